"""Environment snapshot stories: .env discovery and os.environ precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from smtpmail.adapters.mail.environment import find_dotenv_file, load_environment


@pytest.mark.os_agnostic
def test_dotenv_values_are_loaded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keys from the nearest .env file appear in the snapshot."""
    monkeypatch.delenv("SMTP_ADDRESS", raising=False)
    (tmp_path / ".env").write_text("SMTP_ADDRESS=smtp.dotenv.example\n", encoding="utf-8")

    assert load_environment(str(tmp_path))["SMTP_ADDRESS"] == "smtp.dotenv.example"


@pytest.mark.os_agnostic
def test_process_environment_wins_over_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Real environment variables override .env values."""
    (tmp_path / ".env").write_text("SMTP_PORT=25\n", encoding="utf-8")
    monkeypatch.setenv("SMTP_PORT", "587")

    assert load_environment(str(tmp_path))["SMTP_PORT"] == "587"


@pytest.mark.os_agnostic
def test_dotenv_is_found_in_a_parent_directory(tmp_path: Path) -> None:
    """Discovery walks up from the start directory."""
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / ".env").write_text("MAILER_TYPE=smtp\n", encoding="utf-8")

    assert find_dotenv_file(nested) == tmp_path / ".env"


@pytest.mark.os_agnostic
def test_missing_dotenv_still_returns_process_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a .env file the snapshot is just os.environ."""
    monkeypatch.setenv("SMTP_USERNAME", "from-env")

    environment = load_environment(str(tmp_path))

    assert environment["SMTP_USERNAME"] == "from-env"


@pytest.mark.os_agnostic
def test_valueless_dotenv_keys_are_skipped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A bare key without ``=`` does not produce a None entry."""
    monkeypatch.delenv("SMTP_TLS_MODE", raising=False)
    (tmp_path / ".env").write_text("SMTP_TLS_MODE\n", encoding="utf-8")

    assert "SMTP_TLS_MODE" not in load_environment(str(tmp_path))
