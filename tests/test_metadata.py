"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    pyproject = _load_pyproject()
    tool_table = cast(dict[str, Any], pyproject.get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


def _get_package_dir() -> Path:
    """Locate the package directory based on pyproject.toml configuration."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str):
            candidate = PROJECT_ROOT / package_entry
            if candidate.is_dir():
                return candidate
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info lists the package name and version."""
    from smtpmail import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "smtpmail" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_match_pyproject() -> None:
    """Static metadata mirrors pyproject.toml."""
    from smtpmail import __init__conf__

    project = cast(dict[str, Any], _load_pyproject()["project"])
    scripts = cast(dict[str, str], project["scripts"])

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert __init__conf__.shell_command in scripts


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """PEP 561 py.typed marker exists in the package source."""
    py_typed = _get_package_dir() / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_wheel_includes_py_typed_and_default_config() -> None:
    """py.typed and the bundled defaults ship in the wheel."""
    includes = cast(list[str], _wheel_table().get("include", []))

    assert any("py.typed" in entry for entry in includes)
    assert any("defaultconfig.toml" in entry for entry in includes)


@pytest.mark.os_agnostic
def test_bundled_default_config_has_mail_section() -> None:
    """defaultconfig.toml parses and carries the ``[mail]`` section."""
    from smtpmail.adapters.config.loader import get_default_config_path

    defaults = rtoml.load(get_default_config_path())

    assert "app_name" in defaults["mail"]
