"""In-memory logging adapter.

``build_testing`` wires this in so CLI commands can enter
``lib_log_rich.runtime.bind`` without any console or backend output.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from smtpmail import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a silent lib_log_rich runtime unless one is already running.

    The runtime keeps its ring buffer but writes nothing to the console and
    runs without the background queue, so captured CLI output stays clean.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_stream="none",
            queue_enabled=False,
        )
    )


__all__ = ["init_logging_in_memory"]
