"""Rejected-transition messages and the logging-backed diagnostic sink."""
from __future__ import annotations

import logging

from transition_guard.config import GuardConfig
from transition_guard.types import DiagnoseSink


def format_rejection(source: str, target: str, malformed: bool = False) -> str:
    """Human-readable description of a refused ``source => target`` request."""
    message = (
        f"State Machine Error: {source} => {target} "
        "is not an allowed state transition."
    )
    if malformed:
        message += f" ({source} is not in the transition table.)"
    return message


def make_log_sink(
    logger: logging.Logger | None = None,
    level: int = logging.ERROR,
) -> DiagnoseSink:
    """Return a diagnostic sink that writes each message to ``logger``."""
    target = logger if logger is not None else logging.getLogger("transition_guard")

    def log_sink(message: str) -> None:
        target.log(level, message)

    return log_sink


def sink_from_config(config: GuardConfig) -> DiagnoseSink:
    return make_log_sink(logging.getLogger(config.logger_name), config.log_level)
