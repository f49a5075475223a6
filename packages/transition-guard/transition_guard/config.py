"""Guard configuration dataclass."""
from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class GuardConfig:
    """Immutable configuration for the default diagnostic sink.

    Attributes:
        logger_name: Logger that receives rejected-transition messages.
        log_level: Level those messages are logged at.
    """

    logger_name: str = "transition_guard"
    log_level: int = logging.ERROR
