"""Shared types for the transition guard."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping, Protocol, Sequence


class Outcome(str, Enum):
    """Classification of a single transition request."""

    APPLIED = "applied"
    REJECTED = "rejected"
    NOOP = "noop"


class Machine(Protocol):
    """Anything with a current state and a closed transition table."""

    current_state: str

    @property
    def transition_table(self) -> Mapping[str, Sequence[str]]: ...


NotifySink = Callable[[Machine], None]
DiagnoseSink = Callable[[str], None]


class MachineContractError(TypeError):
    """Raised by ``check_machine`` when an object cannot act as a machine."""

    def __init__(self, machine: object, message: str) -> None:
        self.machine = machine
        super().__init__(message)
