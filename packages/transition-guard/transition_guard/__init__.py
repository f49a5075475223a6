"""transition-guard - Table-driven state transition guard."""
from __future__ import annotations

from transition_guard.config import GuardConfig
from transition_guard.diagnostics import format_rejection, make_log_sink
from transition_guard.guard import attempt_transition, make_transition_guard
from transition_guard.machine import (
    StateMachine,
    allowed_targets,
    can_transition,
    check_machine,
    states,
    terminal_states,
)
from transition_guard.observers import StateObservers
from transition_guard.types import (
    DiagnoseSink,
    Machine,
    MachineContractError,
    NotifySink,
    Outcome,
)

__all__ = [
    "attempt_transition",
    "make_transition_guard",
    "Outcome",
    "Machine",
    "StateMachine",
    "StateObservers",
    "GuardConfig",
    "NotifySink",
    "DiagnoseSink",
    "MachineContractError",
    "allowed_targets",
    "can_transition",
    "check_machine",
    "states",
    "terminal_states",
    "format_rejection",
    "make_log_sink",
]
