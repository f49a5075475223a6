"""StateMachine container and read-only transition table helpers."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from transition_guard.types import Machine, MachineContractError


@dataclass
class StateMachine:
    """Caller-owned machine. ``transition_table`` maps a state to the states
    directly reachable from it.

    A state whose allowed list is empty is terminal. The guard only ever
    writes ``current_state``; the table is never touched after construction.
    """

    current_state: str
    transition_table: dict[str, list[str]] = field(default_factory=dict)


def allowed_targets(machine: Machine) -> tuple[str, ...]:
    """States reachable from the current one. Empty for terminal or unknown states."""
    return tuple(machine.transition_table.get(machine.current_state, ()))


def can_transition(machine: Machine, target: str) -> bool:
    """True if ``target`` is in the current state's allowed list."""
    return target in machine.transition_table.get(machine.current_state, ())


def states(table: Mapping[str, Sequence[str]]) -> set[str]:
    """Every state named by the table, as a key or as a target."""
    found = set(table)
    for targets in table.values():
        found.update(targets)
    return found


def terminal_states(table: Mapping[str, Sequence[str]]) -> set[str]:
    """States with no outgoing edges, including targets that are not keys."""
    return {s for s in states(table) if not table.get(s)}


def check_machine(machine: object) -> None:
    """Assert that ``machine`` honours the ``Machine`` contract.

    Meant for tests and development builds; the guard never calls it.
    Raises ``MachineContractError`` on the first problem found.
    """
    if not hasattr(machine, "current_state"):
        raise MachineContractError(machine, "Machine has no 'current_state' attribute")
    if not hasattr(machine, "transition_table"):
        raise MachineContractError(machine, "Machine has no 'transition_table' attribute")

    table = machine.transition_table
    if not isinstance(table, Mapping):
        raise MachineContractError(
            machine,
            f"transition_table must be a mapping, got {type(table).__name__}",
        )
    for state, targets in table.items():
        # A bare string is a Sequence but would match single characters
        if isinstance(targets, str) or not isinstance(targets, Sequence):
            raise MachineContractError(
                machine,
                f"Allowed list for {state!r} must be a sequence of states, "
                f"got {type(targets).__name__}",
            )
