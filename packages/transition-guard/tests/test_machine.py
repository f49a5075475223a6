"""Tests for StateMachine and the table helpers."""
import pytest
from transition_guard import (
    MachineContractError,
    StateMachine,
    allowed_targets,
    can_transition,
    check_machine,
    states,
    terminal_states,
)

TABLE = {
    "draft": ["submitted"],
    "submitted": ["approved", "rejected"],
    "approved": [],
    "rejected": ["draft"],
}


class TestStateMachine:
    """Test cases for the StateMachine container."""

    def test_defaults_to_empty_table(self):
        machine = StateMachine(current_state="idle")
        assert machine.transition_table == {}

    def test_tables_not_shared(self):
        """Each instance gets its own default table."""
        a = StateMachine(current_state="idle")
        b = StateMachine(current_state="idle")
        assert a.transition_table is not b.transition_table


class TestQueries:
    """Test cases for read-only table queries."""

    def test_allowed_targets(self):
        machine = StateMachine("submitted", TABLE)
        assert allowed_targets(machine) == ("approved", "rejected")

    def test_allowed_targets_terminal(self):
        machine = StateMachine("approved", TABLE)
        assert allowed_targets(machine) == ()

    def test_allowed_targets_unknown_state(self):
        machine = StateMachine("limbo", TABLE)
        assert allowed_targets(machine) == ()

    def test_can_transition(self):
        machine = StateMachine("draft", TABLE)
        assert can_transition(machine, "submitted") is True
        assert can_transition(machine, "approved") is False
        # Staying put is a NOOP, not a legal edge
        assert can_transition(machine, "draft") is False

    def test_states_includes_targets(self):
        table = {"a": ["b", "c"], "b": []}
        assert states(table) == {"a", "b", "c"}

    def test_terminal_states(self):
        table = {"a": ["b", "c"], "b": []}
        # "c" has no key, so it has no outgoing edges either
        assert terminal_states(table) == {"b", "c"}
        assert terminal_states(TABLE) == {"approved"}

    def test_queries_do_not_mutate(self):
        table = {"a": ["b"]}
        machine = StateMachine("a", table)
        allowed_targets(machine)
        can_transition(machine, "zzz")
        states(table)
        terminal_states(table)
        assert table == {"a": ["b"]}
        assert machine.current_state == "a"


class TestCheckMachine:
    """Test cases for the development-time contract check."""

    def test_valid_machine_passes(self):
        check_machine(StateMachine("draft", TABLE))

    def test_tuple_lists_accepted(self):
        check_machine(StateMachine("a", {"a": ("b",), "b": ()}))

    def test_missing_current_state(self):
        class NoState:
            transition_table = {}

        with pytest.raises(MachineContractError, match="current_state"):
            check_machine(NoState())

    def test_missing_table(self):
        class NoTable:
            current_state = "a"

        with pytest.raises(MachineContractError, match="transition_table"):
            check_machine(NoTable())

    def test_table_not_mapping(self):
        machine = StateMachine("a", [("a", ["b"])])
        with pytest.raises(MachineContractError, match="mapping"):
            check_machine(machine)

    def test_string_allowed_list_rejected(self):
        """A bare string would match single characters, so it is refused."""
        machine = StateMachine("a", {"a": "b"})
        with pytest.raises(MachineContractError, match="'a'"):
            check_machine(machine)

    def test_error_is_type_error(self):
        machine = StateMachine("a", {"a": {"b"}})
        with pytest.raises(TypeError) as excinfo:
            check_machine(machine)
        assert excinfo.value.machine is machine
