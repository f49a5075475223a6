"""Review workflow -- a document moving through draft, review and approval.

Demonstrates:
- Declaring a transition table on a StateMachine
- Binding observers and a diagnostic sink with make_transition_guard
- The three outcomes: APPLIED, REJECTED and NOOP
- Running a callback once a transition has been applied

Run: python -m examples.review_flow
"""

import logging

from transition_guard import (
    Outcome,
    StateMachine,
    StateObservers,
    make_transition_guard,
    terminal_states,
)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("=== Review Workflow ===\n")

    doc = StateMachine(
        current_state="draft",
        transition_table={
            "draft": ["submitted"],
            "submitted": ["approved", "rejected"],
            "approved": [],
            "rejected": ["draft"],
        },
    )
    print(f"  terminal states: {sorted(terminal_states(doc.transition_table))}\n")

    # Observers stand in for whatever re-renders when the state changes.
    observers = StateObservers()
    observers.subscribe(doc, lambda m: print(f"  [observer] now {m.current_state}"))

    guard = make_transition_guard(notify=observers)

    requests = ["approved", "submitted", "submitted", "approved", "rejected"]
    for target in requests:
        outcome = guard(doc, target, lambda: print("  [callback] done"))
        print(f"  request {target!r:12} -> {outcome.value}")
        if outcome is Outcome.APPLIED:
            print()

    print(f"\nDone. Document is {doc.current_state!r}.")


if __name__ == "__main__":
    main()
