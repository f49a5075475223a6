"""Transition guard: apply a requested state change only if the table allows it."""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from typing import Callable

from transition_guard.config import GuardConfig
from transition_guard.diagnostics import format_rejection, sink_from_config
from transition_guard.types import DiagnoseSink, Machine, NotifySink, Outcome

logger = logging.getLogger(__name__)

Guard = Callable[..., Outcome]

_default_diagnose = sink_from_config(GuardConfig())


def attempt_transition(
    machine: Machine,
    target_state: str,
    on_success: Callable[[], None] | None = None,
    *,
    notify: NotifySink | None = None,
    diagnose: DiagnoseSink | None = None,
) -> Outcome:
    """Move ``machine`` to ``target_state`` if its table allows it.

    Never raises for an illegal request. Order on success is fixed:
    mutate ``current_state``, call ``notify(machine)``, then ``on_success()``.
    Rejections go to ``diagnose`` (stdlib logging by default); a request for
    the current state is a silent ``Outcome.NOOP``.
    """
    return _attempt(
        machine,
        target_state,
        on_success,
        notify,
        diagnose if diagnose is not None else _default_diagnose,
        None,
    )


def make_transition_guard(
    notify: NotifySink | None = None,
    diagnose: DiagnoseSink | None = None,
    config: GuardConfig | None = None,
    lock: AbstractContextManager | None = None,
) -> Guard:
    """Return ``guard(machine, target_state, on_success=None) -> Outcome``
    with its sinks bound.

    When ``diagnose`` is omitted, rejections are logged according to
    ``config``. ``lock`` (e.g. a ``threading.Lock``) is held around the
    read-then-write of ``current_state``; notification and ``on_success`` run
    after it is released.
    """
    if diagnose is None:
        diagnose = sink_from_config(config if config is not None else GuardConfig())

    def guard(
        machine: Machine,
        target_state: str,
        on_success: Callable[[], None] | None = None,
    ) -> Outcome:
        return _attempt(machine, target_state, on_success, notify, diagnose, lock)

    return guard


def _attempt(
    machine: Machine,
    target_state: str,
    on_success: Callable[[], None] | None,
    notify: NotifySink | None,
    diagnose: DiagnoseSink,
    lock: AbstractContextManager | None,
) -> Outcome:
    with lock if lock is not None else nullcontext():
        source = machine.current_state
        table = machine.transition_table
        allowed = table.get(source, ())
        legal = target_state in allowed
        if legal:
            machine.current_state = target_state

    if not legal:
        # Staying put is always fine, even for a state missing from the table
        if target_state == source:
            return Outcome.NOOP
        _report(diagnose, format_rejection(source, target_state, source not in table))
        return Outcome.REJECTED

    if notify is not None:
        notify(machine)
    if on_success is not None:
        on_success()
    return Outcome.APPLIED


def _report(diagnose: DiagnoseSink, message: str) -> None:
    try:
        diagnose(message)
    except Exception:
        logger.exception("Diagnostic sink failed while reporting: %s", message)
