"""In-process observer registry used as the guard's notification sink."""
from __future__ import annotations

from typing import Callable

from transition_guard.types import Machine

_Handler = Callable[[Machine], None]


class StateObservers:
    """Synchronous per-machine pub/sub.

    Handlers are keyed by machine identity, so unhashable machines (plain
    dataclasses) can be observed. ``notify`` calls the machine's own handlers
    in registration order, then the global ones.
    """

    def __init__(self) -> None:
        self._watched: dict[int, tuple[Machine, list[_Handler]]] = {}
        self._global: list[_Handler] = []

    def subscribe(self, machine: Machine, handler: _Handler) -> None:
        entry = self._watched.get(id(machine))
        if entry is None or entry[0] is not machine:
            # Holding the machine keeps its id from being reused while watched
            entry = (machine, [])
            self._watched[id(machine)] = entry
        entry[1].append(handler)

    def unsubscribe(self, machine: Machine, handler: _Handler) -> None:
        entry = self._watched.get(id(machine))
        if entry is None or entry[0] is not machine:
            return
        handlers = entry[1]
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            del self._watched[id(machine)]

    def subscribe_all(self, handler: _Handler) -> None:
        self._global.append(handler)

    def unsubscribe_all(self, handler: _Handler) -> None:
        if handler in self._global:
            self._global.remove(handler)

    def notify(self, machine: Machine) -> None:
        entry = self._watched.get(id(machine))
        if entry is not None and entry[0] is machine:
            for handler in list(entry[1]):
                handler(machine)
        for handler in list(self._global):
            handler(machine)

    def clear(self) -> None:
        self._watched.clear()
        self._global.clear()

    __call__ = notify
