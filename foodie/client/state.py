from __future__ import annotations

from typing import Callable


class StateContainer:
    """Holds state and tells subscribers whenever it changes."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[StateContainer], None]] = []

    def subscribe(self, listener: Callable[[StateContainer], None]) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
