"""
Base View Model.

Observer plumbing shared by all view models. Listeners are kept per event
in registration order and called synchronously from the triggering command.
"""

from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

from notekeeper.core.logging import get_logger

EventT = TypeVar("EventT", bound=Hashable)

Listener = Callable[..., None]


class ObservableViewModel(Generic[EventT]):
    """
    Base class for view models with subscribable events.

    Subclasses call self._emit(event, *args) whenever state changes.

    Usage:
        unsubscribe = vm.subscribe(ListEvent.ERROR, show_toast)
        ...
        unsubscribe()
    """

    def __init__(self) -> None:
        self._listeners: dict[EventT, list[Listener]] = {}
        self._logger = get_logger(self.__class__.__module__)

    def subscribe(self, event: EventT, callback: Listener) -> Callable[[], None]:
        """
        Register a listener for an event.

        Args:
            event: Event to listen for
            callback: Called with the event's arguments

        Returns:
            A function that removes this registration
        """
        self._listeners.setdefault(event, []).append(callback)

        def unsubscribe() -> None:
            callbacks = self._listeners.get(event, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def listener_count(self, event: EventT) -> int:
        """Number of listeners registered for an event."""
        return len(self._listeners.get(event, []))

    def _emit(self, event: EventT, *args: Any) -> None:
        """Notify every listener of an event, in registration order."""
        # Copy so listeners may unsubscribe while being notified
        for callback in list(self._listeners.get(event, [])):
            callback(*args)
