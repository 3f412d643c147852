"""Minimal event emitter for decoupling components."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any, TypedDict

from event_emitter.lib.emitter_config import EmitterConfig

WILDCARD = "*"

Listener = Callable[..., Any]

# Marks an omitted listener, selecting the decorator form of on() and once()
_MISSING: Any = object()


class WildcardEvent(TypedDict, total=False):
    """Record handed to wildcard listeners for every emission."""

    event: Hashable
    args: tuple
    kwargs: dict[str, Any]


class _OnceListener:
    """Callable adapter that removes itself after its first call."""

    def __init__(self, emitter: EventEmitter, event: Hashable, listener: Listener) -> None:
        self.emitter = emitter
        self.event = event
        self.listener = listener
        self.fired = False

    def __call__(self, *args, **kwargs) -> Any:
        # A re-entrant emit may still hold this adapter in its snapshot
        if self.fired:
            return None
        self.fired = True
        try:
            return self.listener(*args, **kwargs)
        finally:
            self.emitter.off(self.event, self)

    def __repr__(self) -> str:
        return f"<once {self.listener!r}>"


def _check_callable(listener: Any) -> None:
    if not callable(listener):
        raise TypeError(f"Listener must be callable, got {type(listener).__name__}")


class EventEmitter:
    """Synchronous in-process event emitter.

    Listeners run on the caller's thread in registration order; exceptions bubble up
    to the caller of emit() and stop delivery for the rest of that pass. Listeners
    registered on WILDCARD receive a WildcardEvent for every emission, before the
    listeners of the emitted event.

    Each emission iterates over a snapshot of the listener list, so on() and off()
    called from inside a listener only affect later emissions.

    Not threadsafe; confine an emitter to one thread or guard it with a lock.
    """

    def __init__(self, config: EmitterConfig | None = None, max_listeners: int | None = None):
        self.config = config or EmitterConfig()
        if max_listeners is None:
            max_listeners = self.config.max_listeners
        elif type(max_listeners) is not int:
            raise TypeError(f"max_listeners must be an int, got {type(max_listeners).__name__}")
        self.max_listeners = max_listeners
        self._listeners: dict[Hashable, list[Listener]] = {}
        self._warned: set[Hashable] = set()

    def on(self, event: Hashable, listener: Listener = _MISSING) -> EventEmitter | Callable:
        """Register a listener for an event, or return a decorator that does.

        Returns the emitter so registrations can be chained. Passing None, or anything
        else that is not callable, raises TypeError.
        """
        if listener is _MISSING:
            return self._decorator(self.on, event)
        _check_callable(listener)
        self._listeners.setdefault(event, []).append(listener)
        logging.debug(f"Registered listener {listener!r} for event << {event} >>")
        self._check_max_listeners(event)
        return self

    def once(self, event: Hashable, listener: Listener = _MISSING) -> EventEmitter | Callable:
        """Register a listener that is removed after it fires once."""
        if listener is _MISSING:
            return self._decorator(self.once, event)
        _check_callable(listener)
        return self.on(event, _OnceListener(self, event, listener))

    def emit(self, event: Hashable, *args, **kwargs) -> bool:
        """Call every listener for this event, wildcard listeners first.

        Returns:
            bool: True if the event itself had at least one listener, regardless of
                any wildcard listeners.
        """
        wildcard_listeners = tuple(self._listeners.get(WILDCARD, ()))
        listeners = tuple(self._listeners.get(event, ())) if event != WILDCARD else ()

        if self.config.log_emits:
            logging.debug(
                f"Emitting << {event} >> to {len(listeners)} listener(s) "
                f"and {len(wildcard_listeners)} wildcard listener(s)"
            )

        for listener in wildcard_listeners:
            listener(_wildcard_record(event, args, kwargs))

        if event == WILDCARD:
            return bool(wildcard_listeners)

        for listener in listeners:
            listener(*args, **kwargs)
        return bool(listeners)

    def off(self, event: Hashable, listener: Listener) -> EventEmitter:
        """Remove every registration of a listener for an event.

        Listeners registered through once() can be removed by passing the original
        function. Unknown events and listeners are ignored.
        """
        registered = self._listeners.get(event)
        if not registered:
            return self
        remaining = [entry for entry in registered if not _matches(entry, listener)]
        if len(remaining) == len(registered):
            return self
        if remaining:
            self._listeners[event] = remaining
        else:
            del self._listeners[event]
            self._warned.discard(event)
        logging.debug(f"Removed listener {listener!r} from event << {event} >>")
        return self

    def off_all(self) -> EventEmitter:
        """Remove all listeners for all events."""
        self._listeners = {}
        self._warned.clear()
        logging.debug("Removed all listeners")
        return self

    def listeners(self, event: Hashable) -> tuple[Listener, ...]:
        return tuple(_unwrap(entry) for entry in self._listeners.get(event, ()))

    def listener_count(self, event: Hashable) -> int:
        return len(self._listeners.get(event, ()))

    def event_names(self) -> tuple[Hashable, ...]:
        return tuple(event for event, registered in self._listeners.items() if registered)

    def _decorator(self, register: Callable[[Hashable, Listener], Any], event: Hashable):
        def decorator(listener: Listener) -> Listener:
            register(event, listener)
            return listener

        return decorator

    def _check_max_listeners(self, event: Hashable) -> None:
        count = len(self._listeners[event])
        if self.max_listeners <= 0 or count <= self.max_listeners or event in self._warned:
            return
        self._warned.add(event)
        logging.warning(
            f"Possible listener leak: {count} listeners registered for event << {event} >> "
            f"(max_listeners={self.max_listeners})"
        )


def _unwrap(entry: Listener) -> Listener:
    return entry.listener if isinstance(entry, _OnceListener) else entry


def _matches(entry: Listener, listener: Listener) -> bool:
    if entry == listener:
        return True
    return isinstance(entry, _OnceListener) and entry.listener == listener


def _wildcard_record(event: Hashable, args: tuple, kwargs: dict[str, Any]) -> WildcardEvent:
    # Each wildcard listener gets its own record
    record: WildcardEvent = {"event": event, "args": args}
    if kwargs:
        record["kwargs"] = dict(kwargs)
    return record
