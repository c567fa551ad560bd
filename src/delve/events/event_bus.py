import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Generic event container for broadcasting navigation notifications.

    Attributes:
        name: Event type/name string, typically from EventType.
        payload: Arbitrary payload associated with the event.
    """
    name: str
    payload: Dict[str, Any]


class EventBus:
    """A lightweight synchronous publish/subscribe event bus.

    Subscribers can register callbacks for specific event names. When an event is
    published, all callbacks registered for that event name are invoked in
    registration order before publish() returns.
    """

    def __init__(self) -> None:
        self._subs: DefaultDict[str, List[Callable[[Event], None]]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Callable[[Event], None]) -> None:
        """Subscribe a callback for a given event name.

        Args:
            event_name: The event name to listen for.
            callback: A function accepting a single Event argument.
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._subs[event_name].append(callback)
        logger.debug("Subscribed %s to '%s'", getattr(callback, "__name__", str(callback)), event_name)

    def unsubscribe(self, event_name: str, callback: Callable[[Event], None]) -> None:
        """Unsubscribe a callback from a given event name."""
        if event_name in self._subs and callback in self._subs[event_name]:
            self._subs[event_name].remove(callback)
            logger.debug("Unsubscribed %s from '%s'", getattr(callback, "__name__", str(callback)), event_name)

    def publish(self, event_name: str, payload: Dict[str, Any]) -> None:
        """Publish an event to all registered subscribers.

        A subscriber that raises is logged and skipped; the remaining subscribers
        still run.
        """
        event = Event(name=event_name, payload=payload)
        subs = list(self._subs.get(event_name, []))
        logger.debug("Publishing event '%s' to %d subscribers", event_name, len(subs))
        for cb in subs:
            try:
                cb(event)
            except Exception:
                logger.exception("Unhandled exception in event subscriber for '%s'", event_name)
