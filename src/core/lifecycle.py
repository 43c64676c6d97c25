"""HTTP lifecycle events and a priority-ordered dispatcher.

Hooks observe three points of a request/response cycle:

- ``request``: before the view runs; a hook may short-circuit with a response.
- ``response``: after a response exists; hooks may mutate it.
- ``exception``: the view raised; a hook may substitute a response.

Two registration styles are supported. A *listener* binds one callable to one
event. A *subscriber* declares the events it handles through
``get_subscribed_events()``, returning ``{event: "method"}`` or
``{event: ("method", priority)}``. Higher priority runs earlier; hooks with
equal priority run in registration order.

Every event carries ``is_main_request``. A request dispatched while another
one is in flight on the same thread is a sub-request.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from django.http import HttpRequest, HttpResponse
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

REQUEST = "request"
RESPONSE = "response"
EXCEPTION = "exception"

EVENTS = (REQUEST, RESPONSE, EXCEPTION)


@dataclass
class LifecycleEvent:
    """Base event: the request being handled and whether it is the primary one."""

    request: HttpRequest
    is_main_request: bool = True
    propagation_stopped: bool = field(default=False, init=False)

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class RequestEvent(LifecycleEvent):
    """Fired before the view; ``set_response`` skips the view entirely."""

    response: Optional[HttpResponse] = None

    def set_response(self, response: HttpResponse) -> None:
        self.response = response
        self.stop_propagation()


@dataclass
class ResponseEvent(LifecycleEvent):
    """Fired once a response exists, whether from the view or a hook."""

    response: Optional[HttpResponse] = None


@dataclass
class ExceptionEvent(LifecycleEvent):
    """Fired when the view raised; ``set_response`` replaces the error response."""

    exception: Optional[BaseException] = None
    response: Optional[HttpResponse] = None

    def set_response(self, response: HttpResponse) -> None:
        self.response = response
        self.stop_propagation()


@dataclass(order=True)
class _Registration:
    sort_key: tuple[int, int]
    callback: Callable[[Any], None] = field(compare=False)


class LifecycleDispatcher:
    """Registration table of lifecycle hooks, kept sorted per event."""

    def __init__(self) -> None:
        self._registrations: dict[str, list[_Registration]] = {event: [] for event in EVENTS}
        self._counter = 0

    def add_listener(self, event: str, callback: Callable[[Any], None], priority: int = 0) -> None:
        """Register ``callback`` for ``event`` at ``priority``."""
        if event not in self._registrations:
            raise ValueError(f"Unknown lifecycle event: {event!r}")
        self._counter += 1
        self._registrations[event].append(_Registration((-priority, self._counter), callback))
        self._registrations[event].sort()

    def add_subscriber(self, subscriber: Any) -> None:
        """Register every handler declared by ``subscriber.get_subscribed_events()``."""
        for event, entry in subscriber.get_subscribed_events().items():
            if isinstance(entry, str):
                method, priority = entry, 0
            else:
                method, priority = entry
            self.add_listener(event, getattr(subscriber, method), priority)

    def get_listeners(self, event: str) -> list[Callable[[Any], None]]:
        """Return the callbacks for ``event`` in invocation order."""
        return [registration.callback for registration in self._registrations.get(event, [])]

    def dispatch(self, event_name: str, event: LifecycleEvent) -> LifecycleEvent:
        """Call the hooks of ``event_name`` until one stops propagation."""
        for callback in self.get_listeners(event_name):
            callback(event)
            if event.propagation_stopped:
                break
        return event


def build_dispatcher(config: dict) -> LifecycleDispatcher:
    """Build a dispatcher from the ``HTTP_LIFECYCLE`` settings mapping.

    ``LISTENERS`` entries need ``event`` and ``listener`` (a dotted path to a
    class or callable) and accept ``method`` and ``priority``. ``SUBSCRIBERS``
    is a list of dotted paths to subscriber classes.
    """
    dispatcher = LifecycleDispatcher()

    for entry in config.get("LISTENERS", []):
        target = import_string(entry["listener"])
        method = entry.get("method")
        if method:
            callback = getattr(target(), method)
        else:
            callback = target
        dispatcher.add_listener(entry["event"], callback, entry.get("priority", 0))

    for path in config.get("SUBSCRIBERS", []):
        dispatcher.add_subscriber(import_string(path)())

    logger.debug(
        "Lifecycle dispatcher built with %d request, %d response and %d exception hooks",
        *(len(dispatcher.get_listeners(event)) for event in EVENTS),
    )
    return dispatcher


__all__ = [
    "EVENTS",
    "EXCEPTION",
    "REQUEST",
    "RESPONSE",
    "ExceptionEvent",
    "LifecycleDispatcher",
    "LifecycleEvent",
    "RequestEvent",
    "ResponseEvent",
    "build_dispatcher",
]
