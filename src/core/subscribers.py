"""HTTP lifecycle subscriber: correlation ids, response headers, error logging."""

import logging
import traceback
import uuid

from . import lifecycle
from .lifecycle import ExceptionEvent, RequestEvent, ResponseEvent

logger = logging.getLogger(__name__)

UNKNOWN_REQUEST_ID = "unknown"


def generate_request_id() -> str:
    return f"req_{uuid.uuid4().hex}"


class HttpLifecycleSubscriber:
    """Handle the request, response and exception events of primary requests.

    The request hook runs at priority 10, ahead of listeners registered at the
    default priority, so the correlation id exists before anything else logs.
    """

    @staticmethod
    def get_subscribed_events() -> dict:
        return {
            lifecycle.REQUEST: ("on_request", 10),
            lifecycle.RESPONSE: "on_response",
            lifecycle.EXCEPTION: ("on_exception", 5),
        }

    def on_request(self, event: RequestEvent) -> None:
        """Stamp a fresh correlation id onto the request."""
        if not event.is_main_request:
            return

        request = event.request
        request_id = generate_request_id()
        request.request_id = request_id

        logger.info(
            "Request started request_id=%s method=%s path=%s",
            request_id,
            request.method,
            request.path_info,
        )

    def on_response(self, event: ResponseEvent) -> None:
        """Decorate the outgoing response with the correlation id and marker headers."""
        if not event.is_main_request or event.response is None:
            return

        request_id = getattr(event.request, "request_id", UNKNOWN_REQUEST_ID)
        response = event.response
        response["X-Request-ID"] = request_id
        response["X-Powered-By"] = "Django"
        response["X-Custom-Header"] = "Event-Subscriber-Example"

        logger.info(
            "Response prepared request_id=%s status_code=%s",
            request_id,
            response.status_code,
        )

    def on_exception(self, event: ExceptionEvent) -> None:
        """Log where the view failed; the response is left to Django."""
        if not event.is_main_request:
            return

        exception = event.exception
        request_id = getattr(event.request, "request_id", UNKNOWN_REQUEST_ID)
        filename, lineno = _source_location(exception)

        logger.error(
            "Exception occurred request_id=%s exception=%s file=%s line=%s",
            request_id,
            exception,
            filename,
            lineno,
        )


def _source_location(exception: BaseException | None) -> tuple[str | None, int | None]:
    """Return the file and line where ``exception`` was raised."""
    if exception is None or exception.__traceback__ is None:
        return None, None
    frame = traceback.extract_tb(exception.__traceback__)[-1]
    return frame.filename, frame.lineno
