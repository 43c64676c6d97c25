"""Request logger: a listener bound to the ``request`` lifecycle event."""

import logging

from .lifecycle import RequestEvent

logger = logging.getLogger(__name__)


class RequestLoggerListener:
    """Log every primary request before its view runs."""

    def on_request(self, event: RequestEvent) -> None:
        if not event.is_main_request:
            return

        request = event.request
        logger.info(
            "Request received method=%s path=%s ip=%s",
            request.method,
            request.path_info,
            request.META.get("REMOTE_ADDR"),
        )
