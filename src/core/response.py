"""The ``{data, errors}`` envelope shared by every JSON endpoint except health."""

from typing import Any

from rest_framework.response import Response


def api_response(data: Any, status: int = 200) -> Response:
    """Return data wrapped in the standard envelope."""

    return Response({"data": data, "errors": []}, status=status)


__all__ = ["api_response"]
