"""Request ID Middleware.

Tags every request with an id that shows up in all of its log lines and in
the ``X-Request-ID`` response header.
"""

import re
import time

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.constants import ErrorMessages, HttpHeaders
from ..core.exceptions import ErrorKind
from ..core.logging import get_logger, set_request_id

logger = get_logger(__name__)

REQUEST_ID_PATTERN = re.compile(
    rf"^[A-Za-z0-9][A-Za-z0-9._-]{{0,{HttpHeaders.REQUEST_ID_MAX_LENGTH - 1}}}$"
)


def inbound_request_id(value: str | None) -> str | None:
    """Caller-supplied request id, or None when absent or not id-like.

    Accepts UUIDs and similar tokens: letters, digits, ``.``, ``_`` and
    ``-``, at most REQUEST_ID_MAX_LENGTH characters.
    """
    if value is None:
        return None
    if not REQUEST_ID_PATTERN.match(value):
        logger.warning(
            "Ignoring malformed inbound request id",
            extra={'header_length': len(value)}
        )
        return None
    return value


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds a request id to the logging context for each request.

    A well-formed ``X-Request-ID`` from the caller is reused; otherwise a new
    one is generated. The id and the processing time are returned as
    response headers, including on unhandled errors.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = set_request_id(inbound_request_id(request.headers.get(HttpHeaders.REQUEST_ID)))
        started = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                'method': request.method,
                'path': request.url.path,
                'client': request.client.host if request.client else 'unknown'
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    'error': str(e),
                    'process_time': time.perf_counter() - started
                },
                exc_info=True
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "msg": ErrorMessages.GENERIC,
                    "kind": ErrorKind.INFRASTRUCTURE.value
                }
            )
        else:
            logger.info(
                "Request completed",
                extra={
                    'status_code': response.status_code,
                    'process_time': time.perf_counter() - started
                }
            )

        response.headers[HttpHeaders.REQUEST_ID] = request_id
        response.headers[HttpHeaders.PROCESS_TIME] = str(time.perf_counter() - started)
        return response
