"""Error-to-response mapping for the applicant endpoints.

Every error leaves the service as ``{"msg": "Hubo un error", "kind": ...}``.
The status code depends on ERROR_STATUS_MODE:

- ``legacy``: the historical codes per operation (create: validation 404,
  get: not found 404, everything else 500)
- ``by_kind``: one code per error kind
"""

import enum

from fastapi import status
from fastapi.responses import JSONResponse

from ..core.config import settings
from ..core.constants import ErrorMessages
from ..core.exceptions import ApplicantServiceError, ErrorKind, ImageUploadError
from ..core.logging import get_logger
from ..schemas.applicant import ErrorResponse

logger = get_logger(__name__)


class Operation(str, enum.Enum):
    """Applicant endpoints, for per-operation status mapping."""
    LIST = "list"
    CREATE = "create"
    EDIT = "edit"
    GET = "get"


LEGACY_STATUS_CODES: dict[Operation, dict[ErrorKind, int]] = {
    Operation.LIST: {},
    Operation.CREATE: {
        ErrorKind.VALIDATION: status.HTTP_404_NOT_FOUND,
    },
    Operation.EDIT: {},
    Operation.GET: {
        ErrorKind.VALIDATION: status.HTTP_404_NOT_FOUND,
        ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    },
}

KIND_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INCONSISTENT_STATE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INFRASTRUCTURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_kind(error: Exception) -> ErrorKind:
    """Kind of an error; anything unexpected counts as infrastructure."""
    if isinstance(error, ApplicantServiceError):
        return error.kind
    return ErrorKind.INFRASTRUCTURE


def status_code_for(operation: Operation, error: Exception) -> int:
    """HTTP status code for an error raised by an operation."""
    kind = error_kind(error)

    if settings.ERROR_STATUS_MODE == "by_kind":
        if isinstance(error, ImageUploadError):
            return status.HTTP_502_BAD_GATEWAY
        return KIND_STATUS_CODES[kind]

    return LEGACY_STATUS_CODES[operation].get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(operation: Operation, error: Exception) -> JSONResponse:
    """Log an error and build the uniform error response for it."""
    kind = error_kind(error)
    status_code = status_code_for(operation, error)

    log_extra = {
        'operation': operation.value,
        'kind': kind.value,
        'status_code': status_code,
        'error': str(error),
        'error_type': type(error).__name__
    }
    if isinstance(error, ApplicantServiceError):
        logger.warning("Applicant request failed", extra=log_extra)
    else:
        logger.error("Unexpected error in applicant request", extra=log_extra, exc_info=error)

    body = ErrorResponse(msg=ErrorMessages.GENERIC, kind=kind.value)
    return JSONResponse(status_code=status_code, content=body.model_dump())
