"""Custom Exceptions for the Applicant Workflow.

Every error raised by the workflow carries an ``ErrorKind`` so the HTTP
boundary can tell causes apart without exposing details to the caller:

- VALIDATION: bad photo attachment or malformed payload, raised before any
  side effect
- NOT_FOUND: the requested applicant (or its address, on edit) is missing
- CONFLICT: the database rejected a write on a constraint
- INCONSISTENT_STATE: an applicant exists without its address
- INFRASTRUCTURE: the database or the image host failed
"""

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of error kinds surfaced to the HTTP boundary."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INCONSISTENT_STATE = "inconsistent_state"
    INFRASTRUCTURE = "infrastructure"


class ApplicantServiceError(Exception):
    """Base exception for all applicant workflow errors."""

    kind: ErrorKind = ErrorKind.INFRASTRUCTURE

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


# Validation errors
class ValidationError(ApplicantServiceError):
    """Request rejected before any side effect."""
    kind = ErrorKind.VALIDATION


class InvalidPhotoError(ValidationError):
    """Photo attachment missing or more than one file sent."""
    pass


class InvalidPayloadError(ValidationError):
    """Structured payload could not be parsed into its typed shape."""
    pass


# Not-found errors
class NotFoundError(ApplicantServiceError):
    """Requested record does not exist."""
    kind = ErrorKind.NOT_FOUND


class ApplicantNotFoundError(NotFoundError):
    """Applicant not found in database."""
    pass


class AddressNotFoundError(NotFoundError):
    """Address not found while editing an applicant."""
    pass


class InconsistentStateError(ApplicantServiceError):
    """Applicant exists but one of its dependent records does not."""
    kind = ErrorKind.INCONSISTENT_STATE


# Infrastructure errors
class InfrastructureError(ApplicantServiceError):
    """External dependency failure."""
    kind = ErrorKind.INFRASTRUCTURE


class ImageUploadError(InfrastructureError):
    """Image host rejected or failed the upload."""
    pass


class PersistenceError(InfrastructureError):
    """Database error while reading or writing records."""
    pass


class ConflictError(ApplicantServiceError):
    """Database constraint violation."""
    kind = ErrorKind.CONFLICT
