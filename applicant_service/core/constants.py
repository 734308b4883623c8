"""Application Constants.

Centralized constants used throughout the application.
"""

# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    # Every error response carries this message; causes are told apart by kind
    GENERIC = "Hubo un error"
    APPLICANT_NOT_FOUND = "El solicitante no existe"
    ADDRESS_NOT_FOUND = "Error en el domicilio"
    ADDRESS_MISSING_FOR_APPLICANT = "Applicant {applicant_id} has no address"
    PHOTO_REQUIRED = "Exactly one applicant photo must be attached"
    PAYLOAD_INVALID = "Applicant payload is invalid: {errors}"
    IMAGE_UPLOAD_FAILED = "Image upload failed: {error}"
    STORAGE_FAILED = "Storage operation failed: {error}"
    STORAGE_CONFLICT = "Storage constraint violated: {error}"


# ============================================================================
# HTTP HEADERS
# ============================================================================

class HttpHeaders:
    """HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"
    REQUEST_ID_MAX_LENGTH = 64


# ============================================================================
# API ENDPOINTS
# ============================================================================

class ApiEndpoints:
    """API endpoint paths."""
    DOCS = "/docs"
    REDOC = "/redoc"
    OPENAPI = "/openapi.json"
    HEALTH = "/health"
    ROOT = "/"
    APPLICANTS = "/applicants"
    APPLICANT_DETAIL = "/detail"


# ============================================================================
# FORM FIELD NAMES
# ============================================================================

class FormFields:
    """Multipart field names used by the create endpoint."""
    DATA = "data"
    PHOTO = "fotoSolicitante"


# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

class DatabaseLimits:
    """Database column limits."""
    NAME_MAX_LENGTH = 100
    PHONE_MAX_LENGTH = 20
    EMAIL_MAX_LENGTH = 255
    URL_MAX_LENGTH = 500
    STREET_MAX_LENGTH = 255
    NUMBER_MAX_LENGTH = 20
    PLACE_MAX_LENGTH = 100
    POSTAL_CODE_MAX_LENGTH = 10
    SHORT_TEXT_MAX_LENGTH = 100

    AMOUNT_PRECISION = 12
    AMOUNT_SCALE = 2


# ============================================================================
# METRICS
# ============================================================================

class Metrics:
    """Metrics-related constants."""
    ENDPOINT_PATH = "/metrics"
    SERVICE_NAME = "applicant-service"


class UploadOutcome:
    """Label values for the image upload counter."""
    SUCCESS = "success"
    FAILURE = "failure"
