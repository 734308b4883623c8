"""Request and response schemas."""

from .applicant import (
    AddressCreate,
    AddressResponse,
    AddressUpdate,
    ApplicantCreate,
    ApplicantCreatedResponse,
    ApplicantCreatedResult,
    ApplicantCreatePayload,
    ApplicantEditedResponse,
    ApplicantEditRequest,
    ApplicantListResponse,
    ApplicantLookupRequest,
    ApplicantResponse,
    ApplicantUpdate,
    ApplicantWithAddressResponse,
    ErrorResponse,
    IntakeFormCreate,
    IntakeFormResponse,
    UploadedImage,
)

__all__ = [
    "AddressCreate",
    "AddressResponse",
    "AddressUpdate",
    "ApplicantCreate",
    "ApplicantCreatedResponse",
    "ApplicantCreatedResult",
    "ApplicantCreatePayload",
    "ApplicantEditedResponse",
    "ApplicantEditRequest",
    "ApplicantListResponse",
    "ApplicantLookupRequest",
    "ApplicantResponse",
    "ApplicantUpdate",
    "ApplicantWithAddressResponse",
    "ErrorResponse",
    "IntakeFormCreate",
    "IntakeFormResponse",
    "UploadedImage",
]
