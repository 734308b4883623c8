"""Pydantic Schemas for API Request/Response Validation.

Wire keys keep the historical camelCase Spanish names (``nombre``,
``solicitante_idSolicitante``...) through aliases; Python code works with the
snake_case column names. Request schemas reject unknown fields.

Update schemas declare required columns with a ``None`` default and a
non-optional type: omitting the field leaves the column untouched, sending an
explicit ``null`` is rejected.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import DatabaseLimits


class RequestModel(BaseModel):
    """Base for request bodies: unknown keys are an error."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, str_strip_whitespace=True)

    def to_columns(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class ResponseModel(BaseModel):
    """Base for response bodies built from ORM rows."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# ============================================================================
# Applicant
# ============================================================================

class ApplicantCreate(RequestModel):
    """Applicant fields sent when registering a new applicant."""
    first_name: str = Field(..., alias="nombre", min_length=1, max_length=DatabaseLimits.NAME_MAX_LENGTH)
    last_name: str = Field(..., alias="apellidoPaterno", min_length=1, max_length=DatabaseLimits.NAME_MAX_LENGTH)
    second_last_name: str | None = Field(None, alias="apellidoMaterno", max_length=DatabaseLimits.NAME_MAX_LENGTH)
    birth_date: date | None = Field(None, alias="fechaNacimiento")
    phone: str | None = Field(None, alias="telefono", max_length=DatabaseLimits.PHONE_MAX_LENGTH)
    email: str | None = Field(None, alias="correo", max_length=DatabaseLimits.EMAIL_MAX_LENGTH)


class ApplicantUpdate(RequestModel):
    """Partial update of an applicant."""
    first_name: str = Field(None, alias="nombre", min_length=1, max_length=DatabaseLimits.NAME_MAX_LENGTH)
    last_name: str = Field(None, alias="apellidoPaterno", min_length=1, max_length=DatabaseLimits.NAME_MAX_LENGTH)
    second_last_name: str | None = Field(None, alias="apellidoMaterno", max_length=DatabaseLimits.NAME_MAX_LENGTH)
    birth_date: date | None = Field(None, alias="fechaNacimiento")
    phone: str | None = Field(None, alias="telefono", max_length=DatabaseLimits.PHONE_MAX_LENGTH)
    email: str | None = Field(None, alias="correo", max_length=DatabaseLimits.EMAIL_MAX_LENGTH)


class ApplicantResponse(ResponseModel):
    id: int = Field(..., alias="idSolicitante")
    first_name: str = Field(..., alias="nombre")
    last_name: str = Field(..., alias="apellidoPaterno")
    second_last_name: str | None = Field(None, alias="apellidoMaterno")
    birth_date: date | None = Field(None, alias="fechaNacimiento")
    phone: str | None = Field(None, alias="telefono")
    email: str | None = Field(None, alias="correo")
    photo_url: str | None = Field(None, alias="fotoSolicitante")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


# ============================================================================
# Address
# ============================================================================

class AddressCreate(RequestModel):
    street: str = Field(..., alias="calle", min_length=1, max_length=DatabaseLimits.STREET_MAX_LENGTH)
    exterior_number: str = Field(..., alias="numeroExterior", min_length=1, max_length=DatabaseLimits.NUMBER_MAX_LENGTH)
    interior_number: str | None = Field(None, alias="numeroInterior", max_length=DatabaseLimits.NUMBER_MAX_LENGTH)
    neighborhood: str = Field(..., alias="colonia", min_length=1, max_length=DatabaseLimits.PLACE_MAX_LENGTH)
    municipality: str = Field(..., alias="municipio", min_length=1, max_length=DatabaseLimits.PLACE_MAX_LENGTH)
    state: str = Field(..., alias="estado", min_length=1, max_length=DatabaseLimits.PLACE_MAX_LENGTH)
    postal_code: str = Field(..., alias="codigoPostal", min_length=1, max_length=DatabaseLimits.POSTAL_CODE_MAX_LENGTH)


class AddressUpdate(RequestModel):
    street: str = Field(None, alias="calle", min_length=1, max_length=DatabaseLimits.STREET_MAX_LENGTH)
    exterior_number: str = Field(None, alias="numeroExterior", min_length=1, max_length=DatabaseLimits.NUMBER_MAX_LENGTH)
    interior_number: str | None = Field(None, alias="numeroInterior", max_length=DatabaseLimits.NUMBER_MAX_LENGTH)
    neighborhood: str = Field(None, alias="colonia", min_length=1, max_length=DatabaseLimits.PLACE_MAX_LENGTH)
    municipality: str = Field(None, alias="municipio", min_length=1, max_length=DatabaseLimits.PLACE_MAX_LENGTH)
    state: str = Field(None, alias="estado", min_length=1, max_length=DatabaseLimits.PLACE_MAX_LENGTH)
    postal_code: str = Field(None, alias="codigoPostal", min_length=1, max_length=DatabaseLimits.POSTAL_CODE_MAX_LENGTH)


class AddressResponse(ResponseModel):
    id: int = Field(..., alias="idDomicilio")
    street: str = Field(..., alias="calle")
    exterior_number: str = Field(..., alias="numeroExterior")
    interior_number: str | None = Field(None, alias="numeroInterior")
    neighborhood: str = Field(..., alias="colonia")
    municipality: str = Field(..., alias="municipio")
    state: str = Field(..., alias="estado")
    postal_code: str = Field(..., alias="codigoPostal")
    applicant_id: int = Field(..., alias="solicitante_idSolicitante")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


# ============================================================================
# Intake form
# ============================================================================

class IntakeFormCreate(RequestModel):
    occupation: str | None = Field(None, alias="ocupacion", max_length=DatabaseLimits.SHORT_TEXT_MAX_LENGTH)
    monthly_income: Decimal | None = Field(
        None, alias="ingresoMensual", ge=0, decimal_places=DatabaseLimits.AMOUNT_SCALE
    )
    dependents: int | None = Field(None, alias="dependientes", ge=0)
    housing_type: str | None = Field(None, alias="tipoVivienda", max_length=DatabaseLimits.SHORT_TEXT_MAX_LENGTH)
    notes: str | None = Field(None, alias="observaciones")


class IntakeFormResponse(ResponseModel):
    id: int = Field(..., alias="idFormulario")
    occupation: str | None = Field(None, alias="ocupacion")
    monthly_income: Decimal | None = Field(None, alias="ingresoMensual")
    dependents: int | None = Field(None, alias="dependientes")
    housing_type: str | None = Field(None, alias="tipoVivienda")
    notes: str | None = Field(None, alias="observaciones")
    applicant_id: int = Field(..., alias="solicitante_idSolicitante")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


# ============================================================================
# Image upload
# ============================================================================

class UploadedImage(BaseModel):
    """Subset of the image host's upload response."""
    model_config = ConfigDict(extra="ignore")

    public_id: str
    secure_url: str
    url: str | None = None
    format: str | None = None
    resource_type: str | None = None
    width: int | None = None
    height: int | None = None
    bytes: int | None = None
    version: int | None = None


# ============================================================================
# Requests
# ============================================================================

class ApplicantCreatePayload(RequestModel):
    """JSON document sent in the ``data`` part of the create request."""
    applicant: ApplicantCreate = Field(..., alias="solicitante")
    address: AddressCreate = Field(..., alias="domicilio")
    form: IntakeFormCreate = Field(..., alias="formulario")


class ApplicantEditRequest(RequestModel):
    id: int
    applicant: ApplicantUpdate = Field(default_factory=ApplicantUpdate, alias="reqSolicitante")
    address: AddressUpdate = Field(default_factory=AddressUpdate, alias="reqDomicilio")


class ApplicantLookupRequest(RequestModel):
    id: int


# ============================================================================
# Responses
# ============================================================================

class ApplicantListResponse(ResponseModel):
    applicants: list[ApplicantResponse] = Field(..., alias="solicitante")


class ApplicantCreatedResult(ResponseModel):
    applicant: ApplicantResponse = Field(..., alias="solicitante")
    address: AddressResponse = Field(..., alias="domicilio")
    form: IntakeFormResponse = Field(..., alias="formulario")
    image: UploadedImage = Field(..., alias="foto")


class ApplicantCreatedResponse(ResponseModel):
    results: ApplicantCreatedResult = Field(..., alias="resultados")


class ApplicantWithAddressResponse(ResponseModel):
    applicant: ApplicantResponse = Field(..., alias="solicitante")
    address: AddressResponse = Field(..., alias="domicilio")


class ApplicantEditedResponse(ResponseModel):
    result: ApplicantWithAddressResponse = Field(..., alias="resultado")


class ErrorResponse(BaseModel):
    """Error body: generic message plus the error kind."""
    msg: str
    kind: str
