"""Applicant Endpoints.

HTTP handlers for applicants and their dependent records.

Request bodies are validated inside the handlers, not by FastAPI, so that a
malformed body gets the same ``{"msg", "kind"}`` error shape and the same
status mapping as any other failure of the operation.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException

from ....core.constants import ApiEndpoints, ErrorMessages, FormFields
from ....core.exceptions import InvalidPayloadError
from ....core.logging import get_logger
from ....schemas.applicant import (
    AddressResponse,
    ApplicantCreatedResponse,
    ApplicantCreatedResult,
    ApplicantEditedResponse,
    ApplicantEditRequest,
    ApplicantListResponse,
    ApplicantLookupRequest,
    ApplicantResponse,
    ApplicantWithAddressResponse,
    ErrorResponse,
    IntakeFormResponse,
)
from ....services.applicant_service import ApplicantService, ApplicantWithAddress
from ...dependencies import get_applicant_service
from ...errors import Operation, error_response

logger = get_logger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Not found or rejected input"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}

# Multipart body parsed inside create_applicant
CREATE_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "required": [FormFields.DATA, FormFields.PHOTO],
                    "properties": {
                        FormFields.DATA: {"type": "string", "description": "JSON applicant payload"},
                        FormFields.PHOTO: {"type": "string", "format": "binary"},
                    },
                }
            }
        },
    }
}


async def read_json_body(request: Request, model):
    """Parse the request body into ``model`` or raise InvalidPayloadError."""
    try:
        body: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidPayloadError(ErrorMessages.PAYLOAD_INVALID.format(errors=str(e))) from e

    try:
        return model.model_validate(body)
    except PydanticValidationError as e:
        raise InvalidPayloadError(ErrorMessages.PAYLOAD_INVALID.format(errors=e.errors())) from e


async def read_form(request: Request) -> FormData:
    """Parse the multipart body or raise InvalidPayloadError."""
    try:
        return await request.form()
    except HTTPException as e:
        raise InvalidPayloadError(ErrorMessages.PAYLOAD_INVALID.format(errors=e.detail)) from e


def applicant_with_address_response(result: ApplicantWithAddress) -> ApplicantWithAddressResponse:
    return ApplicantWithAddressResponse(
        applicant=ApplicantResponse.model_validate(result.applicant),
        address=AddressResponse.model_validate(result.address)
    )


@router.get(
    "",
    response_model=ApplicantListResponse,
    summary="List all applicants",
    responses={500: ERROR_RESPONSES[500]}
)
async def list_applicants(
    service: ApplicantService = Depends(get_applicant_service)
):
    """Return every applicant, unfiltered, in storage order."""
    try:
        applicants = await service.list_applicants()
        return ApplicantListResponse(
            applicants=[ApplicantResponse.model_validate(a) for a in applicants]
        )
    except Exception as e:
        return error_response(Operation.LIST, e)


@router.post(
    "",
    response_model=ApplicantCreatedResponse,
    summary="Register an applicant with address, intake form and photo",
    responses=ERROR_RESPONSES,
    openapi_extra=CREATE_REQUEST_BODY
)
async def create_applicant(
    request: Request,
    service: ApplicantService = Depends(get_applicant_service)
):
    """Create an applicant together with its address and intake form.

    **Multipart fields:**
    - data: JSON text `{"solicitante": {...}, "domicilio": {...}, "formulario": {...}}`
    - fotoSolicitante: exactly one image file

    The photo is uploaded to the image host first, then the three records are
    written in a single transaction.
    """
    try:
        form = await read_form(request)
        try:
            created = await service.create_applicant(
                form.get(FormFields.DATA),
                form.getlist(FormFields.PHOTO)
            )
        finally:
            await form.close()

        return ApplicantCreatedResponse(
            results=ApplicantCreatedResult(
                applicant=ApplicantResponse.model_validate(created.applicant),
                address=AddressResponse.model_validate(created.address),
                form=IntakeFormResponse.model_validate(created.form),
                image=created.image
            )
        )
    except Exception as e:
        return error_response(Operation.CREATE, e)


@router.put(
    "",
    response_model=ApplicantEditedResponse,
    summary="Edit an applicant and its address",
    responses={500: ERROR_RESPONSES[500]}
)
async def edit_applicant(
    request: Request,
    service: ApplicantService = Depends(get_applicant_service)
):
    """Apply partial updates to an applicant and its address.

    **Body:** `{"id": 1, "reqSolicitante": {...}, "reqDomicilio": {...}}`

    Only the fields present in `reqSolicitante` / `reqDomicilio` change.
    """
    try:
        edit = await read_json_body(request, ApplicantEditRequest)
        result = await service.edit_applicant(edit.id, edit.applicant, edit.address)
        return ApplicantEditedResponse(result=applicant_with_address_response(result))
    except Exception as e:
        return error_response(Operation.EDIT, e)


@router.post(
    ApiEndpoints.APPLICANT_DETAIL,
    response_model=ApplicantWithAddressResponse,
    summary="Get an applicant with its address",
    responses=ERROR_RESPONSES
)
async def get_applicant(
    request: Request,
    service: ApplicantService = Depends(get_applicant_service)
):
    """Get one applicant and its address.

    **Body:** `{"id": 1}`
    """
    try:
        lookup = await read_json_body(request, ApplicantLookupRequest)
        result = await service.get_applicant(lookup.id)
        return applicant_with_address_response(result)
    except Exception as e:
        return error_response(Operation.GET, e)
