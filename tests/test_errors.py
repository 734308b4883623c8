"""Tests for the error to HTTP status mapping."""

import json

import pytest

from applicant_service.api.errors import Operation, error_response, status_code_for
from applicant_service.core.config import settings
from applicant_service.core.exceptions import (
    AddressNotFoundError,
    ApplicantNotFoundError,
    ConflictError,
    ImageUploadError,
    InconsistentStateError,
    InvalidPayloadError,
    InvalidPhotoError,
    PersistenceError,
)


@pytest.fixture
def by_kind(monkeypatch):
    monkeypatch.setattr(settings, "ERROR_STATUS_MODE", "by_kind")


@pytest.mark.parametrize("operation,error,expected", [
    (Operation.CREATE, InvalidPhotoError("x"), 404),
    (Operation.CREATE, InvalidPayloadError("x"), 404),
    (Operation.CREATE, ImageUploadError("x"), 500),
    (Operation.CREATE, PersistenceError("x"), 500),
    (Operation.EDIT, InvalidPayloadError("x"), 500),
    (Operation.EDIT, ApplicantNotFoundError("x"), 500),
    (Operation.EDIT, AddressNotFoundError("x"), 500),
    (Operation.GET, InvalidPayloadError("x"), 404),
    (Operation.GET, ApplicantNotFoundError("x"), 404),
    (Operation.GET, InconsistentStateError("x"), 500),
    (Operation.LIST, PersistenceError("x"), 500),
    (Operation.LIST, RuntimeError("boom"), 500),
])
def test_legacy_status_codes(operation, error, expected):
    assert status_code_for(operation, error) == expected


@pytest.mark.parametrize("error,expected", [
    (InvalidPhotoError("x"), 422),
    (ApplicantNotFoundError("x"), 404),
    (AddressNotFoundError("x"), 404),
    (ConflictError("x"), 409),
    (InconsistentStateError("x"), 500),
    (PersistenceError("x"), 500),
    (ImageUploadError("x"), 502),
    (RuntimeError("boom"), 500),
])
def test_status_codes_by_kind(by_kind, error, expected):
    # Same code regardless of operation
    for operation in Operation:
        assert status_code_for(operation, error) == expected


def test_error_body_hides_details():
    response = error_response(Operation.GET, ApplicantNotFoundError("El solicitante no existe"))

    assert response.status_code == 404
    assert json.loads(response.body) == {"msg": "Hubo un error", "kind": "not_found"}


def test_unexpected_error_is_infrastructure():
    response = error_response(Operation.LIST, RuntimeError("connection reset"))

    assert json.loads(response.body)["kind"] == "infrastructure"
