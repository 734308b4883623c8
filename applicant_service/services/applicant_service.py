"""Applicant Service Layer.

Handles the applicant workflow: list, create (applicant + address + form in
one transaction after the photo upload), edit (applicant + address in one
transaction) and get (applicant with its address).

The photo upload is not part of the database transaction. When the
transaction fails after a successful upload the image stays on the image
host; those orphans are logged and counted, not deleted.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any
from contextlib import contextmanager
from dataclasses import dataclass

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from ..core.config import settings
from ..core.constants import ErrorMessages, UploadOutcome
from ..core.exceptions import (
    AddressNotFoundError,
    ApplicantNotFoundError,
    ConflictError,
    ImageUploadError,
    InconsistentStateError,
    InvalidPayloadError,
    InvalidPhotoError,
    PersistenceError,
)
from ..core.logging import get_logger
from ..core.metrics import (
    applicant_image_uploads_total,
    applicant_images_orphaned_total,
    applicants_created_total,
)
from ..models.applicant import Address, Applicant, IntakeForm
from ..repositories.applicant_repository import (
    AddressRepository,
    ApplicantRepository,
    IntakeFormRepository,
)
from ..schemas.applicant import (
    AddressUpdate,
    ApplicantCreatePayload,
    ApplicantUpdate,
    UploadedImage,
)
from ..storage.image_store import ImageStore
from ..utils.transaction_helpers import safe_transaction
from ..utils.uploads import copy_to_temp_file, remove_file

logger = get_logger(__name__)


@dataclass
class CreatedApplicant:
    applicant: Applicant
    address: Address
    form: IntakeForm
    image: UploadedImage


@dataclass
class ApplicantWithAddress:
    applicant: Applicant
    address: Address


@contextmanager
def storage_errors(context: str) -> Iterator[None]:
    """Translate SQLAlchemy errors raised in the block into service errors."""
    try:
        yield
    except IntegrityError as e:
        logger.warning(
            f"Integrity error during {context}",
            extra={'error': str(e.orig) if e.orig else str(e)}
        )
        raise ConflictError(ErrorMessages.STORAGE_CONFLICT.format(error=str(e.orig or e))) from e
    except SQLAlchemyError as e:
        logger.error(
            f"Database error during {context}",
            extra={'error': str(e), 'error_type': type(e).__name__},
            exc_info=True
        )
        raise PersistenceError(ErrorMessages.STORAGE_FAILED.format(error=str(e))) from e


class ApplicantService:
    """Service for managing applicants and their dependent records."""

    def __init__(self, db: AsyncSession, image_store: ImageStore | None = None):
        self.db = db
        self.image_store = image_store
        self.applicants = ApplicantRepository(db)
        self.addresses = AddressRepository(db)
        self.forms = IntakeFormRepository(db)

    async def list_applicants(self) -> list[Applicant]:
        """Return every applicant, unfiltered, in storage order."""
        with storage_errors("applicant listing"):
            return await self.applicants.list()

    async def create_applicant(
        self,
        data: Any,
        photos: Sequence[Any] | None
    ) -> CreatedApplicant:
        """Create an applicant together with its address and intake form.

        This method:
        1. Checks exactly one photo was attached
        2. Parses ``data`` into its typed three-part shape
        3. Uploads the photo (outside the database transaction)
        4. Creates applicant, address and form in one transaction, stamping
           the new applicant id on the dependent records

        Nothing is uploaded or written when steps 1 or 2 fail, and nothing is
        written when the upload fails.

        Args:
            data: JSON text with ``solicitante``, ``domicilio`` and ``formulario``;
                anything else (a file part, a missing field) is rejected
            photos: Values sent under the photo field; each must be a file

        Returns:
            The three created records and the upload result

        Raises:
            InvalidPhotoError: Zero or several photos attached, or a non-file value
            InvalidPayloadError: ``data`` is missing or malformed
            ImageUploadError: The image host failed
            ConflictError, PersistenceError: The database failed
        """
        photo = self._single_photo(photos)
        payload = self._parse_create_payload(data)

        image = await self._upload_photo(photo)

        with storage_errors("applicant creation"):
            try:
                async with safe_transaction(self.db):
                    applicant = await self.applicants.create(
                        Applicant(**payload.applicant.to_columns(), photo_url=image.secure_url)
                    )
                    address = await self.addresses.create(
                        Address(**payload.address.to_columns(), applicant_id=applicant.id)
                    )
                    form = await self.forms.create(
                        IntakeForm(**payload.form.to_columns(), applicant_id=applicant.id)
                    )
            except Exception as e:
                self._report_orphaned_image(image, e)
                raise

        applicants_created_total.inc()
        logger.info(
            "Applicant created",
            extra={
                'applicant_id': applicant.id,
                'address_id': address.id,
                'form_id': form.id
            }
        )

        return CreatedApplicant(applicant=applicant, address=address, form=form, image=image)

    async def edit_applicant(
        self,
        applicant_id: int,
        applicant_changes: ApplicantUpdate,
        address_changes: AddressUpdate
    ) -> ApplicantWithAddress:
        """Apply partial updates to an applicant and its address atomically.

        The address is looked up by primary key using the applicant id, which
        relies on both ids matching since creation. Set
        ADDRESS_LOOKUP_BY_APPLICANT_FK to look it up by foreign key instead.

        Raises:
            ApplicantNotFoundError: No applicant with that id
            AddressNotFoundError: No address found for the applicant
            ConflictError, PersistenceError: The database failed
        """
        with storage_errors("applicant edit"):
            async with safe_transaction(self.db):
                applicant = await self.applicants.find_by_id(applicant_id)
                if applicant is None:
                    raise ApplicantNotFoundError(ErrorMessages.APPLICANT_NOT_FOUND)

                if settings.ADDRESS_LOOKUP_BY_APPLICANT_FK:
                    address = await self.addresses.find_by_applicant_id(applicant.id)
                else:
                    address = await self.addresses.find_by_id(applicant.id)
                if address is None:
                    raise AddressNotFoundError(ErrorMessages.ADDRESS_NOT_FOUND)

                await self.applicants.update(applicant, applicant_changes.to_columns())
                await self.addresses.update(address, address_changes.to_columns())

        logger.info(
            "Applicant updated",
            extra={
                'applicant_id': applicant.id,
                'address_id': address.id,
                'applicant_fields': sorted(applicant_changes.to_columns()),
                'address_fields': sorted(address_changes.to_columns())
            }
        )

        return ApplicantWithAddress(applicant=applicant, address=address)

    async def get_applicant(self, applicant_id: int) -> ApplicantWithAddress:
        """Get an applicant with its address.

        Raises:
            ApplicantNotFoundError: No applicant with that id
            InconsistentStateError: The applicant has no address
        """
        with storage_errors("applicant lookup"):
            applicant = await self.applicants.find_by_id(applicant_id)
            if applicant is None:
                raise ApplicantNotFoundError(ErrorMessages.APPLICANT_NOT_FOUND)

            address = await self.addresses.find_by_applicant_id(applicant.id)

        if address is None:
            logger.error(
                "Applicant without address",
                extra={'applicant_id': applicant.id}
            )
            raise InconsistentStateError(
                ErrorMessages.ADDRESS_MISSING_FOR_APPLICANT.format(applicant_id=applicant.id)
            )

        return ApplicantWithAddress(applicant=applicant, address=address)

    def _single_photo(self, photos: Sequence[Any] | None) -> UploadFile:
        if not photos or len(photos) != 1 or not isinstance(photos[0], UploadFile):
            logger.warning(
                "Rejected applicant photo attachment",
                extra={
                    'photo_count': len(photos) if photos else 0,
                    'photo_types': [type(p).__name__ for p in photos or ()]
                }
            )
            raise InvalidPhotoError(ErrorMessages.PHOTO_REQUIRED)
        return photos[0]

    def _parse_create_payload(self, data: Any) -> ApplicantCreatePayload:
        if not data:
            raise InvalidPayloadError(ErrorMessages.PAYLOAD_INVALID.format(errors="missing data"))
        if not isinstance(data, str):
            raise InvalidPayloadError(
                ErrorMessages.PAYLOAD_INVALID.format(errors=f"data must be text, got {type(data).__name__}")
            )
        try:
            return ApplicantCreatePayload.model_validate_json(data)
        except PydanticValidationError as e:
            logger.warning(
                "Rejected applicant payload",
                extra={'error_count': e.error_count()}
            )
            raise InvalidPayloadError(ErrorMessages.PAYLOAD_INVALID.format(errors=e.errors())) from e

    async def _upload_photo(self, photo: UploadFile) -> UploadedImage:
        if self.image_store is None:
            raise ImageUploadError(
                ErrorMessages.IMAGE_UPLOAD_FAILED.format(error="no image store configured")
            )

        temp_path = await run_in_threadpool(copy_to_temp_file, photo.file, photo.filename)
        try:
            image = await self.image_store.upload(temp_path)
        except Exception:
            applicant_image_uploads_total.labels(outcome=UploadOutcome.FAILURE).inc()
            raise
        finally:
            await run_in_threadpool(remove_file, temp_path)

        applicant_image_uploads_total.labels(outcome=UploadOutcome.SUCCESS).inc()
        return image

    def _report_orphaned_image(self, image: UploadedImage, error: Exception) -> None:
        applicant_images_orphaned_total.inc()
        logger.warning(
            "Applicant creation rolled back after photo upload; image left orphaned",
            extra={
                'public_id': image.public_id,
                'secure_url': image.secure_url,
                'error_type': type(error).__name__
            }
        )
