"""FastAPI Dependencies.

Provides the image store and the applicant service to endpoints. The image
store is created once in the application lifespan and kept on
``app.state``; tests replace it with ``app.dependency_overrides``.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.database import get_db
from ..services.applicant_service import ApplicantService
from ..storage.image_store import ImageStore


def get_image_store(request: Request) -> ImageStore | None:
    """Image store built at startup, if any."""
    return getattr(request.app.state, "image_store", None)


def get_applicant_service(
    db: AsyncSession = Depends(get_db),
    image_store: ImageStore | None = Depends(get_image_store)
) -> ApplicantService:
    """Applicant service bound to the request's database session."""
    return ApplicantService(db, image_store=image_store)
