"""Applicant Repositories.

Data access layer for Applicant, Address and IntakeForm entities.
"""

from __future__ import annotations

from ..models.applicant import Address, Applicant, IntakeForm
from .base import BaseRepository


class ApplicantRepository(BaseRepository[Applicant]):
    """Repository for Applicant data access operations."""

    model = Applicant


class AddressRepository(BaseRepository[Address]):
    """Repository for Address data access operations."""

    model = Address

    async def find_by_applicant_id(self, applicant_id: int) -> Address | None:
        """Find the address whose foreign key points at the applicant."""
        return await self.find_one_by(applicant_id=applicant_id)


class IntakeFormRepository(BaseRepository[IntakeForm]):
    """Repository for IntakeForm data access operations."""

    model = IntakeForm
