"""Repository Layer.

Data access layer following Repository Pattern.
Separates data access logic from business logic.
"""

from .applicant_repository import AddressRepository, ApplicantRepository, IntakeFormRepository
from .base import BaseRepository

__all__ = ['AddressRepository', 'ApplicantRepository', 'BaseRepository', 'IntakeFormRepository']
