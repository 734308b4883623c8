"""Service layer."""

from .applicant_service import ApplicantService, ApplicantWithAddress, CreatedApplicant

__all__ = ['ApplicantService', 'ApplicantWithAddress', 'CreatedApplicant']
