"""Models package.

Export all models for easy importing
"""

from .applicant import Address, Applicant, IntakeForm

__all__ = [
    "Address",
    "Applicant",
    "IntakeForm",
]
