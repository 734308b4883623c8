"""Utility functions.

Prefer importing from specific modules:
    from applicant_service.utils.generators import generate_request_id
    from applicant_service.utils.transaction_helpers import safe_transaction
"""

from .generators import generate_request_id

__all__ = ['generate_request_id']
