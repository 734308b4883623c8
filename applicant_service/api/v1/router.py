"""API v1 Router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from ...core.constants import ApiEndpoints
from .endpoints import applicants

api_router = APIRouter()

# Include applicant endpoints
api_router.include_router(
    applicants.router,
    prefix=ApiEndpoints.APPLICANTS,
    tags=["Applicants"]
)
