"""Tests for transaction helper utilities."""

import pytest
from sqlalchemy import func, select

from applicant_service.models import Address, Applicant
from applicant_service.utils.transaction_helpers import safe_transaction
from factories import make_address, make_applicant


@pytest.mark.asyncio
async def test_safe_transaction_commits_on_success(session_factory):
    """Test that safe_transaction commits on success."""
    async with session_factory() as db:
        async with safe_transaction(db):
            applicant = make_applicant()
            db.add(applicant)
            await db.flush()
            db.add(make_address(applicant_id=applicant.id))

    # A separate session sees the committed rows
    async with session_factory() as db:
        applicants = (await db.execute(select(func.count()).select_from(Applicant))).scalar_one()
        addresses = (await db.execute(select(func.count()).select_from(Address))).scalar_one()

    assert applicants == 1
    assert addresses == 1


@pytest.mark.asyncio
async def test_safe_transaction_rolls_back_on_error(session_factory, seed):
    """Test that safe_transaction rolls back on exception."""
    await seed(make_applicant(id=1, phone="5500000000"))

    async with session_factory() as db:
        with pytest.raises(ValueError, match="Test error"):
            async with safe_transaction(db):
                applicant = await db.get(Applicant, 1)
                applicant.phone = "5599999999"
                db.add(make_address(applicant_id=1))
                await db.flush()
                raise ValueError("Test error")

    async with session_factory() as db:
        applicant = await db.get(Applicant, 1)
        addresses = (await db.execute(select(func.count()).select_from(Address))).scalar_one()

    assert applicant.phone == "5500000000"
    assert addresses == 0
