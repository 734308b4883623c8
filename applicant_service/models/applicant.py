"""SQLAlchemy Models for Applicants.

An Applicant owns exactly one Address and one IntakeForm, both linked through
``applicant_id``. The workflow creates the three rows together.
"""

from datetime import UTC, datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text

from ..core.constants import DatabaseLimits
from ..db.database import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TimestampMixin:
    """created_at / updated_at columns shared by all applicant tables."""

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow
    )


class Applicant(TimestampMixin, Base):
    """Person under review."""

    __tablename__ = "applicants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(DatabaseLimits.NAME_MAX_LENGTH), nullable=False)
    last_name = Column(String(DatabaseLimits.NAME_MAX_LENGTH), nullable=False)
    second_last_name = Column(String(DatabaseLimits.NAME_MAX_LENGTH), nullable=True)
    birth_date = Column(Date, nullable=True)
    phone = Column(String(DatabaseLimits.PHONE_MAX_LENGTH), nullable=True)
    email = Column(String(DatabaseLimits.EMAIL_MAX_LENGTH), nullable=True)
    photo_url = Column(
        String(DatabaseLimits.URL_MAX_LENGTH),
        nullable=True,
        comment="Public URL of the photo on the image host"
    )

    def __repr__(self):
        return f"<Applicant(id={self.id}, last_name={self.last_name})>"


class Address(TimestampMixin, Base):
    """Physical address of an applicant."""

    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(DatabaseLimits.STREET_MAX_LENGTH), nullable=False)
    exterior_number = Column(String(DatabaseLimits.NUMBER_MAX_LENGTH), nullable=False)
    interior_number = Column(String(DatabaseLimits.NUMBER_MAX_LENGTH), nullable=True)
    neighborhood = Column(String(DatabaseLimits.PLACE_MAX_LENGTH), nullable=False)
    municipality = Column(String(DatabaseLimits.PLACE_MAX_LENGTH), nullable=False)
    state = Column(String(DatabaseLimits.PLACE_MAX_LENGTH), nullable=False)
    postal_code = Column(String(DatabaseLimits.POSTAL_CODE_MAX_LENGTH), nullable=False)
    applicant_id = Column(
        Integer,
        ForeignKey("applicants.id"),
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<Address(id={self.id}, applicant_id={self.applicant_id})>"


class IntakeForm(TimestampMixin, Base):
    """Intake answers captured when the applicant is registered."""

    __tablename__ = "intake_forms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    occupation = Column(String(DatabaseLimits.SHORT_TEXT_MAX_LENGTH), nullable=True)
    monthly_income = Column(
        Numeric(DatabaseLimits.AMOUNT_PRECISION, DatabaseLimits.AMOUNT_SCALE),
        nullable=True
    )
    dependents = Column(Integer, nullable=True)
    housing_type = Column(String(DatabaseLimits.SHORT_TEXT_MAX_LENGTH), nullable=True)
    notes = Column(Text, nullable=True)
    applicant_id = Column(
        Integer,
        ForeignKey("applicants.id"),
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<IntakeForm(id={self.id}, applicant_id={self.applicant_id})>"
