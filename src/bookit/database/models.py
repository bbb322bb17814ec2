"""SQLAlchemy models for bookit database."""

from datetime import datetime, date, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Ledger account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class BookingTemplate(Base):
    """Booking template model."""

    __tablename__ = "booking_templates"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    amount = Column(String, nullable=True)
    amount_relates_to = Column(String, nullable=True)
    comments = Column(String, nullable=True)
    debit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    credit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    matcher = Column(String, nullable=True)
    position = Column(Integer, nullable=True)
    include_in_saldo_list = Column(Boolean, default=False, nullable=False)
    charge_rate_code = Column(String, nullable=True)

    # Relationships
    debit_account = relationship("Account", foreign_keys=[debit_account_id])
    credit_account = relationship("Account", foreign_keys=[credit_account_id])
    tags = relationship(
        "BookingTemplateTag",
        back_populates="booking_template",
        cascade="all, delete-orphan",
        order_by="BookingTemplateTag.name",
    )


class BookingTemplateTag(Base):
    """Tag attached to a booking template."""

    __tablename__ = "booking_template_tags"

    id = Column(Integer, primary_key=True)
    booking_template_id = Column(Integer, ForeignKey("booking_templates.id"), nullable=False)
    name = Column(String, nullable=False)

    __table_args__ = (
        UniqueConstraint("booking_template_id", "name", name="uq_booking_template_tag"),
    )

    # Relationships
    booking_template = relationship("BookingTemplate", back_populates="tags")


class Booking(Base):
    """Booking model."""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    debit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    credit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    comments = Column(String, nullable=True)
    value_date = Column(Date, default=date.today, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Invoice(Base):
    """Invoice model, referenced by saldo bookings."""

    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    value_date = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=True)
    balance = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class ChargeRate(Base):
    """Per-person charge rate model."""

    __tablename__ = "charge_rates"

    id = Column(Integer, primary_key=True)
    code = Column(String, nullable=False)
    person_id = Column(Integer, nullable=False)
    valid_from = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)

    __table_args__ = (
        UniqueConstraint("code", "person_id", "valid_from", name="uq_charge_rate_validity"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
