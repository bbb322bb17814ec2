"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay
unchanged when the table layout changes.
"""

from bookit.domain import entities as domain
from bookit.database.models import (
    Account as ORMAccount,
    BookingTemplate as ORMBookingTemplate,
    Booking as ORMBooking,
    Invoice as ORMInvoice,
    ChargeRate as ORMChargeRate,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        code=orm_account.code,
        title=orm_account.title,
        created_at=orm_account.created_at,
    )


def booking_template_to_domain(orm_template: ORMBookingTemplate) -> domain.BookingTemplate:
    """Convert SQLAlchemy BookingTemplate model to domain BookingTemplate entity."""
    return domain.BookingTemplate(
        id=orm_template.id,
        code=orm_template.code,
        title=orm_template.title,
        amount=orm_template.amount,
        amount_relates_to=orm_template.amount_relates_to,
        comments=orm_template.comments,
        debit_account_id=orm_template.debit_account_id,
        credit_account_id=orm_template.credit_account_id,
        matcher=orm_template.matcher,
        position=orm_template.position,
        include_in_saldo_list=bool(orm_template.include_in_saldo_list),
        charge_rate_code=orm_template.charge_rate_code,
        tags=tuple(tag.name for tag in orm_template.tags),
    )


def booking_to_domain(orm_booking: ORMBooking) -> domain.Booking:
    """Convert SQLAlchemy Booking model to domain Booking entity."""
    return domain.Booking(
        id=orm_booking.id,
        title=orm_booking.title,
        amount=orm_booking.amount,
        debit_account_id=orm_booking.debit_account_id,
        credit_account_id=orm_booking.credit_account_id,
        comments=orm_booking.comments,
        value_date=orm_booking.value_date,
        created_at=orm_booking.created_at,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        code=orm_invoice.code,
        title=orm_invoice.title,
        value_date=orm_invoice.value_date,
        amount=orm_invoice.amount,
        balance=orm_invoice.balance,
        created_at=orm_invoice.created_at,
    )


def charge_rate_to_domain(orm_rate: ORMChargeRate) -> domain.ChargeRate:
    """Convert SQLAlchemy ChargeRate model to domain ChargeRate entity."""
    return domain.ChargeRate(
        id=orm_rate.id,
        code=orm_rate.code,
        person_id=orm_rate.person_id,
        valid_from=orm_rate.valid_from,
        amount=orm_rate.amount,
    )
