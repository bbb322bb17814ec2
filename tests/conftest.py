"""Shared pytest fixtures for bookit tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from bookit.database.factories import create_sqlite_database
from bookit.domain.account import AccountService
from bookit.domain.booking_template import BookingTemplateService
from bookit.domain.charge_rate import ChargeRateService
from bookit.domain.invoice import InvoiceService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def template_service(temp_db):
    """Create a BookingTemplateService with a temporary database."""
    return BookingTemplateService(temp_db)


@pytest.fixture
def invoice_service(temp_db):
    """Create an InvoiceService with a temporary database."""
    return InvoiceService(temp_db)


@pytest.fixture
def charge_rate_service(temp_db):
    """Create a ChargeRateService with a temporary database."""
    return ChargeRateService(temp_db)


@pytest.fixture
def sample_accounts(account_service):
    """Create debit and credit accounts."""
    debit_id = account_service.create_account(code="1100", title="Debtors")
    credit_id = account_service.create_account(code="3200", title="Revenue")
    return {
        "debit": account_service.get_account(debit_id),
        "credit": account_service.get_account(credit_id),
    }


@pytest.fixture
def sample_templates(template_service, sample_accounts):
    """Create templates covering fixed, relation and percentage amounts."""
    debit_id = sample_accounts["debit"].id
    credit_id = sample_accounts["credit"].id
    codes = {
        "RENT": dict(title="Office rent", amount="100.00", matcher=r"RENT\s+\d{4}"),
        "VAT:standard": dict(
            title="VAT", amount="0.077", amount_relates_to="reference_amount", matcher="VAT"
        ),
        "VAT:reduced": dict(title="Reduced VAT", amount="2.5%"),
        "OPEN": dict(
            title="Open amount",
            amount="1",
            amount_relates_to="reference_amount_minus_balance",
            comments="Open part of invoice",
        ),
    }
    for code, fields in codes.items():
        template_service.create_template(
            code=code, debit_account_id=debit_id, credit_account_id=credit_id, **fields
        )
    return {code: template_service.get_template_by_code(code) for code in codes}


@pytest.fixture
def sample_invoice(invoice_service):
    """Create an invoice with amount 50.00 and balance 10.00."""
    invoice_id = invoice_service.create_invoice(
        code="R-001",
        title="Consulting",
        value_date=date(2024, 3, 31),
        amount=Decimal("50.00"),
        balance=Decimal("10.00"),
    )
    return invoice_service.get_invoice(invoice_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
