"""Tests for CLI commands."""

import pytest
from bookit.cli.main import cli


def run(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


@pytest.fixture
def cli_setup(cli_runner, temp_db):
    """Create accounts, an invoice and templates through the CLI."""
    for code, title in [("1100", "Debtors"), ("3200", "Revenue"), ("2200", "VAT due")]:
        result = run(cli_runner, temp_db, "account", "create", code, title)
        assert result.exit_code == 0

    commands = [
        ["template", "create", "RENT", "Office rent", "--amount", "100.00",
         "--debit", "1100", "--credit", "3200", "--matcher", "RENT"],
        ["template", "create", "VAT:standard", "VAT", "--amount", "0.077",
         "--relates-to", "reference_amount", "--debit", "1100", "--credit", "2200",
         "--matcher", "VAT"],
        ["template", "create", "VAT:reduced", "Reduced VAT", "--amount", "2.5%"],
        ["invoice", "create", "R-001", "Consulting", "--date", "2024-03-31",
         "--amount", "50.00", "--balance", "10.00"],
    ]
    for args in commands:
        result = run(cli_runner, temp_db, *args)
        assert result.exit_code == 0, result.output


def test_account_create_and_list(cli_runner, temp_db):
    """Test creating an account and listing it."""
    result = run(cli_runner, temp_db, "account", "create", "1000", "Cash")
    assert result.exit_code == 0
    assert "Created account '1000'" in result.output

    result = run(cli_runner, temp_db, "account", "list")
    assert result.exit_code == 0
    assert "Cash" in result.output


def test_account_create_duplicate(cli_runner, temp_db):
    """Test creating an account with a taken code."""
    run(cli_runner, temp_db, "account", "create", "1000", "Cash")
    result = run(cli_runner, temp_db, "account", "create", "1000", "Cash again")

    assert result.exit_code == 1
    assert "already exists" in result.output.lower()


def test_template_create_unknown_account(cli_runner, temp_db):
    """Test creating a template with an unknown account."""
    result = run(cli_runner, temp_db, "template", "create", "X", "X", "--debit", "9999")

    assert result.exit_code == 1
    assert "not found" in result.output


def test_template_create_invalid_amount(cli_runner, temp_db):
    """Test creating a template with an unparseable amount."""
    result = run(cli_runner, temp_db, "template", "create", "X", "X", "--amount", "abc")

    assert result.exit_code == 1
    assert "Could not parse amount" in result.output


def test_template_list(cli_runner, temp_db, cli_setup):
    """Test listing templates in short and default format."""
    result = run(cli_runner, temp_db, "template", "list")

    assert result.exit_code == 0
    assert "1100 / 3200 100.00" in result.output

    result = run(cli_runner, temp_db, "template", "list", "--type", "VAT", "--format", "default")
    assert "RENT" not in result.output
    assert "Reduced VAT" in result.output


def test_template_show(cli_runner, temp_db, cli_setup):
    """Test showing a relation template."""
    result = run(cli_runner, temp_db, "template", "show", "VAT:standard")

    assert result.exit_code == 0
    assert "Amount: 7.70%" in result.output
    assert "Relates to: reference_amount" in result.output


def test_template_show_unknown(cli_runner, temp_db):
    """Test showing an unknown template."""
    result = run(cli_runner, temp_db, "template", "show", "NOPE")

    assert result.exit_code == 1
    assert "BookingTemplate not found for 'NOPE'" in result.output
    assert "see 'bookit template list'" in result.output


def test_template_tag_and_delete(cli_runner, temp_db, cli_setup):
    """Test tagging and then deleting a template."""
    result = run(cli_runner, temp_db, "template", "tag", "RENT", "monthly")
    assert result.exit_code == 0

    result = run(cli_runner, temp_db, "template", "show", "RENT")
    assert "Tags: monthly" in result.output

    result = run(cli_runner, temp_db, "template", "delete", "RENT", "--force")
    assert result.exit_code == 0
    assert "Deleted booking template 'RENT'" in result.output


def test_book_against_invoice(cli_runner, temp_db, cli_setup):
    """Test booking a template against an invoice."""
    result = run(
        cli_runner, temp_db, "book", "VAT:standard",
        "--reference-type", "invoice", "--reference-id", "1", "--value-date", "2024-04-01",
    )

    assert result.exit_code == 0, result.output
    assert "Created booking 1" in result.output
    assert "Amount: 3.85" in result.output
    assert "Value date: 2024-04-01" in result.output
    assert len(temp_db.list_bookings()) == 1


def test_book_dry_run_does_not_save(cli_runner, temp_db, cli_setup):
    """Test a dry run shows the booking without storing it."""
    result = run(cli_runner, temp_db, "book", "RENT", "--amount", "80", "--dry-run")

    assert result.exit_code == 0
    assert "Booking (not saved)" in result.output
    assert "Amount: 80.00" in result.output
    assert temp_db.list_bookings() == []


def test_book_unknown_template(cli_runner, temp_db):
    """Test booking an unknown code, with and without dry run."""
    result = run(cli_runner, temp_db, "book", "NOPE")
    assert result.exit_code == 0
    assert "nothing booked" in result.output

    result = run(cli_runner, temp_db, "book", "NOPE", "--dry-run")
    assert result.exit_code == 1
    assert "BookingTemplate not found" in result.output


def test_book_unknown_reference(cli_runner, temp_db, cli_setup):
    """Test booking against an invoice that does not exist."""
    result = run(
        cli_runner, temp_db, "book", "VAT:standard",
        "--reference-type", "invoice", "--reference-id", "99",
    )

    assert result.exit_code == 1
    assert "invoice 99 not found" in result.output


def test_book_with_person_rate(cli_runner, temp_db, cli_setup):
    """Test booking with a person's charge rate."""
    result = run(
        cli_runner, temp_db, "template", "create", "HOURS", "Consulting hours",
        "--debit", "1100", "--credit", "3200", "--charge-rate-code", "hourly",
    )
    assert result.exit_code == 0
    result = run(
        cli_runner, temp_db, "rate", "add", "hourly", "--person", "7",
        "--amount", "120", "--valid-from", "2024-01-01",
    )
    assert result.exit_code == 0

    result = run(
        cli_runner, temp_db, "book", "HOURS", "--person", "7",
        "--reference-type", "invoice", "--reference-id", "1", "--dry-run",
    )

    assert result.exit_code == 0, result.output
    assert "Amount: 120.00" in result.output


def test_rate_list(cli_runner, temp_db):
    """Test listing charge rates for a code."""
    run(cli_runner, temp_db, "rate", "add", "hourly", "--person", "7", "--amount", "120",
        "--valid-from", "2024-01-01")

    result = run(cli_runner, temp_db, "rate", "list", "--code", "hourly")

    assert result.exit_code == 0
    assert "2024-01-01" in result.output
    assert "120.00" in result.output


def test_invoice_list(cli_runner, temp_db, cli_setup):
    """Test listing invoices."""
    result = run(cli_runner, temp_db, "invoice", "list")

    assert result.exit_code == 0
    assert "R-001" in result.output
    assert "50.00" in result.output


def test_line_item(cli_runner, temp_db, cli_setup):
    """Test expanding templates into line items."""
    result = run(cli_runner, temp_db, "line-item", "RENT", "VAT:reduced", "VAT:standard")

    assert result.exit_code == 0
    assert "1 x Office rent 100.00" in result.output
    assert "2.5 % Reduced VAT" in result.output
    assert "saldo_of VAT [saldo]" in result.output


def test_match(cli_runner, temp_db, cli_setup):
    """Test matching a description against templates."""
    result = run(cli_runner, temp_db, "match", "RENT JANUARY")

    assert result.exit_code == 0
    assert "Found 1 matching template(s)" in result.output
    assert "RENT" in result.output


def test_match_show_errors(cli_runner, temp_db, cli_setup):
    """Test reporting templates with unusable matchers."""
    result = run(cli_runner, temp_db, "match", "nothing", "--show-errors")

    assert result.exit_code == 0
    assert "No matching booking templates." in result.output
    assert "Invalid matcher for template 'VAT:reduced'" in result.output


def test_template_create_out_of_range_amount(cli_runner, temp_db):
    """Test creating a template with an amount too large to store."""
    result = run(cli_runner, temp_db, "template", "create", "BIG", "Big", "--amount", "1E+30")

    assert result.exit_code == 1
    assert "out of range" in result.output


def test_book_large_stored_amount(cli_runner, temp_db, template_service):
    """Test booking a stored template amount beyond 28 digits."""
    template_service.create_template(code="BIG", title="Big", amount="1E+30")

    result = run(cli_runner, temp_db, "book", "BIG", "--dry-run")

    assert result.exit_code == 0, result.output
    assert "Amount: 1,000,000,000,000,000,000,000,000,000,000.00" in result.output


def test_book_percentage_template(cli_runner, temp_db, cli_setup):
    """Test booking a percentage template uses its plain number."""
    result = run(
        cli_runner, temp_db, "book", "VAT:reduced",
        "--reference-type", "invoice", "--reference-id", "1", "--dry-run",
    )

    assert result.exit_code == 0, result.output
    assert "Amount: 2.50" in result.output
