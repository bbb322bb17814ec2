"""Display formatting for booking templates, bookings and line items."""

from decimal import Decimal
from typing import Optional

from bookit.domain.amount import PercentageAmount, SaldoAmount, is_blank, parse_amount_rule
from bookit.domain.entities import Account, BookingTemplate, LineItem


def format_money(amount: Optional[Decimal]) -> str:
    """Format an amount with thousands separators and two decimals."""
    if amount is None:
        return "?"
    return f"{amount:,.2f}"


def format_template_amount(template: BookingTemplate) -> str:
    """Format a template amount as it is meant.

    Relation factors are shown as percentages (0.15 of the reference amount
    reads "15.00%"), fixed amounts as money.
    """
    rule = parse_amount_rule(template.amount, template.amount_relates_to)
    if isinstance(rule, PercentageAmount):
        return f"{rule.percent:.2f}%"
    if isinstance(rule, SaldoAmount):
        return f"{rule.value * 100:.2f}%"
    return format_money(rule.value)


def _account_label(accounts: dict[int, Account], account_id: Optional[int], short: bool) -> str:
    account = accounts.get(account_id) if account_id is not None else None
    if account is None:
        return "?"
    return account.code if short else f"{account.code} {account.title}"


def format_template(
    template: BookingTemplate, accounts: dict[int, Account], style: str = "default"
) -> str:
    """Describe a template in one line.

    Styles:
        default: the title
        short: "1000 / 3200 12.00"
        long: "1000 Cash an 3200 Revenue 12.00, Title (Comments)"
    """
    if style == "default":
        return template.title

    amount = "?" if is_blank(template.amount) else f"{_amount_value(template.amount):.2f}"
    if style == "short":
        return "%s / %s %s" % (
            _account_label(accounts, template.debit_account_id, short=True),
            _account_label(accounts, template.credit_account_id, short=True),
            amount,
        )
    if style == "long":
        return "%s an %s %s, %s (%s)" % (
            _account_label(accounts, template.debit_account_id, short=False),
            _account_label(accounts, template.credit_account_id, short=False),
            amount,
            template.title or "?",
            template.comments or "?",
        )
    raise ValueError(f"Unknown template format '{style}'")


def _amount_value(amount: str) -> Decimal:
    rule = parse_amount_rule(amount)
    if isinstance(rule, PercentageAmount):
        return rule.percent
    return rule.value


def format_line_item(item: LineItem) -> str:
    """Render a line item as "quantity times title price"."""
    times = "" if item.times is None else f"{item.times:g} "
    price = "" if item.price is None else f" {format_money(item.price)}"
    return f"{times}{item.quantity} {item.title}{price}"
