"""Line item expansion of booking templates.

Each template becomes exactly one line item. The template's amount rule
picks the quantity/price encoding:

============  ==========  =========================  ====================
kind          quantity    times                      price
============  ==========  =========================  ====================
percentage    ``%``       "15%" gives 15             left to the caller
saldo         saldo_of    None                       left to the caller
fixed         ``x``       1                          template amount
============  ==========  =========================  ====================
"""

from decimal import Decimal

from bookit.domain.amount import FixedAmount, PercentageAmount, parse_amount_rule
from bookit.domain.entities import BookingTemplate, LineItem, LineItemKind

PERCENTAGE_QUANTITY = "%"
SALDO_QUANTITY = "saldo_of"
FIXED_QUANTITY = "x"


def build_line_item(template: BookingTemplate) -> LineItem:
    """Expand a booking template into a line item descriptor."""
    rule = parse_amount_rule(template.amount, template.amount_relates_to)

    if isinstance(rule, PercentageAmount):
        kind, quantity, times, price = LineItemKind.PERCENTAGE, PERCENTAGE_QUANTITY, rule.percent, None
    elif isinstance(rule, FixedAmount):
        kind, quantity, times, price = LineItemKind.FIXED, FIXED_QUANTITY, Decimal("1"), rule.value
    else:
        kind, quantity, times, price = LineItemKind.SALDO, SALDO_QUANTITY, None, None

    return LineItem(
        kind=kind,
        title=template.title,
        code=template.code,
        quantity=quantity,
        booking_template_id=template.id,
        credit_account_id=template.credit_account_id,
        debit_account_id=template.debit_account_id,
        position=template.position,
        include_in_saldo_list=template.include_in_saldo_list,
        reference_code=template.amount_relates_to,
        times=times,
        price=price,
    )
