"""Invoice Pricing

Pure functions deriving line totals and invoice totals from untrusted input.
The values computed here are the only ones ever persisted; totals submitted
by clients are ignored.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP
from typing import Any, Iterable, Optional

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Allowed gap between a client line total and quantity * unit_price
LINE_TOTAL_TOLERANCE = Decimal("0.01")

# Amount columns are NUMERIC(18, 2)
MAX_INTEGER_DIGITS = 16
MAX_AMOUNT = Decimal("9999999999999999.99")


@dataclass(frozen=True)
class InvoiceTotals:
    """Derived header amounts of an invoice"""
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse an untrusted value as a finite Decimal

    Accepts Decimal, int, float and numeric strings. Anything else
    (None, booleans, containers, garbage strings, NaN, Infinity) yields None,
    and so does any value with more than MAX_INTEGER_DIGITS integer digits.
    Zero comes back as plain 0 whatever its exponent. Never raises.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        # repr keeps 0.1 as 0.1 instead of its binary expansion
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except (InvalidOperation, ValueError):
            return None
    else:
        return None

    if not result.is_finite():
        return None
    if result.is_zero():
        return ZERO
    if result.adjusted() >= MAX_INTEGER_DIGITS:
        return None
    return result


def fits_scale(value: Decimal, places: int) -> bool:
    """True when value has no significant digits beyond the given decimal places"""
    return value == value.quantize(Decimal(1).scaleb(-places))


def sanitize_decimal(value: Any) -> Decimal:
    """Coerce an untrusted value to a finite Decimal, 0 when it is not numeric. Never raises."""
    result = parse_decimal(value)
    return ZERO if result is None else result


def sanitize_quantity(value: Any) -> int:
    """Coerce an untrusted value to an int, flooring fractions. Returns 0 on failure."""
    number = sanitize_decimal(value)
    return int(number.to_integral_value(rounding=ROUND_FLOOR))


def round_money(value: Decimal) -> Decimal:
    """Round an amount to cents (half up)"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_line_total(quantity: Any, unit_price: Any) -> Decimal:
    return sanitize_decimal(quantity) * sanitize_decimal(unit_price)


def _item_total(item: Any) -> Any:
    if isinstance(item, dict):
        return item.get("total_price")
    return getattr(item, "total_price", None)


def compute_invoice_totals(items: Iterable[Any], tax_rate: Any) -> InvoiceTotals:
    """
    Compute subtotal, tax amount and total for a set of line items

    Args:
        items: Mappings or objects exposing total_price
        tax_rate: Percentage applied to the subtotal

    Returns:
        InvoiceTotals where total == subtotal + tax_amount exactly
    """
    subtotal = round_money(
        sum((sanitize_decimal(_item_total(item)) for item in items), ZERO)
    )
    tax_amount = round_money(subtotal * sanitize_decimal(tax_rate) / HUNDRED)
    return InvoiceTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
    )


def line_total_matches(total_price: Any, quantity: Any, unit_price: Any) -> bool:
    """Check a submitted line total against quantity * unit_price"""
    expected = compute_line_total(quantity, unit_price)
    return abs(sanitize_decimal(total_price) - expected) <= LINE_TOTAL_TOLERANCE
