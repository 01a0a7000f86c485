"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

ZERO = Decimal("0")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")

    return -amount if is_negative else amount


def coerce_amount(value) -> Decimal:
    """Coerce any value into a finite Decimal, falling back to zero.

    None, NaN, infinities, empty strings and anything that does not read as a
    number all become ``Decimal("0")``. Floats go through their shortest
    ``repr`` so ``2.005`` becomes ``Decimal("2.005")`` and not the binary
    expansion ``2.00499999...``.
    """
    if value is None:
        return ZERO

    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO

    if isinstance(value, (bool, int)):
        return Decimal(int(value))

    if isinstance(value, float):
        value = repr(value)

    try:
        amount = Decimal(str(value).strip().replace(",", ""))
    except (InvalidOperation, ValueError, TypeError):
        return ZERO

    return amount if amount.is_finite() else ZERO
