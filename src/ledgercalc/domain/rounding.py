"""Currency rounding."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from ledgercalc.utils.amount_parser import coerce_amount


def round_amount(value, decimals) -> Decimal:
    """Round a value to ``decimals`` places, half away from zero.

    The rounding happens on the decimal representation of the value, so
    ``round_amount(2.005, 2)`` is ``Decimal("2.01")`` and
    ``round_amount(-2.005, 2)`` is ``Decimal("-2.01")``. Invalid values are
    treated as 0 and a missing or negative decimal count as 0; this function
    never raises.

    Args:
        value: Number, numeric string or Decimal
        decimals: Number of decimal places

    Returns:
        Rounded Decimal
    """
    amount = coerce_amount(value)
    places = max(int(coerce_amount(decimals)), 0)
    quantum = Decimal(1).scaleb(-places)

    with localcontext() as ctx:
        # quantize needs enough digits for the integer part plus the places
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return amount.quantize(quantum, rounding=ROUND_HALF_UP)
