"""Per-line amount derivation.

Every amount on a detail line is a function of its quantity, unit price and
tax percentage plus the document exchange rates and decimal precision. The
functions here never mutate their input and never raise: missing or invalid
numbers count as zero.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Optional

from ledgercalc.domain.entities import DecimalPrecision, DetailLine
from ledgercalc.domain.rounding import round_amount
from ledgercalc.utils.amount_parser import coerce_amount

HUNDRED = Decimal("100")


def _convert(gross: Decimal, tax: Decimal, rate: Decimal, decimals: int) -> tuple[Decimal, Decimal, Decimal]:
    converted_gross = round_amount(gross * rate, decimals)
    converted_tax = round_amount(tax * rate, decimals)
    return converted_gross, converted_tax, converted_gross + converted_tax


def recalculate_line(
    line: DetailLine,
    exh_rate,
    cty_exh_rate,
    precision: Optional[DecimalPrecision] = None,
    has_country_currency: bool = False,
) -> DetailLine:
    """Derive the amounts of one detail line.

    Args:
        line: Detail line carrying quantity, unit price and tax percentage
        exh_rate: Base to local currency exchange rate
        cty_exh_rate: Base to country currency exchange rate
        precision: Decimal places per amount kind (defaults apply when None)
        has_country_currency: Whether the company keeps a distinct country
            currency. When False the country amounts copy the local amounts.

    Returns:
        New DetailLine with every derived amount filled in
    """
    precision = precision or DecimalPrecision()

    quantity = coerce_amount(line.quantity)
    unit_price = coerce_amount(line.unit_price)
    tax_percentage = coerce_amount(line.tax_percentage)

    gross = round_amount(quantity * unit_price, precision.amt_dec)
    tax = round_amount(gross * tax_percentage / HUNDRED, precision.amt_dec)

    local = _convert(gross, tax, coerce_amount(exh_rate), precision.loc_amt_dec)
    if has_country_currency:
        country = _convert(gross, tax, coerce_amount(cty_exh_rate), precision.cty_amt_dec)
    else:
        country = local

    return replace(
        line,
        quantity=quantity,
        unit_price=unit_price,
        tax_percentage=tax_percentage,
        gross_amount=gross,
        tax_amount=tax,
        total_amount=gross + tax,
        local_gross_amount=local[0],
        local_tax_amount=local[1],
        local_total_amount=local[2],
        country_gross_amount=country[0],
        country_tax_amount=country[1],
        country_total_amount=country[2],
    )


def recalculate_lines(
    lines: Iterable[DetailLine],
    exh_rate,
    cty_exh_rate,
    precision: Optional[DecimalPrecision] = None,
    has_country_currency: bool = False,
) -> list[DetailLine]:
    """Recalculate every line against the same rates."""
    return [
        recalculate_line(line, exh_rate, cty_exh_rate, precision, has_country_currency)
        for line in lines
    ]
