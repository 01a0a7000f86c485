"""Header total aggregation.

Totals are built from the already rounded line amounts and then rounded
once more at header level. They are never re-derived from raw quantities,
so the header always reconciles with the sum of its lines.
"""

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ledgercalc.domain.entities import (
    AdjustmentTotals,
    DecimalPrecision,
    DetailLine,
    HeaderTotals,
    Totals,
    ZERO,
)
from ledgercalc.domain.rounding import round_amount
from ledgercalc.utils.amount_parser import coerce_amount

# (gross, tax, total) line attributes per currency
BASE_FIELDS = ("gross_amount", "tax_amount", "total_amount")
LOCAL_FIELDS = ("local_gross_amount", "local_tax_amount", "local_total_amount")
COUNTRY_FIELDS = ("country_gross_amount", "country_tax_amount", "country_total_amount")


def _sum_field(lines: Sequence[DetailLine], name: str) -> Decimal:
    return sum((coerce_amount(getattr(line, name, None)) for line in lines), ZERO)


def _sum_totals(lines: Sequence[DetailLine], fields: tuple[str, str, str], decimals: int) -> Totals:
    gross, tax, total = (_sum_field(lines, name) for name in fields)
    return Totals(
        total=round_amount(gross, decimals),
        tax=round_amount(tax, decimals),
        total_after_tax=round_amount(total, decimals),
    )


def aggregate_totals(
    lines: Iterable[DetailLine],
    precision: Optional[DecimalPrecision] = None,
    has_country_currency: bool = False,
) -> HeaderTotals:
    """Sum detail lines into header totals.

    Args:
        lines: Recalculated detail lines
        precision: Decimal places per amount kind (defaults apply when None)
        has_country_currency: Round country totals with the country precision.
            Without a distinct country currency the country amounts are local
            amounts and keep the local precision.

    Returns:
        HeaderTotals; all zeros for an empty list
    """
    precision = precision or DecimalPrecision()
    lines = list(lines)
    cty_dec = precision.cty_amt_dec if has_country_currency else precision.loc_amt_dec

    return HeaderTotals(
        base=_sum_totals(lines, BASE_FIELDS, precision.amt_dec),
        local=_sum_totals(lines, LOCAL_FIELDS, precision.loc_amt_dec),
        country=_sum_totals(lines, COUNTRY_FIELDS, cty_dec),
    )


def _net_totals(debit: Totals, credit: Totals, decimals: int) -> Totals:
    net_total = debit.total - credit.total
    net_tax = debit.tax - credit.tax
    return Totals(
        total=round_amount(abs(net_total), decimals),
        tax=round_amount(abs(net_tax), decimals),
        total_after_tax=round_amount(abs(net_total + net_tax), decimals),
    )


def aggregate_adjustment_totals(
    lines: Iterable[DetailLine],
    precision: Optional[DecimalPrecision] = None,
    has_country_currency: bool = False,
) -> AdjustmentTotals:
    """Net debit lines against credit lines for an adjustment document.

    The reported amounts are absolute values of debit minus credit. The
    document is a debit adjustment when the net base amount is negative,
    i.e. credits outweigh debits.
    """
    precision = precision or DecimalPrecision()
    lines = list(lines)
    if not lines:
        return AdjustmentTotals()

    debit = aggregate_totals(
        [line for line in lines if line.is_debit], precision, has_country_currency
    )
    credit = aggregate_totals(
        [line for line in lines if not line.is_debit], precision, has_country_currency
    )

    local = _net_totals(debit.local, credit.local, precision.loc_amt_dec)
    if has_country_currency:
        country = _net_totals(debit.country, credit.country, precision.cty_amt_dec)
    else:
        country = local

    return AdjustmentTotals(
        is_debit=(debit.base.total - credit.base.total) < 0,
        totals=HeaderTotals(
            base=_net_totals(debit.base, credit.base, precision.amt_dec),
            local=local,
            country=country,
        ),
    )
