"""Domain model entities for ledgercalc.

These are pure data classes representing business concepts, independent of
database schema and of whatever form or screen hosts a transaction.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from typing import Optional

ZERO = Decimal("0")

# Header fields written back to the host form, in display order
HEADER_TOTAL_FIELDS = (
    "tot_amt",
    "gst_amt",
    "tot_amt_aft_gst",
    "tot_local_amt",
    "gst_local_amt",
    "tot_local_amt_aft_gst",
    "tot_cty_amt",
    "gst_cty_amt",
    "tot_cty_amt_aft_gst",
)


@dataclass(frozen=True)
class DecimalPrecision:
    """Number of decimal places per amount kind."""

    amt_dec: int = 2
    loc_amt_dec: int = 2
    cty_amt_dec: int = 2
    exh_rate_dec: int = 6


@dataclass(frozen=True)
class CompanySettings:
    """Company-level calculation settings."""

    precision: DecimalPrecision = field(default_factory=DecimalPrecision)
    has_country_currency: bool = False
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class DetailLine:
    """One transaction line item.

    Only quantity, unit price and tax percentage are user inputs; every
    amount field is derived by the line recalculator.
    """

    item_no: int
    quantity: Decimal = ZERO
    unit_price: Decimal = ZERO
    tax_percentage: Decimal = ZERO
    is_debit: bool = False
    remarks: Optional[str] = None
    gross_amount: Decimal = ZERO
    tax_amount: Decimal = ZERO
    total_amount: Decimal = ZERO
    local_gross_amount: Decimal = ZERO
    local_tax_amount: Decimal = ZERO
    local_total_amount: Decimal = ZERO
    country_gross_amount: Decimal = ZERO
    country_tax_amount: Decimal = ZERO
    country_total_amount: Decimal = ZERO


@dataclass(frozen=True)
class Totals:
    """Amount, tax and amount-after-tax for one currency."""

    total: Decimal = ZERO
    tax: Decimal = ZERO
    total_after_tax: Decimal = ZERO

    def __add__(self, other: "Totals") -> "Totals":
        if not isinstance(other, Totals):
            return NotImplemented
        return Totals(
            total=self.total + other.total,
            tax=self.tax + other.tax,
            total_after_tax=self.total_after_tax + other.total_after_tax,
        )


@dataclass(frozen=True)
class HeaderTotals:
    """Header aggregates in base, local and country currency."""

    base: Totals = field(default_factory=Totals)
    local: Totals = field(default_factory=Totals)
    country: Totals = field(default_factory=Totals)

    def __add__(self, other: "HeaderTotals") -> "HeaderTotals":
        if not isinstance(other, HeaderTotals):
            return NotImplemented
        return HeaderTotals(
            base=self.base + other.base,
            local=self.local + other.local,
            country=self.country + other.country,
        )

    def as_fields(self) -> dict[str, Decimal]:
        """Flatten into the nine header field names."""
        values = []
        for totals in (self.base, self.local, self.country):
            values.extend((totals.total, totals.tax, totals.total_after_tax))
        return dict(zip(HEADER_TOTAL_FIELDS, values))


@dataclass(frozen=True)
class AdjustmentTotals:
    """Net header totals of an adjustment document.

    Amounts are absolute values of debit minus credit; ``is_debit`` tells
    the direction of the net base amount.
    """

    is_debit: bool = False
    totals: HeaderTotals = field(default_factory=HeaderTotals)

    def as_fields(self) -> dict:
        fields: dict = {"is_debit": self.is_debit}
        fields.update(self.totals.as_fields())
        return fields


@dataclass(frozen=True)
class ExchangeRate:
    """Exchange rate of a currency effective from a date."""

    id: int
    currency_id: int
    valid_from: date
    rate: Decimal
    is_local: bool
    created_at: datetime


@dataclass(frozen=True)
class TaxRate:
    """Tax percentage of a tax code effective from a date."""

    id: int
    tax_id: int
    valid_from: date
    percentage: Decimal
    created_at: datetime
