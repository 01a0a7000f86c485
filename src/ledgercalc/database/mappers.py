"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay plain
frozen dataclasses with Decimal amounts whatever the storage backend does
with numeric columns.
"""

from decimal import Decimal

from ledgercalc.domain import entities as domain
from ledgercalc.database.models import (
    CompanySetting as ORMCompanySetting,
    ExchangeRate as ORMExchangeRate,
    TaxRate as ORMTaxRate,
)


def _to_decimal(value) -> Decimal:
    # SQLite hands back floats or zero-padded Decimals for Numeric columns
    if value is None:
        return Decimal("0")
    amount = Decimal(str(value)).normalize()
    if amount.as_tuple().exponent > 0:
        amount = amount.quantize(Decimal(1))
    return amount


def settings_to_domain(orm_settings: ORMCompanySetting) -> domain.CompanySettings:
    """Convert SQLAlchemy CompanySetting model to domain CompanySettings entity."""
    return domain.CompanySettings(
        precision=domain.DecimalPrecision(
            amt_dec=orm_settings.amt_dec,
            loc_amt_dec=orm_settings.loc_amt_dec,
            cty_amt_dec=orm_settings.cty_amt_dec,
            exh_rate_dec=orm_settings.exh_rate_dec,
        ),
        has_country_currency=bool(orm_settings.has_country_currency),
        updated_at=orm_settings.updated_at,
    )


def exchange_rate_to_domain(orm_rate: ORMExchangeRate) -> domain.ExchangeRate:
    """Convert SQLAlchemy ExchangeRate model to domain ExchangeRate entity."""
    return domain.ExchangeRate(
        id=orm_rate.id,
        currency_id=orm_rate.currency_id,
        valid_from=orm_rate.valid_from,
        rate=_to_decimal(orm_rate.rate),
        is_local=bool(orm_rate.is_local),
        created_at=orm_rate.created_at,
    )


def tax_rate_to_domain(orm_tax: ORMTaxRate) -> domain.TaxRate:
    """Convert SQLAlchemy TaxRate model to domain TaxRate entity."""
    return domain.TaxRate(
        id=orm_tax.id,
        tax_id=orm_tax.tax_id,
        valid_from=orm_tax.valid_from,
        percentage=_to_decimal(orm_tax.percentage),
        created_at=orm_tax.created_at,
    )
