"""Tests for database mappers."""

import pytest
from datetime import datetime, date, UTC
from decimal import Decimal

from ledgercalc.database.models import (
    CompanySetting as ORMCompanySetting,
    ExchangeRate as ORMExchangeRate,
    TaxRate as ORMTaxRate,
)
from ledgercalc.database.mappers import (
    settings_to_domain,
    exchange_rate_to_domain,
    tax_rate_to_domain,
)
from ledgercalc.domain.entities import (
    CompanySettings,
    DecimalPrecision,
    ExchangeRate,
    TaxRate,
)


class TestSettingsMapper:
    """Tests for CompanySetting mapper."""

    def test_settings_to_domain(self):
        """Test converting ORM CompanySetting to domain CompanySettings."""
        updated_at = datetime.now(UTC)
        orm_settings = ORMCompanySetting(
            id=1,
            amt_dec=3,
            loc_amt_dec=0,
            cty_amt_dec=2,
            exh_rate_dec=8,
            has_country_currency=True,
            updated_at=updated_at,
        )
        settings = settings_to_domain(orm_settings)

        assert isinstance(settings, CompanySettings)
        assert settings.precision == DecimalPrecision(3, 0, 2, 8)
        assert settings.has_country_currency is True
        assert settings.updated_at == updated_at


class TestExchangeRateMapper:
    """Tests for ExchangeRate mapper."""

    def test_exchange_rate_to_domain(self):
        """Test converting ORM ExchangeRate to domain ExchangeRate."""
        orm_rate = ORMExchangeRate(
            id=4,
            currency_id=2,
            valid_from=date(2024, 1, 1),
            rate=Decimal("3.7500000000"),
            is_local=False,
            created_at=datetime.now(UTC),
        )
        rate = exchange_rate_to_domain(orm_rate)

        assert isinstance(rate, ExchangeRate)
        assert rate.id == 4
        assert rate.currency_id == 2
        assert rate.valid_from == date(2024, 1, 1)
        assert str(rate.rate) == "3.75"
        assert rate.is_local is False

    def test_float_rate_becomes_decimal(self):
        """Test float column values are read back as Decimals."""
        orm_rate = ORMExchangeRate(
            id=1, currency_id=1, valid_from=date(2024, 1, 1), rate=1.1, is_local=True
        )
        rate = exchange_rate_to_domain(orm_rate)

        assert rate.rate == Decimal("1.1")
        assert rate.is_local is True


class TestTaxRateMapper:
    """Tests for TaxRate mapper."""

    def test_tax_rate_to_domain(self):
        """Test converting ORM TaxRate to domain TaxRate."""
        orm_tax = ORMTaxRate(
            id=2,
            tax_id=1,
            valid_from=date(2024, 1, 1),
            percentage=Decimal("10.0000"),
            created_at=datetime.now(UTC),
        )
        tax = tax_rate_to_domain(orm_tax)

        assert isinstance(tax, TaxRate)
        assert tax.tax_id == 1
        assert str(tax.percentage) == "10"
