"""Tests for TaxRateService."""

import pytest
from datetime import date
from decimal import Decimal

from ledgercalc.domain.errors import NotFoundError, ValidationError


def test_set_and_get_percentage(tax_rate_service):
    """Test the percentage in force on a date is returned."""
    tax_rate_service.set_percentage(1, Decimal("6"), date(2024, 1, 1))
    tax_rate_service.set_percentage(1, Decimal("8"), date(2024, 7, 1))

    assert tax_rate_service.get_percentage(1, date(2024, 3, 1)) == Decimal("6")
    assert tax_rate_service.get_percentage(1, date(2024, 7, 1)) == Decimal("8")


def test_missing_percentage(tax_rate_service):
    """Test a missing percentage raises NotFoundError."""
    with pytest.raises(NotFoundError, match="Tax percentage for tax 4 on 2024-01-01 not found"):
        tax_rate_service.get_percentage(4, date(2024, 1, 1))


@pytest.mark.parametrize("percentage", [Decimal("-0.01"), Decimal("100.5")])
def test_percentage_out_of_range(tax_rate_service, percentage):
    """Test percentages outside 0..100 are rejected."""
    with pytest.raises(ValidationError, match="between 0 and 100"):
        tax_rate_service.set_percentage(1, percentage, date(2024, 1, 1))


def test_zero_and_hundred_allowed(tax_rate_service):
    """Test the range limits are valid percentages."""
    tax_rate_service.set_percentage(1, Decimal("0"), date(2024, 1, 1))
    tax_rate_service.set_percentage(2, Decimal("100"), date(2024, 1, 1))

    assert [t.tax_id for t in tax_rate_service.list_percentages()] == [1, 2]
    assert len(tax_rate_service.list_percentages(tax_id=2)) == 1
