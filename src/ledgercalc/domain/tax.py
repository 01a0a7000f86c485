"""Tax percentage domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from ledgercalc.database.base import Database
from ledgercalc.domain.entities import TaxRate
from ledgercalc.domain.errors import NotFoundError, ValidationError, tax_rate_not_found


class TaxRateService:
    """Service for GST/tax percentages that change over time."""

    def __init__(self, db: Database):
        """Initialize tax rate service.

        Args:
            db: Database instance
        """
        self.db = db

    def set_percentage(self, tax_id: int, percentage: Decimal, valid_from: date) -> int:
        """Store a tax percentage effective from a date.

        Raises:
            ValidationError: If the percentage is outside 0..100
        """
        if not Decimal("0") <= percentage <= Decimal("100"):
            raise ValidationError(f"Tax percentage must be between 0 and 100, got {percentage}")
        return self.db.upsert_tax_rate(tax_id=tax_id, valid_from=valid_from, percentage=percentage)

    def get_percentage(self, tax_id: int, on_date: date) -> Decimal:
        """Get the tax percentage effective on a date.

        Raises:
            NotFoundError: If no percentage is effective on that date
        """
        found = self.db.find_tax_rate(tax_id, on_date)
        if found is None:
            raise NotFoundError(tax_rate_not_found(tax_id, on_date))
        return found.percentage

    def list_percentages(self, tax_id: Optional[int] = None) -> list[TaxRate]:
        """List stored tax percentages, optionally for one tax code."""
        return self.db.list_tax_rates(tax_id=tax_id)
