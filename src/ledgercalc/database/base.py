"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

from ledgercalc.domain.entities import CompanySettings, ExchangeRate, TaxRate


class Database(ABC):
    """Abstract database interface for ledgercalc."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Settings operations
    @abstractmethod
    def get_settings(self) -> Optional[CompanySettings]:
        """Get stored company settings, or None if never saved."""
        pass

    @abstractmethod
    def save_settings(self, settings: CompanySettings) -> None:
        """Create or replace company settings."""
        pass

    # Exchange rate operations
    @abstractmethod
    def upsert_exchange_rate(
        self, currency_id: int, valid_from: date, rate: Decimal, is_local: bool = False
    ) -> int:
        """Store a rate for a currency and date, replacing an existing one. Returns rate ID."""
        pass

    @abstractmethod
    def find_exchange_rate(
        self, currency_id: int, on_date: date, is_local: bool = False
    ) -> Optional[ExchangeRate]:
        """Get the latest rate effective on or before a date."""
        pass

    @abstractmethod
    def list_exchange_rates(self, currency_id: Optional[int] = None) -> list[ExchangeRate]:
        """List exchange rates, optionally filtered by currency."""
        pass

    # Tax rate operations
    @abstractmethod
    def upsert_tax_rate(self, tax_id: int, valid_from: date, percentage: Decimal) -> int:
        """Store a tax percentage for a tax code and date. Returns tax rate ID."""
        pass

    @abstractmethod
    def find_tax_rate(self, tax_id: int, on_date: date) -> Optional[TaxRate]:
        """Get the latest tax percentage effective on or before a date."""
        pass

    @abstractmethod
    def list_tax_rates(self, tax_id: Optional[int] = None) -> list[TaxRate]:
        """List tax percentages, optionally filtered by tax code."""
        pass
