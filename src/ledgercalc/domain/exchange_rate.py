"""Exchange rate domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgercalc.database.base import Database
from ledgercalc.domain.entities import ExchangeRate
from ledgercalc.domain.errors import NotFoundError, ValidationError, exchange_rate_not_found
from ledgercalc.domain.rounding import round_amount

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """Service for storing and looking up currency exchange rates.

    Two kinds of rate exist per currency: the document rate converting base
    amounts to local currency, and the local (country) rate used when the
    company keeps a distinct country currency.
    """

    def __init__(self, db: Database):
        """Initialize exchange rate service.

        Args:
            db: Database instance
        """
        self.db = db

    def set_rate(
        self, currency_id: int, rate: Decimal, valid_from: date, is_local: bool = False
    ) -> int:
        """Store a rate effective from a date.

        Args:
            currency_id: Currency ID
            rate: Exchange rate, must be positive
            valid_from: First date the rate applies to
            is_local: Store as the local (country) rate

        Returns:
            Exchange rate ID

        Raises:
            ValidationError: If the rate is not positive
        """
        if rate <= 0:
            raise ValidationError(f"Exchange rate must be positive, got {rate}")

        rate_id = self.db.upsert_exchange_rate(
            currency_id=currency_id, valid_from=valid_from, rate=rate, is_local=is_local
        )
        logger.info(
            "Stored %s rate %s for currency %s from %s",
            "local" if is_local else "exchange",
            rate,
            currency_id,
            valid_from,
        )
        return rate_id

    def get_rate(
        self, currency_id: int, on_date: date, exh_rate_dec: int = 6, is_local: bool = False
    ) -> Decimal:
        """Get the rate effective on a date, rounded to the exchange rate precision.

        Args:
            currency_id: Currency ID
            on_date: Account date
            exh_rate_dec: Decimal places of exchange rates
            is_local: Look up the local (country) rate

        Returns:
            Rounded exchange rate

        Raises:
            NotFoundError: If no rate is effective on that date
        """
        found = self.db.find_exchange_rate(currency_id, on_date, is_local=is_local)
        if found is None:
            raise NotFoundError(exchange_rate_not_found(currency_id, on_date, is_local))
        return round_amount(found.rate, exh_rate_dec)

    def list_rates(self, currency_id: Optional[int] = None) -> list[ExchangeRate]:
        """List stored exchange rates.

        Args:
            currency_id: Optional currency filter

        Returns:
            List of exchange rate entities
        """
        return self.db.list_exchange_rates(currency_id=currency_id)
