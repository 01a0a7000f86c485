"""Company settings domain service."""

import logging
from typing import Optional

from ledgercalc.database.base import Database
from ledgercalc.domain.entities import CompanySettings, DecimalPrecision
from ledgercalc.domain.errors import ValidationError, decimal_places_out_of_range

logger = logging.getLogger(__name__)

MAX_AMOUNT_DECIMALS = 10
MAX_EXCHANGE_RATE_DECIMALS = 12


class SettingsService:
    """Service for reading and saving decimal precision and currency settings."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_settings(self) -> CompanySettings:
        """Get company settings, falling back to defaults when none are stored."""
        settings = self.db.get_settings()
        if settings is None:
            return CompanySettings()
        return settings

    def get_precision(self) -> DecimalPrecision:
        """Get decimal precision settings."""
        return self.get_settings().precision

    def save_settings(
        self,
        amt_dec: Optional[int] = None,
        loc_amt_dec: Optional[int] = None,
        cty_amt_dec: Optional[int] = None,
        exh_rate_dec: Optional[int] = None,
        has_country_currency: Optional[bool] = None,
    ) -> CompanySettings:
        """Update company settings. Arguments left as None keep their value.

        Returns:
            The saved settings

        Raises:
            ValidationError: If a decimal count is out of range
        """
        current = self.get_settings()
        precision = current.precision

        updated = DecimalPrecision(
            amt_dec=precision.amt_dec if amt_dec is None else amt_dec,
            loc_amt_dec=precision.loc_amt_dec if loc_amt_dec is None else loc_amt_dec,
            cty_amt_dec=precision.cty_amt_dec if cty_amt_dec is None else cty_amt_dec,
            exh_rate_dec=precision.exh_rate_dec if exh_rate_dec is None else exh_rate_dec,
        )
        self.validate_precision(updated)

        settings = CompanySettings(
            precision=updated,
            has_country_currency=(
                current.has_country_currency
                if has_country_currency is None
                else has_country_currency
            ),
        )
        self.db.save_settings(settings)
        logger.info("Saved company settings: %s", settings)
        return self.get_settings()

    def validate_precision(self, precision: DecimalPrecision) -> None:
        """Check every decimal count is within its supported range.

        Raises:
            ValidationError: If a decimal count is out of range
        """
        limits = {
            "amt_dec": MAX_AMOUNT_DECIMALS,
            "loc_amt_dec": MAX_AMOUNT_DECIMALS,
            "cty_amt_dec": MAX_AMOUNT_DECIMALS,
            "exh_rate_dec": MAX_EXCHANGE_RATE_DECIMALS,
        }
        for field, maximum in limits.items():
            value = getattr(precision, field)
            if not 0 <= value <= maximum:
                raise ValidationError(decimal_places_out_of_range(field, value, maximum))
