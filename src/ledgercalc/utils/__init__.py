"""Utility functions for ledgercalc."""

from ledgercalc.utils.date_parser import parse_date
from ledgercalc.utils.amount_parser import parse_amount, coerce_amount

__all__ = ["parse_date", "parse_amount", "coerce_amount"]
