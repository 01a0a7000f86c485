"""Shared domain error messages and error types."""

from datetime import date


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate item number."""


def exchange_rate_not_found(currency_id: int, on_date: date, is_local: bool = False) -> str:
    """Return message for a missing exchange rate."""
    kind = "Local exchange rate" if is_local else "Exchange rate"
    return f"{kind} for currency {currency_id} on {on_date.isoformat()} not found"


def tax_rate_not_found(tax_id: int, on_date: date) -> str:
    """Return message for a missing tax percentage."""
    return f"Tax percentage for tax {tax_id} on {on_date.isoformat()} not found"


def detail_line_not_found(item_no: int) -> str:
    """Return message for a missing detail line."""
    return f"Detail line {item_no} not found"


def duplicate_item_no(item_no: int) -> str:
    """Return message for a duplicate detail line item number."""
    return f"Detail line with item number {item_no} already exists"


def decimal_places_out_of_range(field: str, value: int, maximum: int) -> str:
    """Return message for a decimal count outside the supported range."""
    return f"{field} must be between 0 and {maximum}, got {value}"
