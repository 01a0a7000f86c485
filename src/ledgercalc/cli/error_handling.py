"""CLI error handling and option parsing helpers.

Every command reports bad input the same way: ``Error: ...`` on stderr and
exit code 1.
"""

import logging
from datetime import date
from decimal import Decimal

import click

from ledgercalc.domain.errors import DomainError
from ledgercalc.utils.amount_parser import parse_amount
from ledgercalc.utils.date_parser import parse_date

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command %s failed", ctx.info_name, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def resolve_cli_date(ctx: click.Context, value: str | None, *, label: str = "date") -> date:
    """Parse a date option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return parse_date(value)
    except ValueError as e:
        handle_domain_error(ctx, ValueError(f"Invalid {label}: {e}"))


def resolve_cli_amount(
    ctx: click.Context, value: str | None, *, label: str = "amount"
) -> Decimal | None:
    """Parse an amount option or argument. None stays None."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        handle_domain_error(ctx, ValueError(f"Invalid {label}: {e}"))
