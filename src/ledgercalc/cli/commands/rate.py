"""Exchange rate commands."""

import click
from ledgercalc.cli.error_handling import (
    handle_domain_error,
    resolve_cli_amount,
    resolve_cli_date,
)
from ledgercalc.domain.errors import DomainError
from ledgercalc.domain.exchange_rate import ExchangeRateService
from ledgercalc.domain.settings import SettingsService


@click.group()
def rate_group():
    """Manage currency exchange rates."""
    pass


@rate_group.command("set")
@click.argument("currency_id", type=int, metavar="CURRENCY_ID")
@click.argument("rate", metavar="RATE")
@click.option("--date", "date_str", help="Date the rate applies from (default: today)")
@click.option("--local", is_flag=True, help="Store as the local (country) rate")
@click.pass_context
def set_rate(ctx, currency_id: int, rate: str, date_str: str | None, local: bool):
    """Store an exchange rate for a currency.

    Examples:
        ledgercalc rate set 2 3.75 --date 2024-01-01
        ledgercalc rate set 2 1.02 --date 2024-01-01 --local
    """
    db = ctx.obj["db"]
    service = ExchangeRateService(db)

    valid_from = resolve_cli_date(ctx, date_str)
    value = resolve_cli_amount(ctx, rate, label="rate")

    try:
        rate_id = service.set_rate(currency_id, value, valid_from, is_local=local)
    except DomainError as e:
        handle_domain_error(ctx, e)

    kind = "local rate" if local else "exchange rate"
    click.echo(
        f"Set {kind} {value} for currency {currency_id} from {valid_from.isoformat()} (ID: {rate_id})"
    )


@rate_group.command("get")
@click.argument("currency_id", type=int, metavar="CURRENCY_ID")
@click.option("--date", "date_str", help="Account date (default: today)")
@click.option("--local", is_flag=True, help="Look up the local (country) rate")
@click.pass_context
def get_rate(ctx, currency_id: int, date_str: str | None, local: bool):
    """Show the rate effective on a date, rounded to the configured precision."""
    db = ctx.obj["db"]
    service = ExchangeRateService(db)
    precision = SettingsService(db).get_precision()

    on_date = resolve_cli_date(ctx, date_str)

    try:
        value = service.get_rate(currency_id, on_date, precision.exh_rate_dec, is_local=local)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(str(value))


@rate_group.command("list")
@click.option("--currency", type=int, help="Only list rates for this currency ID")
@click.pass_context
def list_rates(ctx, currency: int | None):
    """List stored exchange rates."""
    db = ctx.obj["db"]
    service = ExchangeRateService(db)

    rates = service.list_rates(currency_id=currency)
    if not rates:
        click.echo("No exchange rates found.")
        return

    click.echo("\nExchange rates:")
    click.echo("-" * 60)
    for r in rates:
        kind = "local" if r.is_local else "exchange"
        click.echo(
            f"Currency: {r.currency_id:4d} | From: {r.valid_from.isoformat()} | "
            f"{kind:8s} | {r.rate}"
        )


def register_commands(cli):
    """Register exchange rate commands with main CLI."""
    cli.add_command(rate_group, name="rate")
