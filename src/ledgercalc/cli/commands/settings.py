"""Company settings commands."""

import click
from ledgercalc.cli.error_handling import handle_domain_error
from ledgercalc.domain.errors import DomainError
from ledgercalc.domain.settings import SettingsService


def _show(settings) -> None:
    precision = settings.precision
    click.echo("\nCompany settings:")
    click.echo("-" * 40)
    click.echo(f"{'Amount decimals':28s} {precision.amt_dec}")
    click.echo(f"{'Local amount decimals':28s} {precision.loc_amt_dec}")
    click.echo(f"{'Country amount decimals':28s} {precision.cty_amt_dec}")
    click.echo(f"{'Exchange rate decimals':28s} {precision.exh_rate_dec}")
    click.echo(
        f"{'Country currency':28s} {'yes' if settings.has_country_currency else 'no'}"
    )


@click.group()
def settings_group():
    """Manage decimal precision and currency settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show company settings."""
    db = ctx.obj["db"]
    service = SettingsService(db)
    _show(service.get_settings())


@settings_group.command("set")
@click.option("--amt-dec", type=int, help="Decimal places of document currency amounts")
@click.option("--loc-amt-dec", type=int, help="Decimal places of local currency amounts")
@click.option("--cty-amt-dec", type=int, help="Decimal places of country currency amounts")
@click.option("--exh-rate-dec", type=int, help="Decimal places of exchange rates")
@click.option(
    "--country-currency/--no-country-currency",
    default=None,
    help="Keep a distinct country currency with its own exchange rate",
)
@click.pass_context
def set_settings(
    ctx,
    amt_dec: int | None,
    loc_amt_dec: int | None,
    cty_amt_dec: int | None,
    exh_rate_dec: int | None,
    country_currency: bool | None,
):
    """Update company settings. Options not given keep their value.

    Examples:
        ledgercalc settings set --amt-dec 2 --loc-amt-dec 0
        ledgercalc settings set --country-currency --cty-amt-dec 2
    """
    db = ctx.obj["db"]
    service = SettingsService(db)

    try:
        saved = service.save_settings(
            amt_dec=amt_dec,
            loc_amt_dec=loc_amt_dec,
            cty_amt_dec=cty_amt_dec,
            exh_rate_dec=exh_rate_dec,
            has_country_currency=country_currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Settings saved.")
    _show(saved)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
