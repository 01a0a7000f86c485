"""Transaction totals command."""

import click
from ledgercalc.cli.error_handling import (
    handle_domain_error,
    resolve_cli_amount,
    resolve_cli_date,
)
from ledgercalc.domain.errors import DomainError, ValidationError
from ledgercalc.domain.exchange_rate import ExchangeRateService
from ledgercalc.domain.form import TransactionForm
from ledgercalc.domain.header_sync import HeaderSyncController
from ledgercalc.domain.line_import import LineImportService
from ledgercalc.domain.settings import SettingsService

TOTAL_ROWS = (
    ("Document", "tot_amt", "gst_amt", "tot_amt_aft_gst"),
    ("Local", "tot_local_amt", "gst_local_amt", "tot_local_amt_aft_gst"),
    ("Country", "tot_cty_amt", "gst_cty_amt", "tot_cty_amt_aft_gst"),
)


def _display_lines(lines) -> None:
    click.echo("\nLines:")
    click.echo("-" * 96)
    click.echo(
        f"{'#':>3s} {'Qty':>10s} {'Price':>12s} {'Tax %':>7s} {'Amount':>12s} "
        f"{'Tax':>10s} {'Total':>12s} {'Local total':>14s} {'Dr/Cr':>5s}"
    )
    for line in lines:
        click.echo(
            f"{line.item_no:3d} {str(line.quantity):>10s} {str(line.unit_price):>12s} "
            f"{str(line.tax_percentage):>7s} {str(line.gross_amount):>12s} "
            f"{str(line.tax_amount):>10s} {str(line.total_amount):>12s} "
            f"{str(line.local_total_amount):>14s} {'Dr' if line.is_debit else 'Cr':>5s}"
        )


def _display_totals(values: dict) -> None:
    click.echo("\nHeader totals:")
    click.echo("-" * 56)
    click.echo(f"{'':10s} {'Amount':>14s} {'Tax':>14s} {'After tax':>14s}")
    for label, total_field, tax_field, after_tax_field in TOTAL_ROWS:
        click.echo(
            f"{label:10s} {str(values[total_field]):>14s} {str(values[tax_field]):>14s} "
            f"{str(values[after_tax_field]):>14s}"
        )


@click.command("totals")
@click.argument("csv_file", type=click.Path(exists=True), metavar="CSV_FILE")
@click.option("--currency", "currency_id", type=int, required=True, help="Document currency ID")
@click.option("--date", "date_str", help="Account date (default: today)")
@click.option("--exh-rate", help="Exchange rate to use instead of the stored one")
@click.option("--cty-exh-rate", help="Country exchange rate to use instead of the stored one")
@click.option("--adjustment", is_flag=True, help="Net debit lines against credit lines")
@click.option("--verbose", "-v", is_flag=True, help="Show recalculated lines")
@click.pass_context
def totals(
    ctx,
    csv_file: str,
    currency_id: int,
    date_str: str | None,
    exh_rate: str | None,
    cty_exh_rate: str | None,
    adjustment: bool,
    verbose: bool,
):
    """Recalculate line amounts and header totals for lines in a CSV file.

    The CSV needs quantity and unit_price columns, and optionally item_no,
    tax_percentage or tax_id, is_debit and remarks.

    Rates are looked up for the currency on the account date unless given
    with --exh-rate (and --cty-exh-rate when a country currency is kept).

    Examples:
        ledgercalc totals lines.csv --currency 2 --date 2024-01-15
        ledgercalc totals lines.csv --currency 2 --exh-rate 3.75 --verbose
        ledgercalc totals journal.csv --currency 1 --adjustment
    """
    db = ctx.obj["db"]
    settings = SettingsService(db).get_settings()

    account_date = resolve_cli_date(ctx, date_str, label="account date")
    manual_rate = resolve_cli_amount(ctx, exh_rate, label="exchange rate")
    manual_cty_rate = resolve_cli_amount(ctx, cty_exh_rate, label="country exchange rate")

    if manual_cty_rate is not None and not settings.has_country_currency:
        handle_domain_error(
            ctx,
            ValidationError(
                "--cty-exh-rate needs a country currency; "
                "enable it with 'ledgercalc settings set --country-currency'"
            ),
        )

    try:
        result = LineImportService(db).read_lines(csv_file, account_date=account_date)
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    for error in result["errors"]:
        click.echo(f"Warning: {error}", err=True)

    form = TransactionForm(details=result["lines"])
    controller = HeaderSyncController(
        form,
        precision=settings.precision,
        has_country_currency=settings.has_country_currency,
        rate_service=ExchangeRateService(db),
        net_debit_credit=adjustment,
    )

    try:
        if manual_rate is None:
            if not controller.on_currency_changed(currency_id, account_date):
                reason = controller.rate_error or (
                    f"No exchange rate for currency {currency_id} on {account_date.isoformat()}"
                )
                click.echo(f"Error: {reason}; pass --exh-rate to set one", err=True)
                ctx.exit(1)
            if manual_cty_rate is not None:
                controller.on_country_exchange_rate_changed(manual_cty_rate)
        else:
            form.set_values({"currency_id": currency_id, "account_date": account_date})
            if not controller.on_exchange_rate_changed(manual_rate):
                controller.on_details_changed()
            if settings.has_country_currency:
                controller.on_country_exchange_rate_changed(
                    manual_rate if manual_cty_rate is None else manual_cty_rate
                )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Currency: {currency_id} | Date: {account_date.isoformat()} | "
        f"Exchange rate: {form.get_value('exh_rate')} | "
        f"Country rate: {form.get_value('cty_exh_rate')}"
    )

    if verbose:
        _display_lines(form.details)

    _display_totals(form.header_totals())

    if adjustment:
        direction = "debit" if form.get_value("is_debit") else "credit"
        click.echo(f"\nNet direction: {direction}")


def register_commands(cli):
    """Register totals command with main CLI."""
    cli.add_command(totals, name="totals")
