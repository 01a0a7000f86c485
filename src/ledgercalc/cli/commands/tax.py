"""Tax percentage commands."""

import click
from ledgercalc.cli.error_handling import (
    handle_domain_error,
    resolve_cli_amount,
    resolve_cli_date,
)
from ledgercalc.domain.errors import DomainError
from ledgercalc.domain.tax import TaxRateService


@click.group()
def tax_group():
    """Manage GST/tax percentages."""
    pass


@tax_group.command("set")
@click.argument("tax_id", type=int, metavar="TAX_ID")
@click.argument("percentage", metavar="PERCENTAGE")
@click.option("--date", "date_str", help="Date the percentage applies from (default: today)")
@click.pass_context
def set_tax(ctx, tax_id: int, percentage: str, date_str: str | None):
    """Store a tax percentage for a tax code.

    Examples:
        ledgercalc tax set 1 10 --date 2024-01-01
    """
    db = ctx.obj["db"]
    service = TaxRateService(db)

    valid_from = resolve_cli_date(ctx, date_str)
    value = resolve_cli_amount(ctx, percentage.rstrip("%"), label="percentage")

    try:
        tax_rate_id = service.set_percentage(tax_id, value, valid_from)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Set tax {tax_id} to {value}% from {valid_from.isoformat()} (ID: {tax_rate_id})"
    )


@tax_group.command("get")
@click.argument("tax_id", type=int, metavar="TAX_ID")
@click.option("--date", "date_str", help="Account date (default: today)")
@click.pass_context
def get_tax(ctx, tax_id: int, date_str: str | None):
    """Show the tax percentage effective on a date."""
    db = ctx.obj["db"]
    service = TaxRateService(db)

    on_date = resolve_cli_date(ctx, date_str)

    try:
        value = service.get_percentage(tax_id, on_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{value}%")


@tax_group.command("list")
@click.option("--tax", "tax_id", type=int, help="Only list percentages for this tax ID")
@click.pass_context
def list_taxes(ctx, tax_id: int | None):
    """List stored tax percentages."""
    db = ctx.obj["db"]
    service = TaxRateService(db)

    rates = service.list_percentages(tax_id=tax_id)
    if not rates:
        click.echo("No tax percentages found.")
        return

    click.echo("\nTax percentages:")
    click.echo("-" * 50)
    for r in rates:
        click.echo(f"Tax: {r.tax_id:4d} | From: {r.valid_from.isoformat()} | {r.percentage}%")


def register_commands(cli):
    """Register tax commands with main CLI."""
    cli.add_command(tax_group, name="tax")
