"""Main CLI entry point."""

import logging

import click
from ledgercalc import __version__
from ledgercalc.database.factories import create_sqlite_database

# Import and register all commands at module level
from ledgercalc.cli.commands import (
    settings,
    rate,
    tax,
    totals,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.version_option(__version__, prog_name="ledgercalc")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERCALC_DB_PATH environment variable)",
    envvar="LEDGERCALC_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (overrides LEDGERCALC_LOG_LEVEL environment variable)",
    envvar="LEDGERCALC_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Ledgercalc - Multi-currency transaction totals.

    Recalculate line amounts and header totals of transactions in document,
    local and country currency, using stored exchange rates, tax
    percentages and decimal precision settings.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
settings.register_commands(cli)
rate.register_commands(cli)
tax.register_commands(cli)
totals.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
