"""Transaction statistics commands for the CLI."""

import asyncio
import sys

import click

from ....application.services.finances.transaction_statistics_service import (
    TransactionStatisticsService,
)
from ....domain.analytics.exceptions import AnalyticsError
from ....domain.analytics.services.field_access import read_field
from ....domain.finances.exceptions import FinancesError
from ..utils.formatters import format_output
from ..utils.record_sources import CLI_USER_ID, FileTransactionRepository, load_records

FORMAT_CHOICES = ["table", "json", "yaml"]


@click.group()
def finance_cli():
    """Transaction mean and deviation statistics."""
    pass


@finance_cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--value", "-v", type=float, required=True, help="Value to compare")
@click.option("--field", default="value", show_default=True, help="Numeric field to measure")
@click.option(
    "--format", "output_format", type=click.Choice(FORMAT_CHOICES), default="table",
    help="Output format",
)
@click.pass_obj
def deviation(ctx, file, value, field, output_format):
    """Compare VALUE with the trimmed mean of FILE's records."""

    try:
        records = load_records(file)
        service = TransactionStatisticsService(
            FileTransactionRepository([]), decimal_places=ctx.analytics_config.decimal_places
        )
        sample = [{"value": read_field(record, field)} for record in records]
        outcome = service.calculate_statistics(sample, value)

        click.echo(format_output(outcome.to_dict(), output_format))

    except (AnalyticsError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@finance_cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--transaction-id", "-t", required=True, help="Transaction to report")
@click.option(
    "--format", "output_format", type=click.Choice(FORMAT_CHOICES), default="table",
    help="Output format",
)
@click.pass_obj
def report(ctx, file, transaction_id, output_format):
    """Compare a transaction with similar transactions from FILE."""

    try:
        config = ctx.analytics_config
        service = TransactionStatisticsService(
            FileTransactionRepository.from_file(file),
            clock=config.now,
            decimal_places=config.decimal_places,
        )
        result = asyncio.run(service.get_one_with_mean_and_deviation(CLI_USER_ID, transaction_id))

        click.echo(format_output(result.to_dict(), output_format))

    except (AnalyticsError, FinancesError, ValueError, KeyError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
