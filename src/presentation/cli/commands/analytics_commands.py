"""Task and tag analytics commands for the CLI."""

import asyncio
import sys

import click

from ....application.services.analytics.analytics_service import AnalyticsService
from ....domain.analytics.exceptions import AnalyticsError
from ....domain.analytics.services.period_filter import PeriodFilter
from ....domain.analytics.services.task_grouper import TaskGrouper
from ....domain.analytics.value_objects.analytics_period import AnalyticsPeriod
from ..utils.formatters import format_output, task_groups_to_rows
from ..utils.record_sources import CLI_USER_ID, FileTagRepository, FileTaskRepository

PERIOD_CHOICES = [period.value for period in AnalyticsPeriod]
FORMAT_CHOICES = ["table", "json", "yaml"]


def build_analytics_service(config, task_repository=None, tag_repository=None) -> AnalyticsService:
    """Wire the analytics service from CLI configuration."""
    grouper = TaskGrouper(day_format=config.date_format, tz=config.tzinfo)
    period_filter = PeriodFilter(
        week_starts_on=config.week_starts_on, day_format=config.date_format
    )

    return AnalyticsService(
        task_repository=task_repository or FileTaskRepository([]),
        tag_repository=tag_repository or FileTagRepository([]),
        grouper=grouper,
        period_filter=period_filter,
        clock=config.now,
    )


@click.group()
def analytics_cli():
    """Day-grouped task analytics."""
    pass


@analytics_cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--period", "-p", type=click.Choice(PERIOD_CHOICES), help="Restrict to a period")
@click.option(
    "--format", "output_format", type=click.Choice(FORMAT_CHOICES), default="table",
    help="Output format",
)
@click.pass_obj
def tasks(ctx, file, period, output_format):
    """Group tasks from FILE by creation day."""

    try:
        service = build_analytics_service(
            ctx.analytics_config, task_repository=FileTaskRepository.from_file(file)
        )
        groups = asyncio.run(service.get_tasks_analytics(CLI_USER_ID, period))
        data = [group.to_dict() for group in groups]

        if output_format == "table":
            data = task_groups_to_rows(data)

        click.echo(format_output(data, output_format))

    except (AnalyticsError, ValueError, KeyError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@analytics_cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--period", "-p", type=click.Choice(PERIOD_CHOICES), help="Restrict to a period")
@click.option("--tag-id", help="Only report this tag")
@click.option(
    "--format", "output_format", type=click.Choice(FORMAT_CHOICES), default="table",
    help="Output format",
)
@click.pass_obj
def tags(ctx, file, period, tag_id, output_format):
    """Group each tag's tasks from FILE by creation day."""

    try:
        service = build_analytics_service(
            ctx.analytics_config, tag_repository=FileTagRepository.from_file(file)
        )
        if tag_id:
            result = asyncio.run(service.get_tag_analytics(CLI_USER_ID, tag_id, period))
        else:
            result = asyncio.run(service.get_tags_analytics(CLI_USER_ID, period))

        data = [tag.to_dict() for tag in result]

        if output_format == "table":
            for tag in data:
                click.echo(f"{tag['title']} ({tag['color']})")
                click.echo(format_output(task_groups_to_rows(tag["tasks"]), "table"))
        else:
            click.echo(format_output(data, output_format))

    except (AnalyticsError, ValueError, KeyError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
