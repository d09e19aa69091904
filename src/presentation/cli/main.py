"""Main CLI application for productivity analytics."""

import logging
import sys
from pathlib import Path

import click
import yaml

from ...infrastructure.monitoring.structured_logging import log_context
from .commands.analytics_commands import analytics_cli
from .commands.finance_commands import finance_cli
from .utils.config import build_analytics_config, load_config, validate_config
from .utils.logging_setup import setup_logging
from .utils.record_sources import CLI_USER_ID

# Version information
__version__ = "1.0.0"


# Global context for CLI
class CLIContext:
    """Global CLI context."""

    def __init__(self):
        self.config = {}
        self.verbose = False
        self.debug = False
        self.analytics_config = None


@click.group()
@click.option("--config", "-c", type=click.Path(exists=True), help="Configuration file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON documents")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config, verbose, debug, json_logs):
    """
    Productivity Analytics CLI

    Day-grouped task analytics and trimmed-mean transaction statistics
    over JSON or YAML record files.

    Examples:
        productivity-analytics analytics tasks tasks.json --period week
        productivity-analytics analytics tags tags.yaml --format json
        productivity-analytics finance deviation transactions.json --value 120
        productivity-analytics finance report transactions.json -t tx-42
    """
    # Initialize context
    ctx.ensure_object(CLIContext)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug

    # Load configuration
    try:
        if config:
            ctx.obj.config = load_config(config)
            if not validate_config(ctx.obj.config):
                click.echo("Error: Invalid configuration file", err=True)
                sys.exit(1)

        ctx.obj.analytics_config = build_analytics_config(ctx.obj.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    # Setup logging
    analytics_config = ctx.obj.analytics_config
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = max(logging.WARNING, logging.getLevelName(analytics_config.log_level))
    setup_logging(
        log_level,
        log_file=(ctx.obj.config.get("logging") or {}).get("file"),
        json_logs=json_logs or analytics_config.json_logs,
    )

    # One correlation id for every record logged by this invocation
    ctx.with_resource(log_context(user_id=CLI_USER_ID))


# Add command groups
cli.add_command(analytics_cli, name="analytics")
cli.add_command(finance_cli, name="finance")


@cli.command()
@click.option("--output", "-o", type=click.Path(), help="Output file for configuration template")
def init(output):
    """Initialize configuration file."""

    config_template = {
        "analytics": {
            "date_format": "%d.%m.%Y",
            "week_starts_on": 6,
            "timezone": None,
            "decimal_places": 2,
            "log_level": "INFO",
            "json_logs": False,
        },
        "logging": {"file": None},
    }

    if output:
        output_path = Path(output)
    else:
        output_path = Path.cwd() / "analytics-config.yaml"

    try:
        with open(output_path, "w") as f:
            yaml.dump(config_template, f, default_flow_style=False, indent=2)

        click.echo(f"Configuration template created: {output_path}")

    except OSError as e:
        click.echo(f"Error creating configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--config", type=click.Path(exists=True), help="Configuration file to validate")
def validate(config):
    """Validate configuration file."""

    if not config:
        config = Path.cwd() / "analytics-config.yaml"
        if not config.exists():
            click.echo(
                "No configuration file found. Use 'productivity-analytics init' to create one.",
                err=True,
            )
            sys.exit(1)

    try:
        config_data = load_config(config)

        if validate_config(config_data):
            click.echo("Configuration is valid")
        else:
            click.echo("Configuration is invalid", err=True)
            sys.exit(1)

    except (OSError, yaml.YAMLError) as e:
        click.echo(f"Error validating configuration: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
