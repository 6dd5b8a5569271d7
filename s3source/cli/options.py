"""Options shared by the CLI commands."""

import sys

import click

config_argument = click.argument("config_path", type=click.Path(exists=True))

vars_option = click.option(
    "--vars",
    multiple=True,
    help="Template variables in key=value format (can be used multiple times)",
)

args_option = click.option(
    "--args",
    "runtime_args",
    multiple=True,
    help="Runtime arguments for ${...} macros in key=value format (can be used multiple times)",
)

log_level_option = click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)

json_logs_option = click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)


def parse_key_values(pairs: tuple) -> dict[str, str]:
    """Parse ``key=value`` pairs, exiting with status 1 on a malformed pair."""
    values = {}
    for pair in pairs:
        if "=" not in pair:
            click.echo(f"Error: Invalid variable format: {pair}. Use key=value", err=True)
            sys.exit(1)
        key, value = pair.split("=", 1)
        values[key] = value
    return values
