"""CLI command for the design-time schema endpoint."""

import json
import sys

import click

from s3source.api import load_config, resolve_schema
from s3source.cli.options import (
    args_option,
    config_argument,
    json_logs_option,
    log_level_option,
    parse_key_values,
    vars_option,
)
from s3source.core.exceptions import S3SourceError
from s3source.core.logging import configure_logging


@click.command()
@config_argument
@vars_option
@args_option
@log_level_option
@json_logs_option
def schema(config_path: str, vars: tuple, runtime_args: tuple, log_level: str, json_logs: bool):
    """Print the output schema of a config, as JSON.

    The schema comes from the file format when the format defines one
    (text, blob), otherwise from the declared schema.

    Examples:

        s3source schema source.yaml
    """
    configure_logging(level=log_level, json_format=json_logs)

    cli_vars = parse_key_values(vars)
    arguments = parse_key_values(runtime_args)

    try:
        config = load_config(config_path, cli_vars=cli_vars, arguments=arguments)
        configure_logging(
            level=log_level,
            json_format=json_logs,
            reference_name=config.file_source.reference_name,
        )
        resolved = resolve_schema(config)
    except S3SourceError as e:
        click.echo(f"✗ Failed to resolve schema: {e}", err=True)
        sys.exit(1)

    if resolved is None:
        click.echo("✗ No schema: the format does not define one and none is declared", err=True)
        sys.exit(1)

    click.echo(json.dumps(resolved.to_dict(), indent=2))
