"""CLI command for validating source configs."""

import sys

import click

from s3source.api import load_config, validate as validate_config
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
from s3source.core.macros import Deferred

DEFERRABLE_FIELDS = (
    "path",
    "access_id",
    "access_key",
    "region",
    "authentication_method",
    "file_system_properties",
)


@click.command()
@config_argument
@vars_option
@args_option
@log_level_option
@json_logs_option
def validate(config_path: str, vars: tuple, runtime_args: tuple, log_level: str, json_logs: bool):
    """Validate an S3 source config file.

    Checks:
    - YAML syntax and template variables
    - Generic file-source settings (reference name, format, schema)
    - Credentials, region and path scheme
    - fileSystemProperties JSON

    Fields holding ${...} macros are reported as deferred unless bound with --args.

    Examples:

        s3source validate source.yaml
        s3source validate source.yaml --vars bucket=raw --args region=us-east-1
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
        validate_config(config)
    except S3SourceError as e:
        click.echo(f"✗ Config validation failed: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"✗ Unexpected error: {e}", err=True)
        sys.exit(1)

    deferred = [name for name in DEFERRABLE_FIELDS if isinstance(config.field(name), Deferred)]

    click.echo(f"✓ Source '{config.file_source.reference_name}' is valid")
    click.echo(f"  Path: {config.path}")
    click.echo(f"  Authentication: {config.authentication_method}")
    click.echo(f"  Format: {config.file_source.format}")
    if deferred:
        click.echo(f"  Deferred fields: {', '.join(deferred)}")
