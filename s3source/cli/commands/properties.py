"""CLI command for printing resolved filesystem properties."""

import json
import sys

import click

from s3source.api import load_config, resolve_filesystem_properties
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
from s3source.source.properties import mask_secrets


@click.command()
@config_argument
@vars_option
@args_option
@click.option(
    "--show-secrets",
    is_flag=True,
    help="Print the secret key instead of masking it",
)
@log_level_option
@json_logs_option
def properties(
    config_path: str,
    vars: tuple,
    runtime_args: tuple,
    show_secrets: bool,
    log_level: str,
    json_logs: bool,
):
    """Print the filesystem properties a config resolves to, as JSON.

    Examples:

        s3source properties source.yaml
        s3source properties source.yaml --args key_id=AKIA... --show-secrets
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
        resolved = resolve_filesystem_properties(config)
    except S3SourceError as e:
        click.echo(f"✗ Failed to resolve properties: {e}", err=True)
        sys.exit(1)

    if not show_secrets:
        resolved = mask_secrets(resolved)
    click.echo(json.dumps(resolved, indent=2, sort_keys=True))
