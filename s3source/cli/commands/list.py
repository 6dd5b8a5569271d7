"""CLI command for listing available file formats."""

import click

from s3source.filesource.formats import get_format, list_formats


@click.command("list-formats")
def list_formats_command():
    """List available file formats.

    Formats marked with * define their own schema; the others need a
    declared schema.
    """
    click.echo("Available Formats:")
    for name in list_formats():
        marker = " *" if get_format(name).get_schema() is not None else ""
        click.echo(f"  - {name}{marker}")
