"""Main CLI entry point for s3source."""

import click

from s3source import __version__
from s3source.cli.commands.list import list_formats_command
from s3source.cli.commands.properties import properties
from s3source.cli.commands.schema import schema
from s3source.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """s3source - S3 batch source configuration tools."""
    pass


# Register commands
main.add_command(validate)
main.add_command(properties)
main.add_command(schema)
main.add_command(list_formats_command)


if __name__ == "__main__":
    main()
