"""Public API for validating and resolving S3 source configurations."""

import logging
from typing import Mapping, Optional

from s3source.core.schema import Schema
from s3source.models.loader import load_definition
from s3source.source.config import S3BatchSourceConfig
from s3source.source.properties import PropertyResolver
from s3source.source.schema_endpoint import SchemaResolver
from s3source.source.validator import ConfigValidator

logger = logging.getLogger(__name__)


def load_config(
    path: str,
    cli_vars: Optional[Mapping[str, str]] = None,
    arguments: Optional[Mapping[str, str]] = None,
) -> S3BatchSourceConfig:
    """Load an S3 source config from a YAML file.

    Args:
        path: Path to the config YAML file.
        cli_vars: Values for ``{{ var('...') }}`` templates.
        arguments: Runtime arguments bound to ``${...}`` macros. Without
            them, macro fields stay deferred.

    Returns:
        The (unvalidated) configuration.
    """
    definition = load_definition(path, cli_vars=dict(cli_vars) if cli_vars else None)
    return definition.build_config(arguments)


def validate(config: S3BatchSourceConfig) -> None:
    """Validate a configuration, raising ConfigurationError on the first problem."""
    ConfigValidator().validate(config)


def resolve_filesystem_properties(config: S3BatchSourceConfig) -> dict[str, str]:
    """Validate a configuration and return the filesystem properties for it."""
    validate(config)
    return PropertyResolver().resolve_filesystem_properties(config)


def resolve_schema(config: S3BatchSourceConfig) -> Optional[Schema]:
    """Return the output schema for a configuration (design-time endpoint)."""
    return SchemaResolver().resolve_schema(config)
