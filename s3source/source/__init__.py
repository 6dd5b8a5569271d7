"""S3 batch source: configuration, validation, property and schema resolution."""

from s3source.source.config import ACCESS_CREDENTIALS, S3A_SCHEME, S3BatchSourceConfig
from s3source.source.plugin import PLUGIN_NAME, S3BatchSource, create_s3_source
from s3source.source.properties import (
    COPY_HEADER,
    S3A_ACCESS_KEY,
    S3A_ENDPOINT,
    S3A_SECRET_KEY,
    PropertyResolver,
    resolve_filesystem_properties,
)
from s3source.source.schema_endpoint import SchemaResolver, resolve_schema
from s3source.source.validator import ConfigValidator, validate_config

__all__ = [
    "ACCESS_CREDENTIALS",
    "S3A_SCHEME",
    "S3A_ACCESS_KEY",
    "S3A_SECRET_KEY",
    "S3A_ENDPOINT",
    "COPY_HEADER",
    "PLUGIN_NAME",
    "S3BatchSourceConfig",
    "S3BatchSource",
    "ConfigValidator",
    "PropertyResolver",
    "SchemaResolver",
    "create_s3_source",
    "validate_config",
    "resolve_filesystem_properties",
    "resolve_schema",
    "reregister_builtins",
]


def reregister_builtins() -> None:
    """Re-register the built-in S3 plugin after the registry is cleared.

    This is intended for tests that call clear_registry() but need the
    built-in plugin available afterwards.
    """
    from s3source.registry import BATCH_SOURCE, list_plugins, register_plugin

    if PLUGIN_NAME not in list_plugins(BATCH_SOURCE):
        register_plugin(BATCH_SOURCE, PLUGIN_NAME, create_s3_source)
