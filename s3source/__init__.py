"""s3source - S3 batch source configuration for file-reading pipelines.

Validates S3 source configurations, derives the S3A filesystem properties a
file-reading layer needs, and resolves the output schema for design-time
tooling.
"""

__version__ = "0.1.0"

# Public API
from s3source.api import (
    load_config,
    resolve_filesystem_properties,
    resolve_schema,
    validate,
)

# Core classes
from s3source.core.schema import Column, Schema

# Exceptions
from s3source.core.exceptions import (
    ConfigurationError,
    MacroError,
    PluginError,
    PropertyMapError,
    S3SourceError,
    SchemaError,
)
from s3source.filesource.config import FileSourceSettings
from s3source.source.config import S3BatchSourceConfig
from s3source.source.plugin import S3BatchSource

__all__ = [
    # Version
    "__version__",
    # Public API
    "load_config",
    "validate",
    "resolve_filesystem_properties",
    "resolve_schema",
    # Core classes
    "S3BatchSourceConfig",
    "FileSourceSettings",
    "S3BatchSource",
    "Schema",
    "Column",
    # Exceptions
    "S3SourceError",
    "ConfigurationError",
    "PropertyMapError",
    "SchemaError",
    "MacroError",
    "PluginError",
]
