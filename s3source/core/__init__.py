"""Core building blocks: exceptions, logging, macros and schemas."""

from s3source.core.exceptions import (
    ConfigurationError,
    MacroError,
    PluginError,
    PropertyMapError,
    S3SourceError,
    SchemaError,
)
from s3source.core.macros import Concrete, Deferred, FieldValue, classify, contains_macro
from s3source.core.schema import Column, Schema

__all__ = [
    "S3SourceError",
    "ConfigurationError",
    "PropertyMapError",
    "SchemaError",
    "MacroError",
    "PluginError",
    "Concrete",
    "Deferred",
    "FieldValue",
    "classify",
    "contains_macro",
    "Column",
    "Schema",
]
