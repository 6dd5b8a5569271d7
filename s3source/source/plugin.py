"""Batch source that reads files from Amazon S3 through the S3A filesystem."""

from typing import Any, Mapping, Optional

from s3source.core.schema import Schema
from s3source.filesource.lineage import LineageRecorder
from s3source.registry import BATCH_SOURCE, register_plugin
from s3source.source.config import S3BatchSourceConfig
from s3source.source.properties import PropertyResolver
from s3source.source.schema_endpoint import SchemaResolver
from s3source.source.validator import ConfigValidator

PLUGIN_NAME = "S3"


class S3BatchSource:
    """Batch source to use Amazon S3 as a source.

    Combines validation, filesystem property resolution and schema
    resolution for a single configuration. Reading itself is done by the
    host pipeline's file-reading layer using the resolved properties.
    """

    def __init__(
        self,
        config: S3BatchSourceConfig,
        validator: Optional[ConfigValidator] = None,
        property_resolver: Optional[PropertyResolver] = None,
        schema_resolver: Optional[SchemaResolver] = None,
    ):
        self._config = config
        self._validator = validator or ConfigValidator()
        self._property_resolver = property_resolver or PropertyResolver()
        self._schema_resolver = schema_resolver or SchemaResolver()

    @property
    def config(self) -> S3BatchSourceConfig:
        return self._config

    def validate(self) -> None:
        self._validator.validate(self._config)

    def get_filesystem_properties(self) -> dict[str, str]:
        return self._property_resolver.resolve_filesystem_properties(self._config)

    def record_lineage(self, recorder: LineageRecorder, output_fields: list[str]) -> None:
        recorder.record_read("Read", "Read from S3.", output_fields)

    def get_schema(self, config: Optional[S3BatchSourceConfig] = None) -> Optional[Schema]:
        """Endpoint method to get the output schema of a source.

        Args:
            config: Configuration to resolve; defaults to this source's own.
                Design-time tooling passes the config being edited.

        Returns:
            Schema of fields, or None if neither the format nor the user
            declares one.
        """
        return self._schema_resolver.resolve_schema(config or self._config)


@register_plugin(BATCH_SOURCE, PLUGIN_NAME)
def create_s3_source(properties: Mapping[str, Any]) -> S3BatchSource:
    """Factory function for creating an S3BatchSource from flat properties."""
    return S3BatchSource(S3BatchSourceConfig.from_properties(properties))
