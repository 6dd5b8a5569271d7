"""Design-time schema resolution for the S3 batch source."""

import logging
from typing import Optional

from s3source.core.schema import Schema
from s3source.source.config import S3BatchSourceConfig

logger = logging.getLogger(__name__)


class SchemaResolver:
    """Resolves the output schema without touching the stored configuration."""

    def resolve_schema(self, config: S3BatchSourceConfig) -> Optional[Schema]:
        """Return the schema the source will produce.

        A schema derived from the file format replaces the declared schema;
        the declared schema is used when there is no format or the format
        cannot derive one. Errors from the format propagate unchanged.
        """
        settings = config.file_source
        file_format = settings.get_format()
        if file_format is None:
            return settings.get_schema()

        schema = file_format.get_schema(settings.get_path_field())
        if schema is None:
            return settings.get_schema()

        logger.debug(
            "Schema derived from format",
            extra={"context": {"format": file_format.name}},
        )
        return schema


def resolve_schema(config: S3BatchSourceConfig) -> Optional[Schema]:
    """Resolve the output schema with the default resolver."""
    return SchemaResolver().resolve_schema(config)
