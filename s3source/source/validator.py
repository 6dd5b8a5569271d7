"""Validation for the S3 batch source configuration."""

import logging

from s3source.core.exceptions import ConfigurationError
from s3source.core.macros import Deferred
from s3source.source.config import S3A_SCHEME, S3BatchSourceConfig, parse_property_map

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Checks a config before a run, failing on the first unmet rule.

    The order is fixed: generic file-source settings, credentials (only for
    Access Credentials authentication), region, path scheme, filesystem
    properties. A deferred field skips its own check only.
    """

    def validate(self, config: S3BatchSourceConfig) -> None:
        """Validate ``config``.

        Raises:
            ConfigurationError: Describing the first violated rule.
        """
        config.file_source.validate_settings()

        if config.uses_access_credentials():
            access_id = config.field("access_id")
            if not isinstance(access_id, Deferred) and access_id.is_empty():
                raise ConfigurationError(
                    "The Access ID must be specified if authentication method "
                    "is Access Credentials.",
                    context={"field": "accessID"},
                )
            access_key = config.field("access_key")
            if not isinstance(access_key, Deferred) and access_key.is_empty():
                raise ConfigurationError(
                    "The Access Key must be specified if authentication method "
                    "is Access Credentials.",
                    context={"field": "accessKey"},
                )

        region = config.field("region")
        if not isinstance(region, Deferred) and region.is_empty():
            raise ConfigurationError(
                "Non-empty Region must be specified.", context={"field": "region"}
            )

        path = config.field("path")
        if not isinstance(path, Deferred) and not (path.value or "").startswith(S3A_SCHEME):
            raise ConfigurationError(
                f"Path must start with {S3A_SCHEME} for S3AFileSystem",
                context={"field": "path"},
            )

        if not isinstance(config.field("file_system_properties"), Deferred):
            parse_property_map(config.file_system_properties)

        logger.debug(
            "Validated S3 source configuration",
            extra={"reference_name": config.file_source.reference_name},
        )


def validate_config(config: S3BatchSourceConfig) -> None:
    """Validate ``config`` with the default validator."""
    ConfigValidator().validate(config)
