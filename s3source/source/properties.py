"""Derivation of filesystem-connection properties for the S3A filesystem."""

import logging

from s3source.source.config import S3A_SCHEME, S3BatchSourceConfig

logger = logging.getLogger(__name__)

S3A_ACCESS_KEY = "fs.s3a.access.key"
S3A_SECRET_KEY = "fs.s3a.secret.key"
S3A_ENDPOINT = "fs.s3a.endpoint"
COPY_HEADER = "path.tracking.copy.header"

SECRET_PROPERTIES = frozenset({S3A_SECRET_KEY})


def default_endpoint(region: str) -> str:
    """Return the public S3 endpoint for ``region``."""
    return f"s3.{region}.amazonaws.com"


class PropertyResolver:
    """Builds the property map handed to the file-reading layer."""

    def resolve_filesystem_properties(self, config: S3BatchSourceConfig) -> dict[str, str]:
        """Return a fresh property map for ``config``.

        User-supplied fileSystemProperties seed the map. Credentials are only
        added for Access Credentials authentication on an s3a:// path, and an
        explicit fs.s3a.endpoint is never overwritten.
        """
        properties = config.get_filesystem_properties()

        if config.uses_access_credentials() and config.path.startswith(S3A_SCHEME):
            properties[S3A_ACCESS_KEY] = config.access_id
            properties[S3A_SECRET_KEY] = config.access_key
            if S3A_ENDPOINT not in properties:
                properties[S3A_ENDPOINT] = default_endpoint(config.region)

        if config.file_source.should_copy_header():
            properties[COPY_HEADER] = "true"

        logger.debug(
            "Resolved filesystem properties",
            extra={"context": {"keys": ",".join(sorted(properties))}},
        )
        return properties


def resolve_filesystem_properties(config: S3BatchSourceConfig) -> dict[str, str]:
    """Resolve filesystem properties with the default resolver."""
    return PropertyResolver().resolve_filesystem_properties(config)


def mask_secrets(properties: dict[str, str]) -> dict[str, str]:
    """Return a copy of ``properties`` with secret values masked for display."""
    return {
        key: "******" if key in SECRET_PROPERTIES and value else value
        for key, value in properties.items()
    }
