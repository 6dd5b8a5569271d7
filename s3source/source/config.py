"""S3 batch source configuration."""

import json
import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from s3source.core.exceptions import PropertyMapError
from s3source.core.macros import Deferred, FieldValue, classify, substitute_macros
from s3source.filesource.config import FileSourceSettings

logger = logging.getLogger(__name__)

ACCESS_CREDENTIALS = "Access Credentials"
S3A_SCHEME = "s3a://"

# Property names (as the host pipeline spells them) owned by the S3 config itself
S3_PROPERTY_NAMES = frozenset(
    {"path", "accessID", "accessKey", "region", "authenticationMethod", "fileSystemProperties"}
)


class S3BatchSourceConfig(BaseModel):
    """Configuration for the S3 batch source.

    String fields may hold ``${name}`` macros that stay deferred until runtime
    arguments are bound with resolve_macros().
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    path: str = Field(
        description="Path to file(s) to be read. If a directory is specified, "
        "terminate the path name with a '/'. The path must start with s3a://."
    )
    access_id: Optional[str] = Field(
        default=None,
        alias="accessID",
        description="Access ID of the Amazon S3 instance to connect to",
    )
    access_key: Optional[str] = Field(
        default=None,
        alias="accessKey",
        description="Access Key of the Amazon S3 instance to connect to",
    )
    region: Optional[str] = Field(
        default=None, description="Region of the Amazon S3 instance to connect to"
    )
    authentication_method: Optional[str] = Field(
        default=ACCESS_CREDENTIALS,
        alias="authenticationMethod",
        description="Authentication method to access S3. Defaults to Access Credentials.",
    )
    file_system_properties: str = Field(
        default="{}",
        alias="fileSystemProperties",
        description="JSON object of additional properties for the underlying filesystem",
    )
    file_source: FileSourceSettings = Field(
        description="Generic file-source settings (format, schema, path field, ...)"
    )

    _property_cache: Optional[dict[str, str]] = PrivateAttr(default=None)

    @field_validator("file_system_properties", mode="before")
    @classmethod
    def serialize_property_mapping(cls, value: Any) -> Any:
        """Accept a mapping as well as its JSON string form."""
        if isinstance(value, dict):
            return json.dumps(value)
        if value is None:
            return "{}"
        return value

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "S3BatchSourceConfig":
        """Build a config from the flat property mapping the host pipeline supplies.

        S3 keys populate this config; all other keys populate the embedded
        file-source settings.
        """
        s3_values = {k: v for k, v in properties.items() if k in S3_PROPERTY_NAMES}
        generic_values = {k: v for k, v in properties.items() if k not in S3_PROPERTY_NAMES}
        return cls(file_source=FileSourceSettings(**generic_values), **s3_values)

    def field(self, name: str) -> FieldValue:
        """Classify a string field as Concrete or Deferred."""
        return classify(getattr(self, name))

    def uses_access_credentials(self) -> bool:
        """Return True if the configured authentication method is Access Credentials.

        An unset or empty method counts as the default; a deferred one never matches.
        """
        method = self.field("authentication_method")
        if isinstance(method, Deferred):
            return False
        value = method.value or ACCESS_CREDENTIALS
        return value.lower() == ACCESS_CREDENTIALS.lower()

    def get_filesystem_properties(self) -> dict[str, str]:
        """Return the user-supplied filesystem properties as a fresh dict.

        Returns an empty dict while fileSystemProperties is deferred.

        Raises:
            PropertyMapError: If the JSON is malformed or not a flat object.
        """
        if isinstance(self.field("file_system_properties"), Deferred):
            return {}
        if self._property_cache is None:
            self._property_cache = parse_property_map(self.file_system_properties)
        return dict(self._property_cache)

    def resolve_macros(self, arguments: Mapping[str, str]) -> "S3BatchSourceConfig":
        """Return a copy with every ``${key}`` replaced from ``arguments``.

        Raises:
            MacroError: If a macro references a key missing from ``arguments``.
        """
        data = _substitute_all(self.model_dump(by_alias=True), arguments)
        resolved = S3BatchSourceConfig.model_validate(data)
        logger.debug(
            "Bound runtime arguments",
            extra={"context": {"arguments": len(arguments)}},
        )
        return resolved


def parse_property_map(text: str) -> dict[str, str]:
    """Parse a JSON object of filesystem properties.

    Scalar values are converted to strings the way the host pipeline reads
    them; nulls, arrays and nested objects are rejected.
    """
    if not text or not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PropertyMapError(
            f"File system properties must be a JSON object: {e}",
            context={"field": "fileSystemProperties"},
        ) from e

    if not isinstance(data, dict):
        raise PropertyMapError(
            f"File system properties must be a JSON object, got {type(data).__name__}",
            context={"field": "fileSystemProperties"},
        )

    properties: dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, bool):
            properties[key] = "true" if value else "false"
        elif isinstance(value, (str, int, float)):
            properties[key] = str(value)
        else:
            raise PropertyMapError(
                f"File system property '{key}' must be a string, number or boolean",
                context={"field": "fileSystemProperties", "key": key},
            )
    return properties


def _substitute_all(value: Any, arguments: Mapping[str, str]) -> Any:
    if isinstance(value, dict):
        return {k: _substitute_all(v, arguments) for k, v in value.items()}
    if isinstance(value, str):
        return substitute_macros(value, arguments)
    return value
