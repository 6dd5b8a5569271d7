"""Source definition model: the contents of a source config file."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from s3source.core.exceptions import ConfigurationError, PluginError
from s3source.registry import BATCH_SOURCE, get_plugin
from s3source.source.config import S3BatchSourceConfig
from s3source.source.plugin import PLUGIN_NAME, S3BatchSource


class SourceDefinition(BaseModel):
    """A named source plugin and its raw properties."""

    name: str = Field(description="Name of this source definition")
    plugin: str = Field(default=PLUGIN_NAME, description="Batch source plugin name")
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description="Flat plugin properties (camelCase, may contain ${...} macros)",
    )

    def build_config(
        self, arguments: Optional[Mapping[str, str]] = None
    ) -> S3BatchSourceConfig:
        """Build the S3 config through the registered plugin factory.

        Runtime ``arguments``, if given, are bound after the plugin is built.

        Raises:
            ConfigurationError: If the plugin is unknown or is not an S3 batch
                source, or if the properties do not form a valid config.
            MacroError: If an argument referenced by a macro is missing.
        """
        try:
            source = get_plugin(BATCH_SOURCE, self.plugin, self.properties)
        except PluginError as e:
            raise ConfigurationError(
                f"Unknown source plugin: '{self.plugin}'",
                context={"source": self.name, **e.context},
            ) from e
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid source properties: {e}", context={"source": self.name}
            ) from e

        if not isinstance(source, S3BatchSource):
            raise ConfigurationError(
                f"Plugin '{self.plugin}' is not an S3 batch source",
                context={"source": self.name, "plugin": self.plugin},
            )

        config = source.config
        if arguments:
            config = config.resolve_macros(arguments)
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceDefinition":
        return cls.model_validate(data)
