"""Source definition loader with YAML parsing and template rendering."""

import logging
from pathlib import Path
from typing import Dict

import yaml

from s3source.core.exceptions import ConfigurationError
from s3source.models.definition import SourceDefinition
from s3source.models.templates import render_templates

logger = logging.getLogger(__name__)


def load_definition(path: str, cli_vars: Dict[str, str] | None = None) -> SourceDefinition:
    """
    Load a source definition from a YAML file.

    Args:
        path: Path to the YAML file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        SourceDefinition with templates rendered; ${...} macros are kept

    Raises:
        ConfigurationError: If file not found, invalid YAML or validation fails
    """
    definition_path = Path(path)
    try:
        with open(definition_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {path}", context={"path": str(path)})
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {e}", context={"path": str(path)}
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a YAML dictionary",
            context={"path": str(path)},
        )

    data = render_templates(data, cli_vars)

    try:
        definition = SourceDefinition.from_dict(data)
    except Exception as e:
        raise ConfigurationError(
            f"Config validation failed: {e}", context={"path": str(path)}
        ) from e

    logger.debug("Loaded source definition", extra={"context": {"path": str(path)}})
    return definition


def from_yaml(path: str, cli_vars: Dict[str, str] | None = None) -> SourceDefinition:
    """Alias for load_definition."""
    return load_definition(path, cli_vars)
