"""Models module for source config files."""

from s3source.models.definition import SourceDefinition
from s3source.models.loader import from_yaml, load_definition
from s3source.models.templates import render_templates

__all__ = [
    "SourceDefinition",
    "load_definition",
    "from_yaml",
    "render_templates",
]
