"""File format descriptors for the file source.

A format knows the record layout it produces. Formats whose layout is fixed
(text lines, whole-file blobs) can report a schema at design time; formats
whose layout depends on file contents leave the schema to the user.
"""

from abc import ABC, abstractmethod
from typing import Optional

from s3source.core.exceptions import PluginError
from s3source.core.schema import Column, Schema


class FileFormat(ABC):
    """Base class for file format descriptors."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name (e.g., 'csv', 'text', 'parquet')."""
        ...

    @property
    def extensions(self) -> list[str]:
        """Return the file extensions usually associated with this format."""
        return []

    def get_schema(self, path_field: Optional[str] = None) -> Optional[Schema]:
        """Return the schema this format always produces, or None.

        Args:
            path_field: Name of the column carrying the source file path, if any.
        """
        return None


def _with_path_field(columns: list[Column], path_field: Optional[str]) -> Schema:
    if path_field:
        columns = columns + [Column(name=path_field, type="string")]
    return Schema(columns=columns)


class TextFormat(FileFormat):
    """One record per line: byte offset and line body."""

    @property
    def name(self) -> str:
        return "text"

    @property
    def extensions(self) -> list[str]:
        return [".txt", ".log"]

    def get_schema(self, path_field: Optional[str] = None) -> Optional[Schema]:
        return _with_path_field(
            [Column(name="offset", type="long"), Column(name="body", type="string")],
            path_field,
        )


class BlobFormat(FileFormat):
    """One record per file holding the raw bytes."""

    @property
    def name(self) -> str:
        return "blob"

    def get_schema(self, path_field: Optional[str] = None) -> Optional[Schema]:
        return _with_path_field([Column(name="body", type="bytes")], path_field)


class CSVFormat(FileFormat):
    @property
    def name(self) -> str:
        return "csv"

    @property
    def extensions(self) -> list[str]:
        return [".csv"]


class TSVFormat(FileFormat):
    @property
    def name(self) -> str:
        return "tsv"

    @property
    def extensions(self) -> list[str]:
        return [".tsv"]


class DelimitedFormat(FileFormat):
    """Text records split on a user-supplied delimiter."""

    @property
    def name(self) -> str:
        return "delimited"


class JSONFormat(FileFormat):
    @property
    def name(self) -> str:
        return "json"

    @property
    def extensions(self) -> list[str]:
        return [".json", ".jsonl"]


class AvroFormat(FileFormat):
    @property
    def name(self) -> str:
        return "avro"

    @property
    def extensions(self) -> list[str]:
        return [".avro"]


class ParquetFormat(FileFormat):
    @property
    def name(self) -> str:
        return "parquet"

    @property
    def extensions(self) -> list[str]:
        return [".parquet", ".pqt"]


_BUILTIN_FORMATS: dict[str, type[FileFormat]] = {
    "avro": AvroFormat,
    "blob": BlobFormat,
    "csv": CSVFormat,
    "delimited": DelimitedFormat,
    "json": JSONFormat,
    "parquet": ParquetFormat,
    "text": TextFormat,
    "tsv": TSVFormat,
}

# Format registry for custom formats
_format_registry: dict[str, type[FileFormat]] = {}


def register_format(format_class: type[FileFormat]) -> type[FileFormat]:
    """Register a custom format descriptor.

    Args:
        format_class: Format class to register (must have a 'name' property).

    Returns:
        The format class (for use as decorator).

    Raises:
        PluginError: If the name collides with a built-in format.

    Example:
        @register_format
        class OrcFormat(FileFormat):
            @property
            def name(self) -> str:
                return "orc"
    """
    format_name = format_class().name.lower()
    if format_name in _BUILTIN_FORMATS:
        raise PluginError(
            f"Format '{format_name}' is built in and cannot be replaced",
            context={"format": format_name},
        )
    _format_registry[format_name] = format_class
    return format_class


def is_known_format(format_name: str) -> bool:
    name = format_name.lower()
    return name in _BUILTIN_FORMATS or name in _format_registry


def get_format(format_name: str) -> FileFormat:
    """Get a format descriptor by name (case-insensitive).

    Raises:
        PluginError: If format is not supported.
    """
    format_name_lower = format_name.lower()

    format_class = _BUILTIN_FORMATS.get(format_name_lower) or _format_registry.get(
        format_name_lower
    )
    if format_class is None:
        available = ", ".join(list_formats())
        raise PluginError(
            f"Unsupported format: '{format_name}'. Available formats: {available}",
            context={"format": format_name},
        )
    return format_class()


def list_formats() -> list[str]:
    """List all available format names."""
    return sorted(list(_BUILTIN_FORMATS.keys()) + list(_format_registry.keys()))


def clear_custom_formats() -> None:
    """Forget custom formats. Intended for testing only."""
    _format_registry.clear()
