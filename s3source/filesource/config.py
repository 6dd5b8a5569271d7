"""Generic file-source settings.

These are the settings every file-based source shares (reference name,
format, declared schema, path tracking, header handling). A concrete source
embeds a FileSourceSettings and delegates the generic part of its validation
to it.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from s3source.core.exceptions import ConfigurationError
from s3source.core.macros import Deferred, FieldValue, classify
from s3source.core.schema import Schema
from s3source.filesource.formats import FileFormat, get_format, is_known_format

REFERENCE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileSourceSettings(BaseModel):
    """Settings shared by all file-based batch sources."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    reference_name: str = Field(
        alias="referenceName",
        description="Name used to uniquely identify this source for lineage",
    )
    format: Optional[str] = Field(
        default="text",
        description="Format of the data to read (e.g., 'text', 'csv', 'parquet')",
    )
    output_schema: Optional[str] = Field(
        default=None,
        alias="schema",
        description="Declared output schema as an Avro-style record JSON",
    )
    path_field: Optional[str] = Field(
        default=None,
        alias="pathField",
        description="Output field to hold the path of the file a record came from",
    )
    filename_only: bool = Field(
        default=False,
        alias="filenameOnly",
        description="Only write the file name, not the full URI, into the path field",
    )
    recursive: bool = Field(
        default=False, description="Read files in sub-directories of the path"
    )
    ignore_non_existing_folders: bool = Field(
        default=False,
        alias="ignoreNonExistingFolders",
        description="Produce no records instead of failing if the path is missing",
    )
    file_regex: Optional[str] = Field(
        default=None,
        alias="fileRegex",
        description="Only read files whose names match this regular expression",
    )
    max_split_size: Optional[int] = Field(
        default=None,
        alias="maxSplitSize",
        description="Maximum split size in bytes for each partition",
    )
    skip_header: bool = Field(
        default=False,
        alias="skipHeader",
        description="Skip the first line of each file",
    )
    copy_header: bool = Field(
        default=False,
        alias="copyHeader",
        description="Copy the header line of each file to every split",
    )
    delimiter: Optional[str] = Field(
        default=None, description="Delimiter for the 'delimited' format"
    )
    file_encoding: str = Field(
        default="UTF-8",
        alias="fileEncoding",
        description="Character encoding of text files",
    )

    def field(self, name: str) -> FieldValue:
        """Classify a string setting as Concrete or Deferred."""
        return classify(getattr(self, name))

    def validate_settings(self) -> None:
        """Validate the generic settings.

        Raises:
            ConfigurationError: On the first invalid setting.
        """
        reference_name = self.field("reference_name")
        if not isinstance(reference_name, Deferred):
            if reference_name.is_empty() or not REFERENCE_NAME_PATTERN.match(
                reference_name.value
            ):
                raise ConfigurationError(
                    "Reference name must be non-empty and contain only letters, "
                    "numbers, '_', '-' and '.'",
                    context={"field": "referenceName"},
                )

        fmt = self.field("format")
        if not isinstance(fmt, Deferred):
            if fmt.is_empty():
                raise ConfigurationError(
                    "Format must be specified.", context={"field": "format"}
                )
            if not is_known_format(fmt.value):
                raise ConfigurationError(
                    f"Unsupported format: '{fmt.value}'",
                    context={"field": "format"},
                )
            if fmt.value.lower() == "delimited" and not self.delimiter:
                raise ConfigurationError(
                    "Delimiter must be specified for the delimited format.",
                    context={"field": "delimiter"},
                )

        schema = self.get_schema()

        path_field = self.field("path_field")
        if schema is not None and not isinstance(path_field, Deferred) and not path_field.is_empty():
            column = schema.get_column(path_field.value)
            if column is None or column.type != "string":
                raise ConfigurationError(
                    f"Path field '{path_field.value}' must exist in the schema "
                    "and be of type string.",
                    context={"field": "pathField"},
                )

        file_regex = self.field("file_regex")
        if not isinstance(file_regex, Deferred) and not file_regex.is_empty():
            try:
                re.compile(file_regex.value)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid file regular expression: {e}",
                    context={"field": "fileRegex"},
                ) from e

        if self.max_split_size is not None and self.max_split_size <= 0:
            raise ConfigurationError(
                "Max split size must be a positive number of bytes.",
                context={"field": "maxSplitSize"},
            )

    def should_copy_header(self) -> bool:
        return self.copy_header

    def get_format(self) -> Optional[FileFormat]:
        """Return the configured format, or None if unset or deferred.

        Raises:
            PluginError: If the format name is not registered.
        """
        fmt = self.field("format")
        if isinstance(fmt, Deferred) or fmt.is_empty():
            return None
        return get_format(fmt.value)

    def get_path_field(self) -> Optional[str]:
        path_field = self.field("path_field")
        if isinstance(path_field, Deferred) or path_field.is_empty():
            return None
        return path_field.value

    def get_schema(self) -> Optional[Schema]:
        """Return the declared schema, or None if unset or deferred.

        Raises:
            SchemaError: If the declared schema cannot be parsed.
        """
        schema = self.field("output_schema")
        if isinstance(schema, Deferred) or schema.is_empty():
            return None
        return Schema.parse(schema.value)


