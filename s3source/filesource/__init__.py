"""Generic file-source settings, formats and lineage interface."""

from s3source.filesource.config import FileSourceSettings
from s3source.filesource.formats import (
    FileFormat,
    get_format,
    list_formats,
    register_format,
)
from s3source.filesource.lineage import LineageRecorder

__all__ = [
    "FileSourceSettings",
    "FileFormat",
    "LineageRecorder",
    "get_format",
    "list_formats",
    "register_format",
]
