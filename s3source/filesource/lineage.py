"""Lineage recorder interface.

Recording lineage is the host pipeline's job. Sources only describe what
they read through this interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineageRecorder(Protocol):
    """Receives field-level lineage for the records a source reads."""

    def record_read(self, operation_name: str, description: str, fields: list[str]) -> None:
        """Record that ``fields`` were produced by a read operation."""
        ...
