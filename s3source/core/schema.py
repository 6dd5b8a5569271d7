"""Schema models for the records a source produces.

A schema is an ordered list of named, typed columns. It is exchanged with the
host pipeline as an Avro-style record:

    {"type": "record", "name": "etlSchemaBody",
     "fields": [{"name": "offset", "type": "long"},
                {"name": "body", "type": ["string", "null"]}]}
"""

import json
from typing import Any, Optional

import pyarrow as pa
from pydantic import BaseModel, Field

from s3source.core.exceptions import SchemaError
from s3source.core.type_mapping import (
    arrow_type_to_primitive,
    normalize_type,
    primitive_to_arrow_type,
)

DEFAULT_RECORD_NAME = "etlSchemaBody"


class Column(BaseModel):
    """Schema definition for a single column."""

    name: str = Field(description="Column name")
    type: str = Field(description="Primitive type (e.g., 'long', 'string')")
    nullable: bool = Field(
        default=False, description="Whether column allows null values"
    )


class Schema(BaseModel):
    """Ordered record schema."""

    name: str = Field(default=DEFAULT_RECORD_NAME, description="Record name")
    columns: list[Column] = Field(description="List of column definitions")

    def get_column(self, name: str) -> Optional[Column]:
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def get_column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    def to_dict(self) -> dict[str, Any]:
        fields = []
        for col in self.columns:
            col_type: Any = [col.type, "null"] if col.nullable else col.type
            fields.append({"name": col.name, "type": col_type})
        return {"type": "record", "name": self.name, "fields": fields}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def parse(cls, text: str) -> "Schema":
        """Parse an Avro-style record schema string.

        Raises:
            SchemaError: If the text is not valid JSON or not a flat record
                of primitive (optionally nullable) fields.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaError(
                f"Invalid schema JSON: {e}", context={"schema": text}
            ) from e

        if not isinstance(data, dict) or data.get("type") != "record":
            raise SchemaError("Schema must be a JSON record definition")

        fields = data.get("fields")
        if not isinstance(fields, list) or not fields:
            raise SchemaError("Schema record must define at least one field")

        columns = [_parse_field(field) for field in fields]
        return cls(name=data.get("name") or DEFAULT_RECORD_NAME, columns=columns)

    def to_arrow_schema(self) -> pa.Schema:
        return pa.schema(
            [
                pa.field(col.name, primitive_to_arrow_type(col.type), nullable=col.nullable)
                for col in self.columns
            ]
        )

    @classmethod
    def from_arrow_schema(cls, arrow_schema: pa.Schema) -> "Schema":
        columns = [
            Column(
                name=field.name,
                type=arrow_type_to_primitive(field.type),
                nullable=field.nullable,
            )
            for field in arrow_schema
        ]
        return cls(columns=columns)


def _parse_field(field: Any) -> Column:
    if not isinstance(field, dict) or not field.get("name"):
        raise SchemaError("Every schema field must be an object with a name")

    name = field["name"]
    field_type = field.get("type")
    nullable = False

    # ["string", "null"] is how a nullable column is written
    if isinstance(field_type, list):
        non_null = [t for t in field_type if t != "null"]
        if len(non_null) != 1:
            raise SchemaError(
                "Only nullable unions of a single type are supported",
                context={"field": name},
            )
        nullable = len(non_null) != len(field_type)
        field_type = non_null[0]

    if not isinstance(field_type, str):
        raise SchemaError(
            "Field type must be a primitive type name", context={"field": name}
        )

    try:
        canonical = normalize_type(field_type)
    except ValueError as e:
        raise SchemaError(str(e), context={"field": name}) from e

    return Column(name=name, type=canonical, nullable=nullable)
