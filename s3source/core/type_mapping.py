"""Type mapping between schema primitive names and Arrow types.

Schema columns use the primitive type names of the Avro-style record schemas
exchanged with the host pipeline.
"""

import pyarrow as pa

PRIMITIVE_TO_ARROW_TYPE: dict[str, pa.DataType] = {
    "boolean": pa.bool_(),
    "int": pa.int32(),
    "long": pa.int64(),
    "float": pa.float32(),
    "double": pa.float64(),
    "bytes": pa.binary(),
    "string": pa.string(),
}

ALIASES: dict[str, str] = {
    "bool": "boolean",
    "integer": "int",
    "int32": "int",
    "int64": "long",
    "bigint": "long",
    "float32": "float",
    "float64": "double",
    "binary": "bytes",
    "str": "string",
}


def normalize_type(type_name: str) -> str:
    """Return the canonical primitive name for ``type_name``.

    Raises:
        ValueError: If type_name is not a supported primitive
    """
    lowered = type_name.lower()
    lowered = ALIASES.get(lowered, lowered)
    if lowered not in PRIMITIVE_TO_ARROW_TYPE:
        raise ValueError(
            f"Unsupported type name: {type_name}. "
            f"Supported types: {sorted(PRIMITIVE_TO_ARROW_TYPE.keys())}"
        )
    return lowered


def primitive_to_arrow_type(type_name: str) -> pa.DataType:
    """Convert a primitive type name to an Arrow type."""
    return PRIMITIVE_TO_ARROW_TYPE[normalize_type(type_name)]


def arrow_type_to_primitive(arrow_type: pa.DataType) -> str:
    """Convert an Arrow type back to its primitive name."""
    for name, mapped_type in PRIMITIVE_TO_ARROW_TYPE.items():
        if arrow_type.equals(mapped_type):
            return name
    raise ValueError(f"Arrow type {arrow_type} has no schema primitive")
