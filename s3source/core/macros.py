"""Deferred field values and runtime macro substitution.

A configuration value may carry ``${name}`` placeholders that the host
pipeline binds from runtime arguments just before a run. Until then the field
is *deferred*: rules must neither treat it as empty nor read its literal text.
"""

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from s3source.core.exceptions import MacroError

logger = logging.getLogger(__name__)

MACRO_PATTERN = re.compile(r"\$\{\s*([^{}\s]+)\s*\}")


@dataclass(frozen=True)
class Concrete:
    """A field whose value is known (possibly unset)."""

    value: Optional[str]

    def is_empty(self) -> bool:
        return self.value is None or self.value == ""


@dataclass(frozen=True)
class Deferred:
    """A field still holding an unresolved macro expression."""

    expression: str


FieldValue = Union[Concrete, Deferred]


def contains_macro(value: object) -> bool:
    """Return True if ``value`` is a string with an unresolved ``${...}`` macro."""
    return isinstance(value, str) and MACRO_PATTERN.search(value) is not None


def classify(value: Optional[str]) -> FieldValue:
    """Tag a raw field value as Concrete or Deferred."""
    if contains_macro(value):
        return Deferred(expression=value)
    return Concrete(value=value)


def substitute_macros(text: str, arguments: Mapping[str, str]) -> str:
    """Replace every ``${key}`` in ``text`` with ``arguments[key]``.

    Raises:
        MacroError: If a referenced key is not present in ``arguments``.
    """

    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key not in arguments:
            raise MacroError(
                f"Macro '${{{key}}}' has no runtime argument",
                context={"key": key, "available": sorted(arguments.keys())},
            )
        return str(arguments[key])

    rendered = MACRO_PATTERN.sub(replace, text)
    if rendered != text:
        logger.debug("Substituted macros", extra={"context": {"keys": len(MACRO_PATTERN.findall(text))}})
    return rendered
