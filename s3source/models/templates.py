"""Load-time templates for source config files.

A template is a ``{{ env_var('NAME') }}`` or ``{{ var('NAME') }}`` call. It is
replaced with the environment variable or ``--vars`` value when the file is
loaded, so the result is always a concrete value. ``${name}`` macros are a
different thing: they are left in place and bound later from runtime
arguments. A template may not produce a macro, because the field would then
silently turn deferred.
"""

import logging
import os
import re
from typing import Any, Callable, Dict, Mapping

from s3source.core.exceptions import ConfigurationError
from s3source.core.macros import contains_macro

logger = logging.getLogger(__name__)

TEMPLATE_PATTERN = re.compile(r"\{\{(.*?)\}\}")
CALL_PATTERN = re.compile(r"""^\s*(\w+)\(\s*(['"])([^'"]+)\2\s*\)\s*$""")


def render_templates(
    config_dict: Dict[str, Any], cli_vars: Mapping[str, str] | None = None
) -> Dict[str, Any]:
    """
    Render load-time templates in a parsed config file.

    Args:
        config_dict: Parsed YAML mapping (name, plugin, properties)
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        A new mapping with every template replaced; ${...} macros are kept

    Raises:
        ConfigurationError: If a template is malformed, names an unknown
            lookup, references a missing variable, or renders to a macro
    """
    cli_vars = cli_vars or {}
    lookups: Dict[str, Callable[[str], str]] = {
        "env_var": _get_env_var,
        "var": lambda key: _get_cli_var(key, cli_vars),
    }
    return _render_mapping(config_dict, lookups, prefix="")


def _get_env_var(key: str) -> str:
    value = os.environ.get(key)
    if value is None:
        raise ConfigurationError(
            f"Environment variable '{key}' not found",
            context={"key": key},
        )
    return value


def _get_cli_var(key: str, cli_vars: Mapping[str, str]) -> str:
    if key not in cli_vars:
        raise ConfigurationError(
            f"CLI variable '{key}' not provided",
            context={"key": key, "available": sorted(cli_vars)},
        )
    return cli_vars[key]


def _render_mapping(
    data: Mapping[str, Any], lookups: Dict[str, Callable[[str], str]], prefix: str
) -> Dict[str, Any]:
    rendered = {}
    for key, value in data.items():
        field = f"{prefix}{key}"
        if isinstance(value, dict):
            rendered[key] = _render_mapping(value, lookups, prefix=f"{field}.")
        elif isinstance(value, str) and "{{" in value:
            rendered[key] = _render_field(field, value, lookups)
        else:
            rendered[key] = value
    return rendered


def _render_field(field: str, text: str, lookups: Dict[str, Callable[[str], str]]) -> str:
    def replace(match: re.Match) -> str:
        expression = match.group(1).strip()
        call = CALL_PATTERN.match(expression)
        if call is None:
            raise ConfigurationError(
                f"Unsupported template expression: {{{{ {expression} }}}}",
                context={"field": field},
            )
        name, argument = call.group(1), call.group(3)
        if name not in lookups:
            raise ConfigurationError(
                f"Unknown template function: {name}",
                context={"field": field, "available": ", ".join(sorted(lookups))},
            )
        value = lookups[name](argument)
        if contains_macro(value):
            raise ConfigurationError(
                f"Template {name}('{argument}') rendered a ${{...}} macro; "
                "pass runtime values with --args instead",
                context={"field": field},
            )
        return value

    rendered = TEMPLATE_PATTERN.sub(replace, text)
    # Values may be credentials; log the field only.
    logger.debug("Rendered templates", extra={"context": {"field": field}})
    return rendered
