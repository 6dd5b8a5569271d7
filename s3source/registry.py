"""Plugin registry for managing source factories.

This module provides a registry pattern for source plugins, allowing the
host pipeline to look a plugin up by type and name and build it from its
configuration.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, overload

from s3source.core.exceptions import PluginError

BATCH_SOURCE = "batchsource"

PluginFactory = Callable[[Mapping[str, Any]], Any]

# Global registry keyed by (plugin type, plugin name)
_plugin_registry: dict[tuple[str, str], PluginFactory] = {}


@overload
def register_plugin(plugin_type: str, name: str) -> Callable[[PluginFactory], PluginFactory]: ...


@overload
def register_plugin(plugin_type: str, name: str, factory: PluginFactory) -> None: ...


def register_plugin(
    plugin_type: str,
    name: str,
    factory: PluginFactory | None = None,
) -> Callable[[PluginFactory], PluginFactory] | None:
    """Register a plugin factory.

    Can be used as a decorator or called directly:

        # As decorator
        @register_plugin("batchsource", "S3")
        def create_s3_source(properties):
            return S3BatchSource(S3BatchSourceConfig.from_properties(properties))

        # Direct call
        register_plugin("batchsource", "S3", create_s3_source)

    Args:
        plugin_type: Plugin type (e.g., 'batchsource').
        name: Plugin name unique within its type (e.g., 'S3').
        factory: Factory taking the raw property mapping (optional if used as decorator).

    Raises:
        PluginError: If a plugin with the same type and name is already registered.
    """

    def _register(f: PluginFactory) -> PluginFactory:
        key = (plugin_type, name)
        if key in _plugin_registry:
            raise PluginError(
                f"Plugin '{name}' of type '{plugin_type}' is already registered",
                context={"plugin_type": plugin_type, "name": name},
            )
        _plugin_registry[key] = f
        return f

    if factory is not None:
        _register(factory)
        return None

    return _register


def get_plugin(plugin_type: str, name: str, properties: Mapping[str, Any]) -> Any:
    """Create a plugin instance using the registered factory.

    Raises:
        PluginError: If the plugin is not registered.
    """
    factory = _plugin_registry.get((plugin_type, name))
    if factory is None:
        available = ", ".join(list_plugins(plugin_type)) or "(none)"
        raise PluginError(
            f"Unknown {plugin_type} plugin: '{name}'",
            context={"plugin_type": plugin_type, "available": available},
        )
    return factory(properties)


def list_plugins(plugin_type: str) -> list[str]:
    """Return the names of all plugins registered for ``plugin_type``."""
    return sorted(name for kind, name in _plugin_registry if kind == plugin_type)


def clear_registry() -> None:
    """Clear all registered plugins. Intended for testing only."""
    _plugin_registry.clear()
