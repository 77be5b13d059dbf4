"""Plugin discovery, registration, and hook dispatch."""

from __future__ import annotations

import logging
from typing import Any

import pluggy

from workq.plugins.hookspecs import WorkqHookSpec

PROJECT_NAME = "workq"
ENTRY_POINT_GROUP = "workq.plugins"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` with warning-only dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(WorkqHookSpec)
        self._loaded = False

    def discover_and_load(self) -> list[str]:
        """Load ``workq.plugins`` entry points; return the registered plugin names."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def dispatch(self, hook_name: str, warnings: list[str], **kwargs: Any) -> None:
        """Call *hook_name* on every plugin.

        INVARIANT: a failing plugin adds to *warnings* and never raises.
        """
        caller = getattr(self._pm.hook, hook_name)
        try:
            caller(**kwargs)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
