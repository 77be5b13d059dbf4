"""Extension layer — plugin system via pluggy.

Discovery: ``workq.plugins`` entry points, plus direct registration.
INVARIANT: Plugin failures are warnings, never errors.
"""

from workq.plugins.manager import PluginManager, hookimpl

__all__ = ["PluginManager", "hookimpl"]
