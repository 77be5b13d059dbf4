"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, workq.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- workq.toml sections ---


class DrainConfig(BaseModel):
    """[drain] section."""

    model_config = {"frozen": True}

    keep_going: bool = False
    report_discarded: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
