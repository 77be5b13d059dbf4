"""Locate workq.toml.

Lookup order: the WORKQ_CONFIG env var, then a walk up from the start
directory to the filesystem root (the way git finds .git/).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "workq.toml"
CONFIG_ENV_VAR = "WORKQ_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    An env var pointing at a missing file disables discovery entirely.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
