"""seqtest package initialization."""
from __future__ import annotations

import importlib
import logging
import os
from typing import Iterable

from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
]

logger = logging.getLogger(__name__)

_BOOTSTRAPPED = False


def bootstrap(extra_plugins: Iterable[str] = ()) -> None:
    """Initialize seqtest (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    _load_plugins(extra_plugins)
    _BOOTSTRAPPED = True


def _load_plugins(extra_plugins: Iterable[str]) -> None:
    names = list(extra_plugins)
    plugin_env = os.environ.get("SEQTEST_PLUGINS")
    if plugin_env:
        names.extend(plugin_env.split(","))
    for item in names:
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        logger.debug("loaded plugin %s", module_name)
        register = getattr(module, "register", None)
        if callable(register):
            register()
