"""Discovery and loading of test modules into a suite."""
from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, List

from seqtest.core.errors import ConfigError
from seqtest.core.registration import Suite

logger = logging.getLogger(__name__)

TEST_FILE_PATTERNS = ("*_test.py", "test_*.py")


def load_suite(targets: Iterable[str], suite: Suite | None = None) -> Suite:
    """Register every test module in ``targets`` into ``suite``.

    Targets are files, directories (searched recursively) or dotted module
    paths (``package.module`` or ``package.module:function``).
    """

    suite = suite if suite is not None else Suite()
    for target in targets:
        for entry in _expand_target(target):
            entry(suite)
    return suite


def discover(directory: Path) -> List[Path]:
    found = set()
    for pattern in TEST_FILE_PATTERNS:
        found.update(path for path in directory.rglob(pattern) if path.is_file())
    return sorted(found)


def load_from_source(source: Path, func_name: str = "main") -> Callable[[Suite], Any]:
    """Load a callable named ``func_name`` from a Python file at ``source``."""

    path = source.expanduser().resolve()
    if not path.exists():
        raise ConfigError(f"Test file not found: {path}")
    module_name = f"seqtest_module_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ConfigError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    # sibling imports resolve the way pytest's prepend import mode does
    if str(path.parent) not in sys.path:
        sys.path.insert(0, str(path.parent))
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise ConfigError(f"Failed to load test module {path}: {exc}") from exc
    logger.debug("loaded test module %s from %s", module_name, path)
    return _entry_point(module, func_name, str(path))


def import_entry(path: str) -> Callable[[Suite], Any]:
    """Return the entry point at a dotted path.

    Supports ``module:attr`` syntax; a bare module path uses its ``main``.
    """

    if not path:
        raise ConfigError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        attr = "main"
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import test module '{module_name}': {exc}") from exc
    logger.debug("imported test module %s", module_name)
    return _entry_point(module, attr, module_name)


def _expand_target(target: str) -> List[Callable[[Suite], Any]]:
    path = Path(target)
    if path.is_dir():
        files = discover(path)
        if not files:
            logger.warning("no test files found under %s", path)
        return [load_from_source(item) for item in files]
    if path.suffix == ".py" or path.exists():
        return [load_from_source(path)]
    return [import_entry(target)]


def _entry_point(module: Any, func_name: str, origin: str) -> Callable[[Suite], Any]:
    if not hasattr(module, func_name):
        raise ConfigError(f"Function '{func_name}' not found in {origin}")
    func = getattr(module, func_name)
    if not callable(func):
        raise ConfigError(f"Attribute '{func_name}' in {origin} is not callable")
    return func
