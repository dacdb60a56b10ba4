"""Reporter interface definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from seqtest.core.errors import ConfigError
from seqtest.core.models import TestCase
from seqtest.core.results import CaseResult


class Reporter:
    """Interface for output renderers."""

    def on_start(self, cases: Sequence[TestCase]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, results: Sequence[CaseResult]) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, cases: Sequence[TestCase]) -> None:
        for reporter in self._reporters:
            reporter.on_start(cases)

    def handle_result(self, result: CaseResult, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result, index, total)

    def complete(self, results: Sequence[CaseResult]) -> None:
        for reporter in self._reporters:
            reporter.on_complete(results)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)


@dataclass(frozen=True)
class ReporterOptions:
    use_color: bool = True
    report_path: Optional[str] = None


ReporterFactory = Callable[[ReporterOptions], Reporter]

_FACTORIES: Dict[str, ReporterFactory] = {}


def register_reporter(name: str, factory: ReporterFactory) -> None:
    """Make a reporter selectable by name (used by plugins)."""

    if name in _FACTORIES:
        raise ValueError(f"Reporter '{name}' already registered")
    _FACTORIES[name] = factory


def create_reporter(name: str, options: ReporterOptions) -> Reporter:
    try:
        factory = _FACTORIES[name]
    except KeyError as exc:
        available = ", ".join(sorted(_FACTORIES))
        raise ConfigError(f"Unknown reporter '{name}'. Available reporters: {available}") from exc
    return factory(options)


def reporter_names() -> Sequence[str]:
    return tuple(sorted(_FACTORIES))
