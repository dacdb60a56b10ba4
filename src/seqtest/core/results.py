"""Result data structures produced by the test runner."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import Outcome


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing a single test case."""

    group: str
    name: str
    outcome: Outcome
    duration_s: float
    index: int

    @property
    def passed(self) -> bool:
        return self.outcome.passed

    @property
    def status(self) -> str:
        return self.outcome.status

    def identifier(self) -> str:
        return f"{self.group} > {self.name}"


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counts for a finished run."""

    total: int
    passed: int
    failed: int
    assertion_failures: int
    errors: int
    duration_s: float

    @property
    def success(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


def summarize(results: Sequence[CaseResult], duration_s: float = 0.0) -> RunSummary:
    failed = [result for result in results if not result.passed]
    return RunSummary(
        total=len(results),
        passed=len(results) - len(failed),
        failed=len(failed),
        assertion_failures=sum(1 for result in failed if result.outcome.kind == "assertion"),
        errors=sum(1 for result in failed if result.outcome.kind != "assertion"),
        duration_s=duration_s,
    )
