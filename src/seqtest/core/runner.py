"""Test runner executing registered cases one at a time."""
from __future__ import annotations

import asyncio
import fnmatch
import inspect
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .errors import AssertionFailure, RunStateError
from .models import CaseState, Hook, Outcome, TestCase
from .registration import Suite
from .results import CaseResult

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CaseResult, int, int], None]


@dataclass
class CaseScope:
    """Per-case execution scope; nothing in it outlives the case."""

    case: TestCase
    started: float
    failure: Optional[Outcome] = None

    def record(self, exc: Exception) -> None:
        if self.failure is None:
            self.failure = outcome_from_exception(exc)

    def outcome(self) -> Outcome:
        return self.failure or Outcome.success()


class TestRunner:
    """Executes the cases of a suite sequentially in registration order."""

    __test__ = False

    def __init__(self, *, name_patterns: Sequence[str] = ()) -> None:
        self._name_patterns = tuple(name_patterns)

    def select(self, suite: Suite) -> List[TestCase]:
        if not self._name_patterns:
            return list(suite.cases())
        return [
            case
            for case in suite.cases()
            if any(fnmatch.fnmatchcase(case.full_name(), pattern) for pattern in self._name_patterns)
        ]

    def run(self, suite: Suite, *, on_result: Optional[ResultCallback] = None) -> List[CaseResult]:
        """Run every selected case on a fresh event loop and return results in order."""

        return asyncio.run(self.run_async(suite, on_result=on_result))

    async def run_async(
        self, suite: Suite, *, on_result: Optional[ResultCallback] = None
    ) -> List[CaseResult]:
        cases = self.select(suite)
        executed = [case.identifier() for case in cases if case.state is not CaseState.REGISTERED]
        if executed:
            raise RunStateError(f"Cases already executed: {', '.join(executed)}")
        results: List[CaseResult] = []
        total = len(cases)
        for index, case in enumerate(cases, start=1):
            result = await self._execute_case(case, index)
            results.append(result)
            if on_result:
                on_result(result, index, total)
        return results

    async def _execute_case(self, case: TestCase, index: int) -> CaseResult:
        scope = CaseScope(case=case, started=time.perf_counter())
        case.state = CaseState.RUNNING
        logger.debug("running %s", case.identifier())
        try:
            for hook in case.group.set_up_hooks:
                await _invoke(hook)
            await _invoke(case.body)
        except Exception as exc:
            scope.record(exc)
        for hook in case.group.tear_down_hooks:
            try:
                await _invoke(hook)
            except Exception as exc:
                scope.record(exc)
        outcome = scope.outcome()
        case.state = CaseState.PASSED if outcome.passed else CaseState.FAILED
        duration = time.perf_counter() - scope.started
        logger.debug("%s finished: %s", case.identifier(), outcome.status)
        return CaseResult(
            group=case.group.name,
            name=case.name,
            outcome=outcome,
            duration_s=duration,
            index=index,
        )


def outcome_from_exception(exc: Exception) -> Outcome:
    if isinstance(exc, AssertionFailure):
        return Outcome.failure(exc.message, kind="assertion")
    message = str(exc)
    reason = f"{type(exc).__name__}: {message}" if message else type(exc).__name__
    return Outcome.failure(reason, kind="error")


async def _invoke(fn: Hook) -> None:
    result = fn()
    if inspect.isawaitable(result):
        await result
