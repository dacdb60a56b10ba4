"""Terminal reporter rendering progress and summaries."""
from __future__ import annotations

import time
from typing import Sequence

import click
from colorama import Fore, Style, just_fix_windows_console

from seqtest.core.models import TestCase
from seqtest.core.results import CaseResult, summarize

from .base import Reporter

STATUS_COLORS = {
    "passed": Fore.GREEN,
    "failed": Fore.RED,
}


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        self._start_time = 0.0
        self._failures: list[CaseResult] = []

    def on_start(self, cases: Sequence[TestCase]) -> None:
        if self._use_color:
            just_fix_windows_console()
        self._start_time = time.perf_counter()
        self._failures.clear()
        groups = len({id(case.group) for case in cases})
        click.echo(self._styled(f"Running {len(cases)} case(s) in {groups} group(s)", fg="cyan"))

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        ms = result.duration_s * 1000
        click.echo(f"[{index}/{total}] {result.identifier()} -> {self._status(result.status)} ({ms:.2f} ms)")
        if not result.passed:
            self._failures.append(result)
            self._print_failure_details(result)

    def on_complete(self, results: Sequence[CaseResult]) -> None:
        summary = summarize(results, time.perf_counter() - self._start_time)
        click.echo(
            self._styled(
                f"Summary: total={summary.total} passed={summary.passed} failed={summary.failed} "
                f"(assertions={summary.assertion_failures} errors={summary.errors}) "
                f"duration={summary.duration_s:.2f}s",
                fg="green" if summary.success else "red",
            )
        )
        if self._failures:
            click.echo(self._styled("Failure details:", fg="red"))
            for result in self._failures:
                click.echo(f"  [{result.index}] {result.identifier()}")
                self._print_failure_details(result, indent="    ")

    def _status(self, status: str) -> str:
        label = status.upper()
        if not self._use_color:
            return label
        return f"{STATUS_COLORS.get(status, '')}{label}{Style.RESET_ALL}"

    def _styled(self, text: str, *, fg: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg=fg)

    def _print_failure_details(self, result: CaseResult, *, indent: str = "    ") -> None:
        outcome = result.outcome
        label = "reason" if outcome.kind == "assertion" else "error"
        lines = (outcome.reason or "").splitlines() or [""]
        click.echo(f"{indent}{label}: {lines[0]}")
        for line in lines[1:]:
            click.echo(f"{indent}  {line}")
