"""Glue running a loaded suite through the configured reporters."""
from __future__ import annotations

from typing import Sequence

import click

from seqtest.core.registration import Suite
from seqtest.core.results import summarize
from seqtest.core.runner import TestRunner
from seqtest.reporting import ReportManager, Reporter


def run_suite(
    suite: Suite,
    reporters: Sequence[Reporter],
    *,
    name_patterns: Sequence[str] = (),
) -> int:
    """Execute the suite; returns process exit code (0 success, 1 failures)."""

    runner = TestRunner(name_patterns=name_patterns)
    cases = runner.select(suite)
    if not cases:
        click.echo("No cases matched the provided filters.")
        return 1
    manager = ReportManager(reporters)
    manager.start(cases)
    results = runner.run(suite, on_result=manager.handle_result)
    manager.complete(results)
    return summarize(results).exit_code
