"""Example plugin adding a reporter that prints one dot per case.

Enable with ``PYTHONPATH=examples/sample SEQTEST_PLUGINS=plugin`` and ``--reporter dots``.
"""
from typing import Sequence

import click

from seqtest.core.models import TestCase
from seqtest.core.results import CaseResult
from seqtest.reporting import Reporter, register_reporter


class DotReporter(Reporter):
    def on_start(self, cases: Sequence[TestCase]) -> None:
        pass

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        click.echo("." if result.passed else "F", nl=False)

    def on_complete(self, results: Sequence[CaseResult]) -> None:
        click.echo("")


def register() -> None:
    register_reporter("dots", lambda options: DotReporter())
