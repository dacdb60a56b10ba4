"""Assertion entry point built on matchers."""
from __future__ import annotations

from typing import Any, Optional

from .errors import AssertionFailure
from .matchers import Matcher, format_value, wrap_matcher


def expect(actual: Any, matcher: Any, reason: Optional[str] = None) -> None:
    """Assert that ``actual`` satisfies ``matcher``.

    Plain values are compared with ``equals``. On mismatch an
    ``AssertionFailure`` is raised, which ends the running test case.
    """

    resolved: Matcher = wrap_matcher(matcher)
    if resolved.matches(actual):
        return
    raise AssertionFailure(format_failure(actual, resolved, reason))


def format_failure(actual: Any, matcher: Matcher, reason: Optional[str] = None) -> str:
    actual_text = format_value(actual)
    lines = [
        f"Expected: {matcher.describe()}",
        f"  Actual: {actual_text}",
    ]
    mismatch = matcher.describe_mismatch(actual)
    if mismatch and mismatch != f"was {actual_text}":
        lines.append(f"   Which: {mismatch}")
    if reason:
        lines.append(reason)
    return "\n".join(lines)
