"""Matcher objects used by ``expect`` to judge actual values."""
from __future__ import annotations

from typing import Any, Sequence

import numpy as np


class Matcher:
    """Base interface for matchers.

    Subclasses implement ``_matches`` and ``describe``. ``matches`` never
    raises: an exception while matching counts as a mismatch.
    """

    def matches(self, item: Any) -> bool:
        try:
            return bool(self._matches(item))
        except Exception:
            return False

    def _matches(self, item: Any) -> bool:  # pragma: no cover - interface
        raise NotImplementedError

    def describe(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def describe_mismatch(self, item: Any) -> str:
        return f"was {format_value(item)}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.describe()}>"


class _IsTrue(Matcher):
    def _matches(self, item: Any) -> bool:
        return item is True

    def describe(self) -> str:
        return "True"


class _IsFalse(Matcher):
    def _matches(self, item: Any) -> bool:
        return item is False

    def describe(self) -> str:
        return "False"


class _IsNone(Matcher):
    def _matches(self, item: Any) -> bool:
        return item is None

    def describe(self) -> str:
        return "None"


class _IsNotNone(Matcher):
    def _matches(self, item: Any) -> bool:
        return item is not None

    def describe(self) -> str:
        return "not None"


is_true = _IsTrue()
is_false = _IsFalse()
is_none = _IsNone()
is_not_none = _IsNotNone()


class Equals(Matcher):
    """Equality matcher; numpy arrays compare element-wise."""

    def __init__(self, expected: Any) -> None:
        self.expected = expected

    def _matches(self, item: Any) -> bool:
        if isinstance(item, np.ndarray) or isinstance(self.expected, np.ndarray):
            return bool(np.array_equal(np.asarray(item), np.asarray(self.expected)))
        return bool(item == self.expected)

    def describe(self) -> str:
        return format_value(self.expected)

    def describe_mismatch(self, item: Any) -> str:
        if isinstance(item, np.ndarray) or isinstance(self.expected, np.ndarray):
            actual = np.asarray(item)
            expected = np.asarray(self.expected)
            if actual.shape != expected.shape:
                return f"shape mismatch: actual {actual.shape}, expected {expected.shape}"
            mismatched = int(np.count_nonzero(actual != expected))
            return f"{mismatched}/{actual.size} elements differ"
        if isinstance(item, str) and isinstance(self.expected, str):
            return _describe_string_mismatch(item, self.expected)
        return super().describe_mismatch(item)


class CloseTo(Matcher):
    """Numeric matcher accepting values within ``delta`` of ``value``."""

    def __init__(self, value: Any, delta: float) -> None:
        if delta < 0:
            raise ValueError("delta must be non-negative")
        self.value = value
        self.delta = float(delta)

    def _matches(self, item: Any) -> bool:
        if isinstance(item, (str, bytes, bool, np.bool_)):
            return False
        actual = np.asarray(item, dtype=np.float64)
        expected = np.asarray(self.value, dtype=np.float64)
        if actual.shape != expected.shape and expected.shape != ():
            return False
        return bool(np.all(np.abs(actual - expected) <= self.delta))

    def describe(self) -> str:
        return f"a numeric value within <{self.delta}> of <{self.value}>"

    def describe_mismatch(self, item: Any) -> str:
        try:
            diff = np.abs(np.asarray(item, dtype=np.float64) - np.asarray(self.value, dtype=np.float64))
        except (TypeError, ValueError):
            return f"was {format_value(item)}, not a numeric value"
        return f"differs by {float(np.max(diff))}"


class Contains(Matcher):
    def __init__(self, expected: Any) -> None:
        self.expected = expected

    def _matches(self, item: Any) -> bool:
        return self.expected in item

    def describe(self) -> str:
        return f"contains {format_value(self.expected)}"


class HasLength(Matcher):
    def __init__(self, length: int) -> None:
        self.length = length

    def _matches(self, item: Any) -> bool:
        return len(item) == self.length

    def describe(self) -> str:
        return f"an object with length of <{self.length}>"

    def describe_mismatch(self, item: Any) -> str:
        try:
            return f"has length of <{len(item)}>"
        except TypeError:
            return "has no length property"


class IsInstanceOf(Matcher):
    def __init__(self, expected_type: type) -> None:
        self.expected_type = expected_type

    def _matches(self, item: Any) -> bool:
        return isinstance(item, self.expected_type)

    def describe(self) -> str:
        return f"an instance of {self.expected_type.__name__}"

    def describe_mismatch(self, item: Any) -> str:
        return f"is an instance of {type(item).__name__}"


class _OrderingMatcher(Matcher):
    label = ""

    def __init__(self, bound: Any) -> None:
        self.bound = bound

    def describe(self) -> str:
        return f"a value {self.label} {format_value(self.bound)}"

    def describe_mismatch(self, item: Any) -> str:
        return f"is not a value {self.label} {format_value(self.bound)}"


class GreaterThan(_OrderingMatcher):
    label = "greater than"

    def _matches(self, item: Any) -> bool:
        return item > self.bound


class LessThan(_OrderingMatcher):
    label = "less than"

    def _matches(self, item: Any) -> bool:
        return item < self.bound


class IsNot(Matcher):
    def __init__(self, matcher: Any) -> None:
        self.matcher = wrap_matcher(matcher)

    def _matches(self, item: Any) -> bool:
        return not self.matcher.matches(item)

    def describe(self) -> str:
        return f"not {self.matcher.describe()}"


class AllOf(Matcher):
    def __init__(self, matchers: Sequence[Any]) -> None:
        if not matchers:
            raise ValueError("all_of requires at least one matcher")
        self.matchers = [wrap_matcher(m) for m in matchers]

    def _matches(self, item: Any) -> bool:
        return all(m.matches(item) for m in self.matchers)

    def describe(self) -> str:
        return " and ".join(f"({m.describe()})" for m in self.matchers)

    def describe_mismatch(self, item: Any) -> str:
        for matcher in self.matchers:
            if not matcher.matches(item):
                return f"{matcher.describe_mismatch(item)} (expected {matcher.describe()})"
        return super().describe_mismatch(item)


class AnyOf(Matcher):
    def __init__(self, matchers: Sequence[Any]) -> None:
        if not matchers:
            raise ValueError("any_of requires at least one matcher")
        self.matchers = [wrap_matcher(m) for m in matchers]

    def _matches(self, item: Any) -> bool:
        return any(m.matches(item) for m in self.matchers)

    def describe(self) -> str:
        return " or ".join(f"({m.describe()})" for m in self.matchers)


def equals(expected: Any) -> Matcher:
    return Equals(expected)


def close_to(value: Any, delta: float) -> Matcher:
    return CloseTo(value, delta)


def contains(expected: Any) -> Matcher:
    return Contains(expected)


def has_length(length: int) -> Matcher:
    return HasLength(length)


def is_instance_of(expected_type: type) -> Matcher:
    return IsInstanceOf(expected_type)


def greater_than(bound: Any) -> Matcher:
    return GreaterThan(bound)


def less_than(bound: Any) -> Matcher:
    return LessThan(bound)


def is_not(matcher: Any) -> Matcher:
    return IsNot(matcher)


def all_of(*matchers: Any) -> Matcher:
    return AllOf(matchers)


def any_of(*matchers: Any) -> Matcher:
    return AnyOf(matchers)


def wrap_matcher(value: Any) -> Matcher:
    """Return ``value`` as a matcher.

    ``Matcher`` instances pass through, objects exposing callable ``matches``
    and ``describe_mismatch`` are adapted, anything else becomes ``equals``.
    """

    if isinstance(value, Matcher):
        return value
    if not isinstance(value, type) and all(
        callable(getattr(value, attr, None)) for attr in ("matches", "describe_mismatch")
    ):
        return _DuckMatcher(value)
    return Equals(value)


class _DuckMatcher(Matcher):
    """Adapter for matcher-like objects that do not subclass ``Matcher``."""

    def __init__(self, target: Any) -> None:
        self.target = target

    def _matches(self, item: Any) -> bool:
        return self.target.matches(item)

    def describe(self) -> str:
        describe = getattr(self.target, "describe", None)
        if callable(describe):
            return str(describe())
        return type(self.target).__name__

    def describe_mismatch(self, item: Any) -> str:
        return str(self.target.describe_mismatch(item))


def format_value(value: Any) -> str:
    if isinstance(value, np.ndarray):
        return f"array(shape={value.shape}, dtype={value.dtype})"
    return f"<{value!r}>"


def _describe_string_mismatch(actual: str, expected: str) -> str:
    limit = min(len(actual), len(expected))
    for index in range(limit):
        if actual[index] != expected[index]:
            return f"is different at index {index}"
    if len(actual) < len(expected):
        return f"is too short, missing {expected[limit:]!r}"
    return f"is too long, extra {actual[limit:]!r}"
