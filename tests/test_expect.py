import pytest

from seqtest.core import AssertionFailure, expect, is_true
from seqtest.core.matchers import equals, has_length


def test_expect_returns_none_on_match() -> None:
    assert expect(True, is_true) is None


def test_expect_raises_with_mismatch_description() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        expect(False, is_true)
    assert excinfo.value.message == "Expected: True\n  Actual: <False>"
    assert isinstance(excinfo.value, AssertionError)


def test_expect_wraps_plain_values_in_equals() -> None:
    expect([1, 2], [1, 2])
    with pytest.raises(AssertionFailure) as excinfo:
        expect(1, 2)
    assert "Expected: <2>" in str(excinfo.value)


def test_expect_includes_which_and_reason() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        expect([1], has_length(2), reason="list should hold two items")
    lines = excinfo.value.message.splitlines()
    assert lines == [
        "Expected: an object with length of <2>",
        "  Actual: <[1]>",
        "   Which: has length of <1>",
        "list should hold two items",
    ]


def test_expect_describes_string_difference() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        expect("abc", equals("abd"))
    assert "Which: is different at index 2" in excinfo.value.message


def test_expect_accepts_matcher_like_objects() -> None:
    class Positive:
        def matches(self, item) -> bool:
            return item > 0

        def describe(self) -> str:
            return "a positive number"

        def describe_mismatch(self, item) -> str:
            return "is not positive"

    expect(3, Positive())
    with pytest.raises(AssertionFailure) as excinfo:
        expect(-1, Positive())
    assert excinfo.value.message.splitlines() == [
        "Expected: a positive number",
        "  Actual: <-1>",
        "   Which: is not positive",
    ]
