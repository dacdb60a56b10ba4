"""Core dataclasses shared across seqtest subsystems."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Union

BodyResult = Union[None, Awaitable[Any]]
TestBody = Callable[[], BodyResult]
Hook = Callable[[], BodyResult]


class CaseState(enum.Enum):
    """Lifecycle of a single test case."""

    REGISTERED = "registered"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (CaseState.PASSED, CaseState.FAILED)


@dataclass(frozen=True)
class Outcome:
    """Terminal status of a test case."""

    status: str
    reason: Optional[str] = None
    kind: Optional[str] = None  # "assertion" or "error" when failed

    @classmethod
    def success(cls) -> "Outcome":
        return cls(status="passed")

    @classmethod
    def failure(cls, reason: str, kind: str = "error") -> "Outcome":
        return cls(status="failed", reason=reason, kind=kind)

    @property
    def passed(self) -> bool:
        return self.status == "passed"


@dataclass(eq=False)
class TestCase:
    """A named, deferred test body owned by exactly one group."""

    __test__ = False  # keep pytest from collecting this class

    name: str
    group: "TestGroup" = field(repr=False)
    body: TestBody
    state: CaseState = CaseState.REGISTERED

    def identifier(self) -> str:
        return f"{self.group.name} > {self.name}"

    def full_name(self) -> str:
        return f"{self.group.name} {self.name}"


@dataclass(eq=False)
class TestGroup:
    """Named, ordered collection of test cases."""

    __test__ = False

    name: str
    cases: List[TestCase] = field(default_factory=list)
    set_up_hooks: List[Hook] = field(default_factory=list)
    tear_down_hooks: List[Hook] = field(default_factory=list)
