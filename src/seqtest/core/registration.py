"""Group and test registration."""
from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from .errors import RegistrationError
from .models import Hook, TestBody, TestCase, TestGroup

logger = logging.getLogger(__name__)


class GroupContext:
    """Registration handle passed to a group body.

    The context is only open while the group body runs; registering
    through it afterwards raises ``RegistrationError``.
    """

    def __init__(self, group: TestGroup) -> None:
        self._group = group
        self._open = True

    @property
    def name(self) -> str:
        return self._group.name

    @property
    def is_open(self) -> bool:
        return self._open

    def test(self, name: str, body: TestBody) -> TestCase:
        self._ensure_open(f"test '{name}'")
        _check_name(name, "Test")
        if not callable(body):
            raise RegistrationError(f"Body of test '{name}' is not callable")
        case = TestCase(name=name, group=self._group, body=body)
        self._group.cases.append(case)
        logger.debug("registered %s", case.identifier())
        return case

    def set_up(self, hook: Hook) -> None:
        self._ensure_open("set_up hook")
        if not callable(hook):
            raise RegistrationError("set_up hook is not callable")
        self._group.set_up_hooks.append(hook)

    def tear_down(self, hook: Hook) -> None:
        self._ensure_open("tear_down hook")
        if not callable(hook):
            raise RegistrationError("tear_down hook is not callable")
        self._group.tear_down_hooks.append(hook)

    def close(self) -> None:
        self._open = False

    def _ensure_open(self, what: str) -> None:
        if not self._open:
            raise RegistrationError(
                f"Cannot register {what}: group '{self._group.name}' is already closed"
            )


class Suite:
    """Ordered collection of registered groups."""

    def __init__(self) -> None:
        self._groups: List[TestGroup] = []
        self._current: Optional[GroupContext] = None

    def group(self, name: str, body: Callable[[GroupContext], None]) -> TestGroup:
        """Register a group; ``body`` receives the group's context and runs now."""

        _check_name(name, "Group")
        if self._current is not None:
            raise RegistrationError(
                f"Cannot register group '{name}' inside group '{self._current.name}'"
            )
        if not callable(body):
            raise RegistrationError(f"Body of group '{name}' is not callable")
        group = TestGroup(name=name)
        context = GroupContext(group)
        self._current = context
        try:
            body(context)
        finally:
            context.close()
            self._current = None
        # a group whose body raised is never registered
        self._groups.append(group)
        logger.debug("registered group '%s' with %d case(s)", name, len(group.cases))
        return group

    def test(self, name: str, body: TestBody) -> TestCase:
        """Register a case into the currently open group."""

        if self._current is None:
            raise RegistrationError(f"Test '{name}' must be registered inside a group")
        return self._current.test(name, body)

    @property
    def groups(self) -> List[TestGroup]:
        return list(self._groups)

    def cases(self) -> Iterator[TestCase]:
        for group in self._groups:
            yield from group.cases

    def __len__(self) -> int:
        return sum(len(group.cases) for group in self._groups)


def _check_name(name: str, kind: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise RegistrationError(f"{kind} name must be a non-empty string")
