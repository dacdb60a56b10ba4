"""Exception hierarchy shared across seqtest subsystems."""
from __future__ import annotations


class SeqtestError(Exception):
    """Base class for harness errors surfaced to the caller."""


class RegistrationError(SeqtestError):
    """Raised when groups or cases are registered outside a valid context."""


class RunStateError(SeqtestError):
    """Raised when a suite's cases are executed more than once."""


class ConfigError(SeqtestError):
    """Raised for invalid config files or test modules."""


class AssertionFailure(AssertionError):
    """Raised by ``expect`` when a matcher rejects the actual value."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
