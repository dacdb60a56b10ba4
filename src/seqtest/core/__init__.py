"""Core models and helpers exposed at the package level."""
from .errors import AssertionFailure, ConfigError, RegistrationError, RunStateError, SeqtestError
from .expect import expect
from .matchers import (
    Matcher,
    all_of,
    any_of,
    close_to,
    contains,
    equals,
    greater_than,
    has_length,
    is_false,
    is_instance_of,
    is_none,
    is_not,
    is_not_none,
    is_true,
    less_than,
)
from .models import CaseState, Outcome, TestCase, TestGroup
from .registration import GroupContext, Suite
from .results import CaseResult, RunSummary, summarize
from .runner import TestRunner

__all__ = [
    "AssertionFailure",
    "CaseResult",
    "CaseState",
    "ConfigError",
    "GroupContext",
    "Matcher",
    "Outcome",
    "RegistrationError",
    "RunStateError",
    "RunSummary",
    "SeqtestError",
    "Suite",
    "TestCase",
    "TestGroup",
    "TestRunner",
    "all_of",
    "any_of",
    "close_to",
    "contains",
    "equals",
    "expect",
    "greater_than",
    "has_length",
    "is_false",
    "is_instance_of",
    "is_none",
    "is_not",
    "is_not_none",
    "is_true",
    "less_than",
    "summarize",
]
