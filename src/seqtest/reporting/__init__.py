"""Reporting exports."""
from .base import (
    ReportManager,
    Reporter,
    ReporterOptions,
    create_reporter,
    register_reporter,
    reporter_names,
)
from .json_reporter import JsonReporter
from .terminal import TerminalReporter

register_reporter("terminal", lambda options: TerminalReporter(use_color=options.use_color))
register_reporter("json", lambda options: JsonReporter(path=options.report_path))

__all__ = [
    "ReportManager",
    "Reporter",
    "ReporterOptions",
    "JsonReporter",
    "TerminalReporter",
    "create_reporter",
    "register_reporter",
    "reporter_names",
]
