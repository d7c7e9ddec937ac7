# src/fasthenry_builder/errors.py
import logging
from abc import ABCMeta, abstractmethod
from typing import Any, Dict

logger = logging.getLogger(__name__)


class FastHenryBuilderError(Exception):
    """Base class for all user-facing errors in FastHenry Builder."""
    pass


class ModelBuildError(FastHenryBuilderError):
    """
    Raised when an input model cannot be loaded from a network description. The
    message is the diagnostic report of the underlying failure.
    """
    pass


class DiagnosableError(Exception, metaclass=ABCMeta):
    """Base for internal exceptions that know how to explain themselves to the user."""

    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# Context keys shown in a report header, in display order.
_CONTEXT_LABELS = (
    ("code", "Issue Code"),
    ("location", "Location"),
    ("source_file", "Source File"),
    ("path", "Path"),
)

_RULE_WIDTH = 75
_LABEL_WIDTH = 16


def _indented(text: str):
    return [f"  {line}" for line in text.splitlines()]


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Lays out a multi-line report shared by every diagnosable error.

    `context` may carry any of 'code', 'location', 'source_file' and 'path';
    empty entries are left out of the header.
    """
    header = [("Error Type", error_type)]
    header += [(label, context[key]) for key, label in _CONTEXT_LABELS if context.get(key)]

    lines = ["\n", " FastHenry Builder: Actionable Diagnostic Report ".center(_RULE_WIDTH, "=")]
    lines += [f"{label + ':':<{_LABEL_WIDTH}}{value}" for label, value in header]
    lines += ["\nDetails:"] + _indented(details)
    if suggestion:
        lines += ["\nSuggestion:"] + _indented(suggestion)
    lines.append("=" * _RULE_WIDTH)
    return "\n".join(lines)
