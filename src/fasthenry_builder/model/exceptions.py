# src/fasthenry_builder/model/exceptions.py
"""
Diagnosable exceptions raised while an input model is being built.

`ArgumentShapeError` covers every malformed argument to the builder operations
(unit, segment configuration, ports, sweep). `CapabilityError` is raised by the
services that accept a model as an argument when they are handed anything other
than an `InputModel`.
"""
from typing import Any, Dict, Optional

from ..errors import DiagnosableError, format_diagnostic_report
from ..issue_codes import IssueCode


class ArgumentShapeError(DiagnosableError):
    """
    Raised when an argument has the wrong type or lacks a required field.

    Attributes:
        issue_code: The `IssueCode` naming the check that failed.
        errors: Field-level errors as reported by the cerberus validator, if any.
        location: Where the offending argument came from (e.g., "segments[3]").
        source_file: The description file the argument was read from, if any.
    """
    def __init__(
        self,
        issue_code: IssueCode,
        errors: Optional[Dict[str, Any]] = None,
        location: Optional[str] = None,
        source_file: Optional[Any] = None,
        **message_args: Any,
    ):
        self.issue_code = issue_code
        self.errors: Dict[str, Any] = dict(errors or {})
        self.location = location
        self.source_file = source_file
        self.message = issue_code.format_message(**message_args)
        super().__init__(self._summary())

    def _summary(self) -> str:
        summary = f"[{self.issue_code.code}] {self.message}"
        if self.errors:
            summary += " " + "; ".join(f"{field}: {msgs}" for field, msgs in sorted(self.errors.items()))
        return summary

    def with_context(self, location: str, source_file: Optional[Any] = None) -> "ArgumentShapeError":
        """Annotates this error with where the offending argument came from."""
        self.location = location
        self.source_file = source_file
        return self

    def get_diagnostic_report(self) -> str:
        details = self.message
        if self.errors:
            details += "\n\nField errors:\n" + "\n".join(
                f"  - {field}: {msgs}" for field, msgs in sorted(self.errors.items())
            )
        return format_diagnostic_report(
            error_type="Invalid Builder Argument",
            details=details,
            suggestion="Correct the argument so that it provides every required field with the expected type.",
            context={'code': self.issue_code.code, 'location': self.location, 'source_file': self.source_file}
        )


class CapabilityError(DiagnosableError, TypeError):
    """Raised when a service is given an object that is not an `InputModel`."""
    def __init__(self, service: str, received: Any):
        self.service = service
        self.received_type = type(received).__name__
        super().__init__(f"{service} requires a valid InputModel; received {self.received_type}.")

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Model Handle",
            details=str(self),
            suggestion="Create the model with InputModel(unit) and pass that object.",
            context={}
        )
