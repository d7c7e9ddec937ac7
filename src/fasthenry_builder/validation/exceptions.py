# src/fasthenry_builder/validation/exceptions.py
"""
Defines the diagnosable exception raised when a model cannot be serialized
because its ports, electrical nodes or sweep do not fit together.
"""
from typing import List

from .issues import ValidationIssue, ValidationIssueLevel
from ..errors import DiagnosableError, format_diagnostic_report


class ReferentialIntegrityError(DiagnosableError):
    """
    Raised when network validation finds one or more error-level issues.

    The exception keeps only the ERROR issues of the list it is given, so the
    report never mixes warnings in with the reasons the write was refused.
    """
    def __init__(self, issues: List[ValidationIssue]):
        self.issues: List[ValidationIssue] = [
            issue for issue in issues if issue.level == ValidationIssueLevel.ERROR
        ]
        if not self.issues:
            summary_message = "ReferentialIntegrityError was raised with no error-level issues."
        else:
            summary_message = (
                f"Network validation failed with {len(self.issues)} error(s):\n"
                + "\n".join(f"  - {issue}" for issue in self.issues)
            )
        super().__init__(summary_message)

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

    def get_diagnostic_report(self) -> str:
        details = (
            "The network cannot be written as a FastHenry input file.\n"
            f"Found {len(self.issues)} error(s). See details below:\n\n"
            + "\n".join(f"  - {issue}" for issue in self.issues)
        )
        context = {'code': self.issues[0].code} if self.issues else {}
        return format_diagnostic_report(
            error_type="Network Referential Integrity Error",
            details=details,
            suggestion="Make sure ports and a frequency sweep are set, and that every port names an electrical node used by a segment.",
            context=context
        )
