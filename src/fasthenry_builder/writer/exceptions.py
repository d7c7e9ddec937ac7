# src/fasthenry_builder/writer/exceptions.py
from dataclasses import dataclass
from pathlib import Path

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(frozen=True)
class ResourceConflictError(DiagnosableError):
    """
    Raised when the destination of an input file already exists and the caller
    did not ask for it to be overwritten. The existing file is left untouched.
    """
    path: Path

    def __str__(self):
        return f"File already exists: '{self.path}'."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Output File Already Exists",
            details=f"Refusing to overwrite the existing file system entry at '{self.path}'.",
            suggestion="Choose another destination, remove the existing file, or write with force=True.",
            context={'path': self.path}
        )
