# src/fasthenry_builder/parser/exceptions.py
"""
Defines the diagnosable exceptions for reading network description files.

`ParsingError` covers file-level problems (missing file, unreadable file,
invalid YAML). `SchemaValidationError` covers YAML that loads fine but does not
have the structure of a network description.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """Common base for all description parsing and schema validation errors."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the network description file.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Raised when a description file cannot be read or is not valid YAML.
    """
    details: str
    file_path: Path

    def __str__(self):
        return f"Parsing error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Raised when the YAML is syntactically valid but is not a network description
    (e.g., missing 'units' or 'segments', unknown keys, malformed ports).
    """
    errors: Dict[str, Any]
    file_path: Path

    def __str__(self):
        error_lines = [f"  - In field '{k}': {v}" for k, v in sorted(self.errors.items())]
        return (
            f"Schema validation failed for file '{self.file_path}':\n"
            + "\n".join(error_lines)
        )

    def get_diagnostic_report(self) -> str:
        error_list_str = "\n".join(f"  - Field '{k}': {v}" for k, v in sorted(self.errors.items()))
        details = (
            "The structure of the file does not match the network description format.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="Description Schema Validation Error",
            details=details,
            suggestion="A description needs 'units' and a non-empty 'segments' list, and may add 'ports' and 'frequency'. Check the spelling of every segment key.",
            context={'source_file': self.file_path}
        )
