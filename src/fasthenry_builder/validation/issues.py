# src/fasthenry_builder/validation/issues.py
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class ValidationIssueLevel(Enum):
    """Severity level of a validation issue."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    def __str__(self):
        return self.value


@dataclass
class ValidationIssue:
    """
    A single finding of the network validator, with enough context (the
    offending port or electrical node) to act on it.
    """
    level: ValidationIssueLevel
    code: str
    message: str
    port_index: Optional[int] = None
    node_name: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.level.name} - {self.code}]"]
        if self.port_index is not None:
            parts.append(f"Port: {self.port_index}")
        if self.node_name:
            parts.append(f"Node: {self.node_name}")
        parts.append(f"Message: {self.message}")

        filtered_details = {
            k: v for k, v in self.details.items()
            if k not in ('port_index', 'node_name')
        }
        if filtered_details:
            details_str = ", ".join(f"{k}={v}" for k, v in sorted(filtered_details.items()))
            parts.append(f"Details: ({details_str})")

        return " ".join(parts)
