# src/fasthenry_builder/validation/__init__.py
import logging
logger = logging.getLogger(__name__)

from .issues import ValidationIssue, ValidationIssueLevel
from .network_validator import NetworkValidator, has_errors
from .exceptions import ReferentialIntegrityError

__all__ = [
    "ValidationIssue",
    "ValidationIssueLevel",
    "NetworkValidator",
    "has_errors",
    "ReferentialIntegrityError",
]
