# src/fasthenry_builder/writer/__init__.py
from .writer import InputFileWriter, format_number
from .exceptions import ResourceConflictError

__all__ = [
    "InputFileWriter",
    "format_number",
    "ResourceConflictError",
]
