# src/fasthenry_builder/parser/__init__.py
from .raw_data import ParsedNetworkDescription
from .parser import NetworkDescriptionParser
from .exceptions import ParsingError, SchemaValidationError

__all__ = [
    "ParsedNetworkDescription",
    "NetworkDescriptionParser",
    "ParsingError",
    "SchemaValidationError",
]
