# src/fasthenry_builder/parser/parser.py
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

import cerberus
import yaml

from ..model.schema import SEGMENT_FIELDS
from ..units import SUPPORTED_LENGTH_UNITS
from .raw_data import ParsedNetworkDescription
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

NUMERIC_SEGMENT_FIELDS = ("w", "h", "sigma", "rho", "wx", "wy", "wz", "rh", "rw")


class DescriptionValidator(cerberus.Validator):
    """Cerberus validator with coercions for values YAML 1.1 leaves as strings."""

    def _normalize_coerce_number(self, value: Any) -> Any:
        # PyYAML reads literals such as 1e8 or 1.0e8 as strings. Anything that
        # is not a plain number (e.g. "10 MHz") is left for later checks.
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return value
        return value

    def _normalize_coerce_coordinate(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self._normalize_coerce_number(v) for v in value]
        if isinstance(value, Mapping):
            return {k: self._normalize_coerce_number(v) for k, v in value.items()}
        return value


class NetworkDescriptionParser:
    """
    Reads and structurally validates a YAML network description.
    Its sole responsibility is to produce a `ParsedNetworkDescription`; building
    the InputModel from it is done by `ModelBuilder`.
    """
    _segment_schema: Dict[str, Any] = {name: {} for name in SEGMENT_FIELDS}
    _segment_schema.update({
        "sn1": {"required": True, "coerce": "coordinate"},
        "sn2": {"required": True, "coerce": "coordinate"},
        "en1": {"required": True},
        "en2": {"required": True},
        "nhinc": {"type": "integer"},
        "nwinc": {"type": "integer"},
    })
    _segment_schema.update({name: {"coerce": "number"} for name in NUMERIC_SEGMENT_FIELDS})

    _schema = {
        "units": {"type": "string", "required": True, "allowed": list(SUPPORTED_LENGTH_UNITS)},
        "segments": {
            "type": "list", "required": True, "minlength": 1,
            "schema": {"type": "dict", "schema": _segment_schema},
        },
        "ports": {
            "type": "list", "required": False,
            "schema": {"type": "list", "items": [{"type": "string"}, {"type": "string"}]},
        },
        "frequency": {
            "type": "dict", "required": False, "schema": {
                "fmin": {"required": True, "coerce": "number"},
                "fmax": {"required": True, "coerce": "number"},
                "ndec": {"required": False, "coerce": "number"},
            },
        },
    }

    def __init__(self):
        self._validator = DescriptionValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("NetworkDescriptionParser initialized.")

    def parse(self, yaml_path: Union[str, Path]) -> ParsedNetworkDescription:
        """Parses a description file from disk."""
        resolved_path = Path(yaml_path).resolve()
        logger.info(f"Parsing network description: {resolved_path}")
        return self._parse_content(self._load_yaml(resolved_path), resolved_path)

    def parse_string(self, text: str, source: Union[str, Path] = "<string>") -> ParsedNetworkDescription:
        """Parses a description held in memory. `source` is only used in diagnostics."""
        source_path = Path(source)
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source_path) from e
        return self._parse_content(self._check_root(content, source_path), source_path)

    def _parse_content(self, content: Dict[str, Any], source_path: Path) -> ParsedNetworkDescription:
        if not self._validator.validate(content):
            raise SchemaValidationError(self._validator.errors, source_path)
        document = self._validator.document
        return ParsedNetworkDescription(
            unit=document["units"],
            source_yaml_path=source_path,
            raw_segments=document["segments"],
            raw_ports=document.get("ports"),
            raw_frequency=document.get("frequency"),
        )

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise ParsingError(details=f"Description file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        return self._check_root(content, source)

    @staticmethod
    def _check_root(content: Any, source: Path) -> Dict[str, Any]:
        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content
