# src/fasthenry_builder/model/schema.py
"""
Cerberus schemas and validation entry points for the builder operations.

Segment configurations are checked in a fixed sequence of stages. Each stage is a
small schema run against the whole document, and the first stage that fails
raises an `ArgumentShapeError` carrying that stage's issue code, so callers
always see the most fundamental problem first. Nothing here touches a model;
the functions return validated, typed records for the model to store.
"""
import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional, Tuple

import cerberus
import pint

from ..data_structures import Coordinate, FrequencySweep, Port, SegmentConfig
from ..issue_codes import IssueCode
from ..units import SUPPORTED_LENGTH_UNITS, ureg, to_hertz
from .exceptions import ArgumentShapeError

logger = logging.getLogger(__name__)


class BuilderValidator(cerberus.Validator):
    """
    Cerberus validator extended with the numeric rules used by the builder schemas.
    Numbers are any real or integral type (numpy scalars included), never bool.
    """
    types_mapping = cerberus.Validator.types_mapping.copy()
    types_mapping["number"] = cerberus.TypeDefinition("number", (numbers.Real,), (bool,))
    types_mapping["integer"] = cerberus.TypeDefinition("integer", (numbers.Integral,), (bool,))

    def _validate_finite(self, constraint: bool, field: str, value: Any):
        """
        Rejects NaN and infinite values.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or isinstance(value, bool) or not isinstance(value, numbers.Real):
            return
        if not math.isfinite(float(value)):
            self._error(field, "must be a finite number")


ENDPOINT_FIELDS = ("sn1", "sn2")
NODE_NAME_FIELDS = ("en1", "en2")
EXTENSION_FIELDS = ("wx", "wy", "wz")
FILAMENT_FIELDS = ("nhinc", "nwinc", "rh", "rw")
SEGMENT_FIELDS = ENDPOINT_FIELDS + NODE_NAME_FIELDS + ("w", "h", "sigma", "rho") + EXTENSION_FIELDS + FILAMENT_FIELDS

_number_rule = {"type": "number", "finite": True}

_coordinate_schema = {axis: {**_number_rule, "required": True} for axis in ("x", "y", "z")}

SEGMENT_VALIDATION_STAGES: List[Tuple[IssueCode, Dict[str, Any]]] = [
    (IssueCode.SEG_ENDPOINTS_MISSING,
     {name: {"required": True} for name in ENDPOINT_FIELDS + NODE_NAME_FIELDS}),
    (IssueCode.SEG_COORDINATE_INVALID,
     {name: {"type": "dict", "schema": _coordinate_schema} for name in ENDPOINT_FIELDS}),
    (IssueCode.SEG_NODE_NAME_INVALID,
     {name: {"type": "string"} for name in NODE_NAME_FIELDS}),
    (IssueCode.SEG_DIMENSIONS_MISSING,
     {name: {**_number_rule, "required": True} for name in ("w", "h")}),
    # 'required' together with mutual 'excludes' means exactly one of the two.
    (IssueCode.SEG_MATERIAL_INVALID,
     {"sigma": {**_number_rule, "required": True, "excludes": "rho"},
      "rho": {**_number_rule, "required": True, "excludes": "sigma"}}),
    (IssueCode.SEG_EXTENSION_INCOMPLETE,
     {axis: {"dependencies": [other for other in EXTENSION_FIELDS if other != axis]} for axis in EXTENSION_FIELDS}),
    (IssueCode.SEG_EXTENSION_INVALID,
     {axis: dict(_number_rule) for axis in EXTENSION_FIELDS}),
    (IssueCode.SEG_FILAMENT_OVERRIDE_INVALID,
     {"nhinc": {"type": "integer", "min": 1}, "nwinc": {"type": "integer", "min": 1},
      "rh": dict(_number_rule), "rw": dict(_number_rule)}),
]

_known_fields_schema = {name: {} for name in SEGMENT_FIELDS}

PORTS_SCHEMA = {
    "ports": {
        "type": "list",
        "required": True,
        "schema": {"type": "list", "items": [{"type": "string"}, {"type": "string"}]},
    }
}

SWEEP_SCHEMA = {
    "fmin": {**_number_rule, "required": True, "min": 0},
    "fmax": {**_number_rule, "required": True, "min": 0},
    "ndec": dict(_number_rule),
}


def validate_unit(unit: Any) -> str:
    """Checks that `unit` is one of the length-unit symbols FastHenry understands."""
    if not isinstance(unit, str) or unit not in SUPPORTED_LENGTH_UNITS:
        raise ArgumentShapeError(
            IssueCode.MODEL_UNIT_INVALID,
            unit=unit, supported_units=", ".join(f"'{u}'" for u in SUPPORTED_LENGTH_UNITS)
        )
    return unit


def _as_coordinate_mapping(value: Any) -> Any:
    """Brings the accepted coordinate spellings into the {x, y, z} form the schema checks."""
    if isinstance(value, Coordinate):
        return {"x": value.x, "y": value.y, "z": value.z}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 3:
        return dict(zip(("x", "y", "z"), value))
    return value


def _flatten_extension(extension: Any) -> Dict[str, Any]:
    """Spreads an extension vector given as a coordinate into the wx, wy and wz fields."""
    vector = _as_coordinate_mapping(extension)
    if not isinstance(vector, Mapping):
        raise ArgumentShapeError(
            IssueCode.SEG_EXTENSION_INVALID, errors={"extension": [f"cannot use {vector!r} as a vector"]}
        )
    return {f"w{axis}": vector[axis] for axis in ("x", "y", "z") if vector.get(axis) is not None}


def validate_segment_config(config: Any) -> SegmentConfig:
    """
    Validates a segment configuration and returns it as a typed `SegmentConfig`.

    Args:
        config: A `SegmentConfig` or a mapping using the flat input-file keys
                (sn1, sn2, en1, en2, w, h, sigma|rho, wx, wy, wz, nhinc, nwinc, rh, rw).
                Keys whose value is None are treated as absent.

    Raises:
        ArgumentShapeError: on the first failing validation stage.
    """
    if isinstance(config, SegmentConfig):
        document = config.to_mapping()
        extension = document.pop("extension", None)
        if extension is not None:
            document.update(_flatten_extension(extension))
    elif isinstance(config, Mapping):
        document = {key: value for key, value in config.items() if value is not None}
    else:
        raise ArgumentShapeError(IssueCode.SEG_CONFIG_TYPE, received=type(config).__name__)

    for name in ENDPOINT_FIELDS:
        if name in document:
            document[name] = _as_coordinate_mapping(document[name])

    for issue_code, stage_schema in SEGMENT_VALIDATION_STAGES:
        validator = BuilderValidator(stage_schema, allow_unknown=True)
        if not validator.validate(document):
            logger.debug(f"Segment configuration rejected at stage {issue_code.code}: {validator.errors}")
            raise ArgumentShapeError(issue_code, errors=validator.errors)

    validator = BuilderValidator(_known_fields_schema, allow_unknown=False)
    if not validator.validate(document):
        raise ArgumentShapeError(IssueCode.SEG_UNKNOWN_FIELD, errors=validator.errors)

    return SegmentConfig.from_mapping(document)


def validate_ports(ports: Any) -> Tuple[Port, ...]:
    """Validates a list of (en1, en2) pairs and returns them as `Port` records."""
    if isinstance(ports, Sequence) and not isinstance(ports, str):
        pairs = [
            [p.en1, p.en2] if isinstance(p, Port)
            else list(p) if isinstance(p, Sequence) and not isinstance(p, str)
            else p
            for p in ports
        ]
    else:
        pairs = ports
    validator = BuilderValidator(PORTS_SCHEMA)
    if not validator.validate({"ports": pairs}):
        raise ArgumentShapeError(IssueCode.PORT_DEFINITION_INVALID, errors=validator.errors)
    return tuple(Port(en1, en2) for en1, en2 in pairs)


def validate_frequency(fmin: Any, fmax: Any, ndec: Optional[Any] = None) -> FrequencySweep:
    """
    Validates the sweep parameters and returns a `FrequencySweep` in Hz.

    `fmin` and `fmax` may be plain numbers (Hz), pint quantities or strings such
    as "10 MHz". `ndec` is the optional number of points per decade.
    """
    values: Dict[str, Any] = {}
    for name, value in (("fmin", fmin), ("fmax", fmax)):
        if isinstance(value, (str, ureg.Quantity)):
            try:
                value = to_hertz(value)
            except (pint.DimensionalityError, pint.UndefinedUnitError, ValueError, TypeError) as e:
                raise ArgumentShapeError(
                    IssueCode.SWEEP_INVALID, reason=f"{name} value '{value}' is not a frequency ({e})."
                ) from e
        values[name] = value
    if ndec is not None:
        values["ndec"] = ndec

    validator = BuilderValidator(SWEEP_SCHEMA)
    if not validator.validate(values):
        raise ArgumentShapeError(
            IssueCode.SWEEP_INVALID, errors=validator.errors,
            reason="Need non-negative numbers for fmin and fmax, and a number for ndec if given."
        )
    if values["fmax"] < values["fmin"]:
        raise ArgumentShapeError(IssueCode.SWEEP_INVALID, reason="fmax cannot be less than fmin.")
    if ndec is not None and ndec <= 0:
        raise ArgumentShapeError(IssueCode.SWEEP_INVALID, reason="ndec must be greater than zero.")
    if ndec is not None and values["fmin"] == 0:
        raise ArgumentShapeError(IssueCode.SWEEP_INVALID, reason="fmin must be greater than zero when ndec is given.")

    return FrequencySweep(fmin=values["fmin"], fmax=values["fmax"], ndec=ndec)
