# src/fasthenry_builder/model/__init__.py
from .input_model import InputModel, CoordinateIndex
from .equivalence import group_equivalent_nodes
from .schema import validate_segment_config, validate_ports, validate_frequency, validate_unit
from .exceptions import ArgumentShapeError, CapabilityError

__all__ = [
    "InputModel",
    "CoordinateIndex",
    "group_equivalent_nodes",
    "validate_segment_config",
    "validate_ports",
    "validate_frequency",
    "validate_unit",
    "ArgumentShapeError",
    "CapabilityError",
]
