# src/fasthenry_builder/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("FastHenry Builder package initialized.")

from .units import ureg, pint, Quantity, SUPPORTED_LENGTH_UNITS
from .data_structures import (
    Coordinate, Conductivity, Resistivity, SegmentConfig,
    SpatialNode, Segment, Port, FrequencySweep, EquivalenceGroup,
)
from .issue_codes import IssueCode
from .model import InputModel, ArgumentShapeError, CapabilityError
from .validation import NetworkValidator, ValidationIssue, ValidationIssueLevel, ReferentialIntegrityError
from .writer import InputFileWriter, ResourceConflictError
from .parser import NetworkDescriptionParser, ParsingError, SchemaValidationError
from .model_builder import ModelBuilder, load_input_model
from .errors import FastHenryBuilderError, ModelBuildError, DiagnosableError

__all__ = [
    # Units
    "ureg", "pint", "Quantity", "SUPPORTED_LENGTH_UNITS",
    # Data Structures
    "Coordinate", "Conductivity", "Resistivity", "SegmentConfig",
    "SpatialNode", "Segment", "Port", "FrequencySweep", "EquivalenceGroup",
    # Model
    "InputModel", "IssueCode",
    # Validation
    "NetworkValidator", "ValidationIssue", "ValidationIssueLevel",
    # Writer
    "InputFileWriter",
    # Description files
    "NetworkDescriptionParser", "ModelBuilder", "load_input_model",
    # Errors
    "FastHenryBuilderError", "ModelBuildError", "DiagnosableError",
    "ArgumentShapeError", "CapabilityError", "ReferentialIntegrityError",
    "ResourceConflictError", "ParsingError", "SchemaValidationError",
]
