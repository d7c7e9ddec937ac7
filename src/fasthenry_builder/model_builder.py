# src/fasthenry_builder/model_builder.py
"""
Builds an InputModel from a parsed network description.

The ModelBuilder is the bridge between the YAML description format and the
builder API: it replays the description through `InputModel.add_segment`,
`set_ports` and `set_frequency`, so a description file is validated by exactly
the same rules as code that drives the model directly. It is also the top-level
error boundary for loading: any diagnosable error raised while reading or
building is re-raised as a single `ModelBuildError` carrying the full report.
"""
import logging
from pathlib import Path
from typing import Union

from .errors import DiagnosableError, ModelBuildError, format_diagnostic_report
from .model import InputModel, ArgumentShapeError
from .parser import NetworkDescriptionParser, ParsedNetworkDescription

logger = logging.getLogger(__name__)


class ModelBuilder:
    """Synthesizes an `InputModel` from a `ParsedNetworkDescription`."""

    def build_input_model(self, description: ParsedNetworkDescription) -> InputModel:
        """
        Replays the description onto a fresh model.

        Raises:
            ArgumentShapeError: annotated with the offending section
                (e.g., "segments[2]") and the description file.
        """
        source = description.source_yaml_path
        try:
            model = InputModel(description.unit)
        except ArgumentShapeError as e:
            raise e.with_context("units", source)

        for position, raw_segment in enumerate(description.raw_segments):
            try:
                model.add_segment(raw_segment)
            except ArgumentShapeError as e:
                raise e.with_context(f"segments[{position}]", source)

        if description.raw_ports is not None:
            try:
                model.set_ports(description.raw_ports)
            except ArgumentShapeError as e:
                raise e.with_context("ports", source)

        if description.raw_frequency is not None:
            frequency = description.raw_frequency
            try:
                model.set_frequency(frequency["fmin"], frequency["fmax"], frequency.get("ndec"))
            except ArgumentShapeError as e:
                raise e.with_context("frequency", source)

        logger.info(f"Built input model from '{source}': {len(model.nodes)} nodes, {len(model.segments)} segments.")
        return model

    def load(self, yaml_path: Union[str, Path]) -> InputModel:
        """
        Parses a description file and builds its model, turning every failure into
        a `ModelBuildError` with an actionable report.
        """
        try:
            description = NetworkDescriptionParser().parse(yaml_path)
            return self.build_input_model(description)
        except DiagnosableError as e:
            raise ModelBuildError(e.get_diagnostic_report()) from e
        except Exception as e:
            report = format_diagnostic_report(
                error_type=f"An Unexpected Error Occurred ({type(e).__name__})",
                details=f"Loading the network description failed with an unexpected internal error: {e}",
                suggestion="This may indicate a bug in FastHenry Builder. Please review the traceback.",
                context={'source_file': yaml_path}
            )
            raise ModelBuildError(report) from e


def load_input_model(yaml_path: Union[str, Path]) -> InputModel:
    """Convenience wrapper around `ModelBuilder().load()`."""
    return ModelBuilder().load(yaml_path)
