# src/fasthenry_builder/writer/writer.py
"""
Serializes an InputModel into the FastHenry input file format.

The file is made of these sections, always in this order: the unit directive,
one `N` line per spatial node, one `E` line per segment, one `.Equiv` statement
per electrical node, the `.external` ports, the `.freq` sweep and the `.end`
marker. The whole text is assembled and validated in memory before the
destination is opened, so a failed write never leaves a partial file behind.
"""
import logging
import numbers
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np

from ..data_structures import EquivalenceGroup, FrequencySweep, Segment, SpatialNode
from ..model import InputModel, CapabilityError
from ..validation import NetworkValidator, ReferentialIntegrityError, ValidationIssueLevel, has_errors
from .exceptions import ResourceConflictError

logger = logging.getLogger(__name__)


def format_number(value: Any) -> str:
    """
    Formats a number for the input file. Integers are written as-is. Floats use
    the shortest digits that round-trip: positional between 1e-4 and 1e6, and
    scientific with a bare exponent outside that range
    (10.0 -> "10", 1e8 -> "1e8", 1.68e-08 -> "1.68e-8").
    """
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return str(int(value))
    value = float(value)
    if value == 0 or 1e-4 <= abs(value) < 1e6:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1).replace("e+", "e")


class InputFileWriter:
    """
    Renders and writes the FastHenry input file for one InputModel.

    The writer holds no state of its own besides the model reference; rendering
    the same, unmodified model twice produces identical text.
    """

    def __init__(self, model: InputModel):
        if not isinstance(model, InputModel):
            raise CapabilityError("InputFileWriter", model)
        self.model = model

    def render(self) -> str:
        """
        Returns the complete input file text.

        Raises:
            ReferentialIntegrityError: if ports or the sweep are missing, or a port
                names an electrical node that no segment uses.
        """
        issues = NetworkValidator(self.model).validate()
        for issue in issues:
            if issue.level == ValidationIssueLevel.WARNING:
                logger.warning(str(issue))
            elif issue.level == ValidationIssueLevel.INFO:
                logger.info(str(issue))
        if has_errors(issues):
            raise ReferentialIntegrityError(issues)

        groups = self.model.equivalence_groups()
        representatives: Dict[str, int] = {group.name: group.representative for group in groups}

        lines: List[str] = ["* Set the units", f".units {self.model.unit}"]
        lines.extend(self._node_line(node) for node in self.model.nodes)
        lines.append("")
        lines.extend(self._segment_line(segment) for segment in self.model.segments)
        lines.append("")
        lines.extend(self._equiv_line(group) for group in groups)
        lines.append("")
        lines.append("* Define the ports of the network")
        for port in self.model.ports:
            lines.append(f".external N{representatives[port.en1]} N{representatives[port.en2]}")
        lines.append("")
        lines.append(self._freq_line(self.model.sweep))
        lines.append("* Mark end of file")
        lines.append(".end")
        return "\n".join(lines) + "\n"

    def write(self, path: Union[str, Path], force: bool = False) -> Path:
        """
        Writes the input file to `path` and returns the path written.

        Raises:
            ResourceConflictError: if `path` exists and `force` is false.
            ReferentialIntegrityError: see `render()`. No file is created.
        """
        target = Path(path)
        if not force and (target.exists() or target.is_symlink()):
            raise ResourceConflictError(path=target)

        content = self.render()

        # Exclusive creation closes the gap between the existence check and the open.
        mode = "w" if force else "x"
        try:
            with target.open(mode, encoding="utf-8", newline="\n") as f:
                f.write(content)
        except FileExistsError as e:
            raise ResourceConflictError(path=target) from e

        logger.info(f"Wrote FastHenry input file '{target}' ({len(self.model.nodes)} nodes, "
                    f"{len(self.model.segments)} segments, {len(self.model.ports)} ports).")
        return target

    # --- Line formatting ---

    @staticmethod
    def _node_line(node: SpatialNode) -> str:
        c = node.coordinate
        return f"{node.label} x={format_number(c.x)} y={format_number(c.y)} z={format_number(c.z)}"

    @staticmethod
    def _segment_line(segment: Segment) -> str:
        fields = [
            f"E{segment.index}",
            f"N{segment.sn1}",
            f"N{segment.sn2}",
            f"w={format_number(segment.w)}",
            f"h={format_number(segment.h)}",
            f"{segment.material.keyword}={format_number(segment.material.value)}",
        ]
        if segment.extension is not None:
            ext = segment.extension
            fields.extend([f"wx={format_number(ext.x)}", f"wy={format_number(ext.y)}", f"wz={format_number(ext.z)}"])
        for name in ("nhinc", "nwinc", "rh", "rw"):
            value = getattr(segment, name)
            if value is not None:
                fields.append(f"{name}={format_number(value)}")
        return " ".join(fields)

    @staticmethod
    def _equiv_line(group: EquivalenceGroup) -> str:
        return " ".join([".Equiv"] + [f"N{index}" for index in group.members])

    @staticmethod
    def _freq_line(sweep: FrequencySweep) -> str:
        line = f".freq fmin={format_number(sweep.fmin)} fmax={format_number(sweep.fmax)}"
        if sweep.ndec is not None:
            line += f" ndec={format_number(sweep.ndec)}"
        return line
