# src/fasthenry_builder/model/input_model.py
"""
Defines the InputModel, the aggregate that collects everything a FastHenry input
file describes: the length unit, the deduplicated spatial nodes, the conductor
segments, the ports and the frequency sweep.

The model owns its state exclusively. Callers mutate it only through
`add_segment`, `set_ports` and `set_frequency`, and read it through immutable
snapshots (`nodes`, `segments`, `ports`, `sweep`). Every mutating operation
validates its arguments completely before touching any state, so a rejected
call leaves the model exactly as it was.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..data_structures import (
    Coordinate,
    EquivalenceGroup,
    FrequencySweep,
    Port,
    Segment,
    SpatialNode,
)
from ..issue_codes import IssueCode
from .equivalence import group_equivalent_nodes
from .exceptions import ArgumentShapeError
from .schema import validate_frequency, validate_ports, validate_segment_config, validate_unit

logger = logging.getLogger(__name__)


class CoordinateIndex:
    """
    Maps coordinates to 1-based spatial node indices.

    Matching is exact (numeric equality of all three components, no tolerance).
    Indices are handed out in order of first appearance and never change.
    """

    def __init__(self):
        self._index_by_key: Dict[Tuple[float, float, float], int] = {}
        self._coordinates: List[Coordinate] = []

    def __len__(self) -> int:
        return len(self._coordinates)

    def resolve(self, coordinate: Coordinate) -> Tuple[int, bool]:
        """Returns the index for `coordinate` and whether a new entry was created."""
        key = coordinate.as_tuple()
        if key in self._index_by_key:
            return self._index_by_key[key], False
        self._coordinates.append(coordinate)
        index = len(self._coordinates)
        self._index_by_key[key] = index
        return index, True


class InputModel:
    """
    The description of one FastHenry network.

    Example:
        model = InputModel("mm")
        model.add_segment(sn1=(0, 0, 0), sn2=(0, 1000, 0), en1="start", en2="end",
                          w=1, h=1, rho=1.68e-8)
        model.set_ports([("start", "end")])
        model.set_frequency(10, 1e8, ndec=0.5)
        model.write_file("wire.inp", force=True)
    """

    def __init__(self, unit: str):
        self._unit: str = validate_unit(unit)
        self._coordinate_index = CoordinateIndex()
        self._nodes: List[SpatialNode] = []
        self._segments: List[Segment] = []
        self._ports: Optional[Tuple[Port, ...]] = None
        self._sweep: Optional[FrequencySweep] = None
        logger.info(f"Created FastHenry input model with unit '{self._unit}'.")

    def __repr__(self) -> str:
        return (f"InputModel(unit={self._unit!r}, nodes={len(self._nodes)}, "
                f"segments={len(self._segments)}, ports={len(self._ports or ())})")

    # --- Read-only views ---

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def nodes(self) -> Tuple[SpatialNode, ...]:
        return tuple(self._nodes)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def ports(self) -> Optional[Tuple[Port, ...]]:
        """The registered ports, or None if ports were never set."""
        return self._ports

    @property
    def sweep(self) -> Optional[FrequencySweep]:
        return self._sweep

    def node(self, index: int) -> SpatialNode:
        """Returns the spatial node with the given 1-based index."""
        if not 1 <= index <= len(self._nodes):
            raise IndexError(f"No spatial node N{index}; the model has {len(self._nodes)} node(s).")
        return self._nodes[index - 1]

    def equivalence_groups(self) -> List[EquivalenceGroup]:
        return group_equivalent_nodes(self._nodes)

    # --- Builder operations ---

    def add_segment(self, config: Any = None, **fields: Any) -> Segment:
        """
        Adds a conductor segment.

        The segment is described either by `config` (a `SegmentConfig` or a mapping
        with the flat keys sn1, sn2, en1, en2, w, h, sigma|rho and the optional
        wx, wy, wz, nhinc, nwinc, rh, rw) or by the same keys passed as keyword
        arguments. Endpoint coordinates that match an existing node exactly are
        merged into it, and the node takes the electrical node name supplied here.

        Returns:
            The registered `Segment`, with endpoints resolved to node indices.

        Raises:
            ArgumentShapeError: if the configuration is malformed. The model is
                left unchanged.
        """
        if config is not None and fields:
            raise ArgumentShapeError(IssueCode.SEG_CONFIG_TYPE, received="both a configuration and keyword fields")
        if config is None:
            config = fields if fields else None
        seg_config = validate_segment_config(config)

        sn1 = self._merge_node(seg_config.sn1, seg_config.en1)
        sn2 = self._merge_node(seg_config.sn2, seg_config.en2)
        segment = Segment(
            index=len(self._segments) + 1,
            sn1=sn1,
            sn2=sn2,
            en1=seg_config.en1,
            en2=seg_config.en2,
            w=seg_config.w,
            h=seg_config.h,
            material=seg_config.material,
            extension=seg_config.extension,
            nhinc=seg_config.nhinc,
            nwinc=seg_config.nwinc,
            rh=seg_config.rh,
            rw=seg_config.rw,
        )
        self._segments.append(segment)
        logger.debug(f"Added segment E{segment.index}: N{sn1} ({segment.en1}) -> N{sn2} ({segment.en2}).")
        return segment

    def _merge_node(self, coordinate: Coordinate, electrical_node: str) -> int:
        index, created = self._coordinate_index.resolve(coordinate)
        node = SpatialNode(index=index, coordinate=coordinate, electrical_node=electrical_node)
        if created:
            self._nodes.append(node)
            logger.debug(f"Created spatial node N{index} at {coordinate.as_tuple()} ({electrical_node}).")
        else:
            previous = self._nodes[index - 1]
            if previous.electrical_node != electrical_node:
                logger.debug(f"Spatial node N{index} renamed from '{previous.electrical_node}' to '{electrical_node}'.")
            # The first coordinate seen for a node stays its position.
            self._nodes[index - 1] = SpatialNode(index, previous.coordinate, electrical_node)
        return index

    def set_ports(self, ports: Any) -> Tuple[Port, ...]:
        """
        Replaces the port list. `ports` is a sequence of (en1, en2) pairs of
        electrical node names. Whether the names exist is only checked when the
        file is written, since segments may still be added afterwards.
        """
        new_ports = validate_ports(ports)
        self._ports = new_ports
        logger.info(f"Registered {len(new_ports)} port(s).")
        return new_ports

    def set_frequency(self, fmin: Any, fmax: Any, ndec: Optional[Any] = None) -> FrequencySweep:
        """Replaces the frequency sweep. Frequencies are in Hz unless given with units."""
        sweep = validate_frequency(fmin, fmax, ndec)
        self._sweep = sweep
        logger.info(f"Frequency sweep set: fmin={sweep.fmin} Hz, fmax={sweep.fmax} Hz, ndec={sweep.ndec}.")
        return sweep

    # --- Serialization ---

    def to_text(self) -> str:
        """Renders the FastHenry input file without writing it."""
        from ..writer import InputFileWriter
        return InputFileWriter(self).render()

    def write_file(self, path: Union[str, Path], force: bool = False) -> Path:
        """
        Writes the FastHenry input file to `path`. An existing file is only
        replaced when `force` is true.
        """
        from ..writer import InputFileWriter
        return InputFileWriter(self).write(path, force=force)
