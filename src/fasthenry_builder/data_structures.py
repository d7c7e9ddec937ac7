# src/fasthenry_builder/data_structures.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A point in 3-D space, expressed in the model's declared length unit."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> Coordinate:
        """Reads the x, y and z entries of `mapping`; other entries are ignored."""
        return cls(mapping["x"], mapping["y"], mapping["z"])


@dataclass(frozen=True)
class Conductivity:
    value: float
    keyword: ClassVar[str] = "sigma"


@dataclass(frozen=True)
class Resistivity:
    value: float
    keyword: ClassVar[str] = "rho"


# A segment carries exactly one of the two material descriptions.
Material = Union[Conductivity, Resistivity]


@dataclass(frozen=True)
class SegmentConfig:
    """
    Typed configuration for a single conductor segment.

    `sn1`/`sn2` are the endpoint coordinates and `en1`/`en2` the electrical node
    names attached to them. `extension` is the (wx, wy, wz) vector that orients
    the segment's width; `nhinc`/`nwinc` override the number of filaments along
    height and width, and `rh`/`rw` the ratio between adjacent filaments.
    """
    sn1: Coordinate
    sn2: Coordinate
    en1: str
    en2: str
    w: float
    h: float
    material: Material
    extension: Optional[Coordinate] = None
    nhinc: Optional[int] = None
    nwinc: Optional[int] = None
    rh: Optional[float] = None
    rw: Optional[float] = None

    def to_mapping(self) -> Dict[str, Any]:
        """
        Flattens the record into the keyword layout used by the input file. The
        extension vector is passed through as-is under "extension".
        """
        mapping: Dict[str, Any] = {
            "sn1": self.sn1, "sn2": self.sn2,
            "en1": self.en1, "en2": self.en2,
            "w": self.w, "h": self.h,
        }
        if isinstance(self.material, (Conductivity, Resistivity)):
            mapping[self.material.keyword] = self.material.value
        if self.extension is not None:
            mapping["extension"] = self.extension
        for name in ("nhinc", "nwinc", "rh", "rw"):
            if (value := getattr(self, name)) is not None:
                mapping[name] = value
        return mapping

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> SegmentConfig:
        """
        Builds the record from an already validated flat mapping whose
        coordinates are {x, y, z} dictionaries.
        """
        material: Material = (
            Conductivity(mapping["sigma"]) if "sigma" in mapping else Resistivity(mapping["rho"])
        )
        extension = None
        if "wx" in mapping:
            extension = Coordinate(mapping["wx"], mapping["wy"], mapping["wz"])
        return cls(
            sn1=Coordinate.from_mapping(mapping["sn1"]),
            sn2=Coordinate.from_mapping(mapping["sn2"]),
            en1=mapping["en1"],
            en2=mapping["en2"],
            w=mapping["w"],
            h=mapping["h"],
            material=material,
            extension=extension,
            nhinc=mapping.get("nhinc"),
            nwinc=mapping.get("nwinc"),
            rh=mapping.get("rh"),
            rw=mapping.get("rw"),
        )


@dataclass(frozen=True)
class SpatialNode:
    """
    A deduplicated point in space. `index` is 1-based and fixed at creation;
    `electrical_node` is the name most recently attached to this coordinate.
    """
    index: int
    coordinate: Coordinate
    electrical_node: str

    @property
    def label(self) -> str:
        return f"N{self.index}"


@dataclass(frozen=True)
class Segment:
    """A registered segment, with its endpoints resolved to spatial node indices."""
    index: int
    sn1: int
    sn2: int
    en1: str
    en2: str
    w: float
    h: float
    material: Material
    extension: Optional[Coordinate] = None
    nhinc: Optional[int] = None
    nwinc: Optional[int] = None
    rh: Optional[float] = None
    rw: Optional[float] = None


@dataclass(frozen=True)
class Port:
    """A two-terminal measurement port between two electrical nodes."""
    en1: str
    en2: str


@dataclass(frozen=True)
class EquivalenceGroup:
    """Spatial nodes that share one electrical node name, in ascending index order."""
    name: str
    members: Tuple[int, ...]

    @property
    def representative(self) -> int:
        return self.members[0]


@dataclass(frozen=True)
class FrequencySweep:
    """Frequency range in Hz, with an optional number of points per decade."""
    fmin: float
    fmax: float
    ndec: Optional[float] = None

    def frequencies(self) -> np.ndarray:
        """
        Returns the frequencies FastHenry evaluates for this sweep: `fmin` stepped
        by a factor of 10**(1/ndec) while not exceeding `fmax`. Without `ndec`
        only the two end points are evaluated.
        """
        if self.ndec is None or self.fmin == self.fmax:
            return np.unique(np.array([self.fmin, self.fmax], dtype=float))
        if self.fmin <= 0:
            raise ValueError("A logarithmic frequency sweep requires fmin > 0.")
        decades = np.log10(self.fmax / self.fmin)
        # Guard against 10**k landing a hair above fmax through rounding.
        num_steps = int(np.floor(decades * self.ndec + 1e-9))
        return self.fmin * 10.0 ** (np.arange(num_steps + 1, dtype=float) / self.ndec)


