# src/fasthenry_builder/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# The parser's output: the structurally validated content of one description
# file. Per-segment semantics are checked later by InputModel itself.

@dataclass(frozen=True)
class ParsedNetworkDescription:
    """Structurally validated content of a YAML network description."""
    unit: str
    source_yaml_path: Path
    raw_segments: List[Dict[str, Any]] = field(default_factory=list)
    raw_ports: Optional[List[List[str]]] = None
    raw_frequency: Optional[Dict[str, Any]] = None
