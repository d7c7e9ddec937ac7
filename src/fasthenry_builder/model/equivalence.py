# src/fasthenry_builder/model/equivalence.py
import logging
from typing import Dict, Iterable, List

from ..data_structures import EquivalenceGroup, SpatialNode

logger = logging.getLogger(__name__)


def group_equivalent_nodes(nodes: Iterable[SpatialNode]) -> List[EquivalenceGroup]:
    """
    Groups spatial nodes by their electrical node name.

    Nodes are scanned in ascending index order; groups appear in the order their
    name is first met during that scan, and members keep the scan order, so the
    first member of each group is its lowest-indexed node.
    """
    members: Dict[str, List[int]] = {}
    for node in sorted(nodes, key=lambda n: n.index):
        members.setdefault(node.electrical_node, []).append(node.index)
    groups = [EquivalenceGroup(name=name, members=tuple(indices)) for name, indices in members.items()]
    logger.debug(f"Grouped spatial nodes into {len(groups)} electrical node(s).")
    return groups
