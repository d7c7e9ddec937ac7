# tests/test_equivalence.py
from fasthenry_builder import Coordinate, EquivalenceGroup, SpatialNode
from fasthenry_builder.model import group_equivalent_nodes

from conftest import make_segment


def _node(index, name):
    return SpatialNode(index=index, coordinate=Coordinate(index, 0, 0), electrical_node=name)


def test_nodes_are_grouped_by_electrical_node_name():
    nodes = [_node(1, "a"), _node(2, "b"), _node(3, "a"), _node(4, "c"), _node(5, "b")]
    assert group_equivalent_nodes(nodes) == [
        EquivalenceGroup("a", (1, 3)),
        EquivalenceGroup("b", (2, 5)),
        EquivalenceGroup("c", (4,)),
    ]


def test_grouping_follows_index_order_not_input_order():
    nodes = [_node(3, "x"), _node(2, "y"), _node(1, "x")]
    groups = group_equivalent_nodes(nodes)
    assert groups == [EquivalenceGroup("x", (1, 3)), EquivalenceGroup("y", (2,))]
    assert groups[0].representative == 1


def test_no_nodes_no_groups():
    assert group_equivalent_nodes([]) == []


def test_model_groups_follow_renames(mm_model):
    mm_model.add_segment(make_segment(sn1=(0, 0, 0), sn2=(0, 1, 0), en1="gnd", en2="sig"))
    mm_model.add_segment(make_segment(sn1=(1, 0, 0), sn2=(1, 1, 0), en1="gnd", en2="out"))
    mm_model.add_segment(make_segment(sn1=(0, 1, 0), sn2=(1, 1, 0), en1="out", en2="out"))
    groups = mm_model.equivalence_groups()
    assert groups == [EquivalenceGroup("gnd", (1, 3)), EquivalenceGroup("out", (2, 4))]
    # Every spatial node belongs to exactly one group.
    members = sorted(i for group in groups for i in group.members)
    assert members == [node.index for node in mm_model.nodes]
