# tests/test_network_validator.py
import pytest

from fasthenry_builder import (
    InputModel, NetworkValidator, ValidationIssueLevel, CapabilityError, ReferentialIntegrityError,
)
from fasthenry_builder.validation import has_errors

from conftest import make_segment


def _codes(issues):
    return [issue.code for issue in issues]


def test_complete_model_has_no_issues(wire_model):
    issues = NetworkValidator(wire_model).validate()
    assert issues == []
    assert not has_errors(issues)


def test_empty_model_reports_everything_missing(mm_model):
    issues = NetworkValidator(mm_model).validate()
    assert _codes(issues) == ["NETWORK_EMPTY", "PORTS_UNDEFINED", "SWEEP_UNDEFINED"]
    assert [i.level for i in issues] == [
        ValidationIssueLevel.WARNING, ValidationIssueLevel.ERROR, ValidationIssueLevel.ERROR,
    ]
    assert has_errors(issues)


def test_empty_port_list_is_only_a_warning(wire_model):
    wire_model.set_ports([])
    issues = NetworkValidator(wire_model).validate()
    assert _codes(issues) == ["PORTS_EMPTY"]
    assert not has_errors(issues)


def test_port_on_unknown_node_is_an_error(wire_model):
    wire_model.set_ports([["A", "B"], ["A", "Z"]])
    issues = NetworkValidator(wire_model).validate()
    assert _codes(issues) == ["PORT_NODE_UNDEFINED"]
    assert issues[0].port_index == 2
    assert issues[0].node_name == "Z"
    assert "Port: 2" in str(issues[0])


def test_unknown_node_is_reported_once_per_port(wire_model):
    wire_model.set_ports([["Z", "Z"], ["X", "Y"]])
    issues = NetworkValidator(wire_model).validate()
    assert [(i.port_index, i.node_name) for i in issues] == [(1, "Z"), (2, "X"), (2, "Y")]


def test_shorted_port_is_a_warning(wire_model):
    wire_model.set_ports([["B", "B"]])
    issues = NetworkValidator(wire_model).validate()
    assert _codes(issues) == ["PORT_SHORTED"]
    assert issues[0].level == ValidationIssueLevel.WARNING


def test_port_between_disconnected_conductors_is_a_warning(mm_model):
    mm_model.add_segment(make_segment(sn1=(0, 0, 0), sn2=(0, 1, 0), en1="A", en2="B"))
    mm_model.add_segment(make_segment(sn1=(5, 0, 0), sn2=(5, 1, 0), en1="C", en2="D"))
    mm_model.set_ports([["A", "B"], ["A", "C"]])
    mm_model.set_frequency(1, 10)
    issues = NetworkValidator(mm_model).validate()
    assert _codes(issues) == ["PORT_NO_PATH"]
    assert issues[0].port_index == 2
    assert issues[0].details == {"port_index": 2, "en1": "A", "en2": "C"}


def test_path_through_shared_electrical_node_counts_as_connected(mm_model):
    # The two conductors only meet through the shared name "mid".
    mm_model.add_segment(make_segment(sn1=(0, 0, 0), sn2=(0, 1, 0), en1="A", en2="mid"))
    mm_model.add_segment(make_segment(sn1=(5, 0, 0), sn2=(5, 1, 0), en1="mid", en2="D"))
    mm_model.set_ports([["A", "D"]])
    mm_model.set_frequency(1, 10)
    assert NetworkValidator(mm_model).validate() == []


def test_renamed_node_no_longer_satisfies_a_port(wire_model):
    # Reusing the first endpoint under a new name replaces "A" everywhere.
    wire_model.add_segment(make_segment(sn2={"x": 0, "y": -5, "z": 0}, en1="A2", en2="C"))
    issues = NetworkValidator(wire_model).validate()
    assert _codes(issues) == ["PORT_NODE_UNDEFINED"]
    assert issues[0].node_name == "A"


def test_validate_reflects_current_state(mm_model):
    validator = NetworkValidator(mm_model)
    assert has_errors(validator.validate())
    mm_model.add_segment(make_segment())
    mm_model.set_ports([["A", "B"]])
    mm_model.set_frequency(10, 100)
    assert validator.validate() == []


def test_validator_requires_an_input_model():
    with pytest.raises(CapabilityError):
        NetworkValidator(None)


def test_referential_integrity_error_keeps_only_errors(mm_model):
    issues = NetworkValidator(mm_model).validate()
    error = ReferentialIntegrityError(issues)
    assert error.codes == ["PORTS_UNDEFINED", "SWEEP_UNDEFINED"]
    report = error.get_diagnostic_report()
    assert "Issue Code:     PORTS_UNDEFINED" in report
    assert "NETWORK_EMPTY" not in report
