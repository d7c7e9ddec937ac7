# src/fasthenry_builder/validation/network_validator.py
import logging
from typing import List, Optional

import networkx as nx

from ..data_structures import EquivalenceGroup
from ..issue_codes import IssueCode
from ..model import InputModel, CapabilityError
from .issues import ValidationIssue, ValidationIssueLevel

logger = logging.getLogger(__name__)


class NetworkValidator:
    """
    Checks that an input model can be serialized and flags likely mistakes.

    Errors are conditions under which no valid input file exists: ports or sweep
    never set, or a port naming an electrical node that no segment uses. Warnings
    point at files FastHenry will accept but which are probably not what the
    author meant, such as a port whose terminals no conductor path connects.

    The validator only reads the model; `validate()` can be called any number
    of times and always reflects the model's current state.
    """

    def __init__(self, model: InputModel):
        if not isinstance(model, InputModel):
            raise CapabilityError("NetworkValidator", model)
        self.model = model
        self.issues: List[ValidationIssue] = []

    def validate(self) -> List[ValidationIssue]:
        """
        Runs all checks and returns every issue found (errors, warnings and info).
        The caller decides whether ERROR issues stop the operation.
        """
        self.issues = []
        groups = self.model.equivalence_groups()

        if not self.model.segments:
            self._add_issue(ValidationIssueLevel.WARNING, IssueCode.NETWORK_EMPTY)
        self._check_ports(groups)
        if self.model.sweep is None:
            self._add_issue(ValidationIssueLevel.ERROR, IssueCode.SWEEP_UNDEFINED)

        if self.issues:
            errors = sum(1 for i in self.issues if i.level == ValidationIssueLevel.ERROR)
            warnings = sum(1 for i in self.issues if i.level == ValidationIssueLevel.WARNING)
            logger.info(f"Network validation complete. Found: {errors} errors, {warnings} warnings.")
        else:
            logger.debug("Network validation complete with no issues found.")
        return self.issues

    def _add_issue(self, level: ValidationIssueLevel, code_enum: IssueCode, **kwargs):
        self.issues.append(ValidationIssue(
            level=level,
            code=code_enum.code,
            message=code_enum.format_message(**kwargs),
            port_index=kwargs.get('port_index'),
            node_name=kwargs.get('node_name'),
            details=kwargs,
        ))

    def _check_ports(self, groups: List[EquivalenceGroup]):
        ports = self.model.ports
        if ports is None:
            self._add_issue(ValidationIssueLevel.ERROR, IssueCode.PORTS_UNDEFINED)
            return
        if not ports:
            self._add_issue(ValidationIssueLevel.WARNING, IssueCode.PORTS_EMPTY)
            return

        known_nodes = {group.name for group in groups}
        graph: Optional[nx.Graph] = None
        for port_index, port in enumerate(ports, start=1):
            undefined = [name for name in (port.en1, port.en2) if name not in known_nodes]
            for name in dict.fromkeys(undefined):
                self._add_issue(ValidationIssueLevel.ERROR, IssueCode.PORT_NODE_UNDEFINED,
                                port_index=port_index, node_name=name)
            if undefined:
                continue

            if port.en1 == port.en2:
                self._add_issue(ValidationIssueLevel.WARNING, IssueCode.PORT_SHORTED,
                                port_index=port_index, node_name=port.en1)
                continue

            if graph is None:
                graph = self._build_conductor_graph(known_nodes)
            if not nx.has_path(graph, port.en1, port.en2):
                self._add_issue(ValidationIssueLevel.WARNING, IssueCode.PORT_NO_PATH,
                                port_index=port_index, en1=port.en1, en2=port.en2)

    def _build_conductor_graph(self, known_nodes: set) -> nx.Graph:
        """
        Builds the graph of electrical nodes joined by segments. Each segment links
        the names its two spatial nodes carry now, which are the names the
        `.Equiv` statements of the written file will use.
        """
        graph = nx.Graph()
        graph.add_nodes_from(known_nodes)
        for segment in self.model.segments:
            graph.add_edge(
                self.model.node(segment.sn1).electrical_node,
                self.model.node(segment.sn2).electrical_node,
            )
        return graph


def has_errors(issues: List[ValidationIssue]) -> bool:
    return any(issue.level == ValidationIssueLevel.ERROR for issue in issues)
