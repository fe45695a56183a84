"""
Race report for the shared-state scenarios.

Builds an interference graph from a scenario's calculations: an edge
``writer -> reader`` means the reader calculated with the value the writer
had put into the shared field. Correct calculations add no edges.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import networkx as nx

from .calculators import Calculation


@dataclass
class RaceReport:
    """Mismatches and interference found in one scenario run"""
    scenario: str
    calculations: List[Calculation]
    interference: nx.DiGraph = field(default_factory=nx.DiGraph)

    @property
    def mismatches(self) -> List[Calculation]:
        return [calc for calc in self.calculations if not calc.correct]

    @property
    def mismatch_rate(self) -> float:
        if not self.calculations:
            return 0.0
        return len(self.mismatches) / len(self.calculations)

    def overwritten_by(self) -> List[Tuple[str, int]]:
        """Writers ordered by how many other workers read their value."""
        writers = [(node, self.interference.out_degree(node))
                   for node in self.interference.nodes
                   if self.interference.out_degree(node) > 0]
        return sorted(writers, key=lambda item: (-item[1], item[0]))

    def summary(self) -> str:
        text = (f"{self.scenario}: {len(self.mismatches)} of {len(self.calculations)} "
                "calculations observed a foreign write")
        top = self.overwritten_by()
        if top:
            writer, readers = top[0]
            text += f" (most overwritten by {writer}, read by {readers} workers)"
        return text


def build_report(scenario: str, calculations: List[Optional[Calculation]]) -> RaceReport:
    """Create a RaceReport, linking each mismatch to the worker that caused it."""
    calculations = [calc for calc in calculations if calc is not None]
    report = RaceReport(scenario=scenario, calculations=calculations)

    writers: Dict[int, str] = {calc.intended: calc.label for calc in calculations}
    graph = report.interference
    graph.add_nodes_from(calc.label for calc in calculations)

    for calc in report.mismatches:
        writer = writers.get(calc.observed)
        if writer is not None and writer != calc.label:
            graph.add_edge(writer, calc.label, value=calc.observed)

    return report
