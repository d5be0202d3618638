"""
Cycle breaker: makes a net flow graph acyclic by repeatedly removing the
weakest edge of a detected cycle.

Each pass runs the DFS detector, takes the cycle it reports, and deletes the
minimum-value edge on that cycle (the first one along the cycle path on ties).
Every pass removes exactly one edge, so the loop ends after at most E passes.

This is a greedy approximation. It eliminates every cycle while discarding
little flow, but it does not compute a minimum feedback arc set: removing one
shared edge could sometimes break several cycles at a lower total cost than the
per-cycle choices made here.
"""
import networkx as nx
from loguru import logger
from typing import Optional

from ..exceptions import CycleResolutionError
from ..models import BreakReport, RemovedEdge
from .cycle_detector import find_cycle


def break_cycles(G: nx.DiGraph, max_iterations: Optional[int] = None) -> BreakReport:
    """
    Mutates G in place until it is a DAG. Edges must carry a `value` attribute.

    Raises CycleResolutionError if `max_iterations` passes were spent and a
    cycle is still present. Nodes left without edges are not removed here.
    """
    report = BreakReport()

    while True:
        cycle = find_cycle(G)
        if cycle is None:
            break

        if max_iterations is not None and report.iterations >= max_iterations:
            raise CycleResolutionError(report.iterations, [u for u, _ in cycle])

        source, target = min(cycle, key=lambda edge: G.edges[edge]["value"])
        value = G.edges[source, target]["value"]
        G.remove_edge(source, target)

        report.removed_edges.append(RemovedEdge(
            source=source,
            target=target,
            value=value,
            cycle=[u for u, _ in cycle],
        ))
        report.iterations += 1
        report.discarded_value += value
        logger.debug(
            f"Broke cycle {' -> '.join(str(u) for u, _ in cycle)} by removing "
            f"{source} -> {target} ({value})"
        )

    return report
