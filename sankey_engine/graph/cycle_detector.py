"""
Cycle detector: depth-first search for a directed cycle in a flow graph.

Keeps a `visited` set and an `on_stack` set (the current DFS path). An edge into
a node that is still on the stack closes a cycle. The search restarts from every
unvisited node, so graphs split into several components are fully covered, and
a node finished in one component can never be mistaken for part of a cycle in
another.

The traversal uses an explicit work stack of successor iterators rather than
recursion, so deep chains do not hit the interpreter recursion limit.
"""
import networkx as nx
from typing import Iterable, List, Optional, Tuple

from ..core.graph import graph_from_links
from ..models import SankeyLink, SankeyNode

Edge = Tuple[str, str]

_EXHAUSTED = object()


def find_cycle(G: nx.DiGraph) -> Optional[List[Edge]]:
    """
    Return the first cycle found as a list of edges, starting at the node that
    was revisited and ending with the closing edge back into it, e.g.
    [("A", "B"), ("B", "C"), ("C", "A")]. Returns None for an acyclic graph.
    """
    visited = set()
    on_stack = set()

    for root in G.nodes():
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        path = [root]
        work = [iter(G.successors(root))]

        while work:
            neighbor = next(work[-1], _EXHAUSTED)

            if neighbor is _EXHAUSTED:
                work.pop()
                on_stack.discard(path.pop())
                continue

            if neighbor in on_stack:
                members = path[path.index(neighbor):]
                edges = list(zip(members, members[1:]))
                edges.append((members[-1], neighbor))
                return edges

            if neighbor not in visited:
                visited.add(neighbor)
                on_stack.add(neighbor)
                path.append(neighbor)
                work.append(iter(G.successors(neighbor)))

    return None


def has_cycle(G: nx.DiGraph) -> bool:
    return find_cycle(G) is not None


def detect_cycles(nodes: Iterable[SankeyNode], links: Iterable[SankeyLink]) -> bool:
    """Cycle check over an assembled Sankey result's nodes and links."""
    return has_cycle(graph_from_links(nodes, links))
