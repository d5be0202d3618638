import networkx as nx
from typing import Dict, Iterable, Tuple

from ..models import SankeyLink, SankeyNode


def build_flow_graph(net_flows: Dict[Tuple[str, str], float]) -> nx.DiGraph:
    """Builds a directed graph from (source, target) -> value, keeping value > 0 only."""
    G = nx.DiGraph()
    for (source, target), value in net_flows.items():
        if value <= 0:
            continue
        G.add_edge(source, target, value=value)
    return G


def graph_from_links(nodes: Iterable[SankeyNode], links: Iterable[SankeyLink]) -> nx.DiGraph:
    """Builds a directed graph from an assembled Sankey node/link list."""
    G = nx.DiGraph()
    # Add nodes first so isolated nodes are still visited
    G.add_nodes_from(node.id for node in nodes)
    for link in links:
        G.add_edge(link.source, link.target, value=link.value)
    return G
