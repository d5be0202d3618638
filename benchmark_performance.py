import random
import time

import networkx as nx
import numpy as np

from sankey_engine.core.utils import configure_logging
from sankey_engine.graph.cycle_breaker import break_cycles
from sankey_engine.models import (
    AggregationLevel, EdgeStats, FlowType, NetworkData, NetworkEdge, NetworkNode, TransferInfo, ValueType
)
from sankey_engine.orchestrator import transform_network_to_sankey


def generate_benchmark_network(num_clubs=2000, num_edges=20000, num_leagues=120):
    """
    Random club network: clubs spread across leagues/countries/continents with
    lognormal fees. Dense enough at league level that net flows contain many
    overlapping cycles.
    """
    print(f"Generating {num_clubs} clubs / {num_edges} edges...")
    continents = ["Europe", "South America", "Asia", "Africa", "North America", "Oceania"]
    countries = [f"Country {i}" for i in range(num_leagues // 2)]

    nodes = []
    for i in range(num_clubs):
        league = i % num_leagues
        country = league % len(countries)
        nodes.append(NetworkNode(
            id=f"club_{i}",
            name=f"Club {i}",
            league=f"League {league}",
            country=countries[country],
            continent=continents[country % len(continents)],
        ))

    pairs = set()
    while len(pairs) < num_edges:
        source, target = random.sample(range(num_clubs), 2)
        pairs.add((source, target))

    edges = []
    for source, target in pairs:
        fees = np.round(np.random.lognormal(14.5, 1.5, size=random.randint(1, 4)), -3)
        transfers = [
            TransferInfo(id=k + 1, player_name=f"P{source}-{target}-{k}", transfer_fee=float(fee))
            for k, fee in enumerate(fees)
        ]
        edges.append(NetworkEdge(
            id=f"club_{source}-club_{target}",
            source=f"club_{source}",
            target=f"club_{target}",
            transfers=transfers,
            stats=EdgeStats(total_value=float(fees.sum()), transfer_count=len(transfers)),
        ))

    return NetworkData(nodes=nodes, edges=edges)


def adversarial_graph(n=60):
    """Complete digraph with distinct weights: the worst case for repeated cycle breaking."""
    G = nx.DiGraph()
    weights = np.random.permutation(n * (n - 1)) + 1
    k = 0
    for u in range(n):
        for v in range(n):
            if u != v:
                G.add_edge(f"N{u}", f"N{v}", value=float(weights[k]))
                k += 1
    return G


def benchmark():
    configure_logging("WARNING")
    random.seed(7)
    np.random.seed(7)

    network = generate_benchmark_network()

    print("\n--- Strategy Timings ---")
    for level in AggregationLevel:
        for flow_type in FlowType:
            for value_type in ValueType:
                start_time = time.time()
                result = transform_network_to_sankey(network, level, flow_type, value_type)
                elapsed = time.time() - start_time
                print(
                    f"{flow_type.value:>13}/{level.value:<9}/{value_type.value:<5} "
                    f"{result.stats.transformed_node_count:>5} nodes "
                    f"{result.stats.transformed_link_count:>6} links "
                    f"cycles={str(result.stats.has_cycles):<5} {elapsed:.4f}s"
                )
                if not result.links and network.edges:
                    print("  -> Empty result! Check the log output.")

    print("\n--- Adversarial Cycle Breaking ---")
    G = adversarial_graph()
    edge_count = G.number_of_edges()
    start_time = time.time()
    report = break_cycles(G)
    elapsed = time.time() - start_time
    print(f"Edges: {edge_count}, removed: {report.iterations}, time: {elapsed:.4f}s")
    print(f"Acyclic: {nx.is_directed_acyclic_graph(G)}")


if __name__ == "__main__":
    benchmark()
