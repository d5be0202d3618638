"""
Net flows: opposing flows between two categories collapse into one link.

1. Cancel every A->B / B->A pair down to the dominant direction carrying
   |v(A->B) - v(B->A)|. Equal pairs disappear entirely.
2. Build a graph from the surviving positive flows.
3. Cancellation only removes 2-cycles, so longer loops (A->B->C->A) are broken
   by removing the weakest edge of each detected cycle until none remain.
4. Node values are recomputed from surviving links; nodes left without links
   are dropped.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from loguru import logger

from ..config import EngineConfig
from ..core.aggregation import aggregate_by_level
from ..core.graph import build_flow_graph
from ..graph.cycle_breaker import break_cycles
from ..graph.cycle_detector import has_cycle
from ..models import (
    AggregationLevel, Flow, NetworkData, SankeyLink, SankeyNode, TransformResult, ValueType
)
from .result import assemble_result


def cancel_opposing_flows(flows: List[Flow]) -> Dict[Tuple[str, str], float]:
    """Returns (source, target) -> net value; at most one direction per category pair."""
    net_flows: Dict[Tuple[str, str], float] = {}

    for flow in flows:
        forward = (flow.source, flow.target)
        reverse = (flow.target, flow.source)

        if reverse not in net_flows:
            net_flows[forward] = flow.value
            continue

        net_value = flow.value - net_flows[reverse]
        if net_value > 0:
            del net_flows[reverse]
            net_flows[forward] = net_value
        elif net_value < 0:
            net_flows[reverse] = -net_value
        else:
            del net_flows[reverse]

    return net_flows


def create_net_flows(
    network: NetworkData,
    level: AggregationLevel,
    value_type: ValueType = ValueType.SUM,
    engine_config: Optional[EngineConfig] = None,
) -> TransformResult:
    level = AggregationLevel(level)
    value_type = ValueType(value_type)
    engine_config = engine_config or EngineConfig()
    flows = aggregate_by_level(network, level, value_type, engine_config.max_transfer_details)

    G = build_flow_graph(cancel_opposing_flows(flows))

    has_cycles = has_cycle(G)
    if has_cycles:
        report = break_cycles(G, engine_config.max_break_iterations)
        logger.info(
            f"Removed {len(report.removed_edges)} edge(s) to break cycles "
            f"({report.discarded_value} {value_type.value} discarded)"
        )

    links = [
        SankeyLink(source=source, target=target, value=data["value"])
        for source, target, data in G.edges(data=True)
    ]

    node_values: Dict[str, float] = defaultdict(float)
    for link in links:
        node_values[link.source] += link.value
        node_values[link.target] += link.value

    nodes = [
        SankeyNode(id=name, name=name, category=level.value, value=node_values[name])
        for name in G.nodes()
        if G.degree(name) > 0
    ]

    return assemble_result(network, nodes, links, has_cycles=has_cycles)
