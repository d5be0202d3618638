"""
Bidirectional flows: A->B and B->A stay separate links.

Every flow runs from "{source} (Out)" to "{target} (In)". Out-nodes only ever
appear as link sources and In-nodes only as link targets, so the result is
acyclic by construction and no cycle detection is run.
"""
from typing import Dict, List, Optional

from ..config import EngineConfig
from ..core.aggregation import aggregate_by_level
from ..models import (
    AggregationLevel, NetworkData, SankeyLink, SankeyNode, TransformResult, ValueType
)
from .result import assemble_result

OUT_SUFFIX = " (Out)"
IN_SUFFIX = " (In)"


def create_bidirectional_flows(
    network: NetworkData,
    level: AggregationLevel,
    value_type: ValueType = ValueType.SUM,
    engine_config: Optional[EngineConfig] = None,
) -> TransformResult:
    level = AggregationLevel(level)
    value_type = ValueType(value_type)
    engine_config = engine_config or EngineConfig()
    flows = aggregate_by_level(network, level, value_type, engine_config.max_transfer_details)

    nodes: Dict[str, SankeyNode] = {}
    links: List[SankeyLink] = []

    for flow in flows:
        # Links must carry a positive value
        if flow.value <= 0:
            continue

        source_out_id = f"{flow.source}{OUT_SUFFIX}"
        target_in_id = f"{flow.target}{IN_SUFFIX}"

        if source_out_id not in nodes:
            nodes[source_out_id] = SankeyNode(
                id=source_out_id, name=flow.source, category=f"{level.value}_out", value=0.0
            )
        if target_in_id not in nodes:
            nodes[target_in_id] = SankeyNode(
                id=target_in_id, name=flow.target, category=f"{level.value}_in", value=0.0
            )

        nodes[source_out_id].value += flow.value
        nodes[target_in_id].value += flow.value

        links.append(SankeyLink(source=source_out_id, target=target_in_id, value=flow.value))

    return assemble_result(network, list(nodes.values()), links, has_cycles=False)
