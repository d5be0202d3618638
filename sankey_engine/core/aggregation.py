"""
Flow aggregation: re-buckets club-to-club edges into category-to-category
flows under a chosen metric.

  sum   -> adds each edge's precomputed stats.totalValue
  count -> adds each edge's precomputed stats.transferCount
           (len(transfers) when the edge carries no count)

Edges whose endpoints are missing from the node list are skipped, and so are
edges whose endpoints fall into the same category. Zero-value flows are kept;
dropping them is up to the flow builders.
"""
from typing import Dict, List, Optional, Tuple

from loguru import logger

from ..models import (
    AggregationLevel, Flow, NetworkData, NetworkEdge, TransferDetail, ValueType
)
from .categories import extract_category


def edge_value(edge: NetworkEdge, value_type: ValueType) -> float:
    if value_type == ValueType.COUNT:
        if edge.stats is not None and edge.stats.transfer_count is not None:
            return edge.stats.transfer_count
        return len(edge.transfers)
    return edge.stats.total_value if edge.stats is not None else 0.0


def aggregate_by_level(
    network: NetworkData,
    level: AggregationLevel,
    value_type: ValueType = ValueType.SUM,
    max_transfer_details: Optional[int] = None,
) -> List[Flow]:
    """
    Returns one Flow per ordered (source category, target category) pair, in
    the order the pairs were first seen.
    """
    flows: Dict[Tuple[str, str], Flow] = {}
    node_map = {node.id: node for node in network.nodes}
    skipped = 0

    for edge in network.edges:
        source_node = node_map.get(edge.source)
        target_node = node_map.get(edge.target)
        if source_node is None or target_node is None:
            skipped += 1
            continue

        source_category = extract_category(source_node, level)
        target_category = extract_category(target_node, level)
        if source_category == target_category:
            continue

        key = (source_category, target_category)
        flow = flows.get(key)
        if flow is None:
            flow = flows[key] = Flow(source=source_category, target=target_category)

        flow.value += edge_value(edge, value_type)

        for transfer in edge.transfers:
            if max_transfer_details is not None and len(flow.transfers) >= max_transfer_details:
                break
            flow.transfers.append(TransferDetail(
                player_name=transfer.player_name,
                transfer_fee=transfer.transfer_fee,
                date=transfer.date,
                season=transfer.season,
                transfer_window=transfer.transfer_window,
            ))

    if skipped:
        logger.debug(f"Skipped {skipped} edge(s) with dangling endpoints")

    return list(flows.values())
