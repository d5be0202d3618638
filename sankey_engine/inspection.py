"""
Flow and category summaries over the raw club network: the numbers behind a
Sankey link or node tooltip.
"""
from typing import Optional

from .core.categories import extract_category
from .models import (
    AggregationLevel, CategorySummary, FlowSummary, NetworkData, TopTransfer
)


def summarize_flow(
    network: NetworkData,
    source_category: str,
    target_category: str,
    level: AggregationLevel,
) -> Optional[FlowSummary]:
    """Aggregate every club edge that maps onto source_category -> target_category."""
    node_map = {node.id: node for node in network.nodes}
    relevant_edges = []
    for edge in network.edges:
        source_node = node_map.get(edge.source)
        target_node = node_map.get(edge.target)
        if source_node is None or target_node is None:
            continue
        if (extract_category(source_node, level) == source_category
                and extract_category(target_node, level) == target_category):
            relevant_edges.append(edge)

    if not relevant_edges:
        return None

    total_value = 0.0
    transfer_count = 0
    transfer_types = []
    top = None

    for edge in relevant_edges:
        total_value += edge.stats.total_value if edge.stats else 0.0
        transfer_count += len(edge.transfers)
        for transfer in edge.transfers:
            if transfer.transfer_type and transfer.transfer_type not in transfer_types:
                transfer_types.append(transfer.transfer_type)
            fee = transfer.transfer_fee
            if fee is not None and fee > 0 and (top is None or fee > top.transfer_fee):
                top = transfer

    return FlowSummary(
        source=source_category,
        target=target_category,
        transfer_count=transfer_count,
        total_value=total_value,
        avg_value=total_value / transfer_count if transfer_count else 0.0,
        top_transfer=TopTransfer(
            player_name=top.player_name, fee=top.transfer_fee, date=top.date
        ) if top else None,
        transfer_types=transfer_types,
    )


def summarize_category(
    network: NetworkData,
    category: str,
    level: AggregationLevel,
) -> Optional[CategorySummary]:
    """
    In/out totals for every club in `category`. An edge between two clubs of the
    same category counts as both incoming and outgoing.
    """
    member_ids = {
        node.id for node in network.nodes if extract_category(node, level) == category
    }
    if not member_ids:
        return None

    transfers_in = transfers_out = total_transfers = 0
    total_spent = total_received = 0.0

    for edge in network.edges:
        incoming = edge.target in member_ids
        outgoing = edge.source in member_ids
        if not (incoming or outgoing):
            continue

        value = edge.stats.total_value if edge.stats else 0.0
        count = len(edge.transfers)
        if incoming:
            transfers_in += count
            total_spent += value
        if outgoing:
            transfers_out += count
            total_received += value
        total_transfers += count

    return CategorySummary(
        category=category,
        level=AggregationLevel(level),
        transfers_in=transfers_in,
        transfers_out=transfers_out,
        total_spent=total_spent,
        total_received=total_received,
        net_spend=total_spent - total_received,
        avg_transfer_value=(
            (total_spent + total_received) / total_transfers if total_transfers else 0.0
        ),
    )
