from typing import List

from ..models import NetworkData, SankeyLink, SankeyNode, TransformResult, TransformStats


def assemble_result(
    network: NetworkData,
    nodes: List[SankeyNode],
    links: List[SankeyLink],
    has_cycles: bool,
) -> TransformResult:
    """Packages nodes/links with original vs. transformed counts and total link value."""
    return TransformResult(
        nodes=nodes,
        links=links,
        stats=TransformStats(
            original_node_count=len(network.nodes),
            original_link_count=len(network.edges),
            transformed_node_count=len(nodes),
            transformed_link_count=len(links),
            total_value=sum(link.value for link in links),
            has_cycles=has_cycles,
        ),
    )


def empty_result(original_node_count: int = 0, original_link_count: int = 0) -> TransformResult:
    return TransformResult(
        nodes=[],
        links=[],
        stats=TransformStats(
            original_node_count=original_node_count,
            original_link_count=original_link_count,
            transformed_node_count=0,
            transformed_link_count=0,
            total_value=0.0,
            has_cycles=False,
        ),
    )
