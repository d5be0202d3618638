"""
Display filters layered on top of an engine result: minimum link value,
self-loop visibility, and pruning of nodes no surviving link touches.

Stats are left as the engine produced them.
"""
from typing import Optional

from .models import TransformResult


def apply_display_filters(
    result: TransformResult,
    minimum_flow_value: Optional[float] = None,
    show_self_loops: bool = False,
) -> TransformResult:
    links = result.links
    if minimum_flow_value:
        links = [link for link in links if link.value >= minimum_flow_value]
    if not show_self_loops:
        links = [link for link in links if link.source != link.target]

    connected = set()
    for link in links:
        connected.add(link.source)
        connected.add(link.target)

    nodes = [node for node in result.nodes if node.id in connected]
    return result.model_copy(update={"nodes": nodes, "links": links})
