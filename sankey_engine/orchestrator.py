import time
from typing import Any, Optional, Tuple, Union

from loguru import logger

from .config import SankeyConfig, config as default_config
from .flows.bidirectional import create_bidirectional_flows
from .flows.net import create_net_flows
from .flows.result import empty_result
from .models import AggregationLevel, FlowType, NetworkData, TransformResult, ValueType


def _original_counts(network: Any) -> Tuple[int, int]:
    if isinstance(network, NetworkData):
        return len(network.nodes), len(network.edges)
    if isinstance(network, dict):
        nodes = network.get("nodes")
        edges = network.get("edges")
        return (
            len(nodes) if isinstance(nodes, list) else 0,
            len(edges) if isinstance(edges, list) else 0,
        )
    return 0, 0


def transform_network_to_sankey(
    network: Union[NetworkData, dict],
    level: AggregationLevel,
    flow_type: FlowType,
    value_type: Optional[ValueType] = None,
    config: Optional[SankeyConfig] = None,
) -> TransformResult:
    """
    Re-aggregates a club transfer network into a Sankey-ready category graph.

    Never raises: any failure (invalid input, unknown level, unresolved cycles)
    is logged and turned into an empty result that still reports the input's
    original node and edge counts.
    """
    start_time = time.time()
    config = config or default_config

    try:
        if not isinstance(network, NetworkData):
            network = NetworkData.model_validate(network)
        level = AggregationLevel(level)
        flow_type = FlowType(flow_type)
        value_type = ValueType(value_type or config.engine.default_value_type)

        if flow_type is FlowType.BIDIRECTIONAL:
            result = create_bidirectional_flows(network, level, value_type, config.engine)
        else:
            result = create_net_flows(network, level, value_type, config.engine)

    except Exception:
        logger.exception("Error transforming network data to Sankey")
        return empty_result(*_original_counts(network))

    logger.info(
        f"{flow_type.value}/{level.value}/{value_type.value}: "
        f"{result.stats.original_node_count} clubs, {result.stats.original_link_count} edges -> "
        f"{result.stats.transformed_node_count} nodes, {result.stats.transformed_link_count} links "
        f"in {time.time() - start_time:.4f}s"
    )
    return result
