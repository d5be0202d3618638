"""
FastAPI router for Sankey transforms and strategy presets.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException

from ..config import config
from ..filters import apply_display_filters
from ..models import (
    AggregationLevel, FlowType, NetworkData, StrategyPreview, TransformResult, ValueType
)
from ..orchestrator import transform_network_to_sankey
from ..strategies import SANKEY_STRATEGIES, Strategy, get_strategy_by_id

router = APIRouter()


@router.post("/transform", response_model=TransformResult)
def transform(
    network: NetworkData,
    level: AggregationLevel = AggregationLevel.LEAGUE,
    flow_type: FlowType = FlowType.NET,
    value_type: Optional[ValueType] = None,
    minimum_flow_value: Optional[float] = None,
    show_self_loops: Optional[bool] = None,
):
    """
    Re-aggregate a club network into Sankey nodes/links.
    Display filters default to the configured values.
    """
    result = transform_network_to_sankey(network, level, flow_type, value_type)
    return apply_display_filters(
        result,
        minimum_flow_value=(
            minimum_flow_value if minimum_flow_value is not None
            else config.display.minimum_flow_value
        ),
        show_self_loops=(
            show_self_loops if show_self_loops is not None
            else config.display.show_self_loops
        ),
    )


@router.get("/strategies", response_model=List[Strategy])
def list_strategies():
    return SANKEY_STRATEGIES


@router.post("/strategies/{strategy_id}/preview", response_model=StrategyPreview)
def preview_strategy(
    strategy_id: str,
    network: NetworkData,
    value_type: ValueType = ValueType.SUM,
):
    strategy = get_strategy_by_id(strategy_id)
    if strategy is None:
        raise HTTPException(status_code=404, detail=f"Unknown strategy: {strategy_id}")

    result = strategy.transform(network, value_type)
    return StrategyPreview(
        strategy_id=strategy.id,
        node_count=len(result.nodes),
        link_count=len(result.links),
        total_value=result.stats.total_value,
        has_data=len(result.nodes) > 0,
        has_cycles=result.stats.has_cycles,
    )
