"""
Sankey strategies: the named (aggregation level x flow type) presets a client
can pick from. `net_league` is the default.
"""
from typing import List, Optional, Union

from .config import SankeyConfig
from .models import (
    AggregationLevel, CamelModel, FlowType, NetworkData, TransformResult, ValueType
)
from .orchestrator import transform_network_to_sankey


class Strategy(CamelModel):
    id: str
    name: str
    description: str
    aggregation_level: AggregationLevel
    flow_type: FlowType

    def transform(
        self,
        network: Union[NetworkData, dict],
        value_type: ValueType = ValueType.SUM,
        config: Optional[SankeyConfig] = None,
    ) -> TransformResult:
        return transform_network_to_sankey(
            network, self.aggregation_level, self.flow_type, value_type, config
        )


_DESCRIPTIONS = {
    (FlowType.BIDIRECTIONAL, AggregationLevel.CLUB):
        "Shows club-to-club transfers as separate incoming and outgoing flows (A→B and B→A separately)",
    (FlowType.NET, AggregationLevel.CLUB):
        "Shows club-to-club transfers as net flows (A↔B combined, showing only net difference)",
}


def _build_strategies() -> List[Strategy]:
    strategies = []
    for level in AggregationLevel:
        for flow_type in (FlowType.BIDIRECTIONAL, FlowType.NET):
            if flow_type is FlowType.BIDIRECTIONAL:
                default_description = (
                    f"Shows {level.value}-to-{level.value} transfers as separate "
                    "incoming and outgoing flows"
                )
            else:
                default_description = (
                    f"Shows {level.value}-to-{level.value} transfers as net flows "
                    "(combined bidirectional flows)"
                )
            strategies.append(Strategy(
                id=f"{flow_type.value}_{level.value}",
                name=f"{flow_type.value.capitalize()} {level.value.capitalize()} Flows",
                description=_DESCRIPTIONS.get((flow_type, level), default_description),
                aggregation_level=level,
                flow_type=flow_type,
            ))
    return strategies


SANKEY_STRATEGIES: List[Strategy] = _build_strategies()


def get_strategy_by_id(strategy_id: str) -> Optional[Strategy]:
    return next((s for s in SANKEY_STRATEGIES if s.id == strategy_id), None)


def get_strategies_by_level(level: AggregationLevel) -> List[Strategy]:
    return [s for s in SANKEY_STRATEGIES if s.aggregation_level == level]


def get_strategies_by_flow_type(flow_type: FlowType) -> List[Strategy]:
    return [s for s in SANKEY_STRATEGIES if s.flow_type == flow_type]


DEFAULT_STRATEGY = get_strategy_by_id("net_league")
