from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class AggregationLevel(str, Enum):
    CLUB = "club"
    LEAGUE = "league"
    COUNTRY = "country"
    CONTINENT = "continent"


class FlowType(str, Enum):
    BIDIRECTIONAL = "bidirectional"
    NET = "net"


class ValueType(str, Enum):
    SUM = "sum"
    COUNT = "count"


class CamelModel(BaseModel):
    """Accepts and emits the camelCase field names used on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Input network ─────────────────────────────────────────────────────────────

class TransferInfo(CamelModel):
    id: Optional[int] = None
    player_name: str
    transfer_fee: Optional[float] = None
    transfer_type: Optional[str] = None
    transfer_window: Optional[str] = None
    date: Optional[str] = None
    season: Optional[str] = None
    position: Optional[str] = None
    player_age: Optional[int] = None

class EdgeStats(CamelModel):
    total_value: float = 0.0
    transfer_count: Optional[int] = None
    avg_transfer_value: float = 0.0
    types: List[str] = Field(default_factory=list)
    seasons: List[str] = Field(default_factory=list)
    transfer_windows: List[str] = Field(default_factory=list)
    success_rate: Optional[float] = None

class NetworkNode(CamelModel):
    id: str
    name: str
    league: Optional[str] = None
    country: Optional[str] = None
    continent: Optional[str] = None
    league_tier: Optional[int] = None

class NetworkEdge(CamelModel):
    id: Optional[str] = None
    source: str
    target: str
    transfers: List[TransferInfo] = Field(default_factory=list)
    stats: Optional[EdgeStats] = None

class NetworkData(CamelModel):
    nodes: List[NetworkNode] = Field(default_factory=list)
    edges: List[NetworkEdge] = Field(default_factory=list)


# ── Intermediate flows ────────────────────────────────────────────────────────

class TransferDetail(CamelModel):
    player_name: str
    transfer_fee: Optional[float] = None
    date: Optional[str] = None
    season: Optional[str] = None
    transfer_window: Optional[str] = None

class Flow(CamelModel):
    source: str
    target: str
    value: float = 0.0
    transfers: List[TransferDetail] = Field(default_factory=list)


# ── Sankey output ─────────────────────────────────────────────────────────────

class SankeyNode(CamelModel):
    id: str
    name: str
    category: str
    value: float

class SankeyLink(CamelModel):
    source: str
    target: str
    value: float

class TransformStats(CamelModel):
    original_node_count: int
    original_link_count: int
    transformed_node_count: int
    transformed_link_count: int
    total_value: float
    has_cycles: bool

class TransformResult(CamelModel):
    nodes: List[SankeyNode]
    links: List[SankeyLink]
    stats: TransformStats


# ── Cycle breaking ────────────────────────────────────────────────────────────

class RemovedEdge(CamelModel):
    source: str
    target: str
    value: float
    cycle: List[str]

class BreakReport(CamelModel):
    removed_edges: List[RemovedEdge] = Field(default_factory=list)
    iterations: int = 0
    discarded_value: float = 0.0


# ── Inspection ────────────────────────────────────────────────────────────────

class TopTransfer(CamelModel):
    player_name: str
    fee: float
    date: Optional[str] = None

class FlowSummary(CamelModel):
    source: str
    target: str
    transfer_count: int
    total_value: float
    avg_value: float
    top_transfer: Optional[TopTransfer] = None
    transfer_types: List[str]

class CategorySummary(CamelModel):
    category: str
    level: AggregationLevel
    transfers_in: int
    transfers_out: int
    total_spent: float
    total_received: float
    net_spend: float
    avg_transfer_value: float


# ── API payloads ──────────────────────────────────────────────────────────────

class StrategyPreview(CamelModel):
    strategy_id: str
    node_count: int
    link_count: int
    total_value: float
    has_data: bool
    has_cycles: bool

class FlowInspectionRequest(CamelModel):
    network: NetworkData
    source: str
    target: str
    level: AggregationLevel = AggregationLevel.LEAGUE

class CategoryInspectionRequest(CamelModel):
    network: NetworkData
    category: str
    level: AggregationLevel = AggregationLevel.LEAGUE
