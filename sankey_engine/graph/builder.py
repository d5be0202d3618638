"""
Network builder: parses tabular transfer records and constructs the club
network the flow engine consumes.

One node per club, one edge per (from club, to club) pair carrying the
individual transfers and precomputed stats. Rows without a from_club (free
agents, academy promotions) only register the destination club.
"""
import io
from typing import Dict, Optional, Tuple

import pandas as pd

from ..core.utils import slugify
from ..models import EdgeStats, NetworkData, NetworkEdge, NetworkNode, TransferInfo


REQUIRED_COLUMNS = {"player_name", "from_club", "to_club", "fee", "date"}

TEXT_COLUMNS = [
    "player_name", "from_club", "to_club",
    "from_league", "from_country", "from_continent",
    "to_league", "to_country", "to_continent",
    "season", "transfer_window", "transfer_type", "position",
]


def _clean_text(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    value = str(value).strip()
    return value or None


def normalize_transfers(df: pd.DataFrame) -> pd.DataFrame:
    """Validate columns, coerce types and drop rows that cannot form a transfer."""
    df = df.copy()
    df.columns = df.columns.str.strip()
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"CSV missing required columns: {sorted(missing)}")

    for column in TEXT_COLUMNS:
        if column not in df.columns:
            df[column] = None
        df[column] = df[column].map(_clean_text).astype(object)

    if "player_age" not in df.columns:
        df["player_age"] = None
    df["fee"] = pd.to_numeric(df["fee"], errors="coerce")
    df["player_age"] = pd.to_numeric(df["player_age"], errors="coerce")
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df = df.dropna(subset=["player_name", "to_club", "date"])
    return df.sort_values("date", kind="stable").reset_index(drop=True)


def parse_transfers_csv(file_content: bytes) -> pd.DataFrame:
    """Parse CSV bytes into a cleaned transfer DataFrame."""
    df = pd.read_csv(io.BytesIO(file_content))
    return normalize_transfers(df)


def build_network(df: pd.DataFrame) -> NetworkData:
    """
    Build the club network from a normalized transfer DataFrame.
    Fees of zero or missing are recorded as null (free transfers / undisclosed).
    """
    nodes: Dict[str, NetworkNode] = {}
    edges: Dict[Tuple[str, str], NetworkEdge] = {}
    used_ids = set()

    def ensure_node(club: str, league, country, continent) -> str:
        node = nodes.get(club)
        if node is None:
            node_id = f"club_{slugify(club)}"
            suffix = 2
            while node_id in used_ids:
                node_id = f"club_{slugify(club)}_{suffix}"
                suffix += 1
            used_ids.add(node_id)
            node = nodes[club] = NetworkNode(
                id=node_id, name=club, league=league, country=country, continent=continent
            )
        return node.id

    for row in df.itertuples(index=False):
        target_id = ensure_node(row.to_club, row.to_league, row.to_country, row.to_continent)
        if row.from_club is None:
            continue
        source_id = ensure_node(row.from_club, row.from_league, row.from_country, row.from_continent)

        key = (source_id, target_id)
        edge = edges.get(key)
        if edge is None:
            edge = edges[key] = NetworkEdge(
                id=f"{source_id}-{target_id}",
                source=source_id,
                target=target_id,
                stats=EdgeStats(transfer_count=0),
            )

        fee = None if pd.isna(row.fee) or row.fee == 0 else float(row.fee)
        edge.transfers.append(TransferInfo(
            id=len(edge.transfers) + 1,
            player_name=row.player_name,
            transfer_fee=fee,
            transfer_type=row.transfer_type,
            transfer_window=row.transfer_window,
            date=row.date.strftime("%Y-%m-%d"),
            season=row.season,
            position=row.position,
            player_age=None if pd.isna(row.player_age) else int(row.player_age),
        ))

        stats = edge.stats
        stats.transfer_count += 1
        stats.total_value += fee or 0.0
        if row.transfer_type and row.transfer_type not in stats.types:
            stats.types.append(row.transfer_type)
        if row.season and row.season not in stats.seasons:
            stats.seasons.append(row.season)
        if row.transfer_window and row.transfer_window not in stats.transfer_windows:
            stats.transfer_windows.append(row.transfer_window)

    for edge in edges.values():
        if edge.stats.transfer_count > 0:
            edge.stats.avg_transfer_value = edge.stats.total_value / edge.stats.transfer_count

    return NetworkData(nodes=list(nodes.values()), edges=list(edges.values()))


def build_network_from_csv(file_content: bytes) -> NetworkData:
    return build_network(parse_transfers_csv(file_content))
