"""Shared fixtures: small transfer networks with known category flows."""

import pytest

from sankey_engine.models import (
    EdgeStats, NetworkData, NetworkEdge, NetworkNode, TransferInfo
)

M = 1_000_000.0


def make_edge(source, target, fees, total_value=None, transfer_count=None):
    """Edge with one transfer per fee; stats default to the fee total and count."""
    transfers = [
        TransferInfo(id=i + 1, player_name=f"{source}-{target}-{i}", transfer_fee=fee,
                     transfer_type="permanent", date="2024-07-01", season="2024/25")
        for i, fee in enumerate(fees)
    ]
    if total_value is None:
        total_value = sum(fee or 0.0 for fee in fees)
    return NetworkEdge(
        id=f"{source}-{target}",
        source=source,
        target=target,
        transfers=transfers,
        stats=EdgeStats(
            total_value=total_value,
            transfer_count=len(fees) if transfer_count is None else transfer_count,
        ),
    )


def _league_network(flows):
    """
    One club per league. `flows` maps (league_a, league_b) -> total value and
    becomes one single-transfer edge per entry, in order.
    """
    nodes = {}
    edges = []
    for (source_league, target_league), value in flows.items():
        for league in (source_league, target_league):
            if league not in nodes:
                nodes[league] = NetworkNode(id=f"club_{league}", name=f"{league} FC", league=league)
        edges.append(make_edge(f"club_{source_league}", f"club_{target_league}", [value]))
    return NetworkData(nodes=list(nodes.values()), edges=edges)


@pytest.fixture
def league_network():
    return _league_network


@pytest.fixture
def sample_network():
    """
    Seven clubs across four leagues plus one club with no metadata.

    League-level sum flows (in first-seen order):
        La Liga -> Premier League      80M
        Premier League -> La Liga      20M
        Brasileirão -> La Liga         20M
        Ligue 1 -> Premier League      60M
        Premier League -> Brasileirão   4M
        Unknown League -> Ligue 1       0
    Barcelona -> Real Madrid is internal to La Liga and the edge into
    club_ghost dangles.
    """
    nodes = [
        NetworkNode(id="club_rm", name="Real Madrid", league="La Liga", country="Spain", continent="Europe"),
        NetworkNode(id="club_mci", name="Manchester City", league="Premier League", country="England", continent="Europe"),
        NetworkNode(id="club_bar", name="Barcelona", league="La Liga", country="Spain", continent="Europe"),
        NetworkNode(id="club_fla", name="Flamengo", league="Brasileirão", country="Brazil", continent="South America"),
        NetworkNode(id="club_psg", name="Paris Saint-Germain", league="Ligue 1", country="France", continent="Europe"),
        NetworkNode(id="club_che", name="Chelsea", league="Premier League", country="England", continent="Europe"),
        NetworkNode(id="club_mys", name="Mystery FC"),
    ]
    edges = [
        make_edge("club_rm", "club_mci", [50 * M, 30 * M]),
        make_edge("club_mci", "club_rm", [20 * M]),
        make_edge("club_bar", "club_rm", [10 * M]),
        make_edge("club_fla", "club_rm", [15 * M, None, 5 * M]),
        make_edge("club_psg", "club_che", [60 * M]),
        make_edge("club_che", "club_fla", [4 * M]),
        make_edge("club_mys", "club_psg", [None]),
        make_edge("club_rm", "club_ghost", [5 * M]),
    ]
    return NetworkData(nodes=nodes, edges=edges)
