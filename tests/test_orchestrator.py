"""Tests for the top-level transform entry point."""

import networkx as nx

from conftest import M
from sankey_engine.config import EngineConfig, SankeyConfig
from sankey_engine.models import AggregationLevel, FlowType, ValueType
from sankey_engine.orchestrator import transform_network_to_sankey


def _links(result):
    return {(link.source, link.target): link.value for link in result.links}


class TestTransformNetworkToSankey:
    def test_net_league(self, sample_network):
        result = transform_network_to_sankey(sample_network, AggregationLevel.LEAGUE, FlowType.NET)
        assert result.stats.total_value == 140 * M
        assert result.stats.has_cycles is True

    def test_bidirectional_league(self, sample_network):
        result = transform_network_to_sankey(
            sample_network, AggregationLevel.LEAGUE, FlowType.BIDIRECTIONAL
        )
        assert result.stats.total_value == 184 * M
        assert result.stats.has_cycles is False

    def test_accepts_camel_case_dict(self):
        network = {
            "nodes": [
                {"id": "club_a", "name": "A FC", "league": "A"},
                {"id": "club_b", "name": "B FC", "league": "B"},
            ],
            "edges": [{
                "id": "e1",
                "source": "club_a",
                "target": "club_b",
                "transfers": [{"playerName": "Someone", "transferFee": 12.5}],
                "stats": {"totalValue": 12.5, "transferCount": 1},
            }],
        }
        result = transform_network_to_sankey(network, "league", "net")
        assert _links(result) == {("A", "B"): 12.5}

    def test_string_enums(self, sample_network):
        result = transform_network_to_sankey(sample_network, "country", "bidirectional", "count")
        assert result.links
        assert all(node.category.startswith("country_") for node in result.nodes)

    def test_invalid_network_returns_empty_result(self):
        network = {"nodes": [{"id": "club_a"}], "edges": [{"source": "club_a"}, {}]}
        result = transform_network_to_sankey(network, AggregationLevel.LEAGUE, FlowType.NET)

        assert result.nodes == []
        assert result.links == []
        assert result.stats.original_node_count == 1
        assert result.stats.original_link_count == 2
        assert result.stats.total_value == 0

    def test_non_dict_input_returns_empty_result(self):
        result = transform_network_to_sankey("not a network", AggregationLevel.LEAGUE, FlowType.NET)
        assert result.stats.original_node_count == 0
        assert result.stats.transformed_link_count == 0

    def test_unknown_level_returns_empty_result(self, sample_network):
        result = transform_network_to_sankey(sample_network, "position", FlowType.NET)
        assert result.links == []
        assert result.stats.original_node_count == 7
        assert result.stats.original_link_count == 8

    def test_unknown_flow_type_returns_empty_result(self, sample_network):
        result = transform_network_to_sankey(sample_network, AggregationLevel.LEAGUE, "sideways")
        assert result.links == []
        assert result.stats.original_link_count == 8

    def test_unresolved_cycles_return_empty_result(self, league_network):
        network = league_network({
            ("A", "B"): 5.0, ("B", "A"): 1.0, ("P", "Q"): 5.0, ("Q", "P"): 1.0,
            ("B", "C"): 2.0, ("C", "A"): 2.0, ("Q", "R"): 2.0, ("R", "P"): 2.0,
        })
        config = SankeyConfig(engine=EngineConfig(max_break_iterations=1))
        result = transform_network_to_sankey(
            network, AggregationLevel.LEAGUE, FlowType.NET, config=config
        )
        assert result.links == []
        assert result.stats.has_cycles is False
        assert result.stats.original_link_count == 8

    def test_default_value_type_from_config(self, sample_network):
        config = SankeyConfig(engine=EngineConfig(default_value_type=ValueType.COUNT))
        result = transform_network_to_sankey(
            sample_network, AggregationLevel.LEAGUE, FlowType.BIDIRECTIONAL, config=config
        )
        assert _links(result)[("Brasileirão (Out)", "La Liga (In)")] == 3

    def test_explicit_value_type_wins_over_config(self, sample_network):
        config = SankeyConfig(engine=EngineConfig(default_value_type=ValueType.COUNT))
        result = transform_network_to_sankey(
            sample_network, AggregationLevel.LEAGUE, FlowType.BIDIRECTIONAL,
            ValueType.SUM, config=config,
        )
        assert _links(result)[("Brasileirão (Out)", "La Liga (In)")] == 20 * M

    def test_every_strategy_output_is_acyclic(self, sample_network):
        for level in AggregationLevel:
            for flow_type in FlowType:
                result = transform_network_to_sankey(sample_network, level, flow_type)
                G = nx.DiGraph()
                G.add_nodes_from(node.id for node in result.nodes)
                G.add_edges_from((link.source, link.target) for link in result.links)
                assert nx.is_directed_acyclic_graph(G)
                assert set(G.nodes()) >= {n for link in result.links for n in (link.source, link.target)}

    def test_serializes_camel_case(self, sample_network):
        result = transform_network_to_sankey(sample_network, AggregationLevel.LEAGUE, FlowType.NET)
        payload = result.model_dump(by_alias=True)
        assert set(payload["stats"]) == {
            "originalNodeCount", "originalLinkCount", "transformedNodeCount",
            "transformedLinkCount", "totalValue", "hasCycles",
        }
