"""
Unit tests for NetworkGraph and NetworkGraphBuilder.
"""

import pytest

from namma_metro.core.exceptions import CapacityExceededError, InvalidStationNameError
from namma_metro.core.models.metro_line import MetroLine
from namma_metro.core.services.json_network_repository import JsonNetworkRepository
from namma_metro.core.services.network_graph import NetworkGraph
from namma_metro.core.services.network_graph_builder import NetworkGraphBuilder


class TestNetworkGraph:
    """Test graph construction primitives."""

    def test_connect_is_symmetric(self):
        """Test that edges are undirected."""
        graph = NetworkGraph()
        graph.build_line("red", ["A1", "B1"])

        assert graph.connected(0, 1)
        assert graph.connected(1, 0)
        assert graph.edge_count == 1

    def test_self_loop_and_repeat_ignored(self):
        """Test that self loops and duplicate edges are not added."""
        graph = NetworkGraph()
        graph.build_line("red", ["A1", "B1"])

        assert graph.connect(0, 0) is False
        assert graph.connect(1, 0) is False
        assert not graph.connected(0, 0)
        assert graph.edge_count == 1

    def test_repeated_name_in_line_has_no_self_loop(self):
        """Test that consecutive spellings of one station do not loop."""
        graph = NetworkGraph()
        ids = graph.build_line("red", ["M.G. Road", "mg road", "Trinity"])

        assert ids == [0, 0, 1]
        assert graph.edge_count == 1
        assert not graph.connected(0, 0)

    def test_single_station_line(self):
        """Test that a one-station line yields an isolated station."""
        graph = NetworkGraph()
        ids = graph.build_line("stub", ["Lonely"])

        assert ids == [0]
        assert graph.degree(0) == 0
        assert graph.neighbors(0) == []
        assert graph.station(0).lines == ["stub"]

    def test_connect_unknown_station(self):
        """Test that connecting unknown ids fails."""
        graph = NetworkGraph()

        with pytest.raises(KeyError):
            graph.connect(0, 1)

    def test_invalid_name_reports_line(self):
        """Test that build errors carry the line name."""
        graph = NetworkGraph()

        with pytest.raises(InvalidStationNameError) as exc_info:
            graph.build_line("pink", ["Hulimavu", "--"])

        assert exc_info.value.line_name == "pink"

    def test_planned_flags_length_checked(self):
        """Test that planned flags must match the station list."""
        graph = NetworkGraph()

        with pytest.raises(ValueError):
            graph.build_line("red", ["A1", "B1"], planned_flags=[False])

    def test_neighbors_sorted_and_edges(self, test_graph):
        """Test neighbour ordering and edge listing."""
        assert test_graph.neighbors(2) == [1, 3, 4, 5]
        assert list(test_graph.edges()) == [(0, 1), (1, 2), (1, 6), (2, 3), (2, 4), (2, 5), (5, 6)]

    def test_visibility(self):
        """Test that planned stations are hidden only when excluded."""
        visible = NetworkGraph(include_planned=True)
        hidden = NetworkGraph(include_planned=False)
        for graph in (visible, hidden):
            graph.build_line("red", ["A1", "B1"], planned_flags=[False, True])

        assert visible.is_visible(1)
        assert hidden.is_visible(0)
        assert not hidden.is_visible(1)


class TestNetworkGraphBuilder:
    """Test building graphs from line definitions."""

    def test_build(self, test_graph):
        """Test the three-line network."""
        assert test_graph.station_count == 7
        assert test_graph.edge_count == 7
        assert test_graph.line_names == ["red", "blue", "green"]
        assert test_graph.station(2).lines == ["red", "blue"]

    def test_build_is_deterministic(self, test_lines):
        """Test that the same lines give the same ids."""
        builder = NetworkGraphBuilder()

        first = builder.build(test_lines)
        second = builder.build(test_lines)

        assert [s.key_name for s in first.registry] == [s.key_name for s in second.registry]
        assert list(first.edges()) == list(second.edges())

    def test_exclude_planned_bridges_gaps(self, planned_lines):
        """Test that planned stations are dropped and their neighbours joined."""
        graph = NetworkGraphBuilder().build(planned_lines, include_planned=False)

        assert [station.name for station in graph.registry] == ["Alpha", "India"]
        assert graph.connected(0, 1)
        # violet has no operational station and is skipped entirely
        assert graph.line_names == ["orange"]

    def test_include_planned(self, planned_lines):
        """Test that planned stations are built when included."""
        graph = NetworkGraphBuilder().build(planned_lines, include_planned=True)

        assert graph.station_count == 5
        assert graph.station(1).planned
        assert not graph.connected(0, 2)

    def test_capacity_exceeded(self, test_lines):
        """Test that builds fail when the network is too large."""
        with pytest.raises(CapacityExceededError):
            NetworkGraphBuilder(capacity=3).build(test_lines)

    def test_build_from_repository(self, network_data_dir):
        """Test building from a JSON repository."""
        builder = NetworkGraphBuilder(data_repository=JsonNetworkRepository(str(network_data_dir)))

        graph = builder.build_from_repository()

        assert graph.station_count == 7

    def test_build_from_repository_without_repository(self):
        """Test that a repository is required."""
        with pytest.raises(ValueError):
            NetworkGraphBuilder().build_from_repository()

    def test_single_station_lines(self):
        """Test lines of one station share nothing."""
        graph = NetworkGraphBuilder().build([
            MetroLine(name="a", stations=("Solo",)),
            MetroLine(name="b", stations=("Solo",)),
        ])

        assert graph.station_count == 1
        assert graph.edge_count == 0
        assert graph.station(0).lines == ["a", "b"]
