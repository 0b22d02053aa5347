"""
Global pytest configuration and fixtures.
"""

import json
import pytest
from pathlib import Path

from namma_metro.core.models.metro_line import MetroLine, StationEntry
from namma_metro.core.services.network_graph_builder import NetworkGraphBuilder
from namma_metro.core.services.route_service import RouteService
from namma_metro.core.services.station_name_normalizer import StationNameNormalizer
from namma_metro.managers.config_manager import ConfigData


@pytest.fixture
def normalizer():
    """Provide a normalizer with the default key length."""
    return StationNameNormalizer()


@pytest.fixture
def test_lines():
    """
    Provide a small three-line network.

    Station ids in build order:
        0 Alpha, 1 Bravo, 2 Charlie, 3 Delta, 4 Echo, 5 Foxtrot, 6 Golf

    red:    Alpha - Bravo - Charlie - Delta
    blue:   Echo - Charlie - Foxtrot
    green:  Bravo - Golf - Foxtrot
    """
    return [
        MetroLine(name="red", stations=("Alpha", "Bravo", "Charlie", "Delta")),
        MetroLine(name="blue", stations=("Echo", "Charlie", "Foxtrot")),
        MetroLine(name="green", stations=("Bravo", "Golf", "Foxtrot")),
    ]


@pytest.fixture
def planned_lines():
    """
    Provide a network with planned stations.

    orange: Alpha - Hotel (planned) - India
    violet: Juliet (planned) - Kilo (planned)
    """
    return [
        MetroLine(name="orange", stations=(
            StationEntry("Alpha"),
            StationEntry("Hotel", planned=True),
            StationEntry("India"),
        )),
        MetroLine(name="violet", stations=(
            StationEntry("Juliet", planned=True),
            StationEntry("Kilo", planned=True),
        )),
    ]


@pytest.fixture
def test_graph(test_lines, normalizer):
    """Provide a built graph for the three-line network."""
    return NetworkGraphBuilder(normalizer=normalizer).build(test_lines)


@pytest.fixture
def test_config():
    """Provide a default configuration."""
    return ConfigData()


@pytest.fixture
def route_service(test_lines, test_config):
    """Provide a route service built from the three-line network."""
    service = RouteService(test_config)
    service.build(test_lines)
    return service


@pytest.fixture
def network_data_dir(tmp_path, test_lines):
    """Write the three-line network as JSON files and return the directory."""
    lines_dir = tmp_path / "lines"
    lines_dir.mkdir()

    index = {"network": "Test Metro", "lines": []}
    for line in test_lines:
        file_name = f"{line.name}.json"
        (lines_dir / file_name).write_text(json.dumps(line.to_dict()), encoding="utf-8")
        index["lines"].append({"name": line.name, "file": file_name})

    (tmp_path / "network_index.json").write_text(json.dumps(index), encoding="utf-8")
    return tmp_path


@pytest.fixture
def temp_config_file(tmp_path) -> Path:
    """Provide a path for a configuration file that does not exist yet."""
    return tmp_path / "config" / "config.json"
