"""
Unit tests for JsonNetworkRepository.

Uses real files in a temporary directory instead of mocks.
"""

import json

import pytest

from namma_metro.core.exceptions import NetworkDataError
from namma_metro.core.services.json_network_repository import JsonNetworkRepository


class TestJsonNetworkRepository:
    """Test loading line definitions from JSON files."""

    def test_load_lines_in_index_order(self, network_data_dir, test_lines):
        """Test that lines come back in index order."""
        repository = JsonNetworkRepository(str(network_data_dir))

        lines = repository.load_lines()

        assert [line.name for line in lines] == ["red", "blue", "green"]
        assert lines == test_lines

    def test_get_line_by_name(self, network_data_dir):
        """Test line lookup."""
        repository = JsonNetworkRepository(str(network_data_dir))

        assert repository.get_line_by_name("blue").station_names == ["Echo", "Charlie", "Foxtrot"]
        assert repository.get_line_by_name("magenta") is None
        assert repository.get_network_name() == "Test Metro"

    def test_index_name_overrides_file_name(self, network_data_dir):
        """Test that the name in the index wins."""
        index_path = network_data_dir / "network_index.json"
        index = json.loads(index_path.read_text(encoding="utf-8"))
        index["lines"][0]["name"] = "crimson"
        index_path.write_text(json.dumps(index), encoding="utf-8")

        lines = JsonNetworkRepository(str(network_data_dir)).load_lines()

        assert lines[0].name == "crimson"

    def test_malformed_line_file(self, network_data_dir):
        """Test that broken JSON raises NetworkDataError."""
        (network_data_dir / "lines" / "blue.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(NetworkDataError, match="Malformed JSON"):
            JsonNetworkRepository(str(network_data_dir)).load_lines()

    def test_missing_index(self, tmp_path):
        """Test that a missing index raises NetworkDataError."""
        with pytest.raises(NetworkDataError):
            JsonNetworkRepository(str(tmp_path)).load_lines()

    def test_empty_station_list(self, network_data_dir):
        """Test that a line without stations is rejected."""
        (network_data_dir / "lines" / "red.json").write_text(
            json.dumps({"name": "red", "stations": []}), encoding="utf-8")

        with pytest.raises(NetworkDataError, match="red.json"):
            JsonNetworkRepository(str(network_data_dir)).load_lines()

    def test_string_planned_flag(self, network_data_dir):
        """Test that a quoted planned flag is reported instead of read as true."""
        (network_data_dir / "lines" / "red.json").write_text(
            json.dumps({"name": "red", "stations": [{"name": "Alpha", "planned": "false"}]}),
            encoding="utf-8")

        with pytest.raises(NetworkDataError, match="red.json"):
            JsonNetworkRepository(str(network_data_dir)).load_lines()

    def test_duplicate_line_names(self, network_data_dir):
        """Test that two lines may not share a name."""
        index_path = network_data_dir / "network_index.json"
        index = json.loads(index_path.read_text(encoding="utf-8"))
        index["lines"][1]["name"] = "red"
        index_path.write_text(json.dumps(index), encoding="utf-8")

        with pytest.raises(NetworkDataError, match="Duplicate"):
            JsonNetworkRepository(str(network_data_dir)).load_lines()

    def test_index_entry_without_file(self, network_data_dir):
        """Test that index entries need a file."""
        index_path = network_data_dir / "network_index.json"
        index_path.write_text(json.dumps({"lines": [{"name": "red"}]}), encoding="utf-8")

        with pytest.raises(NetworkDataError, match="without a file"):
            JsonNetworkRepository(str(network_data_dir)).load_lines()

    def test_refresh_data(self, network_data_dir):
        """Test reloading after the files change."""
        repository = JsonNetworkRepository(str(network_data_dir))
        assert len(repository.load_lines()) == 3

        index_path = network_data_dir / "network_index.json"
        index = json.loads(index_path.read_text(encoding="utf-8"))
        index["lines"] = index["lines"][:1]
        index_path.write_text(json.dumps(index), encoding="utf-8")

        assert repository.refresh_data() is True
        assert len(repository.load_lines()) == 1

    def test_refresh_data_failure(self, network_data_dir):
        """Test that refresh reports broken files without raising."""
        repository = JsonNetworkRepository(str(network_data_dir))
        repository.load_lines()
        (network_data_dir / "network_index.json").write_text("[]", encoding="utf-8")

        assert repository.refresh_data() is False

    def test_packaged_data(self):
        """Test the data shipped with the package."""
        repository = JsonNetworkRepository()

        assert [line.name for line in repository.load_lines()] == ["purple", "green", "pink"]
        assert repository.get_network_name() == "Namma Metro"
