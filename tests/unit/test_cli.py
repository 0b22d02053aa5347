"""
Unit tests for the command-line interface.
"""

import json

import pytest

from namma_metro import cli
from namma_metro.core.models.metro_line import MetroLine, StationEntry


@pytest.fixture
def data_args(network_data_dir):
    """Provide the global arguments pointing at the three-line network."""
    return ["--data-dir", str(network_data_dir)]


class TestRouteCommand:
    """Test the route subcommand."""

    def test_route_summary(self, data_args, capsys):
        """Test printing a route with alternates."""
        exit_code = cli.main(data_args + ["route", "alpha", "foxtrot"])

        out = capsys.readouterr().out
        assert exit_code == cli.EXIT_OK
        assert "Alpha -> Bravo -> Charlie -> Foxtrot" in out
        assert "Alternate routes:\n 1. Alpha -> Bravo -> Golf -> Foxtrot (3 stops)" in out

    def test_route_without_alternates(self, data_args, capsys):
        """Test disabling alternates."""
        cli.main(data_args + ["route", "Alpha", "Foxtrot", "--alternates", "0"])

        assert "Alternate routes:" not in capsys.readouterr().out

    def test_station_not_found(self, data_args, capsys):
        """Test the error and suggestions for an unknown station."""
        exit_code = cli.main(data_args + ["route", "Gol", "Alpha"])

        err = capsys.readouterr().err
        assert exit_code == cli.EXIT_NOT_FOUND
        assert "Start station not found: Gol" in err
        assert "Did you mean (Gol): Golf" in err

    def test_no_route(self, tmp_path, capsys):
        """Test two stations without a connection."""
        lines_dir = tmp_path / "lines"
        lines_dir.mkdir()
        index = {"lines": []}
        for line in (MetroLine(name="a", stations=("North",)), MetroLine(name="b", stations=("South",))):
            (lines_dir / f"{line.name}.json").write_text(json.dumps(line.to_dict()), encoding="utf-8")
            index["lines"].append({"name": line.name, "file": f"{line.name}.json"})
        (tmp_path / "network_index.json").write_text(json.dumps(index), encoding="utf-8")

        exit_code = cli.main(["--data-dir", str(tmp_path), "route", "North", "South"])

        assert exit_code == cli.EXIT_NOT_FOUND
        assert "No route found" in capsys.readouterr().err

    def test_export(self, data_args, tmp_path, capsys):
        """Test saving a TXT report."""
        target = tmp_path / "out" / "route.txt"

        exit_code = cli.main(data_args + ["route", "Delta", "Golf", "--export", str(target)])

        assert exit_code == cli.EXIT_OK
        assert f"Saved TXT report: {target}" in capsys.readouterr().out
        report = target.read_text(encoding="utf-8")
        assert "ROUTE REPORT" in report
        assert "Delta -> Charlie -> Bravo -> Golf" in report


class TestListingCommands:
    """Test the stations and suggest subcommands."""

    def test_stations(self, data_args, capsys):
        """Test listing stations."""
        exit_code = cli.main(data_args + ["stations"])

        out = capsys.readouterr().out
        assert exit_code == cli.EXIT_OK
        assert "Station list (total: 7)" in out
        assert " - Charlie (red, blue)" in out

    def test_stations_planned_marker(self, tmp_path, capsys):
        """Test the planned marker and --exclude-planned."""
        lines_dir = tmp_path / "lines"
        lines_dir.mkdir()
        line = MetroLine(name="orange", stations=(StationEntry("Alpha"), StationEntry("Hotel", planned=True)))
        (lines_dir / "orange.json").write_text(json.dumps(line.to_dict()), encoding="utf-8")
        (tmp_path / "network_index.json").write_text(
            json.dumps({"lines": [{"name": "orange", "file": "orange.json"}]}), encoding="utf-8")

        cli.main(["--data-dir", str(tmp_path), "stations"])
        assert " - Hotel (orange) [planned]" in capsys.readouterr().out

        cli.main(["--data-dir", str(tmp_path), "--exclude-planned", "stations"])
        out = capsys.readouterr().out
        assert "Hotel" not in out
        assert "Station list (total: 1)" in out

    def test_suggest(self, data_args, capsys):
        """Test prefix suggestions."""
        exit_code = cli.main(data_args + ["suggest", "ch"])

        out = capsys.readouterr().out
        assert exit_code == cli.EXIT_OK
        assert "  - Charlie" in out

    def test_suggest_no_match(self, data_args, capsys):
        """Test a prefix with no matches."""
        exit_code = cli.main(data_args + ["suggest", "zz"])

        assert exit_code == cli.EXIT_NOT_FOUND
        assert "(no prefix matches)" in capsys.readouterr().out


class TestConfigurationErrors:
    """Test error handling around configuration and data."""

    def test_invalid_config_file(self, tmp_path, capsys):
        """Test that a broken config file is reported."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{broken", encoding="utf-8")

        exit_code = cli.main(["--config", str(config_path), "stations"])

        assert exit_code == cli.EXIT_CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().err

    def test_missing_data(self, tmp_path, capsys):
        """Test that missing network data is reported."""
        exit_code = cli.main(["--data-dir", str(tmp_path), "stations"])

        assert exit_code == cli.EXIT_CONFIG_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_command_required(self):
        """Test that a subcommand is required."""
        with pytest.raises(SystemExit):
            cli.main([])
