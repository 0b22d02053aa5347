"""
JSON Network Repository Implementation

Repository implementation for loading metro line definitions from JSON files.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any

from ..exceptions import NetworkDataError
from ..interfaces.i_network_repository import INetworkRepository
from ..models.metro_line import MetroLine
from ...utils.data_path_resolver import get_data_directory, INDEX_FILE_NAME


class JsonNetworkRepository(INetworkRepository):
    """
    Repository implementation for JSON-based network data.

    network_index.json fixes the order lines are built in; station ids depend
    on that order, so line files are never discovered by globbing.
    """

    def __init__(self, data_directory: Optional[str] = None):
        """
        Initialize the JSON network repository.

        Args:
            data_directory: Directory containing network_index.json and lines/
        """
        self.data_directory = get_data_directory(data_directory)
        self.lines_directory = self.data_directory / "lines"
        self.logger = logging.getLogger(__name__)

        self._lines_cache: Optional[List[MetroLine]] = None
        self._line_name_to_line: Optional[Dict[str, MetroLine]] = None
        self._network_name: str = ""
        self._last_loaded: Optional[datetime] = None

        self.logger.info(f"Initialized JsonNetworkRepository with data directory: {self.data_directory}")

    def _ensure_data_loaded(self) -> None:
        """Ensure data is loaded into cache."""
        if self._lines_cache is None:
            self._load_all_data()

    def _load_all_data(self) -> None:
        """Load the index and every line file it lists."""
        self.logger.info("Loading metro network data from JSON files...")

        index = self._read_json(self.data_directory / INDEX_FILE_NAME)
        entries = index.get("lines")
        if not isinstance(entries, list) or not entries:
            raise NetworkDataError(f"{INDEX_FILE_NAME} must list at least one line")

        lines = []
        for entry in entries:
            lines.append(self._load_line(entry))

        names = [line.name for line in lines]
        if len(set(names)) != len(names):
            raise NetworkDataError(f"Duplicate line names in {INDEX_FILE_NAME}: {names}")

        self._lines_cache = lines
        self._line_name_to_line = {line.name: line for line in lines}
        self._network_name = index.get("network", "")
        self._last_loaded = datetime.now()
        self.logger.info(f"Loaded {len(lines)} lines "
                         f"with {sum(line.station_count for line in lines)} station entries")

    def _load_line(self, entry: Dict[str, Any]) -> MetroLine:
        """Parse one line file referenced by the index."""
        file_name = entry.get("file") if isinstance(entry, dict) else None
        if not file_name:
            raise NetworkDataError(f"Index entry without a file: {entry!r}")

        line_data = self._read_json(self.lines_directory / file_name)
        # The index name wins so a file can be shared between networks
        if entry.get("name"):
            line_data = dict(line_data, name=entry["name"])

        try:
            line = MetroLine.from_dict(line_data)
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkDataError(f"Invalid line definition in {file_name}: {e}") from e

        self.logger.debug(f"Loaded line: {line}")
        return line

    def _read_json(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"MALFORMED JSON in {path.name}: line {e.lineno}, column {e.colno}")
            raise NetworkDataError(f"Malformed JSON in {path}: {e}") from e
        except OSError as e:
            raise NetworkDataError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise NetworkDataError(f"Expected a JSON object in {path}")
        return data

    def load_lines(self) -> List[MetroLine]:
        """Load all line definitions in build order."""
        self._ensure_data_loaded()
        return list(self._lines_cache)

    def get_line_by_name(self, name: str) -> Optional[MetroLine]:
        """Get a line definition by its name."""
        self._ensure_data_loaded()
        return self._line_name_to_line.get(name)

    def get_network_name(self) -> str:
        self._ensure_data_loaded()
        return self._network_name

    def refresh_data(self) -> bool:
        """Drop cached data and read the files again."""
        self._lines_cache = None
        self._line_name_to_line = None
        try:
            self._load_all_data()
            return True
        except NetworkDataError as e:
            self.logger.error(f"Failed to refresh network data: {e}")
            return False
