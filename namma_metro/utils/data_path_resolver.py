"""
Data path resolver for finding network data files in development and installed environments.
"""
from pathlib import Path
from typing import Optional

INDEX_FILE_NAME = "network_index.json"


def get_data_directory(override: Optional[str] = None) -> Path:
    """
    Get the directory holding network_index.json.

    Args:
        override: Explicit directory from configuration, used as-is if given

    Returns:
        Path to the data directory
    """
    if override:
        return Path(override)

    # Packaged data lives next to this package: namma_metro/utils -> namma_metro/data
    package_data_dir = Path(__file__).parent.parent / "data"
    if (package_data_dir / INDEX_FILE_NAME).exists():
        return package_data_dir

    cwd_data_dir = Path.cwd() / "namma_metro" / "data"
    if (cwd_data_dir / INDEX_FILE_NAME).exists():
        return cwd_data_dir

    raise FileNotFoundError(
        "Could not find network data directory. Searched in:\n" +
        f"- Package path: {package_data_dir}\n" +
        f"- Current directory: {cwd_data_dir}\n" +
        "Set network.data_directory in the configuration file."
    )


def get_lines_directory(override: Optional[str] = None) -> Path:
    """Get the lines subdirectory within the data directory."""
    return get_data_directory(override) / "lines"


def get_data_file_path(filename: str, override: Optional[str] = None) -> Path:
    """
    Get the full path to a data file.

    Args:
        filename: Name of the file (e.g., 'network_index.json')
        override: Explicit data directory

    Returns:
        Path to the file
    """
    return get_data_directory(override) / filename
