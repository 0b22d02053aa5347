"""
Utility package for the Namma Metro route finder.
"""

from .data_path_resolver import get_data_directory, get_lines_directory, get_data_file_path

__all__ = [
    "get_data_directory",
    "get_lines_directory",
    "get_data_file_path",
]
