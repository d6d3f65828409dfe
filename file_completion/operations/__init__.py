"""
Operations package - the transport capability the strategies act through.
"""

from .path_utils import (
    calculate_relative_path,
    build_destination_path,
    conflict_candidate,
    generate_conflict_free_path,
    resolve_target_directory,
)
from .file_operations import FileOperations, LocalFileOperations

__all__ = [
    "FileOperations",
    "LocalFileOperations",
    "calculate_relative_path",
    "build_destination_path",
    "conflict_candidate",
    "generate_conflict_free_path",
    "resolve_target_directory",
]
