"""
File Operations - transport capability used by the process strategies.

The completion layer never touches the filesystem directly; strategies call
through a FileOperations implementation so remote transports can be plugged
in next to the local one.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import aiofiles.os


class FileOperations(ABC):
    """Abstract transport for deleting and moving consumed files."""

    @abstractmethod
    async def delete_file(self, path: str) -> bool:
        """Delete a file. Returns True if the file no longer exists."""
        pass

    @abstractmethod
    async def rename_file(self, source: str, target: str) -> bool:
        """Move a file. Returns True if the file arrived at target."""
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    async def build_directory(self, directory: str) -> bool:
        """Create a directory including parents. Returns True if it exists afterwards."""
        pass


class LocalFileOperations(FileOperations):
    """FileOperations backed by the local filesystem via aiofiles."""

    async def delete_file(self, path: str) -> bool:
        try:
            await aiofiles.os.remove(path)
            logging.debug(f"Deleted file: {path}")
        except FileNotFoundError:
            logging.debug(f"File already gone, nothing to delete: {path}")
        except OSError as e:
            logging.warning(f"Could not delete {path}: {e}")
        return not await aiofiles.os.path.exists(path)

    async def rename_file(self, source: str, target: str) -> bool:
        try:
            await aiofiles.os.rename(source, target)
        except OSError as e:
            logging.warning(f"Could not rename {source} -> {target}: {e}")
            return False
        logging.debug(f"Renamed file: {source} -> {target}")
        return await aiofiles.os.path.exists(target)

    async def exists(self, path: str) -> bool:
        return await aiofiles.os.path.exists(path)

    async def build_directory(self, directory: str) -> bool:
        if await aiofiles.os.path.isdir(directory):
            return True
        try:
            await aiofiles.os.makedirs(directory, exist_ok=True)
        except OSError as e:
            logging.warning(f"Could not create directory {directory}: {e}")
            return False
        return await aiofiles.os.path.isdir(directory)

    def __str__(self) -> str:
        return "LocalFileOperations"


def parent_directory(path: str) -> str:
    return str(Path(path).parent)
