"""
Idempotent repositories - keep track of files that were already consumed.
"""

from .repository import IdempotentRepository
from .memory_repository import MemoryIdempotentRepository
from .file_repository import FileIdempotentRepository

__all__ = [
    "IdempotentRepository",
    "MemoryIdempotentRepository",
    "FileIdempotentRepository",
]
