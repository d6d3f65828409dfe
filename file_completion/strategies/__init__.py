"""
Process strategies - commit/rollback policies for consumed files.
"""

from .base import ProcessStrategy
from .noop import NoOpProcessStrategy
from .delete import DeleteProcessStrategy
from .rename import RenameProcessStrategy

__all__ = [
    "ProcessStrategy",
    "NoOpProcessStrategy",
    "DeleteProcessStrategy",
    "RenameProcessStrategy",
]
