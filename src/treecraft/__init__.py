from __future__ import annotations

from .core.engine import build_structure, run_build
from .core.parsing import BoxDrawingParser, TreeParser
from .domain.errors import AlreadyExistsError, FileSystemError, ParseError, TreeCraftError
from .domain.tree_models import Node

__version__ = "0.1.0"

__all__ = [
    "build_structure",
    "run_build",
    "BoxDrawingParser",
    "TreeParser",
    "Node",
    "TreeCraftError",
    "ParseError",
    "FileSystemError",
    "AlreadyExistsError",
]
