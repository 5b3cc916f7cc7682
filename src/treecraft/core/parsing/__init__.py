from __future__ import annotations

from .base import TreeParser
from .box_drawing import BoxDrawingParser
from .builder import build_tree
from .indentation import extract_name, get_indent_level, is_directory, parse_line

__all__ = [
    "TreeParser",
    "BoxDrawingParser",
    "build_tree",
    "extract_name",
    "get_indent_level",
    "is_directory",
    "parse_line",
]
