from __future__ import annotations

"""
Structure Creator.

Materializes a parsed tree as real directories and empty files. The
destination must not exist beforehand; creation then proceeds depth-first
in source order and stops at the first filesystem failure without rolling
back what was already created.
"""

import logging
import os
from dataclasses import dataclass

from treecraft.domain.errors import AlreadyExistsError, FileSystemError
from treecraft.domain.tree_models import Node

logger = logging.getLogger(__name__)


@dataclass
class CreationStats:
    """Counters of filesystem entries created by one run."""
    directories: int = 0
    files: int = 0

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_structure(root: Node, output_dir: str) -> CreationStats:
    """
    Create the destination directory and every node below the root.

    The root node's own name is not used: the destination directory takes
    its place.

    Args:
        root: Root of the parsed tree.
        output_dir: Destination directory; must not exist.

    Returns:
        CreationStats: Directories (root included) and files created.

    Raises:
        AlreadyExistsError: If output_dir exists. Nothing is touched.
        FileSystemError: On any OSError during creation.
    """
    if os.path.lexists(output_dir):
        raise AlreadyExistsError(output_dir)

    stats = CreationStats()
    _make_dir(output_dir, stats)

    # Explicit stack; reversed push keeps children in source order
    stack = [(child, output_dir) for child in reversed(root.children)]
    while stack:
        node, base_path = stack.pop()
        node_path = os.path.join(base_path, node.name)

        if node.is_directory:
            _make_dir(node_path, stats)
            stack.extend((child, node_path) for child in reversed(node.children))
        else:
            _touch(node_path, stats)

    logger.info(f"Created {stats.directories} directories and {stats.files} files under {output_dir}")
    return stats

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _make_dir(path: str, stats: CreationStats) -> None:
    try:
        os.mkdir(path)
    except OSError as e:
        logger.debug(f"Failed to create directory '{path}': {e}")
        raise FileSystemError(e, path) from e
    stats.directories += 1
    logger.debug(f"[DIR] {path}")


def _touch(path: str, stats: CreationStats) -> None:
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as e:
        logger.debug(f"Failed to create file '{path}': {e}")
        raise FileSystemError(e, path) from e
    stats.files += 1
    logger.debug(f"[FILE] {path}")
