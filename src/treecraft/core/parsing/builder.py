from __future__ import annotations

"""
Tree Builder.

Reconstructs parent/child nesting from the ordered, flat sequence of
ParsedEntry records that follow the root line. Runs a single forward
cursor pass with an explicit frame stack instead of Python recursion, so
very deep diagrams are not bounded by the interpreter recursion limit.
"""

import logging
from typing import List, Sequence, Tuple

from treecraft.domain.tree_models import Node, ParsedEntry

logger = logging.getLogger(__name__)

ROOT_DEPTH = 0

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root: Node, entries: Sequence[ParsedEntry]) -> int:
    """
    Attach entries to the root according to their depth.

    For the entry under the cursor, compared with the current parent:
    - depth == parent depth + 1: a direct child. Directories become the
      new parent; files only consume their own entry.
    - depth <= parent depth: control returns to the enclosing parent,
      which looks at the same entry again.
    - depth > parent depth + 1: the pass stops. Every enclosing parent is
      shallower still, so the stop reaches the root and the entry, along
      with everything after it, stays unattached.
    At the root frame a depth of 0 also ends the pass.

    Args:
        root: Root directory node; receives the top-level children.
        entries: Entries in source order, root line excluded.

    Returns:
        int: Cursor position at which the pass stopped (len(entries) when
        every entry was attached).
    """
    frames: List[Tuple[Node, int]] = [(root, ROOT_DEPTH)]
    cursor = 0

    while cursor < len(entries):
        parent, parent_depth = frames[-1]
        entry = entries[cursor]

        if entry.depth == parent_depth + 1:
            child = Node(entry.name, entry.is_directory)
            parent.add_child(child)
            if child.is_directory:
                frames.append((child, entry.depth))
            cursor += 1
        elif entry.depth <= parent_depth and len(frames) > 1:
            frames.pop()
        else:
            break

    if cursor < len(entries):
        logger.warning(
            f"{len(entries) - cursor} entries left unattached, starting at "
            f"'{entries[cursor].name}' (depth {entries[cursor].depth})."
        )

    return cursor
