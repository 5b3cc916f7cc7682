from __future__ import annotations

"""
Tree Preview Renderer.

Converts a parsed tree into the visual lines that describe what would be
created, using the same connectors the parser understands. Traversal uses
an explicit stack, so preview depth is not bounded by the interpreter
recursion limit.
"""

from typing import List, Optional, Tuple

from treecraft.domain.tree_models import Node

BRANCH_MID = "├── "
BRANCH_LAST = "└── "
PREFIX_MID = "│   "
PREFIX_LAST = "    "


def render_preview(root: Node, root_label: Optional[str] = None) -> List[str]:
    """
    Render the tree as preview lines, without filesystem effects.

    Args:
        root: Root of the parsed tree.
        root_label: Text for the first line; defaults to the root name.

    Returns:
        List[str]: One line for the root plus one per descendant.
    """
    label = root.name if root_label is None else root_label
    lines: List[str] = [f"{label}/"]

    # (node, prefix, is_last); reversed push keeps children in source order
    stack: List[Tuple[Node, str, bool]] = _child_frames(root, "")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = BRANCH_LAST if is_last else BRANCH_MID
        suffix = "/" if node.is_directory else ""
        lines.append(f"{prefix}{connector}{node.name}{suffix}")

        stack.extend(_child_frames(node, prefix + (PREFIX_LAST if is_last else PREFIX_MID)))
    return lines


def _child_frames(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    last = len(node.children) - 1
    return [(child, prefix, i == last) for i, child in reversed(list(enumerate(node.children)))]
