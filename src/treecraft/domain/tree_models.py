from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the hierarchical node type produced by the diagram parser and
consumed by the materializer, plus the flat entry record exchanged
between the line parser and the tree builder.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    Represents one entry (file or directory) in the hierarchy.

    Attributes:
        name: Entry name with tree glyphs, comments and trailing '/' removed.
        is_directory: True if the entry is created as a directory.
        children: Ordered child entries, in source-text order.
    """
    name: str
    is_directory: bool
    children: List["Node"] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        """Append a child, preserving insertion order."""
        self.children.append(child)

    def to_dict(self) -> Dict[str, Any]:
        """Nested dict form of the subtree, built without recursion."""
        out: Dict[str, Any] = {"name": self.name, "is_directory": self.is_directory, "children": []}
        stack = [(self, out)]
        while stack:
            node, target = stack.pop()
            for child in node.children:
                child_dict = {"name": child.name, "is_directory": child.is_directory, "children": []}
                target["children"].append(child_dict)
                stack.append((child, child_dict))
        return out


@dataclass(frozen=True)
class ParsedEntry:
    """
    Structural record of a single diagram line.

    Attributes:
        depth: Nesting level inferred from indentation (root level is 0).
        name: Cleaned entry name.
        is_directory: Directory classification for the entry.
    """
    depth: int
    name: str
    is_directory: bool
