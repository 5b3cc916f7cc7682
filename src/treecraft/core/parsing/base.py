from __future__ import annotations

"""
Base Definitions for Diagram Parsers.

Provides the abstract interface that every diagram dialect implements.
"""

from abc import ABC, abstractmethod

from treecraft.domain.tree_models import Node


class TreeParser(ABC):
    """
    Abstract base class for text-to-tree parsers.
    """

    @abstractmethod
    def parse(self, contents: str) -> Node:
        """
        Convert diagram text into a rooted tree.

        Args:
            contents: Full diagram text.

        Returns:
            Node: The root directory node.

        Raises:
            ParseError: If the text cannot produce a tree.
        """
        pass
