from __future__ import annotations

"""
Box-Drawing Diagram Parser.

Parses trees drawn with box-drawing glyphs (├──, └──, │) or plain
indentation, as printed by the `tree` command and commonly pasted into
READMEs and chat transcripts.
"""

import logging
from typing import List

from treecraft.core.parsing.base import TreeParser
from treecraft.core.parsing.builder import build_tree
from treecraft.core.parsing.indentation import PATH_SEPARATOR, extract_name, parse_line
from treecraft.domain.errors import ParseError
from treecraft.domain.tree_models import Node, ParsedEntry

logger = logging.getLogger(__name__)


class BoxDrawingParser(TreeParser):
    """
    Default diagram dialect.

    The first non-blank line names the root, which is always a directory.
    Every following line is classified independently and then nested by
    the tree builder.
    """

    def parse(self, contents: str) -> Node:
        lines = contents.splitlines()
        if not lines:
            raise ParseError("empty input")

        root_index = next((i for i, line in enumerate(lines) if line.strip()), None)
        if root_index is None:
            raise ParseError("empty input")

        root_name = extract_name(lines[root_index]).rstrip(PATH_SEPARATOR)
        root = Node(root_name, True)

        entries: List[ParsedEntry] = []
        for line in lines[root_index + 1:]:
            entry = parse_line(line)
            if entry is None:
                continue
            logger.debug(f"Parsed entry: depth={entry.depth} dir={entry.is_directory} name='{entry.name}'")
            entries.append(entry)

        attached = build_tree(root, entries)
        logger.info(f"Parsed diagram root '{root_name}': {attached} of {len(entries)} entries attached.")

        return root
