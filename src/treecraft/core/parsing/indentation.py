from __future__ import annotations

"""
Line-Level Diagram Parsing.

Classifies a single physical line of a tree diagram into a ParsedEntry
(depth, name, is_directory). Each function is stateless: the same line
text always yields the same result regardless of its neighbours.

Two indentation styles are accepted and may be mixed in one document:
pipe continuation ("│   ├── name") and bare whitespace ("    ├── name").
"""

from typing import Optional

from treecraft.domain.tree_models import ParsedEntry

# -----------------------------------------------------------------------------
# GLYPHS
# -----------------------------------------------------------------------------

PIPE = "│"
TEE = "├"
CORNER = "└"
CONNECTOR = "─"
BRANCHES = (TEE, CORNER)
TREE_GLYPHS = (PIPE, TEE, CORNER, CONNECTOR)

COMMENT_MARK = "#"
PATH_SEPARATOR = "/"

TAB_WIDTH = 4
PIPE_BASE_SPACING = 3
LEVEL_WIDTH = 4

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_indent_level(line: str) -> int:
    """
    Infer the nesting depth of a diagram line.

    Rules:
    - Leading spaces count 1 unit each, tabs 4 units.
    - A pipe glyph adds one level. If it is followed by 3 or more
      whitespace characters another level is added, plus one more for
      every further group of 4. The leading units are ignored here.
    - A branch glyph with no pipe before it gives (units // 4) + 1.
    - Anything else is level 0 (the root line, or a malformed line).

    Args:
        line: Raw line text.

    Returns:
        int: Inferred depth.
    """
    i = 0
    n = len(line)

    leading_units = 0
    while i < n and line[i] in (" ", "\t"):
        leading_units += TAB_WIDTH if line[i] == "\t" else 1
        i += 1

    if i < n and line[i] == PIPE:
        i += 1
        level = 1

        run_start = i
        while i < n and line[i] in (" ", "\t"):
            i += 1
        run = i - run_start

        if run >= PIPE_BASE_SPACING:
            level += 1 + (run - PIPE_BASE_SPACING) // LEVEL_WIDTH
        return level

    if i < n and line[i] in BRANCHES:
        return leading_units // LEVEL_WIDTH + 1

    return 0


def extract_name(line: str) -> str:
    """
    Strip tree glyphs, surrounding whitespace and any trailing comment.

    Args:
        line: Raw line text.

    Returns:
        str: The bare entry name, possibly empty.
    """
    name = line
    for glyph in TREE_GLYPHS:
        name = name.replace(glyph, "")
    name = name.strip()

    if COMMENT_MARK in name:
        name = name.split(COMMENT_MARK, 1)[0].strip()
    return name


def is_directory(name: str) -> bool:
    """
    Decide whether a name denotes a directory.

    A trailing separator always means directory; otherwise the final path
    segment is a directory unless it contains a dot.
    """
    if name.endswith(PATH_SEPARATOR):
        return True
    last_part = name.split(PATH_SEPARATOR)[-1]
    return "." not in last_part


def parse_line(line: str) -> Optional[ParsedEntry]:
    """
    Classify one diagram line.

    Args:
        line: Raw line text.

    Returns:
        Optional[ParsedEntry]: The structural entry, or None if the line is
        blank or holds nothing but glyphs and comments.
    """
    if not line.strip():
        return None

    name = extract_name(line)
    if not name:
        return None

    return ParsedEntry(
        depth=get_indent_level(line),
        name=name.rstrip(PATH_SEPARATOR),
        is_directory=is_directory(name),
    )
