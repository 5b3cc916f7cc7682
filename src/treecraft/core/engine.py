from __future__ import annotations

"""
Build Orchestration.

Coordinates one complete build:
1. Validates configuration and paths.
2. Reads the diagram file.
3. Parses it into a tree.
4. Creates the structure on disk, or renders a preview.

Core components raise domain errors; this module is the boundary that
turns them into a tagged BuildResult.
"""

import logging
from typing import Any, Dict, Optional

from treecraft.core.materialize.creator import create_structure
from treecraft.core.materialize.preview import render_preview
from treecraft.core.parsing.base import TreeParser
from treecraft.core.parsing.box_drawing import BoxDrawingParser
from treecraft.core.validator import validate_config
from treecraft.domain.build_models import BuildResult, create_error_result, create_success_result
from treecraft.domain.errors import TreeCraftError
from treecraft.domain.tree_models import Node
from treecraft.infra.fs import normalize_path, read_text_file

logger = logging.getLogger(__name__)


def run_build(
        config: Optional[Dict[str, Any]],
        *,
        parser: Optional[TreeParser] = None,
) -> BuildResult:
    """
    Execute a full build from a configuration dictionary.

    Args:
        config: The configuration dictionary (raw or partial).
        parser: Diagram parser to use. Defaults to BoxDrawingParser.

    Returns:
        BuildResult: Status, preview lines and counters.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = cfg["input_path"]
    output_path = cfg["output_path"]
    preview = cfg["preview"]

    try:
        root = build_structure(
            input_path,
            output_path,
            preview=preview,
            encoding=cfg["encoding"],
            parser=parser,
        )
    except TreeCraftError as e:
        logger.debug(f"Build failed: {e}")
        return create_error_result(e, input_path, output_path, preview)

    lines = render_preview(root, root_label=output_path) if preview else []

    return create_success_result(
        input_path,
        output_path,
        preview,
        preview_lines=lines,
        tree=root.to_dict(),
        summary_extra=_summarize(root),
    )


def build_structure(
        input_path: str,
        output_path: str,
        *,
        preview: bool = False,
        encoding: str = "utf-8",
        parser: Optional[TreeParser] = None,
) -> Node:
    """
    Read, parse and (unless previewing) materialize a diagram.

    Args:
        input_path: Diagram file.
        output_path: Destination directory.
        preview: If True, skip all filesystem writes.
        encoding: Encoding of the diagram file.
        parser: Diagram parser to use. Defaults to BoxDrawingParser.

    Returns:
        Node: The parsed tree.

    Raises:
        ParseError, FileSystemError, AlreadyExistsError.
    """
    logger.info(f"Reading diagram: {input_path}")
    contents = read_text_file(normalize_path(input_path), encoding=encoding)

    root = (parser or BoxDrawingParser()).parse(contents)

    if not preview:
        create_structure(root, normalize_path(output_path))

    return root


def _summarize(root: Node) -> Dict[str, int]:
    """Count directories and files below the root."""
    directories = 0
    files = 0
    stack = list(root.children)
    while stack:
        node = stack.pop()
        if node.is_directory:
            directories += 1
        else:
            files += 1
        stack.extend(node.children)
    return {"nodes": directories + files, "directories": directories, "files": files}
