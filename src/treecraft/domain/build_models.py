from __future__ import annotations

"""
Build Domain Data Models.

Defines the result object and factory functions used to communicate the
outcome of a build (create or preview) between the engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from treecraft.domain.errors import TreeCraftError

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Tagged result of a complete build execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: One-line diagnostic in case of failure.
        error_kind: Failure tag ('parse', 'filesystem', 'already_exists').
        input_path: Diagram file that was read.
        output_path: Destination directory (created or previewed).
        preview: Whether the run was a preview (no filesystem effects).
        preview_lines: Rendered preview, one entry per line.
        tree: Nested dict form of the parsed tree.
        summary: Counters below the root (nodes, directories, files).
    """
    ok: bool
    error: str
    error_kind: str

    input_path: str
    output_path: str
    preview: bool

    preview_lines: List[str] = field(default_factory=list)
    tree: Dict[str, Any] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: TreeCraftError,
        input_path: str,
        output_path: str,
        preview: bool,
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a failed build result from the raised error.

    Args:
        error: The domain error that aborted the build.
        input_path: Diagram file path.
        output_path: Destination directory.
        preview: Whether the run was a preview.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=str(error),
        error_kind=error.kind,
        input_path=input_path,
        output_path=output_path,
        preview=preview,
        summary=summary_extra or {},
    )


def create_success_result(
        input_path: str,
        output_path: str,
        preview: bool,
        preview_lines: Optional[List[str]] = None,
        tree: Optional[Dict[str, Any]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a successful build result.

    Args:
        input_path: Diagram file path.
        output_path: Destination directory.
        preview: Whether the run was a preview.
        preview_lines: Rendered preview lines (preview runs only).
        tree: Nested dict form of the parsed tree.
        summary_extra: Execution counters.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        error_kind="",
        input_path=input_path,
        output_path=output_path,
        preview=preview,
        preview_lines=list(preview_lines or []),
        tree=tree or {},
        summary=summary_extra or {},
    )
