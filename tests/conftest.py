from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared diagram fixtures used across unit and e2e tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
PROJECT_DIAGRAM = (
    "project/\n"
    "├── src/\n"
    "│   └── main.txt\n"
    "└── README.md\n"
)


@pytest.fixture
def project_diagram() -> str:
    """
    Return the reference diagram:

    project/
    ├── src/
    │   └── main.txt
    └── README.md
    """
    return PROJECT_DIAGRAM


@pytest.fixture
def diagram_file(tmp_path: Path, project_diagram: str) -> Path:
    """Write the reference diagram to a UTF-8 file and return its path."""
    path = tmp_path / "structure.txt"
    path.write_text(project_diagram, encoding="utf-8")
    return path
