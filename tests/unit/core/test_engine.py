from __future__ import annotations

"""
Unit tests for the Build Engine.

Verifies that run_build turns every failure into a tagged BuildResult,
and that preview runs have no filesystem side effects.
"""

from pathlib import Path

import pytest

from treecraft.core.engine import build_structure, run_build
from treecraft.core.parsing import TreeParser
from treecraft.domain.errors import AlreadyExistsError, ParseError
from treecraft.domain.tree_models import Node


def test_run_build_creates_structure(tmp_path: Path, diagram_file: Path) -> None:
    out = tmp_path / "out"
    result = run_build({"input_path": str(diagram_file), "output_path": str(out)})

    assert result.ok is True
    assert result.error == ""
    assert result.preview is False
    assert result.preview_lines == []
    assert result.summary == {"nodes": 3, "directories": 1, "files": 2}
    assert result.tree["name"] == "project"
    assert (out / "src" / "main.txt").is_file()
    assert (out / "README.md").is_file()


def test_run_build_preview_has_no_side_effects(tmp_path: Path, diagram_file: Path) -> None:
    out = tmp_path / "out"
    result = run_build({"input_path": str(diagram_file), "output_path": str(out), "preview": True})

    assert result.ok is True
    assert result.preview_lines == [
        f"{out}/",
        "├── src/",
        "│   └── main.txt",
        "└── README.md",
    ]
    assert not out.exists()


def test_run_build_missing_input(tmp_path: Path) -> None:
    result = run_build({
        "input_path": str(tmp_path / "missing.txt"),
        "output_path": str(tmp_path / "out"),
    })

    assert result.ok is False
    assert result.error_kind == "filesystem"
    assert result.error.startswith("File system error:")
    assert not (tmp_path / "out").exists()


def test_run_build_empty_input(tmp_path: Path) -> None:
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")

    result = run_build({"input_path": str(empty), "output_path": str(tmp_path / "out")})

    assert result.ok is False
    assert result.error_kind == "parse"
    assert result.error == "Parse error: empty input"
    assert not (tmp_path / "out").exists()


def test_run_build_existing_destination(tmp_path: Path, diagram_file: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()

    result = run_build({"input_path": str(diagram_file), "output_path": str(out)})

    assert result.ok is False
    assert result.error_kind == "already_exists"
    assert result.error == f"Path already exists: {out}"
    assert list(out.iterdir()) == []


def test_run_build_honours_encoding(tmp_path: Path) -> None:
    diagram = tmp_path / "utf16.txt"
    diagram.write_bytes("raíz\n└── café.txt\n".encode("utf-16"))

    result = run_build({
        "input_path": str(diagram),
        "output_path": str(tmp_path / "out"),
        "encoding": "utf-16",
        "preview": True,
    })

    assert result.ok is True
    assert result.tree["children"][0]["name"] == "café.txt"


def test_run_build_with_custom_parser(tmp_path: Path, diagram_file: Path) -> None:
    class FixedParser(TreeParser):
        def parse(self, contents: str) -> Node:
            root = Node("fixed", True)
            root.add_child(Node("only.txt", False))
            return root

    result = run_build(
        {"input_path": str(diagram_file), "output_path": "dest", "preview": True},
        parser=FixedParser(),
    )

    assert result.preview_lines == ["dest/", "└── only.txt"]


def test_build_structure_raises_domain_errors(tmp_path: Path, diagram_file: Path) -> None:
    blank = tmp_path / "blank.txt"
    blank.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ParseError):
        build_structure(str(blank), str(tmp_path / "out"))

    with pytest.raises(AlreadyExistsError):
        build_structure(str(diagram_file), str(tmp_path))


def test_run_build_preview_of_very_deep_diagram(tmp_path: Path) -> None:
    """Depth well past the interpreter recursion limit still yields a result."""
    levels = 1200
    lines = ["root/"]
    for depth in range(1, levels + 1):
        lines.append("    " * (depth - 1) + f"└── d{depth}")
    diagram = tmp_path / "deep.txt"
    diagram.write_text("\n".join(lines) + "\n", encoding="utf-8")

    result = run_build({"input_path": str(diagram), "output_path": "dest", "preview": True})

    assert result.ok is True
    assert len(result.preview_lines) == levels + 1
    assert result.preview_lines[1] == "└── d1/"
    assert result.preview_lines[-1] == "    " * (levels - 1) + f"└── d{levels}/"
    assert result.summary == {"nodes": levels, "directories": levels, "files": 0}
    assert result.tree["children"][0]["name"] == "d1"
