from __future__ import annotations

"""
Unit tests for the Internationalization (i18n) utility.
"""

import json
from pathlib import Path

from treecraft.utils.i18n import I18n, i18n


def test_default_locale_is_loaded() -> None:
    assert i18n.is_loaded is True
    assert i18n.t("cli.status.created") == "✓ Successfully created structure"


def test_cli_keys_present() -> None:
    for key in (
        "app.description",
        "cli.status.preview_header",
        "cli.status.creating",
        "cli.args.preview",
    ):
        assert i18n.t(key) != key, f"Key '{key}' is missing in en.json"


def test_i18n_resolution_logic(tmp_path: Path) -> None:
    """Verify dot-notation resolution, interpolation and fallback."""
    dummy_content = {
        "test": {
            "hello": "Hello {name}!",
            "simple": "Simple Text"
        }
    }
    (tmp_path / "test_locale.json").write_text(json.dumps(dummy_content), encoding="utf-8")

    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("test_locale")

    assert service.t("test.simple") == "Simple Text"
    assert service.t("test.hello", name="World") == "Hello World!"
    assert service.t("missing.key") == "missing.key"
    assert service.t("test.simple.deeper") == "test.simple.deeper"
    assert service.t("test.hello", other="x") == "test.hello"


def test_missing_locale_falls_back_to_keys(tmp_path: Path) -> None:
    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("xx")

    assert service.is_loaded is False
    assert service.t("cli.status.created") == "cli.status.created"
