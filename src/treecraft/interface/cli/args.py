from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treecraft.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treecraft CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treecraft",
        description=i18n.t("app.description"),
    )

    # --- Paths ---
    p.add_argument("input_file", help=i18n.t("cli.args.input_file"))
    p.add_argument("output_dir", help=i18n.t("cli.args.output_dir"))

    # --- Mode ---
    p.add_argument(
        "--preview",
        action="store_true",
        help=i18n.t("cli.args.preview"),
    )
    p.add_argument(
        "--encoding",
        default=None,
        help=i18n.t("cli.args.encoding"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    # --- Configuration Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags that were not given map to None, so they never mask values
    coming from the config file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_file
    overrides["output_path"] = args.output_dir
    overrides["encoding"] = args.encoding
    overrides["preview"] = True if args.preview else None
    overrides["log_level"] = "DEBUG" if args.debug else None

    return overrides
