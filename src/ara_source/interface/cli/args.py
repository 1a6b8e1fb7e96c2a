from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ara-source CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="ara-source",
        description="Load the source files of an Ara project and its vendored dependencies.",
    )

    # --- Inputs ---
    p.add_argument(
        "project_root",
        help="Project root; logical paths are relative to it.",
    )
    p.add_argument(
        "directories",
        nargs="*",
        default=[],
        help="Source directories in order: application sources first, then vendored trees.",
    )

    # --- Loader settings ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated list of recognized extensions (default: .ara).",
    )
    p.add_argument(
        "--workers",
        dest="workers",
        type=int,
        default=None,
        help="Number of reader threads (default: 1).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with loader settings; flags take precedence.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective loader settings and exit.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the parsed namespace into loader configuration overrides.

    Only flags the user actually passed appear in the result, so values read
    from a config file are not clobbered by argparse defaults.
    """
    overrides: Dict[str, Any] = {}

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.workers is not None:
        overrides["workers"] = args.workers

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
