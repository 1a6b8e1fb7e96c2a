from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, merges configuration sources (defaults, optional JSON
file, command-line overrides), runs a load and renders the resulting source
map as text or JSON.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from ara_source.core.services.assembler import load
from ara_source.core.services.hasher import ContentHasher, Sha256ContentHasher
from ara_source.core.services.validator import validate_config
from ara_source.domain.config import LoaderConfig, load_config_file
from ara_source.domain.result_models import LoadResult
from ara_source.infra.fs import expand_user_input
from ara_source.infra.logging import LoggingConfig, configure_logging, get_logger
from ara_source.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_CONFIG_ERROR = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 when the load fails, 2 on configuration errors.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "WARNING",
        console=True,
        log_file=args.log_file,
    ))

    # 1. Configuration hierarchy: defaults < config file < flags
    raw_conf: Dict[str, Any] = {}
    if args.config_file:
        try:
            raw_conf.update(load_config_file(args.config_file))
        except (OSError, ValueError) as e:
            logger.error(f"Cannot read config file: {e}")
            return EXIT_CONFIG_ERROR

    raw_conf.update(cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 2. Load (shell-style expansion applies to typed paths only)
    project_root = expand_user_input(args.project_root)
    directories = [expand_user_input(d) for d in args.directories]
    logger.debug(f"Loading {len(directories)} directories under {project_root}")
    result = load(project_root, directories, LoaderConfig.from_dict(clean_conf))

    # 3. Render
    hasher = Sha256ContentHasher()
    if args.json_output:
        print(json.dumps(result_to_dict(result, hasher), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, hasher)

    return EXIT_OK if result.ok else EXIT_LOAD_ERROR

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def result_to_dict(result: LoadResult, hasher: ContentHasher) -> Dict[str, Any]:
    """
    Convert a load result into a JSON-serializable document.

    Content is represented by its digest; the text itself is not emitted.
    """
    doc: Dict[str, Any] = {
        "ok": result.ok,
        "project_root": result.project_root,
        "directories": result.directories,
    }

    if result.error is not None:
        doc["error"] = {
            "kind": result.error.kind.value,
            "path": result.error.path,
            "directories": list(result.error.directories),
            "reason": result.error.reason,
            "message": str(result.error),
        }
        return doc

    source_map = result.unwrap()
    doc["count"] = len(source_map)
    doc["fingerprint"] = source_map.fingerprint(hasher)
    doc["sources"] = [
        {
            "logical_path": entry.logical_path,
            "kind": entry.kind.value,
            "origin": entry.origin.kind.value,
            "directory": entry.origin.directory,
            "absolute_path": entry.absolute_path,
            "hash": hasher.hash(entry.content),
        }
        for entry in source_map.entries()
    ]
    return doc


def _print_human_summary(result: LoadResult, hasher: ContentHasher) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    source_map = result.unwrap()
    for entry in source_map.entries():
        digest = hasher.hash(entry.content)[:12]
        print(f"{entry.logical_path}\t{entry.kind.value}\t{entry.origin.kind.value}\t{digest}")

    print(f"{len(source_map)} sources loaded.", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
