from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, resolves configuration (defaults, config file, CLI
overrides), runs the structure check and renders the report.

Exit codes:
    0: The directory satisfies every requirement.
    1: A required entry, manifest key or script is missing (or an optional
       entry with --strict-optional).
    2: The target path is invalid, the manifest cannot be parsed or the
       filesystem refused a read (permissions, I/O errors).
    130: Interrupted by the user.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from npmfs.core.config_validator import validate_config
from npmfs.core.structure.checker import check_project
from npmfs.domain.config import get_default_config, load_config, save_config
from npmfs.domain.errors import ElementError
from npmfs.domain.structure_models import StructureReport
from npmfs.infra.logging import LoggingConfig, configure_logging, get_logger
from npmfs.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_VIOLATION = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file), force=True)
    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Warning: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config_file:
        if not save_config(clean_conf, args.save_config_file):
            print(f"ERROR: cannot write configuration to '{args.save_config_file}'", file=sys.stderr)
            return EXIT_BAD_INPUT
        print(f"Configuration saved to '{args.save_config_file}'")
        return EXIT_OK

    try:
        report = check_project(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Check interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ElementError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except OSError as e:
        logger.error(f"Filesystem error during check: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.json_output:
        payload = asdict(report)
        payload["ok"] = report.ok
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(report)

    return _exit_code(report, fail_on_optional=clean_conf["fail_on_optional"])

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge the overrides that were actually set into ``base``.

    Unknown keys are dropped so a stray override cannot pollute the schema.
    """
    out = dict(base)
    known = get_default_config().keys()
    for k, v in overrides.items():
        if k in known and v is not None:
            out[k] = v
    return out


def _exit_code(report: StructureReport, *, fail_on_optional: bool) -> int:
    if not report.ok:
        return EXIT_VIOLATION
    if fail_on_optional and report.missing_optional:
        return EXIT_VIOLATION
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(report: StructureReport) -> None:
    """Print the report as an indented terminal summary."""
    print(f"Package root: {report.path}")
    print("Status: OK" if report.ok else "Status: FAILED")

    sections = [
        ("Missing required directories", report.missing_required_dirs),
        ("Missing required files", report.missing_required_files),
        ("Missing manifest keys", report.missing_manifest_keys),
        ("Missing scripts", report.missing_scripts),
        ("Missing optional directories", report.missing_optional_dirs),
        ("Missing optional files", report.missing_optional_files),
    ]
    for label, names in sections:
        if names:
            print(f"{label}:")
            for name in names:
                print(f"  - {name}")

    if report.size_bytes >= 0:
        print(f"Size: {report.size_bytes:,} bytes")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
