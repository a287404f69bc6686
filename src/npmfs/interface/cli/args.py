from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Declares the command-line schema and translates the parsed namespace into
configuration overrides understood by the structure checker.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the npmfs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="npmfs",
        description="Check that a directory has the layout of an npm package.",
    )

    # --- Target ---
    p.add_argument(
        "-p", "--path",
        dest="root_path",
        default=None,
        help="Directory to check (default: current directory).",
    )
    p.add_argument(
        "--discover",
        action="store_true",
        help="Walk upward from --path to the nearest directory holding the manifest.",
    )
    p.add_argument(
        "--manifest",
        dest="manifest_name",
        default=None,
        help="Manifest file name (default: package.json).",
    )

    # --- Declared layout ---
    p.add_argument("--require-dirs", dest="required_dirs", default=None,
                   help="Comma-separated directories that must exist.")
    p.add_argument("--require-files", dest="required_files", default=None,
                   help="Comma-separated files that must exist.")
    p.add_argument("--optional-dirs", dest="optional_dirs", default=None,
                   help="Comma-separated directories that may exist.")
    p.add_argument("--optional-files", dest="optional_files", default=None,
                   help="Comma-separated files that may exist.")

    # --- Manifest expectations ---
    p.add_argument("--require-keys", dest="required_manifest_keys", default=None,
                   help="Comma-separated top-level manifest keys that must be declared.")
    p.add_argument("--require-scripts", dest="required_scripts", default=None,
                   help="Comma-separated entries that must exist under \"scripts\".")

    # --- Behaviour ---
    p.add_argument(
        "--size",
        action="store_true",
        help="Report the aggregate size of the checked directory.",
    )
    p.add_argument(
        "--strict-optional",
        action="store_true",
        help="Fail when an optional entry is missing too.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Configuration file (default: ./.npmfs.json when present).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore configuration files and start from built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        dest="save_config_file",
        default=None,
        help="Write the effective configuration to FILE and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the report as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

_CSV_FIELDS = [
    "required_dirs", "required_files", "optional_dirs", "optional_files",
    "required_manifest_keys", "required_scripts",
]


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Only the values the user actually set.
    """
    overrides: Dict[str, Any] = {
        "root_path": args.root_path,
        "manifest_name": args.manifest_name,
    }

    for name in _CSV_FIELDS:
        value = getattr(args, name)
        if value is not None:
            overrides[name] = _split_csv(value)

    if args.discover:
        overrides["discover_root"] = True
    if args.size:
        overrides["measure_size"] = True
    if args.strict_optional:
        overrides["fail_on_optional"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated string; an empty string yields an empty list."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
