from __future__ import annotations

"""
Project structure check orchestration.

Coordinates a full check of a package root:
1. Validates configuration and normalizes the target path.
2. Optionally discovers the package root by scanning upward for the manifest.
3. Compares the root against the declared required/optional contents.
4. Parses the manifest and checks required keys and scripts.
5. Measures the aggregate size when requested.
"""

import logging
import os
from dataclasses import replace
from typing import Any, Dict, Optional

from npmfs.core.config_validator import validate_config
from npmfs.core.elements.directory import DirectoryElement
from npmfs.core.elements.json_file import JSONFile
from npmfs.core.services.dir_size import size_of
from npmfs.core.services.tree_scanner import scan_dir_tree
from npmfs.core.structure.manifest import missing_manifest_keys, missing_scripts
from npmfs.core.structure.validator import StructureValidator
from npmfs.domain.element_models import DirContents
from npmfs.domain.structure_models import StructureReport
from npmfs.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def check_project(config: Optional[Dict[str, Any]]) -> StructureReport:
    """
    Check a package root against the configured layout.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        StructureReport: Every missing entry, key and script, plus the size
                         when 'measure_size' is set.

    Raises:
        ElementError: If the root is not an existing directory or the
                      manifest cannot be parsed.
    """
    logger.info("Structure check started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root_path = normalize_path(cfg["root_path"])
    manifest_name = cfg["manifest_name"]

    # -------------------------------------------------------------------------
    # 2) Root Discovery
    # -------------------------------------------------------------------------
    if cfg["discover_root"]:
        found = scan_dir_tree(root_path).file(manifest_name)
        if found is None:
            logger.warning(f"No '{manifest_name}' found above '{root_path}'. Checking it as-is.")
        else:
            root_path = found
            logger.info(f"Package root discovered at '{root_path}'")

    directory = DirectoryElement(root_path)

    # -------------------------------------------------------------------------
    # 3) Layout
    # -------------------------------------------------------------------------
    validator = StructureValidator(
        directory,
        required=DirContents(cfg["required_dirs"], cfg["required_files"]),
        optional=DirContents(cfg["optional_dirs"], cfg["optional_files"]),
    )
    report = validator.report()

    # -------------------------------------------------------------------------
    # 4) Manifest
    # -------------------------------------------------------------------------
    manifest_path = os.path.join(directory.path, manifest_name)
    if os.path.isfile(manifest_path):
        manifest = JSONFile(manifest_path)
        report = replace(
            report,
            missing_manifest_keys=missing_manifest_keys(manifest, cfg["required_manifest_keys"]),
            missing_scripts=missing_scripts(manifest, cfg["required_scripts"]),
        )
    else:
        logger.debug(f"No manifest at '{manifest_path}'; key and script checks skipped.")

    # -------------------------------------------------------------------------
    # 5) Size
    # -------------------------------------------------------------------------
    if cfg["measure_size"]:
        report = replace(report, size_bytes=size_of(directory.path))

    logger.info(f"Structure check finished for '{report.path}' (ok={report.ok}).")
    return report
