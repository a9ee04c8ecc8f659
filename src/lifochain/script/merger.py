"""
lifochain.script.merger — Script overlay merger.

Combines multiple -f files:
  lifochain run -f script.yaml -f more.yaml

Merge strategy:
  - First file must be the base script (apiVersion, kind, metadata, ops)
  - Subsequent files are overlays: their ops are appended in order
  - An overlay's metadata.name replaces the base name

Overlay format:
    metadata:
      name: basics-extended
    ops:
      - pop
      - pop: null
        expect_empty: true
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from lifochain.script.parser import ScriptParseError, load_yaml


def merge_script_files(file_paths: list[str | Path]) -> dict[str, Any]:
    """Merge a base script with overlay files.

    Args:
        file_paths: File paths list (base first)

    Returns:
        Merged script dict
    """
    if not file_paths:
        raise ValueError("At least one file is required")

    base = load_yaml(file_paths[0])
    for fp in file_paths[1:]:
        base = merge_overlay(base, load_yaml(fp))
    return base


def merge_overlay(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Append overlay ops to base and apply its name override."""
    result = copy.deepcopy(base)

    extra_ops = overlay.get("ops", []) or []
    if not isinstance(extra_ops, list):
        raise ScriptParseError("overlay ops must be a list")

    ops = list(result.get("ops", []) or [])
    ops.extend(copy.deepcopy(extra_ops))
    result["ops"] = ops

    metadata = overlay.get("metadata") or {}
    if isinstance(metadata, dict) and metadata.get("name"):
        result.setdefault("metadata", {})
        if not isinstance(result["metadata"], dict):
            result["metadata"] = {}
        result["metadata"]["name"] = metadata["name"]

    return result
