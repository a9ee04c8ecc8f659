"""
lifochain.script.parser — Script YAML parser.

script.yaml format:

    apiVersion: lifochain.io/v1
    kind: Script
    metadata:
      name: basics
    ops:
      - push: 1
      - push: 2
      - pop: null
        expect: 2
      - peek_mut: after
      - pop
      - pop: null
        expect_empty: true

An op is either a bare name (pop, peek, is_empty, close) or a mapping
with one operation key and optional `expect` / `expect_empty`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

API_VERSION = "lifochain.io/v1"

# operation name → argument required
OPERATIONS: dict[str, bool] = {
    "push": True,
    "pop": False,
    "peek": False,
    "peek_mut": True,
    "is_empty": False,
    "close": False,
}

_EXPECT_KEYS = ("expect", "expect_empty")

# Distinguishes "no expect given" from "expect: null"
_UNSET = object()


@dataclass
class OpSpec:
    """A single scripted chain operation."""
    name: str
    arg: Any = None
    expect: Any = _UNSET
    expect_empty: bool = False

    @property
    def has_expect(self) -> bool:
        return self.expect is not _UNSET


@dataclass
class ScriptSpec:
    """Parsed script definition."""
    name: str
    ops: list[OpSpec] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)


class ScriptParseError(Exception):
    """Script parse error."""
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping from disk."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Script file not found: {p}")

    try:
        with open(p) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScriptParseError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScriptParseError(
            f"Script file must be a YAML mapping, got {type(data).__name__}"
        )
    return data


def parse_script_file(path: str | Path) -> ScriptSpec:
    """Parse a script.yaml file.

    Raises:
        ScriptParseError: Format error
        FileNotFoundError: File not found
    """
    return parse_script_dict(load_yaml(path))


def parse_script_dict(data: dict[str, Any]) -> ScriptSpec:
    """Create a ScriptSpec from a dict."""
    api_version = data.get("apiVersion", "")
    if api_version and api_version != API_VERSION:
        raise ScriptParseError(
            f"Unsupported apiVersion: '{api_version}'. Expected '{API_VERSION}'"
        )

    kind = data.get("kind", "")
    if kind and kind != "Script":
        raise ScriptParseError(f"Unsupported kind: '{kind}'. Expected 'Script'")

    metadata = data.get("metadata", {}) or {}
    if not isinstance(metadata, dict):
        raise ScriptParseError("metadata must be a mapping")

    name = metadata.get("name", "")
    if not name:
        raise ScriptParseError("metadata.name is required")

    ops_raw = data.get("ops", []) or []
    if not isinstance(ops_raw, list):
        raise ScriptParseError("ops must be a list")

    ops = [parse_op(item, i) for i, item in enumerate(ops_raw)]

    return ScriptSpec(name=str(name), ops=ops, raw=data)


def parse_op(item: Any, index: int = 0) -> OpSpec:
    """Parse one entry of the ops list."""
    where = f"ops[{index}]"

    if isinstance(item, str):
        if item not in OPERATIONS:
            raise ScriptParseError(f"{where}: unknown operation '{item}'")
        if OPERATIONS[item]:
            raise ScriptParseError(f"{where}: '{item}' requires an argument")
        return OpSpec(name=item)

    if not isinstance(item, dict):
        raise ScriptParseError(f"{where} must be a string or a mapping")

    op_keys = [k for k in item if k not in _EXPECT_KEYS]
    if len(op_keys) != 1:
        raise ScriptParseError(
            f"{where} must name exactly one operation, got {op_keys or 'none'}"
        )

    name = op_keys[0]
    if name not in OPERATIONS:
        raise ScriptParseError(f"{where}: unknown operation '{name}'")

    arg = item[name]
    if not OPERATIONS[name] and arg is not None:
        raise ScriptParseError(f"{where}: '{name}' takes no argument")

    expect_empty = item.get("expect_empty", False)
    if not isinstance(expect_empty, bool):
        raise ScriptParseError(f"{where}.expect_empty must be a boolean")

    if expect_empty and "expect" in item:
        raise ScriptParseError(
            f"{where}: 'expect' and 'expect_empty' are mutually exclusive"
        )

    return OpSpec(
        name=name,
        arg=arg,
        expect=item.get("expect", _UNSET),
        expect_empty=expect_empty,
    )
