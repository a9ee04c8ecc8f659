"""lifochain.script — YAML-driven chain scripts."""

from lifochain.script.parser import parse_script_file, parse_script_dict, ScriptSpec, OpSpec, ScriptParseError
from lifochain.script.merger import merge_script_files
from lifochain.script.engine import run_script, execute, ScriptResult, OpResult, ScriptError

__all__ = [
    "parse_script_file",
    "parse_script_dict",
    "ScriptSpec",
    "OpSpec",
    "ScriptParseError",
    "merge_script_files",
    "run_script",
    "execute",
    "ScriptResult",
    "OpResult",
    "ScriptError",
]
