"""
lifochain.script.engine — Script runner.

Merges script files, parses them, then replays the ops against a
fresh Chain, checking expectations as it goes.

    lifochain run -f script.yaml -f more.yaml
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lifochain.core.chain import Chain
from lifochain.core.link import ChainError, Empty
from lifochain.script.merger import merge_script_files
from lifochain.script.parser import OpSpec, ScriptParseError, ScriptSpec, parse_script_dict

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """Script execution error."""
    pass


@dataclass
class OpResult:
    """Outcome of one op."""
    op: str
    value: Any = None
    empty: bool = False

    def to_dict(self) -> dict[str, Any]:
        if self.empty:
            return {"op": self.op, "empty": True}
        if self.op == "push":
            return {"op": self.op}
        return {"op": self.op, "result": self.value}


@dataclass
class ScriptResult:
    """Outcome of a whole script run."""
    name: str
    results: list[OpResult] = field(default_factory=list)
    released: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "results": [r.to_dict() for r in self.results],
            "released": self.released,
        }


def run_script(file_paths: list[str | Path]) -> ScriptResult:
    """Merge, parse and execute script files.

    Raises:
        ScriptError: parse error, failed expectation or chain misuse
        FileNotFoundError: a file does not exist
    """
    try:
        merged = merge_script_files(file_paths)
        spec = parse_script_dict(merged)
    except ScriptParseError as e:
        raise ScriptError(f"Script parse error: {e}") from e

    return execute(spec)


def execute(spec: ScriptSpec) -> ScriptResult:
    """Run every op of `spec` against a new chain.

    The chain is torn down at the end (or by a `close` op); the number
    of nodes released is reported.
    """
    result = ScriptResult(name=spec.name)
    chain: Chain[Any] = Chain()

    logger.debug("Running script '%s' (%d ops)", spec.name, len(spec.ops))
    try:
        for i, op in enumerate(spec.ops):
            try:
                outcome = _apply(chain, op, result)
            except ChainError as e:
                raise ScriptError(f"ops[{i}] ({op.name}): {e}") from e
            _check_expect(op, outcome, i)
            result.results.append(outcome)
    finally:
        result.released += chain.close()

    return result


def _apply(chain: Chain[Any], op: OpSpec, result: ScriptResult) -> OpResult:
    """Apply one op and wrap its outcome."""
    if op.name == "push":
        chain.push(op.arg)
        return OpResult(op="push")

    if op.name == "pop":
        value = chain.pop()
    elif op.name == "peek":
        value = chain.peek()
    elif op.name == "peek_mut":
        front = chain.peek_mut()
        value = front if isinstance(front, Empty) else front.replace(op.arg)
    elif op.name == "is_empty":
        value = chain.is_empty()
    elif op.name == "close":
        released = chain.close()
        result.released += released
        value = released
    else:
        raise ScriptError(f"Unknown operation '{op.name}'")

    if isinstance(value, Empty):
        return OpResult(op=op.name, empty=True)
    return OpResult(op=op.name, value=value)


def _check_expect(op: OpSpec, outcome: OpResult, index: int) -> None:
    """Compare an outcome with the op's expect / expect_empty."""
    where = f"ops[{index}] ({op.name})"

    if op.expect_empty and not outcome.empty:
        raise ScriptError(f"{where}: expected EMPTY, got {outcome.value!r}")

    if op.has_expect:
        if outcome.empty:
            raise ScriptError(f"{where}: expected {op.expect!r}, got EMPTY")
        if outcome.value != op.expect:
            raise ScriptError(
                f"{where}: expected {op.expect!r}, got {outcome.value!r}"
            )
