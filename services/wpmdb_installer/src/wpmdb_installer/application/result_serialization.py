from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import TypeVar

from wpmdb_installer.application.lock import TOOL_NAME, TOOL_VERSION
from wpmdb_installer.domain.diagnostics import Diagnostic, Location
from wpmdb_installer.domain.json_types import JsonDict, as_json_dict
from wpmdb_installer.domain.result import Result

T = TypeVar("T")

RESULT_SCHEMA_VERSION = 1


def _serialize_location(location: Location | None) -> JsonDict | None:
    if location is None:
        return None
    return as_json_dict(asdict(location))


def serialize_diagnostic(diag: Diagnostic) -> JsonDict:
    return as_json_dict(
        {
            "id": diag.id,
            "code": diag.code,
            "rule": diag.rule,
            "severity": diag.severity.value,
            "message": diag.message,
            "hint": diag.hint,
            "details": diag.details,
            "is_execution": diag.is_execution,
            "location": _serialize_location(diag.location),
        }
    )


def serialize_result(result: Result[T], command: str, args: list[str]) -> JsonDict:
    """JSON envelope printed by ``--json``; artifacts never carry credentials."""
    return as_json_dict(
        {
            "result_schema_version": RESULT_SCHEMA_VERSION,
            "tool": {"name": TOOL_NAME, "version": TOOL_VERSION},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "command": command,
            "args": args,
            "exit_code": result.exit_code,
            "diagnostics": [serialize_diagnostic(d) for d in result.diagnostics],
            "artifacts": result.artifacts,
        }
    )
