from __future__ import annotations

import json
from pathlib import Path

import jsonschema

from wpmdb_installer.domain.diagnostics import Diagnostic, Severity
from wpmdb_installer.domain.json_types import JsonDict, as_json_dict
from wpmdb_installer.ports.policy_engine import LockPolicyPort

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "schemas" / "lock.schema.v1.json"


def load_schema(path: Path = SCHEMA_PATH) -> JsonDict:
    return as_json_dict(json.loads(path.read_text(encoding="utf-8")))


class LockSchemaPolicy(LockPolicyPort):
    def __init__(self, schema_path: Path = SCHEMA_PATH) -> None:
        self.schema = load_schema(schema_path)

    def validate_lock(self, lock: JsonDict) -> list[Diagnostic]:
        validator = jsonschema.Draft202012Validator(self.schema)
        diagnostics: list[Diagnostic] = []
        errors = sorted(
            validator.iter_errors(lock), key=lambda e: [str(p) for p in e.path]
        )
        for error in errors:
            where = "/".join(str(part) for part in error.path) or "<root>"
            diagnostics.append(
                Diagnostic(
                    code="LOCK_SCHEMA_INVALID",
                    rule="lock.schema",
                    severity=Severity.ERROR,
                    message=f"{where}: {error.message}",
                    details={"path": [str(part) for part in error.path]},
                )
            )
        return diagnostics
