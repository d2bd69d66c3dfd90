from __future__ import annotations

import tomllib
from pathlib import Path

import tomli_w

from wpmdb_installer.domain.diagnostics import Diagnostic, FileLocation, Severity
from wpmdb_installer.domain.errors import CredentialLeakError
from wpmdb_installer.domain.json_types import JsonDict, as_json_dict, as_json_dicts
from wpmdb_installer.domain.package import PackageRef
from wpmdb_installer.domain.result import Result
from wpmdb_installer.domain.url_params import carries_credentials

LockDict = JsonDict

DEFAULT_LOCK_NAME = ".wpmdb-pro.toml"
TOOL_NAME = "wpmdb-pro-installer"
TOOL_VERSION = "0.1.0"


def new_lock() -> LockDict:
    return {"tool": {"name": TOOL_NAME, "version": TOOL_VERSION}, "packages": []}


def read_lock(path: Path) -> Result[LockDict]:
    if not path.exists():
        return Result(
            diagnostics=[
                Diagnostic(
                    code="LOCK_MISSING",
                    rule="lock.exists",
                    severity=Severity.ERROR,
                    message=f"{path.name} not found",
                    location=FileLocation(str(path)),
                    hint="Run `wpmdb-pro resolve` or `wpmdb-pro sync` first",
                )
            ]
        )
    try:
        raw = as_json_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="LOCK_PARSE_FAILED",
                    rule="lock.parse",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(path)),
                )
            ]
        )
    return Result(value=raw)


def lock_entries(lock: LockDict) -> list[JsonDict]:
    return as_json_dicts(lock.get("packages"))


def lock_entry(package: PackageRef) -> JsonDict:
    if package.dist_url is None:
        raise ValueError(f"Package {package.name} has not been resolved")
    return {
        "name": package.name,
        "version": package.pretty_version,
        "source": package.source_url,
        "variant": package.variant.value,
        "dist_url": package.dist_url,
    }


def find_entry(lock: LockDict, name: str) -> JsonDict | None:
    for entry in lock_entries(lock):
        if entry.get("name") == name:
            return entry
    return None


def upsert_entry(lock: LockDict, entry: JsonDict) -> LockDict:
    """Return a copy of ``lock`` holding ``entry``, entries sorted by name."""
    entries = [e for e in lock_entries(lock) if e.get("name") != entry.get("name")]
    entries.append(entry)
    entries.sort(key=lambda e: str(e.get("name", "")))
    updated: LockDict = dict(lock)
    updated["packages"] = list(entries)
    return updated


def write_lock(path: Path, lock: LockDict) -> None:
    for entry in lock_entries(lock):
        if carries_credentials(str(entry.get("dist_url", ""))):
            raise CredentialLeakError(
                f"Refusing to write credentials for {entry.get('name')} to {path.name}",
                details={"package": entry.get("name")},
            )
    path.write_text(tomli_w.dumps(dict(lock)), encoding="utf-8")
