from __future__ import annotations

import logging
from pathlib import Path

from wpmdb_installer.application.lock import (
    LockDict,
    lock_entry,
    new_lock,
    read_lock,
    upsert_entry,
    write_lock,
)
from wpmdb_installer.application.manifest import load_manifest
from wpmdb_installer.application.resolve import resolve_package
from wpmdb_installer.domain.diagnostics import (
    Diagnostic,
    FileLocation,
    Severity,
    has_errors,
)
from wpmdb_installer.domain.errors import CredentialLeakError, InvalidVersionError
from wpmdb_installer.domain.json_types import JsonDict
from wpmdb_installer.domain.package import PackageRef
from wpmdb_installer.domain.result import Result

log = logging.getLogger(__name__)


def _artifact(package: PackageRef) -> JsonDict:
    return {"name": package.name, "dist_url": package.dist_url}


def _load_or_new(lock_path: Path) -> Result[LockDict]:
    if not lock_path.exists():
        return Result(value=new_lock())
    return read_lock(lock_path)


def _write(lock_path: Path, lock: LockDict) -> list[Diagnostic]:
    try:
        write_lock(lock_path, lock)
    except CredentialLeakError as e:
        log.error("Lock not written: %s", e)
        return [
            Diagnostic(
                code="LOCK_SECRET_LEAK",
                rule="lock.dist_url.credentials",
                severity=Severity.ERROR,
                message=e.message,
                location=FileLocation(str(lock_path)),
                hint="Re-resolve the package; credentials belong in the environment",
                details=e.details,
            )
        ]
    return []


def resolve_into_lock(lock_path: Path, package: PackageRef) -> Result[PackageRef]:
    """Resolve one package and record it in the lock, keeping other entries."""
    lock_result = _load_or_new(lock_path)
    if lock_result.value is None:
        return Result(diagnostics=lock_result.diagnostics)
    try:
        resolved = resolve_package(package)
    except InvalidVersionError as e:
        return Result(diagnostics=e.diagnostics)

    write_diagnostics = _write(
        lock_path, upsert_entry(lock_result.value, lock_entry(resolved))
    )
    if write_diagnostics:
        return Result(diagnostics=write_diagnostics)
    log.info("Locked %s %s", resolved.name, resolved.pretty_version)
    return Result(value=resolved, artifacts=[_artifact(resolved)])


def sync_lock(manifest_path: Path, lock_path: Path) -> Result[list[PackageRef]]:
    """
    Resolve every manifest package and rewrite the lock from scratch.

    A single invalid version aborts the whole step: the lock is written only
    when every package resolved.
    """
    manifest_result = load_manifest(manifest_path)
    diagnostics: list[Diagnostic] = list(manifest_result.diagnostics)
    if manifest_result.value is None or has_errors(diagnostics):
        return Result(diagnostics=diagnostics)

    resolved: list[PackageRef] = []
    for package in manifest_result.value:
        try:
            resolved.append(resolve_package(package))
        except InvalidVersionError as e:
            diagnostics.extend(e.diagnostics)
    if has_errors(diagnostics):
        failed = len(manifest_result.value) - len(resolved)
        log.error("Lock not written: %d package(s) failed to resolve", failed)
        return Result(diagnostics=diagnostics)

    lock = new_lock()
    for package in resolved:
        lock = upsert_entry(lock, lock_entry(package))
    write_diagnostics = _write(lock_path, lock)
    if write_diagnostics:
        return Result(diagnostics=diagnostics + write_diagnostics)
    log.info("Locked %d package(s) in %s", len(resolved), lock_path)
    return Result(
        value=resolved,
        diagnostics=diagnostics,
        artifacts=[_artifact(p) for p in resolved],
    )
