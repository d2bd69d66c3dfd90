from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from wpmdb_installer.application.lock import lock_entries, read_lock
from wpmdb_installer.domain.diagnostics import (
    Diagnostic,
    EntryLocation,
    Severity,
    apply_strictness,
)
from wpmdb_installer.domain.json_types import JsonDict
from wpmdb_installer.domain.result import Result
from wpmdb_installer.domain.url_params import carries_credentials
from wpmdb_installer.domain.variants import build_canonical_url, classify_variant
from wpmdb_installer.domain.versioning import validate_version
from wpmdb_installer.ports.policy_engine import LockPolicyPort


def _check_entry(entry: JsonDict, location: EntryLocation) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    name = str(entry.get("name", ""))
    version = str(entry.get("version", ""))
    source = str(entry.get("source", ""))
    dist_url = str(entry.get("dist_url", ""))

    if carries_credentials(dist_url):
        diagnostics.append(
            Diagnostic(
                code="LOCK_SECRET_LEAK",
                rule="lock.dist_url.credentials",
                severity=Severity.ERROR,
                message=f"Locked dist URL of {name} carries credentials",
                location=location,
                hint="Re-resolve the package; credentials belong in the environment",
            )
        )

    version_diagnostics = [
        replace(d, location=location) for d in validate_version(version, name)
    ]
    diagnostics.extend(version_diagnostics)
    if version_diagnostics:
        return diagnostics

    variant = classify_variant(source)
    if entry.get("variant") != variant.value:
        diagnostics.append(
            Diagnostic(
                code="LOCK_VARIANT_MISMATCH",
                rule="lock.variant",
                severity=Severity.ERROR,
                message=(
                    f"{name} is locked as {entry.get('variant')} "
                    f"but its source is a {variant.value} package"
                ),
                location=location,
            )
        )

    expected = build_canonical_url(variant, version)
    if dist_url != expected:
        diagnostics.append(
            Diagnostic(
                code="LOCK_DIST_URL_MISMATCH",
                rule="lock.dist_url.canonical",
                severity=Severity.WARN,
                message=f"Locked dist URL of {name} differs from {expected}",
                location=location,
                details={"expected": expected, "actual": dist_url},
                upgradeable=True,
            )
        )
    return diagnostics


def validate_lock(
    lock_path: Path,
    strict: bool = False,
    policy_engine: LockPolicyPort | None = None,
) -> Result[None]:
    diagnostics: list[Diagnostic] = []
    lock_result = read_lock(lock_path)
    diagnostics.extend(lock_result.diagnostics)
    if lock_result.value is None:
        return Result(diagnostics=apply_strictness(diagnostics, strict))

    lock = lock_result.value
    if policy_engine is not None:
        diagnostics.extend(policy_engine.validate_lock(lock))

    seen: set[str] = set()
    for index, entry in enumerate(lock_entries(lock)):
        name = str(entry.get("name", ""))
        location = EntryLocation(str(lock_path), index, name or None)
        if name in seen:
            diagnostics.append(
                Diagnostic(
                    code="LOCK_ENTRY_DUPLICATE",
                    rule="lock.packages",
                    severity=Severity.ERROR,
                    message=f"Duplicate package entry: {name}",
                    location=location,
                )
            )
            continue
        seen.add(name)
        diagnostics.extend(_check_entry(entry, location))

    return Result(diagnostics=apply_strictness(diagnostics, strict))
