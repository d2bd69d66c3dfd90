from __future__ import annotations

from pathlib import Path

from wpmdb_installer.application.credentials import (
    licence_key_from_env,
    site_url_from_env,
)
from wpmdb_installer.application.lock import find_entry, read_lock
from wpmdb_installer.application.resolve import build_authenticated_url
from wpmdb_installer.domain.diagnostics import Diagnostic, Severity, ValueLocation
from wpmdb_installer.domain.errors import MissingKeyError, MissingSiteUrlError
from wpmdb_installer.domain.result import Result
from wpmdb_installer.ports.environment import EnvironmentPort


def fetch_url_for(lock_path: Path, name: str, env: EnvironmentPort) -> Result[str]:
    """Build the one-off download URL for a locked package."""
    lock_result = read_lock(lock_path)
    if lock_result.value is None:
        return Result(diagnostics=lock_result.diagnostics)

    entry = find_entry(lock_result.value, name)
    if entry is None or not entry.get("dist_url"):
        return Result(
            diagnostics=[
                Diagnostic(
                    code="LOCK_ENTRY_MISSING",
                    rule="lock.packages",
                    severity=Severity.ERROR,
                    message=f"{name} is not locked in {lock_path.name}",
                    location=ValueLocation("name", name),
                )
            ]
        )

    try:
        licence_key = licence_key_from_env(env)
        site_url = site_url_from_env(env)
    except (MissingKeyError, MissingSiteUrlError) as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CREDENTIALS_MISSING",
                    rule="env.credentials",
                    severity=Severity.ERROR,
                    message=e.message,
                    details=e.details,
                    hint="Set it in the environment or in a .env file",
                )
            ]
        )
    fetch_url = build_authenticated_url(str(entry["dist_url"]), licence_key, site_url)
    return Result(value=fetch_url)
