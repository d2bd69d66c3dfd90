from __future__ import annotations

from pathlib import Path

import yaml

from wpmdb_installer.domain.diagnostics import (
    Diagnostic,
    EntryLocation,
    FileLocation,
    Severity,
)
from wpmdb_installer.domain.json_types import as_json_dict, as_json_list
from wpmdb_installer.domain.package import PackageRef
from wpmdb_installer.domain.result import Result

DEFAULT_MANIFEST_NAME = "wpmdb-pro.yaml"

_REQUIRED_KEYS = ("name", "version", "source")


def load_manifest(path: Path) -> Result[list[PackageRef]]:
    """
    Read package definitions from a YAML manifest.

    The manifest lists the packages to resolve::

        packages:
          - name: deliciousbrains/wp-migrate-db-pro
            version: "2.6.10"
            source: https://deliciousbrains.com/dl/wp-migrate-db-pro.zip
    """
    if not path.exists():
        return Result(
            diagnostics=[
                Diagnostic(
                    code="MANIFEST_MISSING",
                    rule="manifest.exists",
                    severity=Severity.ERROR,
                    message=f"{path.name} not found",
                    location=FileLocation(str(path)),
                )
            ]
        )
    try:
        raw: object = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="MANIFEST_PARSE_FAILED",
                    rule="manifest.parse",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(path)),
                )
            ]
        )

    diagnostics: list[Diagnostic] = []
    packages: list[PackageRef] = []
    for index, item in enumerate(as_json_list(as_json_dict(raw).get("packages"))):
        entry = as_json_dict(item)
        missing = [key for key in _REQUIRED_KEYS if entry.get(key) in (None, "")]
        if missing:
            diagnostics.append(
                Diagnostic(
                    code="MANIFEST_ENTRY_INVALID",
                    rule="manifest.packages",
                    severity=Severity.ERROR,
                    message=f"Package entry {index} is missing {', '.join(missing)}",
                    location=EntryLocation(str(path), index),
                )
            )
            continue
        packages.append(
            PackageRef(
                name=str(entry["name"]),
                pretty_version=str(entry["version"]),
                source_url=str(entry["source"]),
            )
        )
    if not packages and not diagnostics:
        diagnostics.append(
            Diagnostic(
                code="MANIFEST_EMPTY",
                rule="manifest.packages",
                severity=Severity.WARN,
                message=f"{path.name} declares no packages",
                location=FileLocation(str(path)),
            )
        )
    return Result(value=packages, diagnostics=diagnostics)
