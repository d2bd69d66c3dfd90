from __future__ import annotations

import re

from wpmdb_installer.domain.diagnostics import Diagnostic, Severity, ValueLocation
from wpmdb_installer.domain.errors import InvalidVersionError
from wpmdb_installer.domain.variants import PACKAGE_NAME, WILDCARD_VERSION

# major.minor.patch[.build]: one digit each, patch may have two.
EXACT_VERSION_PATTERN = re.compile(r"\d\.\d\.\d{1,2}(?:\.\d)?", re.ASCII)


def validate_version(version: str, package_name: str = PACKAGE_NAME) -> list[Diagnostic]:
    if version == WILDCARD_VERSION:
        return []
    if EXACT_VERSION_PATTERN.fullmatch(version):
        return []
    return [
        Diagnostic(
            code="VERSION_INVALID",
            rule="version.exact",
            severity=Severity.ERROR,
            message=(
                f"The version constraint of {package_name} should be exact "
                f'(with 3 or 4 digits). Invalid version string "{version}"'
            ),
            location=ValueLocation("version", version),
            hint='Use "*" for the latest release or a version such as 2.6.10',
        )
    ]


def require_valid_version(version: str, package_name: str = PACKAGE_NAME) -> str:
    """Return ``version`` unchanged, or raise :class:`InvalidVersionError`."""
    diagnostics = validate_version(version, package_name)
    if diagnostics:
        raise InvalidVersionError(
            diagnostics[0].message,
            details={"package": package_name, "version": version},
            hint=diagnostics[0].hint,
            diagnostics=diagnostics,
        )
    return version
