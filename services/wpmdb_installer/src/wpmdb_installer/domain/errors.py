from __future__ import annotations

from dataclasses import dataclass, field

from wpmdb_installer.domain.diagnostics import Diagnostic
from wpmdb_installer.domain.json_types import JsonDict


@dataclass
class InstallerError(Exception):
    message: str
    details: JsonDict | None = None
    hint: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidVersionError(InstallerError):
    diagnostics: list[Diagnostic] = field(default_factory=list)


class MissingKeyError(InstallerError):
    """The licence key is not available in the environment."""

    def __init__(self, variable: str) -> None:
        super().__init__(
            "Could not find a key for WP Migrate DB Pro. "
            "Please make it available via the environment variable " + variable,
            details={"variable": variable},
        )
        self.variable = variable


class MissingSiteUrlError(InstallerError):
    """The site URL is not available in the environment."""

    def __init__(self, variable: str) -> None:
        super().__init__(
            "Could not find a site URL for WP Migrate DB Pro. "
            "Please make it available via the environment variable " + variable,
            details={"variable": variable},
        )
        self.variable = variable


class CredentialLeakError(InstallerError):
    pass
