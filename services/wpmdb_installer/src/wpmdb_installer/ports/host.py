"""
Events delivered by the host dependency manager and the hooks it calls.

The host resolves packages first (the dist URL set here ends up in its lock
file) and later downloads them, one pre-download event per file.
"""

from dataclasses import dataclass
from typing import Literal, Protocol

from wpmdb_installer.domain.package import PackageRef
from wpmdb_installer.ports.fetcher import FetcherPort

JobType = Literal["install", "update"]


@dataclass
class PackageOperation:
    job_type: JobType
    package: PackageRef | None = None
    target_package: PackageRef | None = None

    @property
    def subject(self) -> PackageRef:
        # update operations carry the new version as the target package
        package = self.target_package if self.job_type == "update" else self.package
        if package is None:
            raise ValueError(f"{self.job_type} operation has no package")
        return package


@dataclass
class PackageEvent:
    operation: PackageOperation

    @property
    def package(self) -> PackageRef:
        return self.operation.subject

    def set_dist_url(self, dist_url: str) -> None:
        revised = self.package.with_dist_url(dist_url)
        if self.operation.job_type == "update":
            self.operation.target_package = revised
        else:
            self.operation.package = revised


@dataclass
class PreFileDownloadEvent:
    processed_url: str
    fetcher: FetcherPort

    def set_fetcher(self, fetcher: FetcherPort) -> None:
        self.fetcher = fetcher


class InstallerPluginPort(Protocol):
    def add_version(self, event: PackageEvent) -> None: ...

    def add_params(self, event: PreFileDownloadEvent) -> None: ...
