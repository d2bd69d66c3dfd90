"""
Host plugin that makes installing WP Migrate DB Pro possible.

The plugin does not offer a way to be installed through a package registry.
The host is given a package definition (name, exact version, source URL);
this plugin turns the version into a versioned download URL when packages
are resolved, and adds the licence key and site URL from the environment
only when the file is downloaded. The credentials therefore never show up
in the host's lock file.
"""

from __future__ import annotations

import logging

from wpmdb_installer.adapters.fetcher.authenticated import AuthenticatedFetcher
from wpmdb_installer.application.credentials import (
    licence_key_from_env,
    site_url_from_env,
)
from wpmdb_installer.application.resolve import build_authenticated_url, resolve_dist_url
from wpmdb_installer.domain.variants import PACKAGE_NAME, is_distribution_url
from wpmdb_installer.ports.environment import EnvironmentPort
from wpmdb_installer.ports.host import (
    InstallerPluginPort,
    PackageEvent,
    PreFileDownloadEvent,
)

log = logging.getLogger(__name__)


def is_handled_package(name: str) -> bool:
    """The main plugin and its add-ons (``-cli``, ``-media-files``)."""
    return name == PACKAGE_NAME or name.startswith(PACKAGE_NAME + "-")


class WpMigrateDbProPlugin(InstallerPluginPort):
    def __init__(self, env: EnvironmentPort) -> None:
        self.env = env

    def add_version(self, event: PackageEvent) -> None:
        """
        Put the version into the package's dist URL.

        Different versions must end up with different URLs in the host's
        lock file, otherwise a cached archive of another version would be
        reused. An invalid version raises and aborts the resolution.
        """
        package = event.package
        if not is_handled_package(package.name):
            return
        dist_url = resolve_dist_url(
            package.name, package.source_url, package.pretty_version
        )
        event.set_dist_url(dist_url)
        log.debug("Resolved %s %s to %s", package.name, package.pretty_version, dist_url)

    def add_params(self, event: PreFileDownloadEvent) -> None:
        """
        Swap in a fetcher whose URL carries the licence key and site URL.

        The event's processed URL is left untouched so the credentials are
        never recorded by the host.
        """
        processed_url = event.processed_url
        if not is_distribution_url(processed_url):
            return
        fetch_url = build_authenticated_url(
            processed_url,
            licence_key_from_env(self.env),
            site_url_from_env(self.env),
        )
        event.set_fetcher(AuthenticatedFetcher(fetch_url, event.fetcher))
        log.debug("Authenticated download of %s", processed_url)
