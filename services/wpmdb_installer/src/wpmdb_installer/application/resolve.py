"""
Entry points used by the host glue.

``resolve_dist_url`` runs once per package when the host resolves its
dependencies; the URL it returns is written to the host's lock file.
``build_authenticated_url`` runs once per download and its result must not
be stored anywhere.
"""

from __future__ import annotations

from wpmdb_installer.domain.package import PackageRef
from wpmdb_installer.domain.url_params import compose_fetch_url
from wpmdb_installer.domain.variants import build_canonical_url, classify_variant
from wpmdb_installer.domain.versioning import require_valid_version


def resolve_dist_url(package_name: str, source_url: str, pretty_version: str) -> str:
    version = require_valid_version(pretty_version, package_name)
    return build_canonical_url(classify_variant(source_url), version)


def resolve_package(package: PackageRef) -> PackageRef:
    dist_url = resolve_dist_url(package.name, package.source_url, package.pretty_version)
    return package.with_dist_url(dist_url)


def build_authenticated_url(canonical_url: str, licence_key: str, site_url: str) -> str:
    return compose_fetch_url(canonical_url, licence_key, site_url)
