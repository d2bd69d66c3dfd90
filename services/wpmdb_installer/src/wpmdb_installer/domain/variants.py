from __future__ import annotations

from enum import Enum

PACKAGE_NAME = "deliciousbrains/wp-migrate-db-pro"

# Download location without filename, version and credentials.
DIST_BASE_URL = "https://deliciousbrains.com/dl/"

WILDCARD_VERSION = "*"
LATEST_TOKEN = "latest"


class PackageVariant(str, Enum):
    MAIN = "main"
    CLI = "cli"
    MEDIA_FILES = "media-files"

    @property
    def prefix(self) -> str:
        return _FILENAME_PREFIXES[self]


_FILENAME_PREFIXES = {
    PackageVariant.MAIN: "wp-migrate-db-pro-",
    PackageVariant.CLI: "wp-migrate-db-pro-cli-",
    PackageVariant.MEDIA_FILES: "wp-migrate-db-pro-media-files-",
}

# Most specific marker first: every add-on marker also contains the main name.
VARIANT_MARKERS: tuple[tuple[str, PackageVariant], ...] = (
    ("wp-migrate-db-pro-media-files", PackageVariant.MEDIA_FILES),
    ("wp-migrate-db-pro-cli", PackageVariant.CLI),
)


def classify_variant(source_url: str) -> PackageVariant:
    for marker, variant in VARIANT_MARKERS:
        if marker in source_url:
            return variant
    return PackageVariant.MAIN


def version_token(version: str) -> str:
    return LATEST_TOKEN if version == WILDCARD_VERSION else version


def build_canonical_url(variant: PackageVariant, version: str) -> str:
    """Secret-free download URL for a validated version, safe to persist."""
    return DIST_BASE_URL + variant.prefix + version_token(version) + ".zip"


def is_distribution_url(url: str) -> bool:
    return DIST_BASE_URL in url


def package_name_for(variant: PackageVariant) -> str:
    if variant is PackageVariant.MAIN:
        return PACKAGE_NAME
    return f"{PACKAGE_NAME}-{variant.value}"
