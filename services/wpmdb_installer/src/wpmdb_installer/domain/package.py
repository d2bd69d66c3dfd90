from dataclasses import dataclass, replace

from wpmdb_installer.domain.variants import PackageVariant, classify_variant


@dataclass(frozen=True)
class PackageRef:
    name: str
    pretty_version: str
    source_url: str
    dist_url: str | None = None

    @property
    def variant(self) -> PackageVariant:
        return classify_variant(self.source_url)

    def with_dist_url(self, dist_url: str) -> "PackageRef":
        return replace(self, dist_url=dist_url)
