from wpmdb_installer.ports.fetcher import FetcherPort


class AuthenticatedFetcher:
    """
    Fetcher bound to a URL that carries credentials.

    Whatever URL the host asks for, the bound URL is fetched through the
    wrapped fetcher, so the credentials never reach the host's records.
    """

    def __init__(self, fetch_url: str, inner: FetcherPort) -> None:
        self._fetch_url = fetch_url
        self.inner = inner

    def fetch(self, url: str) -> bytes:
        return self.inner.fetch(self._fetch_url)

    def __repr__(self) -> str:
        return f"AuthenticatedFetcher(inner={self.inner!r})"
