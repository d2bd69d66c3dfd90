from wpmdb_installer.adapters.fetcher.authenticated import AuthenticatedFetcher


class EchoFetcher:
    def fetch(self, url):
        return url.encode()

    def __repr__(self):
        return "EchoFetcher()"


def test_fetches_bound_url_whatever_is_requested():
    fetcher = AuthenticatedFetcher("https://x/y.zip?licence_key=secret", EchoFetcher())
    assert fetcher.fetch("https://x/y.zip") == b"https://x/y.zip?licence_key=secret"


def test_repr_hides_credentials():
    fetcher = AuthenticatedFetcher("https://x/y.zip?licence_key=secret", EchoFetcher())
    assert "secret" not in repr(fetcher)
