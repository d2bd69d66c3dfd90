from typing import Protocol


class FetcherPort(Protocol):
    def fetch(self, url: str) -> bytes: ...
