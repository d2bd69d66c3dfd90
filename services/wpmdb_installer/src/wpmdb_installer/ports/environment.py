from typing import Protocol


class EnvironmentPort(Protocol):
    def get(self, name: str) -> str | None: ...
