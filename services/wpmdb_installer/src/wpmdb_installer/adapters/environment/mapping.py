from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values


class MappingEnvironment:
    def __init__(self, values: Mapping[str, str | None]) -> None:
        self._values = dict(values)

    @classmethod
    def from_env_file(cls, path: Path) -> MappingEnvironment:
        """File values layered under the process environment."""
        return cls({**dotenv_values(path), **os.environ})

    def get(self, name: str) -> str | None:
        return self._values.get(name)
