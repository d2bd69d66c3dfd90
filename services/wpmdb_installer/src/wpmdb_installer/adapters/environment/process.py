import logging
import os
from pathlib import Path

from dotenv import load_dotenv

log = logging.getLogger(__name__)


class ProcessEnvironment:
    """
    Reads variables from the process environment.

    A ``.env`` file in ``cwd`` (the working directory by default) is loaded on
    the first lookup. Variables that are already set win over the file.
    """

    def __init__(self, cwd: Path | None = None, dotenv: bool = True) -> None:
        self.cwd = cwd
        self.dotenv = dotenv
        self._loaded = False

    def _load_dotenv_once(self) -> None:
        if self._loaded or not self.dotenv:
            return
        self._loaded = True
        path = (self.cwd or Path.cwd()) / ".env"
        if path.is_file():
            load_dotenv(path, override=False)
            log.debug("Loaded environment defaults from %s", path)

    def get(self, name: str) -> str | None:
        self._load_dotenv_once()
        return os.environ.get(name)
