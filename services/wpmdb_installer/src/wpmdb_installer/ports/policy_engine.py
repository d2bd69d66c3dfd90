from typing import Protocol

from wpmdb_installer.domain.diagnostics import Diagnostic
from wpmdb_installer.domain.json_types import JsonDict


class LockPolicyPort(Protocol):
    def validate_lock(self, lock: JsonDict) -> list[Diagnostic]: ...
