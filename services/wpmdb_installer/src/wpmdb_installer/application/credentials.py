from __future__ import annotations

from wpmdb_installer.domain.errors import MissingKeyError, MissingSiteUrlError
from wpmdb_installer.ports.environment import EnvironmentPort

# Names of the environment variables holding the credentials.
KEY_ENV_VARIABLE = "WP_MIGRATE_DB_PRO_KEY"
SITE_ENV_VARIABLE = "APP_URL"

_SCHEME_PREFIXES = ("http://", "https://")


def licence_key_from_env(env: EnvironmentPort) -> str:
    key = env.get(KEY_ENV_VARIABLE)
    if not key:
        raise MissingKeyError(KEY_ENV_VARIABLE)
    return key


def strip_scheme(url: str) -> str:
    for prefix in _SCHEME_PREFIXES:
        if url.startswith(prefix):
            return url[len(prefix):]
    return url


def site_url_from_env(env: EnvironmentPort) -> str:
    url = env.get(SITE_ENV_VARIABLE)
    if not url:
        raise MissingSiteUrlError(SITE_ENV_VARIABLE)
    return strip_scheme(url)
