"""
Query parameter handling for distribution URLs.

These are plain string transforms, not a URL parser: the input is trusted to
be a sane URL and anything else passes through best-effort.
"""

from __future__ import annotations

import re
from urllib.parse import quote_plus

LICENCE_KEY_PARAMETER = "licence_key"
SITE_URL_PARAMETER = "site_url"
CREDENTIAL_PARAMETERS = (LICENCE_KEY_PARAMETER, SITE_URL_PARAMETER)


def remove_parameter(url: str, name: str) -> str:
    """
    Remove ``&name=value`` from ``url``.

    Only parameters preceded by ``&`` are matched, so a parameter that is the
    first one in the query (``?name=value``) is left in place.
    """
    # e.g. &t=1.2.3 in example.com?p=index.php&t=1.2.3&k=key
    return re.sub(f"&{re.escape(name)}=[^&]*", "", url)


def add_parameter(url: str, name: str, value: str) -> str:
    """Append ``name=value``, replacing an earlier ``&name=...`` occurrence."""
    clean_url = remove_parameter(url, name)
    joiner = "&" if "?" in clean_url else "?"
    return f"{clean_url}{joiner}{name}={quote_plus(value, safe='')}"


def has_parameter(url: str, name: str) -> bool:
    return re.search(f"[?&]{re.escape(name)}=", url) is not None


def carries_credentials(url: str) -> bool:
    return any(has_parameter(url, name) for name in CREDENTIAL_PARAMETERS)


def compose_fetch_url(base: str, licence_key: str, site_url: str) -> str:
    url = add_parameter(base, LICENCE_KEY_PARAMETER, licence_key)
    return add_parameter(url, SITE_URL_PARAMETER, site_url)
