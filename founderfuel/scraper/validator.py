"""URL gate run before any network access."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from founderfuel.errors import InvalidUrlError

_ALLOWED_SCHEMES = frozenset({"http", "https"})

# Characters that can never appear in a host name: controls, space and URL
# delimiters.
_FORBIDDEN_HOST_CHARS = re.compile(r"[\x00-\x20\x7f#%/<>?@\\^|\[\]]")


def validate_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute ``http``/``https`` URL.

    Raises:
        InvalidUrlError: If *url* cannot be parsed, has another scheme, or has
            no usable host to connect to.
    """
    if not isinstance(url, str):
        raise InvalidUrlError(str(url))

    try:
        parts = urlsplit(url)
        # Accessing .port validates it (raises ValueError when out of range).
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(url) from exc

    if parts.scheme not in _ALLOWED_SCHEMES or not parts.hostname:
        raise InvalidUrlError(url)
    if _FORBIDDEN_HOST_CHARS.search(parts.hostname):
        raise InvalidUrlError(url)

    return url
