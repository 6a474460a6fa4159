"""Helper utilities for the shortening pipeline.

Functions:
    parse_url(url: str) -> str
        Validate an absolute URL and return its normalized form
    expand_path(path: str | Path) -> Path
        Expand a leading `~` in a filesystem path

Example:
    >>> from shurl.utils.helpers import parse_url
    >>> parse_url('HTTPS://Example.com')
    'https://example.com/'
    >>> parse_url('https://example.com/some page?q=a b')
    'https://example.com/some%20page?q=a%20b'
    >>> parse_url('example.com')
    InvalidURLError: relative URL without a scheme: 'example.com'
"""

import re
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit, quote

from shurl.exceptions import InvalidURLError


SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*$')
INVALID_HOST_PATTERN = re.compile(r'[\s<>"\\^`{|}]')

# Schemes which always carry a host, mapped to their default port
SPECIAL_SCHEMES = {
    'http': 80,
    'https': 443,
    'ws': 80,
    'wss': 443,
    'ftp': 21,
}

# Characters left untouched while percent-encoding each URL component.
# `%` is kept so already-encoded input is not encoded twice.
PATH_SAFE = "/%:@!$&'()*+,;=-._~[]"
QUERY_SAFE = PATH_SAFE + '?'
FRAGMENT_SAFE = QUERY_SAFE + '#'
USERINFO_SAFE = "%!$&'()*+,;=:-._~"
# Authority of non-special schemes: userinfo, host and port are kept as typed
AUTHORITY_SAFE = USERINFO_SAFE + '@[]'


def _normalize_host(url: str, scheme: str, hostname: str | None, port: int | None) -> str:
    if not hostname:
        raise InvalidURLError(f'URL is missing a host: {url!r}')
    if INVALID_HOST_PATTERN.search(hostname):
        raise InvalidURLError(f'URL host contains invalid characters: {url!r}')

    if not hostname.isascii():
        try:
            hostname = hostname.encode('idna').decode('ascii')
        except UnicodeError as e:
            raise InvalidURLError(f'URL host is not a valid domain name: {url!r}') from e

    host = f'[{hostname}]' if ':' in hostname else hostname
    if port is not None and port != SPECIAL_SCHEMES[scheme]:
        host = f'{host}:{port}'
    return host


def parse_url(url: str) -> str:
    """Validate an absolute URL and return it in normalized form

    Normalization lowercases the scheme and host, drops default ports, adds
    the root path `/` to hierarchical URLs without a path and percent-encodes
    characters which are not allowed in the userinfo, path, query or fragment (the
    result is safe to embed in a double-quoted HTML attribute).

    Args:
        url (str): URL as typed by the operator

    Returns:
        str: normalized absolute URL

    Raises:
        InvalidURLError: if the URL has no scheme, or a hierarchical URL has
            no (or an invalid) host or port.
    """
    candidate = url.strip()
    if not candidate:
        raise InvalidURLError('URL is empty.')

    try:
        parts = urlsplit(candidate)
    except ValueError as e:
        raise InvalidURLError(f'Malformed URL {url!r}: {e}') from e

    if not parts.scheme or not SCHEME_PATTERN.match(parts.scheme):
        raise InvalidURLError(f'relative URL without a scheme: {url!r}')

    scheme = parts.scheme.lower()
    path = quote(parts.path, safe=PATH_SAFE)
    query = quote(parts.query, safe=QUERY_SAFE)
    fragment = quote(parts.fragment, safe=FRAGMENT_SAFE)

    if scheme in SPECIAL_SCHEMES:
        try:
            port = parts.port
        except ValueError as e:
            raise InvalidURLError(f'URL has an invalid port: {url!r}') from e

        userinfo, at, _ = parts.netloc.rpartition('@')
        host = _normalize_host(url, scheme, parts.hostname, port)
        netloc = f'{quote(userinfo, safe=USERINFO_SAFE)}{at}{host}'
        return urlunsplit((scheme, netloc, path or '/', query, fragment))

    if not (parts.netloc or parts.path):
        raise InvalidURLError(f'URL has nothing after its scheme: {url!r}')
    netloc = quote(parts.netloc, safe=AUTHORITY_SAFE)
    return urlunsplit((scheme, netloc, path, query, fragment))


def expand_path(path: str | Path) -> Path:
    """Expand a leading `~` (current user's home) in a filesystem path."""
    return Path(path).expanduser()
