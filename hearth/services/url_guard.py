"""SSRF guard and URL validation for outbound recipe fetches."""

import ipaddress
import re
from urllib.parse import urlparse

from ..errors import ForbiddenTargetError, InvalidInputError

BLOCKED_HOSTNAMES = {"localhost", "127.0.0.1", "[::1]", "::1", "0.0.0.0"}
BLOCKED_PREFIXES = ("10.", "192.168.", "169.254.")
BLOCKED_SUFFIXES = (".local", ".internal")
PRIVATE_172_REGEX = re.compile(r'^172\.(1[6-9]|2\d|3[01])\.')


def is_private_host(hostname: str) -> bool:
    """True for loopback, private, link-local or internal-suffix hosts.

    Hostnames are checked lexically; no DNS lookup happens here.
    """
    host = hostname.lower().strip()
    if host in BLOCKED_HOSTNAMES:
        return True
    if host.startswith(BLOCKED_PREFIXES) or PRIVATE_172_REGEX.match(host):
        return True
    if host.endswith(BLOCKED_SUFFIXES):
        return True

    try:
        ip = ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return ip.is_loopback or ip.is_private or ip.is_link_local or ip.is_unspecified


def validate_target_url(raw_url: str | None) -> str:
    """
    Check a user-supplied URL before fetching it.

    Returns the trimmed URL.

    Raises:
        InvalidInputError: Empty, unparsable or non-HTTP(S) URL
        ForbiddenTargetError: Host is internal or private
    """
    url = (raw_url or "").strip()
    if not url:
        raise InvalidInputError("URL is required.")

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        raise InvalidInputError("Invalid URL format.")

    if parsed.scheme not in ("http", "https"):
        raise InvalidInputError("URL must be HTTP or HTTPS.")
    if not hostname:
        raise InvalidInputError("Invalid URL format.")

    if is_private_host(hostname):
        raise ForbiddenTargetError()

    return url
