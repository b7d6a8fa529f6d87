"""URL shortening utilities module.

This module handles the generation and validation of short IDs
and the validation of submitted URLs.
"""

import re
import secrets
import string
from urllib.parse import urlsplit

# Characters allowed in short IDs
ALPHABET = string.ascii_letters + string.digits + "-_"

DEFAULT_SHORT_ID_LENGTH = 8
MAX_SHORT_ID_LENGTH = 64

SHORT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# URL schemes whose URLs always carry a host
SPECIAL_SCHEMES = ("http", "https", "ftp", "ws", "wss")

# Leading and trailing C0 controls and spaces are not part of a URL
URL_STRIP_CHARS = "".join(chr(i) for i in range(0x21))


def generate_short_id(length: int = DEFAULT_SHORT_ID_LENGTH) -> str:
    """Generate a random URL-safe short ID.

    Args:
        length: Length of the generated ID.

    Returns:
        Random short ID string.
    """
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def validate_short_id(short_id: str) -> bool:
    """Check that a string could be a short ID issued by this service.

    Args:
        short_id: Short ID to validate.

    Returns:
        True if valid, False otherwise.
    """
    if not short_id or len(short_id) > MAX_SHORT_ID_LENGTH:
        return False
    return SHORT_ID_PATTERN.match(short_id) is not None


def clean_url(url: str) -> str:
    """Drop the characters browsers ignore when parsing a URL.

    Args:
        url: URL as submitted.

    Returns:
        URL without surrounding C0 controls and spaces, and without tabs or
        newlines inside it.
    """
    url = url.strip(URL_STRIP_CHARS)
    return url.replace("\t", "").replace("\n", "").replace("\r", "")


def is_valid_url(url: str) -> bool:
    """Check that a string is an absolute URL with a scheme.

    Spaces in the path, query or fragment are allowed, they get
    percent-encoded on redirect. The host must not contain any.

    Args:
        url: URL to validate.

    Returns:
        True if valid, False otherwise.
    """
    url = clean_url(url or "")
    if not url:
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme:
        return False

    scheme = parts.scheme.lower()
    if scheme not in SPECIAL_SCHEMES:
        return bool(parts.netloc or parts.path)

    # "https:///host/path" still names a host
    rest = url[len(parts.scheme) + 1:].lstrip("/\\")
    try:
        parts = urlsplit(f"{scheme}://{rest}")
        # Touch the port so malformed ports ("http://host:99999") fail here
        parts.port
    except ValueError:
        return False
    if any(ch.isspace() for ch in parts.netloc):
        return False
    return bool(parts.hostname)


def create_short_url(base_url: str, short_id: str) -> str:
    """Create full short URL from base URL and short ID.

    Args:
        base_url: Base URL of the short URL routes, e.g. "http://host/api/url".
        short_id: Short ID.

    Returns:
        Full short URL string.
    """
    return f"{base_url.rstrip('/')}/{short_id}"


def truncate_url(url: str, limit: int = 50) -> str:
    """Shorten a URL for log output."""
    return url if len(url) <= limit else f"{url[:limit]}..."
