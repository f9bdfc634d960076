"""
Input Validators and Sanitizers

This module provides validation and sanitization functions for user inputs.
These functions help prevent security issues and ensure data integrity.

Security Considerations:
- Only http/https URLs are accepted, so redirects never target javascript:,
  data: or file: schemes
- Short codes are restricted to base62 characters
- Length limits prevent DoS attacks
"""

import re
from typing import Optional
from urllib.parse import urlparse

SHORT_CODE_PATTERN = re.compile(r'[0-9a-zA-Z]+')
ALLOWED_SCHEMES = {'http', 'https'}


def is_valid_url(url: str, max_length: int = 2048) -> bool:
    """
    Validate that a URL is a well-formed absolute http(s) URL.

    Args:
        url: The URL string to validate
        max_length: Maximum allowed length (default: 2048 per RFC 7230)

    Returns:
        True if valid, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    if len(url) > max_length:
        return False

    if url != url.strip() or any(ch.isspace() for ch in url):
        return False

    try:
        result = urlparse(url)
        # Accessing port raises ValueError for out-of-range or non-numeric ports
        result.port
    except ValueError:
        return False

    if result.scheme.lower() not in ALLOWED_SCHEMES:
        return False

    if not result.hostname:
        return False

    return True


def is_valid_short_code(short_code: str, max_length: int = 20) -> bool:
    """
    Check that a short code is non-empty, base62 only and within max_length.

    Codes are case-sensitive; no normalization is applied.
    """
    if not short_code or not isinstance(short_code, str):
        return False
    if len(short_code) > max_length:
        return False
    return SHORT_CODE_PATTERN.fullmatch(short_code) is not None


def sanitize_short_code(short_code: str, max_length: int = 20) -> Optional[str]:
    """
    Sanitize and validate a short code taken from a request path.

    Short codes should only contain base62 characters: [0-9a-zA-Z]
    This prevents injection attacks and ensures consistency. Whitespace is
    rejected rather than stripped so paths accept exactly what the store does.

    Args:
        short_code: The short code to sanitize
        max_length: Longest accepted code

    Returns:
        Sanitized short code if valid, None otherwise
    """
    if not short_code or not isinstance(short_code, str):
        return None

    if not is_valid_short_code(short_code, max_length=max_length):
        return None

    return short_code
