"""
Custom Exceptions

This module defines the typed failures raised by the short-link store.
None of them is fatal: each one describes a caller-visible condition that
the HTTP layer translates into a response.
"""


class ShortLinkError(Exception):
    """Base exception for the short-link service."""
    pass


class InvalidURLError(ShortLinkError):
    """Raised when URL validation fails."""

    def __init__(self, url: str, reason: str = "Invalid URL format"):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url}")


class InvalidValidityError(ShortLinkError):
    """Raised when the validity period is not a positive number of minutes."""

    def __init__(self, validity_minutes):
        self.validity_minutes = validity_minutes
        super().__init__(
            f"Validity must be a positive number of minutes, got {validity_minutes!r}"
        )


class InvalidShortCodeError(ShortLinkError):
    """Raised when a custom short code is empty, too long or not alphanumeric."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(
            f"Invalid short code format: {short_code!r}. "
            "Short codes must contain only alphanumeric characters."
        )


class CodeCollisionError(ShortLinkError):
    """Raised when a custom short code is already in use."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short code '{short_code}' already exists")


class ShortCodeNotFoundError(ShortLinkError):
    """Raised when a short code is unknown or its link has expired."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short code '{short_code}' not found")


class CodeSpaceExhaustedError(ShortLinkError):
    """Raised when no free random code was found within the attempt limit."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate a unique short code after {attempts} attempts"
        )
