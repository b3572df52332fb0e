"""Exception types for the URL shortener.

Every error carries the HTTP status the API layer reports for it, so routes
can translate them without string matching.
"""


class URLShortenerError(Exception):
    """Base class for URL shortener errors."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidURLError(URLShortenerError, ValueError):
    """Target URL is not an absolute http(s) URL."""

    status_code = 400


class InvalidValidityError(URLShortenerError, ValueError):
    """Validity is not a positive number of minutes."""

    status_code = 400


class InvalidShortcodeError(URLShortenerError, ValueError):
    """Requested short code has an invalid format."""

    status_code = 400


class ShortcodeInUseError(URLShortenerError):
    """Requested short code is already taken."""

    status_code = 409


class ShortcodeNotFoundError(URLShortenerError):
    """No record exists for the short code."""

    status_code = 404


class ShortcodeExpiredError(URLShortenerError):
    """The short code exists but its validity window has passed."""

    status_code = 410


class CodeGenerationError(URLShortenerError):
    """Could not find a free short code within the retry budget."""

    status_code = 500
