"""Error taxonomy for the Hearth API.

Every failure a request can end in is a HearthError subclass carrying the
HTTP status and a user-facing message. main.py maps them to
``{"message": ..., "code": ...}`` responses. None are retried.
"""


class HearthError(Exception):
    """Base exception for request-terminal errors."""
    status_code = 500
    code = "internal_error"
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(HearthError):
    """Malformed request, unparsable URL or disallowed scheme."""
    status_code = 400
    code = "invalid_input"
    default_message = "Invalid request."


class ForbiddenTargetError(HearthError):
    """Target URL points at an internal or private address."""
    status_code = 400
    code = "forbidden_target"
    default_message = "Cannot fetch from internal or private network addresses."


class FetchFailureError(HearthError):
    """Network error or non-success response while fetching the page."""
    status_code = 500
    code = "fetch_failed"
    default_message = "Failed to fetch URL."


class NoStructuredDataError(HearthError):
    """Neither JSON-LD nor microdata carried a Recipe."""
    status_code = 422
    code = "no_structured_data"
    default_message = "No recipe data found on this page. Please enter the recipe manually."


class EmptyExtractionError(HearthError):
    """A Recipe was located but normalized to an empty record."""
    status_code = 422
    code = "empty_extraction"
    default_message = "Could not extract useful recipe data from this page. Please enter the recipe manually."


class RateLimitedError(HearthError):
    """Caller exhausted its request window."""
    status_code = 429
    code = "rate_limited"
    default_message = "Rate limit exceeded. Try again later."
