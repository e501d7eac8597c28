class AuthenticationError(Exception):
    """Raised when the API key is missing or rejected."""


class IntegrationError(Exception):
    """Raised when a YouTube Data API call fails."""


class RateLimitError(Exception):
    """Raised when the API rate limit or daily quota is hit."""
