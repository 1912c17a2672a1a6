"""Exceptions the route handlers translate into HTTP responses."""

class LyricsGatewayError(Exception):
    """Base exception for the gateway."""
    pass

class NotFoundError(LyricsGatewayError):
    """The upstream has no such record, or the page has no lyrics block."""
    pass

class UnauthorizedError(LyricsGatewayError):
    """No credential was supplied, or the upstream rejected it."""
    pass
