from typing import Optional


class DashboardError(Exception):
    """Base class for every error raised by homedash."""


class RequestError(DashboardError):
    """Raised when an HTTP request cannot produce a usable JSON body."""


class RequestTimeout(RequestError):
    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"Request timed out after {timeout:g}s: {url}")
        self.url = url
        self.timeout = timeout


class NetworkUnreachable(RequestError):
    """Raised on connection-level failures (DNS, refused, reset)."""


class HttpError(RequestError):
    def __init__(self, status: int, reason: Optional[str] = None, url: Optional[str] = None) -> None:
        message = f"HTTP {status}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.status = status
        self.url = url


class Unauthorized(HttpError):
    def __init__(self, url: Optional[str] = None) -> None:
        super().__init__(401, "Unauthorized - Check API key", url)


class NotFound(HttpError):
    def __init__(self, url: Optional[str] = None) -> None:
        super().__init__(404, "Resource not found", url)


class RateLimited(HttpError):
    def __init__(self, url: Optional[str] = None) -> None:
        super().__init__(429, "Too Many Requests", url)


class InvalidPayload(RequestError):
    """Raised when a response body is not valid JSON."""


class Unsupported(DashboardError):
    """Raised when an optional capability (e.g. geolocation) is unavailable."""
