"""Errors raised by the client."""
from typing import Any, Optional


class ConfigurationError(ValueError):
    """Client was constructed with a missing or invalid option."""


class RiotAPIError(Exception):
    """Base class for failures talking to the API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


class ConnectionFailed(RiotAPIError):
    """The request never produced a response (DNS, connect, timeout)."""


class StatusError(RiotAPIError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, *, url: Optional[str] = None, body: Any = None) -> None:
        super().__init__(
            f"the server responded with status {status_code}",
            status_code=status_code,
            url=url,
            body=body,
        )


class ClientError(StatusError):
    """4xx response."""


class ResourceNotFound(ClientError):
    """404 response."""


class ServerError(StatusError):
    """5xx response."""


class ResponseValidationError(RiotAPIError):
    """A successful body did not match the expected record shape."""


def status_error_for(status_code: int, *, url: Optional[str] = None, body: Any = None) -> StatusError:
    if status_code == 404:
        return ResourceNotFound(status_code, url=url, body=body)
    if 400 <= status_code < 500:
        return ClientError(status_code, url=url, body=body)
    if status_code >= 500:
        return ServerError(status_code, url=url, body=body)
    return StatusError(status_code, url=url, body=body)
