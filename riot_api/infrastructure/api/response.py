"""Turning httpx responses into records (or error payloads)."""
from functools import lru_cache
from typing import Any, Callable, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from riot_api.core.logging import get_logger
from riot_api.domain.exceptions import ResponseValidationError, status_error_for

logger = get_logger(__name__, service="riot-api")

Envelope = Union[str, Callable[[Any], Any], None]


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode_body(response: httpx.Response) -> Any:
    """JSON-decode a body; non-JSON text is returned as-is, an empty body as None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def unwrap(body: Any, envelope: Envelope) -> Any:
    if envelope is None or body is None:
        return body
    if callable(envelope):
        return envelope(body)
    if isinstance(body, dict):
        return body.get(envelope, [])
    return body


def parse(shape: Any, data: Any, *, url: Optional[str] = None) -> Any:
    """Validate decoded JSON into ``shape`` (a record class or e.g. ``List[Summoner]``)."""
    if data is None:
        return None
    try:
        return _adapter(shape).validate_python(data)
    except ValidationError as exc:
        raise ResponseValidationError(
            f"unexpected response shape from {url or 'server'}: {exc.error_count()} error(s)",
            url=url,
            body=data,
        ) from exc


def shape_response(
    response: httpx.Response,
    shape: Any = None,
    *,
    envelope: Envelope = None,
    raise_status_errors: bool = False,
    url: Optional[str] = None,
) -> Any:
    """
    Shape a response for the caller.

    2xx bodies are decoded, unwrapped from ``envelope`` and validated into
    ``shape``. Anything else is either raised as a ``StatusError`` subclass or,
    when ``raise_status_errors`` is off, handed back as the raw decoded payload.
    """
    body = decode_body(response)

    if not response.is_success:
        if raise_status_errors:
            raise status_error_for(response.status_code, url=url, body=body)
        logger.warning(
            lambda: f"HTTP {response.status_code}, returning error payload",
            extra={"status": response.status_code, "url": url},
        )
        return body

    if shape is None:
        return unwrap(body, envelope)
    return parse(shape, unwrap(body, envelope), url=url)
