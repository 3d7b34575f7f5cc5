from __future__ import annotations

import contextvars
from typing import Any, Dict

# Fields rendered by the formatters alongside each record.
_fields: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("riot_api_log_fields", default={})


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


class log_context:
    """Attach region/resource fields to every record logged while a request runs."""

    def __init__(self, **fields: Any) -> None:
        self._fields = {k: v for k, v in fields.items() if v is not None}
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        merged = {**_fields.get(), **self._fields}
        self._token = _fields.set(merged)
        return merged

    def __exit__(self, *_) -> None:
        _fields.reset(self._token)
