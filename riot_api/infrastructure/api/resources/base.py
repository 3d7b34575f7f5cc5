"""Shared plumbing for resource classes."""
from typing import TYPE_CHECKING, Any, Dict, Optional
from urllib.parse import quote

from riot_api.core.logging import log_context
from ..response import Envelope

if TYPE_CHECKING:
    from ..riot_client import RiotAPIClient


class Resource:
    """A group of endpoint methods sharing an API version."""

    resource_name: str = "resource"
    version: str = "v1.1"

    def __init__(self, client: "RiotAPIClient"):
        self.client = client

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.version} region={self.client.region.code!r}>"

    @staticmethod
    def segment(value: Any) -> str:
        """Percent-encode one path identifier."""
        return quote(str(value).strip(), safe="")

    def _get(
        self,
        path: str,
        *,
        shape: Any = None,
        envelope: Envelope = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        with log_context(resource=self.resource_name, region=self.client.region.code):
            return self.client.get(
                path,
                version=self.version,
                params=params,
                shape=shape,
                envelope=envelope,
            )
