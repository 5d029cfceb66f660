"""Minimal NerdGraph (New Relic GraphQL API) client.

Sends a single GraphQL document per call and returns the decoded JSON
payload untouched. Interpreting ``errors`` in the payload is left to the
caller; this layer only fails when the HTTP exchange itself fails.
"""

import logging
from typing import Any, Optional

import httpx

from src.nerdgraph.config import NerdGraphSettings
from src.nerdgraph.errors import TransportError

logger = logging.getLogger(__name__)


class NerdGraphClient:
    """Synchronous NerdGraph client.

    No retry is attempted and no timeout beyond the httpx default is set:
    every call is a single shot.
    """

    def __init__(
        self,
        settings: NerdGraphSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self._client = httpx.Client(
            headers={
                "Content-Type": "application/json",
                "API-Key": settings.api_key,
            },
            transport=transport,
        )

    def execute(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """POST a GraphQL document and return the decoded response body.

        Args:
            query: GraphQL query or mutation text
            variables: Variables referenced by the document

        Returns:
            The JSON response object, including any ``errors`` it carries

        Raises:
            TransportError: On network failure, a non-2xx status, or a body
                that is not a JSON object
        """
        logger.debug(f"POST {self.settings.endpoint}")
        try:
            response = self._client.post(
                self.settings.endpoint,
                json={"query": query, "variables": variables},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text if e.response is not None else None
            raise TransportError(
                f"NerdGraph returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                response_body=body or None,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"NerdGraph request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                "NerdGraph response is not valid JSON",
                status_code=response.status_code,
                response_body=response.text[:500] or None,
            ) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"NerdGraph response is a JSON {type(payload).__name__}, expected an object",
                status_code=response.status_code,
                response_body=response.text[:500],
            )
        return payload

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "NerdGraphClient":
        return self

    def __exit__(self, *exc_info):
        self.close()
