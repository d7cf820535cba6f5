"""
HTTP transport for webhook submission.

One POST per message; the response body is not interpreted. Any status >= 400
and any httpx error surface as SubmissionError.
"""

import logging
from typing import Optional, Protocol

import httpx

from slackhook.errors import SubmissionError

logger = logging.getLogger(__name__)

USER_AGENT = "slackhook/0.1.0"


class Transport(Protocol):
    """Anything that can POST an encoded payload to a URL."""

    def post(self, url: str, body: bytes) -> None:
        ...

    def close(self) -> None:
        ...


class HttpTransport:
    def __init__(self, timeout: Optional[float] = None, client: Optional[httpx.Client] = None):
        # timeout=None disables httpx's default timeout; callers wanting one pass it explicitly
        self._client = client or httpx.Client(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": USER_AGENT, "Content-Type": "application/json"}

    def post(self, url: str, body: bytes) -> None:
        try:
            resp = self._client.post(url, content=body, headers=self._headers())
        except httpx.HTTPError as e:
            raise SubmissionError(f"Webhook request failed: {e}", details={"cause": repr(e)}) from e
        if resp.status_code >= 400:
            raise SubmissionError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        logger.debug(f"Webhook accepted payload ({len(body)} bytes): HTTP {resp.status_code}")

    def close(self) -> None:
        self._client.close()
