"""Delegate endpoint client.

Forwards the staged diff and user instructions to an external
text-generation service and returns its response body verbatim.
"""

import logging
from typing import Optional

import httpx

from commitit.config import DEFAULT_DELEGATE_TIMEOUT, ENV_DELEGATE_URL, Settings
from commitit.exceptions import ConfigurationError, DelegateError

logger = logging.getLogger(__name__)

# Separates the diff from the instructions in the request body
DELEGATE_SEPARATOR = "\n<<<COMMITIT-INSTRUCTIONS>>>\n"


def build_request_body(diff: str, instructions: Optional[str] = None) -> str:
    """Join diff and instructions with DELEGATE_SEPARATOR."""
    return f"{diff}{DELEGATE_SEPARATOR}{instructions or ''}"


class DelegateClient:
    """Client for the delegate text-generation endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_DELEGATE_TIMEOUT,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the delegate client.

        Args:
            url: The endpoint accepting POSTed text/plain bodies.
            timeout: Seconds before the request is abandoned.
            token: Optional bearer token sent in the Authorization header.
            transport: Optional httpx transport, used by tests.
        """
        if not url:
            raise ConfigurationError(
                "No delegate URL configured "
                f"(set it with 'commitit config set-delegate-url' or {ENV_DELEGATE_URL})."
            )
        self.url = url
        self.timeout = timeout
        self.token = token
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "DelegateClient":
        return cls(
            url=settings.delegate_url,
            timeout=settings.delegate_timeout,
            token=settings.delegate_token,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "text/plain; charset=utf-8"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def generate(self, diff: str, instructions: Optional[str] = None) -> str:
        """Request a commit message for the diff.

        Args:
            diff: The staged unified diff.
            instructions: Optional user instructions.

        Returns:
            The response body, unmodified.

        Raises:
            DelegateError: On transport failure, timeout, or non-2xx status.
        """
        body = build_request_body(diff, instructions)
        logger.debug("POST %s (%d chars)", self.url, len(body))

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    self.url,
                    content=body.encode("utf-8"),
                    headers=self._headers(),
                )
        except httpx.TimeoutException:
            raise DelegateError(f"Delegate request timed out after {self.timeout}s: {self.url}")
        except httpx.HTTPError as e:
            raise DelegateError(f"Delegate request failed: {e}")

        if not response.is_success:
            raise DelegateError(
                f"Delegate returned HTTP {response.status_code}: {response.text.strip()}"
            )

        logger.debug("Delegate responded with %d chars", len(response.text))
        return response.text
