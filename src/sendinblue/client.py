"""
Sendinblue API client.

Holds the base URL and API key and performs the transactional send.
"""

import json
import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from sendinblue.config import BASE_URL, SendinblueSettings, get_settings
from sendinblue.errors import ConfigurationError, SendinblueError
from sendinblue.shared.logging import get_logger, log_with_context
from sendinblue.transactional.models import TransactionalBody, TransactionalResponse

logger = get_logger(__name__)

SMTP_EMAIL_PATH = "/smtp/email"


def _mask(s: str, keep: int = 6) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return f"{s[:keep]}***"


@dataclass(frozen=True)
class Sendinblue:
    """Client configuration for the Sendinblue v3 API.

    Instances are read-only and can be shared by concurrent sends; every
    send opens and closes its own HTTP client.
    """

    server_url: str
    api_key: str
    timeout_seconds: float = 30.0

    def __repr__(self) -> str:
        return f"Sendinblue(server_url={self.server_url!r}, api_key={_mask(self.api_key)!r})"

    @classmethod
    def production(cls, api_key: str) -> "Sendinblue":
        """Client pointed at the production API."""
        return cls(server_url=BASE_URL, api_key=api_key)

    @classmethod
    def from_settings(cls, settings: SendinblueSettings | None = None) -> "Sendinblue":
        """Build a client from ``SENDINBLUE_*`` settings.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        settings = settings or get_settings()
        if not settings.api_key:
            raise ConfigurationError("Missing SENDINBLUE_API_KEY")

        log_with_context(
            logger,
            logging.INFO,
            "Sendinblue config resolved",
            server_url=settings.server_url,
            api_key=_mask(settings.api_key),
            timeout_seconds=settings.timeout_seconds,
        )
        return cls(
            server_url=settings.server_url,
            api_key=settings.api_key,
            timeout_seconds=settings.timeout_seconds,
        )

    def _get_api_url(self, endpoint: str) -> str:
        return f"{self.server_url.rstrip('/')}{endpoint}"

    def _get_headers(self) -> dict[str, str]:
        return {
            "api-key": self.api_key,
            "accept": "application/json",
            "content-type": "application/json",
        }

    async def send_transactional_email(
        self,
        body: TransactionalBody,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> TransactionalResponse:
        """Send a templated email.

        Args:
            body: Finished request body.
            transport: Optional httpx transport, used by tests.

        Returns:
            Response holding the provider message id.

        Raises:
            SendinblueError: On network failure, non-2xx status or an
                unparseable response. No retry is attempted.
        """
        payload = body.to_payload()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("send_transactional_email: %s", json.dumps(payload, indent=2))

        url = self._get_api_url(SMTP_EMAIL_PATH)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=transport,
            ) as client:
                response = await client.post(url, json=payload, headers=self._get_headers())
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            error_data: dict = {}
            try:
                parsed = e.response.json()
                if isinstance(parsed, dict):
                    error_data = parsed
            except ValueError:
                pass

            log_with_context(
                logger,
                logging.WARNING,
                "Sendinblue send failed",
                url=url,
                status_code=e.response.status_code,
                error=error_data,
            )
            raise SendinblueError(
                f"Sendinblue API error: {e.response.status_code}",
                status_code=e.response.status_code,
                provider_response=error_data,
                original_error=e,
            ) from e

        except httpx.HTTPError as e:
            log_with_context(
                logger,
                logging.WARNING,
                "Sendinblue request failed",
                url=url,
                error=str(e),
            )
            raise SendinblueError(
                f"Sendinblue request failed: {e}",
                original_error=e,
            ) from e

        try:
            return TransactionalResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # invalid JSON or missing messageId
            log_with_context(
                logger,
                logging.WARNING,
                "Sendinblue response could not be parsed",
                url=url,
                status_code=response.status_code,
                error=str(e),
            )
            raise SendinblueError(
                f"Invalid Sendinblue response: {e}",
                status_code=response.status_code,
                original_error=e,
            ) from e
