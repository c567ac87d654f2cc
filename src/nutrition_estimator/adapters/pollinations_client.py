"""Pollinations text API client."""

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from nutrition_estimator.domain.errors import (
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from nutrition_estimator.services.text_generation import TextGenerationClient


@dataclass
class HttpxPollinationsClient(TextGenerationClient):
    """HTTPX-backed client for the Pollinations text endpoint."""

    base_url: str
    http_client: httpx.AsyncClient
    model: str | None = None
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls,
        base_url: str,
        model: str | None = None,
        timeout_seconds: float = 30.0,
    ) -> "HttpxPollinationsClient":
        """Create a Pollinations client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            model=model,
            timeout_seconds=timeout_seconds,
        )

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        """Send the prompt in the URL path and return the text answer."""
        prompt = f"SYSTEM:\n{system_prompt}\n\n{user_prompt}"
        url = f"{self.base_url.rstrip('/')}/{quote(prompt, safe='')}"
        params = {"model": self.model} if self.model else None
        try:
            response = await self.http_client.get(
                url, params=params, timeout=self.timeout_seconds
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError("AI service timed out") from exc
        except httpx.HTTPStatusError as exc:
            raise UpstreamUnavailableError(
                f"AI service failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError("AI service unavailable") from exc
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
