"""OpenAI Responses API client for text generation."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from nutrition_estimator.domain.errors import (
    UpstreamMalformedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from nutrition_estimator.services.text_generation import TextGenerationClient


@dataclass
class OpenAITextClient(TextGenerationClient):
    """Text client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(
        cls, api_key: str, model: str, timeout_seconds: float = 30.0
    ) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, timeout=timeout_seconds, max_retries=0
            ),
            model=model,
        )

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        """Call OpenAI Responses API in JSON mode."""
        try:
            response = await self.client.responses.create(
                model=self.model,
                instructions=system_prompt,
                input=user_prompt,
                text={"format": {"type": "json_object"}},
                store=False,
            )
        except openai.APITimeoutError as exc:
            raise UpstreamTimeoutError("AI service timed out") from exc
        except openai.APIStatusError as exc:
            raise UpstreamUnavailableError(
                f"AI service failed with status {exc.status_code}"
            ) from exc
        except openai.APIError as exc:
            raise UpstreamUnavailableError("AI service unavailable") from exc
        output_text = response.output_text
        if not output_text:
            raise UpstreamMalformedError("AI service returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
