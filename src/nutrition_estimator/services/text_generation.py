"""Text generation client interface and response decoding."""

import json
import re
from typing import Protocol

from nutrition_estimator.domain.errors import UpstreamMalformedError

_CODE_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


class TextGenerationClient(Protocol):
    """Interface for a generative text backend."""

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        """Return the raw text answer for the prompts."""


def decode_json_object(text: str) -> dict[str, object]:
    """Decode a JSON object from a model answer, tolerating code fences."""
    cleaned = text.strip()
    fenced = _CODE_FENCE_RE.match(cleaned)
    if fenced:
        cleaned = fenced.group(1)
    try:
        payload = json.loads(cleaned)
    except ValueError as exc:
        raise UpstreamMalformedError("Invalid AI response format") from exc
    if not isinstance(payload, dict):
        raise UpstreamMalformedError("Invalid AI response format")
    return payload
