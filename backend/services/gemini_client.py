"""Google Gemini API wrapper with error handling.

Two layers:
    complete()      one awaited completion, raises on missing config / API errors
    decode_json()   strips code fences and parses the JSON object in a response

generate_json() combines them into a tagged StructuredResult so callers that
have a fallback can branch on the outcome without catching exceptions.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Literal

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from config import settings
from services.errors import ConfigurationMissing, ModelOutputInvalid, ProviderError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None
_warned_unconfigured = False

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def get_client() -> genai.Client | None:
    global _client, _warned_unconfigured
    if not settings.gemini_api_key:
        if not _warned_unconfigured:
            logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
            _warned_unconfigured = True
        return None
    if _client is None:
        _client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.llm_timeout_s * 1000)),
        )
    return _client


def reset_client() -> None:
    """Drop the cached client (used after settings change and in tests)."""
    global _client, _warned_unconfigured
    _client = None
    _warned_unconfigured = False


async def complete(
    prompt: str,
    *,
    system: str | None = None,
    temperature: float = 0.3,
    max_output_tokens: int = 4096,
) -> str:
    """Send one prompt and return the raw completion text. No retries."""
    client = get_client()
    if client is None:
        raise ConfigurationMissing("GEMINI_API_KEY not configured")

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system,
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
    except genai_errors.APIError as e:
        logger.error("Gemini API error %s: %s", e.code, e.message)
        if e.code == 429:
            raise ProviderError(
                "Rate limit exceeded. Please wait a moment and try again.", status_code=429
            ) from e
        raise ProviderError(f"Gemini API error: {e.message}", status_code=e.code) from e
    except Exception as e:
        logger.error("Gemini request failed: %s", e)
        raise ProviderError(f"Gemini request failed: {e}") from e

    return (response.text or "").strip()


def strip_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def decode_json(text: str) -> dict:
    """Parse the JSON object embedded in an LLM response.

    Takes the span from the first ``{`` to the last ``}`` after removing code
    fences. Anything that isn't a JSON object raises ModelOutputInvalid.
    """
    match = _OBJECT_RE.search(strip_fences(text))
    if not match:
        raise ModelOutputInvalid("No JSON object in model response")
    try:
        data = json.loads(match.group())
    except json.JSONDecodeError as e:
        raise ModelOutputInvalid(f"Failed to parse model response as JSON: {e}") from e
    if not isinstance(data, dict):
        raise ModelOutputInvalid("Model response JSON is not an object")
    return data


@dataclass(frozen=True)
class StructuredResult:
    status: Literal["ok", "unconfigured", "invalid", "failed"]
    data: dict | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "ok"


async def generate_json(
    prompt: str,
    *,
    system: str | None = None,
    temperature: float = 0.3,
    max_output_tokens: int = 4096,
) -> StructuredResult:
    """Send a prompt to Gemini and parse the JSON response."""
    try:
        text = await complete(
            prompt,
            system=system,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
    except ConfigurationMissing as e:
        return StructuredResult("unconfigured", error=e.message)
    except ProviderError as e:
        return StructuredResult("failed", error=e.message)

    try:
        return StructuredResult("ok", data=decode_json(text))
    except ModelOutputInvalid as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e.message)
        return StructuredResult("invalid", error=e.message)
