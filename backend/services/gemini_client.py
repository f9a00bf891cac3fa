"""Google Gemini API wrapper used as the structured-extraction oracle.

Every failure (no key, API error, timeout, empty reply) comes back as
``None``; callers decide how to degrade.
"""

import asyncio
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - structured extraction disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
        logger.info("Gemini client created for model %s", settings.gemini_model)
    return _client


async def generate_text(prompt: str, system_instruction: str | None = None) -> str | None:
    """Send a prompt to Gemini and return the raw reply text."""
    client = get_client()
    if client is None:
        return None

    try:
        call = client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            ),
        )
        if settings.oracle_timeout_seconds > 0:
            response = await asyncio.wait_for(call, timeout=settings.oracle_timeout_seconds)
        else:
            response = await call
    except asyncio.TimeoutError:
        logger.error("Gemini call timed out after %ss", settings.oracle_timeout_seconds)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    text = response.text
    if not text:
        logger.warning("Gemini returned an empty reply")
        return None
    return text

