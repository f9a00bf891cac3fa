"""Base class for services that consume the structured-extraction oracle."""

import logging
from typing import Awaitable, Callable

from services import gemini_client
from services.json_repair import parse_json_object

logger = logging.getLogger(__name__)

# (prompt, system_instruction) -> raw reply text, or None on failure
Oracle = Callable[[str, str | None], Awaitable[str | None]]


class OracleService:
    """Single oracle round-trip with JSON repair; failures come back as None.

    The oracle defaults to the Gemini client and can be swapped for any
    coroutine with the same signature.
    """

    def __init__(self, oracle: Oracle | None = None) -> None:
        self._oracle = oracle or gemini_client.generate_text

    async def _ask(self, prompt: str, system_instruction: str) -> dict | None:
        try:
            reply = await self._oracle(prompt, system_instruction)
        except Exception as e:
            logger.error("Extraction oracle raised: %s", e)
            return None
        if reply is None:
            return None
        return parse_json_object(reply)
