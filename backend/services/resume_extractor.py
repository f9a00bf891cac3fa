"""Structured resume extraction driven by the external LLM oracle.

The oracle is untrusted: it may be unconfigured, slow, fail, or reply with
fenced, truncated or schema-breaking JSON. Whatever happens, callers get a
well-formed ``ResumeDocument``; on failure it is empty, with
``confidence == 0`` and ``degraded`` set.
"""

import logging

from pydantic import ValidationError

from models.schemas.resume_document import ResumeDocument, SkillExtraction
from services import prompt_builder
from services.confidence import calculate_confidence
from services.oracle_service import OracleService

logger = logging.getLogger(__name__)


class ResumeExtractor(OracleService):
    async def extract(self, text: str) -> ResumeDocument:
        """Structure raw resume text into a scored ``ResumeDocument``."""
        data = await self._ask(
            prompt_builder.build_resume_prompt(text),
            prompt_builder.RESUME_PARSER_SYSTEM,
        )
        if data is None:
            logger.warning("Resume extraction unavailable, returning empty document")
            return empty_document(text)

        try:
            document = ResumeDocument.model_validate(data)
        except ValidationError as e:
            logger.warning("Oracle reply does not fit the resume schema: %s", e)
            return empty_document(text)

        return document.model_copy(update={
            "extracted_text": text,
            "confidence": calculate_confidence(document, text),
            "degraded": False,
        })

    async def extract_skills(self, text: str) -> SkillExtraction:
        """Skill-focused extraction; empty result with zero confidence on failure."""
        data = await self._ask(
            prompt_builder.build_skills_prompt(text),
            prompt_builder.RESUME_PARSER_SYSTEM,
        )
        if data is None:
            logger.warning("Skill extraction unavailable, returning empty result")
            return SkillExtraction()

        try:
            result = SkillExtraction.model_validate(data)
        except ValidationError as e:
            logger.warning("Oracle reply does not fit the skills schema: %s", e)
            return SkillExtraction()
        return result.model_copy(update={"confidence": min(1.0, max(0.0, result.confidence))})


def empty_document(text: str = "") -> ResumeDocument:
    return ResumeDocument(extracted_text=text, confidence=0.0, degraded=True)
