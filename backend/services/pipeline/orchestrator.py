"""Pipeline orchestrator: resume text -> explainable skill match.

Flow per document:
    resume_text
      ├─ ResumeExtractor.extract()          → ResumeDocument (+ confidence)
      ├─ build_talent_profile()             → TalentProfile (years, seniority, canonical skills)
      ├─ SkillMatcher.calculate_skill_match → MatchResult
      └─ SkillMatcher.generate_skill_suggestions → SkillSuggestions
                       ↓
                 ResumeAnalysis

Batches run the per-document flow concurrently. Documents share nothing but
the read-only taxonomy, and one document failing never affects the others.
"""

import asyncio
import logging

from models.requests import DocumentInput
from models.responses import BatchItemResult, ResumeAnalysis
from services.profile_builder import build_talent_profile
from services.resume_extractor import ResumeExtractor
from services.skill_matcher import SkillMatcher

logger = logging.getLogger(__name__)

DEGRADED_ERROR = "Structured extraction failed for this document"


async def analyze_resume(
    resume_text: str,
    requirement: list[str] | str,
    extractor: ResumeExtractor | None = None,
    matcher: SkillMatcher | None = None,
) -> ResumeAnalysis:
    """Extract, profile and match one resume against the requirement."""
    extractor = extractor or ResumeExtractor()
    matcher = matcher or SkillMatcher()

    document = await extractor.extract(resume_text)
    profile = build_talent_profile(document, canonicalizer=matcher.canonicalizer)
    match_analysis = matcher.calculate_skill_match(document.skills, requirement)
    suggestions = matcher.generate_skill_suggestions(document.skills)

    return ResumeAnalysis(
        document=document,
        profile=profile,
        match_analysis=match_analysis,
        suggestions=suggestions,
        degraded=document.degraded,
    )


async def _analyze_item(
    item: DocumentInput,
    requirement: list[str] | str,
    extractor: ResumeExtractor,
    matcher: SkillMatcher,
) -> BatchItemResult:
    try:
        analysis = await analyze_resume(item.text, requirement, extractor, matcher)
    except Exception as e:
        logger.exception("Analysis failed for %s", item.file_name or "<unnamed>")
        return BatchItemResult(file_name=item.file_name, success=False, error=str(e) or type(e).__name__)

    if analysis.degraded:
        logger.warning("Extraction degraded for %s", item.file_name or "<unnamed>")
        return BatchItemResult(file_name=item.file_name, success=False, error=DEGRADED_ERROR)
    return BatchItemResult(file_name=item.file_name, success=True, analysis=analysis)


async def analyze_batch(
    documents: list[DocumentInput],
    requirement: list[str] | str,
    extractor: ResumeExtractor | None = None,
    matcher: SkillMatcher | None = None,
) -> list[BatchItemResult]:
    """Analyze many resumes concurrently; results keep the input order."""
    extractor = extractor or ResumeExtractor()
    matcher = matcher or SkillMatcher()
    # Reject malformed requirements once, before any oracle call
    matcher.required_skills(requirement)

    results = await asyncio.gather(
        *(_analyze_item(doc, requirement, extractor, matcher) for doc in documents)
    )
    failed = sum(1 for r in results if not r.success)
    logger.info("Batch analysis finished: %d documents, %d failed", len(results), failed)
    return list(results)
