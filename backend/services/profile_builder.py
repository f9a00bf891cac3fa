"""Parsed resume -> canonical talent profile used for ranking."""

import logging
from datetime import datetime

from models.schemas.resume_document import ResumeDocument
from models.schemas.talent import EmploymentPreferences, ScreeningStatus, TalentProfile
from services.experience import seniority, total_years
from services.skill_canonicalizer import SkillCanonicalizer

logger = logging.getLogger(__name__)

MAX_HIGHLIGHTS = 3
RECOMMEND_ABOVE_CONFIDENCE = 0.7
SCREENING_NOTES = ["Resume parsed automatically", "Skills extracted using AI"]


def build_highlights(document: ResumeDocument) -> list[str]:
    """First two roles and first two projects, as one-line highlights."""
    highlights = [
        f"{exp.position} at {exp.company} - {exp.description[0] if exp.description else ''}"
        for exp in document.experience[:2]
    ] + [
        f"{project.name}: {project.description}"
        for project in document.projects[:2]
    ]
    return [h for h in highlights if h][:MAX_HIGHLIGHTS]


def build_talent_profile(
    document: ResumeDocument,
    canonicalizer: SkillCanonicalizer | None = None,
    now: datetime | None = None,
) -> TalentProfile:
    canonicalizer = canonicalizer or SkillCanonicalizer()
    now = now or datetime.now()

    years = total_years(document.experience, now)
    tier = seniority(years, document.experience)
    logger.debug("Profile for %r: %.1f years, %s", document.personal_info.name, years, tier)

    return TalentProfile(
        id=f"resume_{int(now.timestamp() * 1000)}",
        name=document.personal_info.name,
        title=document.experience[0].position if document.experience and document.experience[0].position else "Professional",
        experience=years,
        skills=document.skills.all_skills(),
        canonical_skills=canonicalizer.canonical_skills(document.skills),
        location=document.personal_info.location,
        availability="open",
        source="resume",
        match_score=0.0,
        highlights=build_highlights(document),
        summary=document.summary,
        seniority=tier,
        employment_preferences=EmploymentPreferences(type="full-time", remote=True, relocation=False),
        screening_status=ScreeningStatus(
            automated=True,
            score=document.confidence * 100,
            notes=list(SCREENING_NOTES),
            recommended=document.confidence > RECOMMEND_ABOVE_CONFIDENCE,
        ),
    )
