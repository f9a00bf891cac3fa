"""Relevance scoring of candidate profiles against a parsed talent search.

Score out of 100, read as 0-1:
    skills        <= 40   share of query skills found in the profile skills
    requirements  <= 30   share of requirements found in title/highlights/AI tags
    experience    <= 20   closeness of profile years to the requested years
    location      <= 10   same city, allowing known aliases
When none of these apply the profile gets a base-quality score instead.
"""

import logging
from collections import Counter

from models.schemas.talent import (
    MatchDistribution,
    QueryUnderstanding,
    RankingScore,
    SearchFilters,
    TalentProfile,
    TalentQuery,
    TalentSearchResult,
)
from services.taxonomy import SkillTaxonomy, get_taxonomy

logger = logging.getLogger(__name__)

W_SKILLS = 40
W_REQUIREMENTS = 30
W_EXPERIENCE = 20
W_LOCATION = 10
BASE_QUALITY_STEP = 20
MAX_SCORE = 100


def skills_component(profile: TalentProfile, extracted_skills: list[str]) -> float:
    if not extracted_skills:
        return 0.0
    profile_skills = [s.lower() for s in profile.skills]
    hits = [
        skill for skill in extracted_skills
        if any(skill.lower() in p for p in profile_skills)
    ]
    return len(hits) / len(extracted_skills) * W_SKILLS


def requirements_component(profile: TalentProfile, extracted_requirements: list[str]) -> float:
    if not extracted_requirements:
        return 0.0
    haystack = (
        [profile.title.lower()]
        + [h.lower() for h in profile.highlights]
        + [d.lower() for d in profile.ai_experience.domains]
        + [f.lower() for f in profile.ai_experience.frameworks]
    )
    hits = [
        req for req in extracted_requirements
        if any(req.lower() in text for text in haystack)
    ]
    return len(hits) / len(extracted_requirements) * W_REQUIREMENTS


def experience_component(profile: TalentProfile, wanted_years: float | None) -> float:
    if not wanted_years:
        return 0.0
    diff = abs(profile.experience - wanted_years)
    if diff <= 2:
        return 20.0
    if diff <= 4:
        return 15.0
    if diff <= 6:
        return 10.0
    if profile.experience >= wanted_years * 0.7:
        return 5.0
    return 0.0


def same_location(a: str, b: str, taxonomy: SkillTaxonomy) -> bool:
    a, b = a.strip().lower(), b.strip().lower()
    if a == b:
        return True
    return any(a in variants and b in variants for variants in taxonomy.location_aliases.values())


def location_component(
    profile: TalentProfile,
    wanted_location: str | None,
    taxonomy: SkillTaxonomy,
) -> float:
    if not wanted_location:
        return 0.0
    return float(W_LOCATION) if same_location(profile.location, wanted_location, taxonomy) else 0.0


def base_quality_component(profile: TalentProfile) -> float:
    """Profile completeness, used only when no query criterion applied."""
    signals = (
        bool(profile.skills),
        bool(profile.highlights),
        bool(profile.ai_experience.frameworks),
        bool(profile.ai_experience.domains),
        profile.experience > 0,
    )
    return float(sum(BASE_QUALITY_STEP for present in signals if present))


def score(
    profile: TalentProfile,
    extracted_skills: list[str],
    extracted_requirements: list[str],
    filters: SearchFilters | None = None,
    taxonomy: SkillTaxonomy | None = None,
) -> RankingScore:
    """Relevance of ``profile`` to a search, with its components kept for inspection."""
    taxonomy = taxonomy or get_taxonomy()
    filters = filters or SearchFilters()

    result = RankingScore(
        skills=skills_component(profile, extracted_skills),
        requirements=requirements_component(profile, extracted_requirements),
        experience=experience_component(profile, filters.experience),
        location=location_component(profile, filters.location, taxonomy),
    )
    raw = result.skills + result.requirements + result.experience + result.location
    if raw == 0:
        result.base_quality = base_quality_component(profile)
        raw = result.base_quality

    result.raw = raw
    result.score = min(1.0, max(0.0, raw / MAX_SCORE))
    return result


# ---------------------------------------------------------------------------
# Result-set ranking
# ---------------------------------------------------------------------------

def passes_filters(profile: TalentProfile, filters: SearchFilters) -> bool:
    """Hard filters: every requested AI domain/framework, employment type, availability."""
    ai = filters.ai_experience
    if ai and ai.domains and not all(d in profile.ai_experience.domains for d in ai.domains):
        return False
    if ai and ai.frameworks and not all(f in profile.ai_experience.frameworks for f in ai.frameworks):
        return False
    if filters.employment_type and profile.employment_preferences.type != filters.employment_type:
        return False
    if filters.availability and profile.availability != filters.availability:
        return False
    return True


def _distribution(values: list[str | None]) -> dict[str, int]:
    return dict(Counter(v for v in values if isinstance(v, str)))


def rank_profiles(
    profiles: list[TalentProfile],
    query: TalentQuery,
    limit: int = 10,
    offset: int = 0,
    taxonomy: SkillTaxonomy | None = None,
) -> TalentSearchResult:
    """Score, filter, sort and paginate a candidate result set."""
    taxonomy = taxonomy or get_taxonomy()
    filters = query.derived_filters

    scored = [
        profile.model_copy(update={
            "match_score": score(
                profile,
                query.extracted_skills,
                query.extracted_requirements,
                filters,
                taxonomy,
            ).score,
        })
        for profile in profiles
    ]
    kept = [p for p in scored if passes_filters(p, filters)]
    kept.sort(key=lambda p: p.match_score, reverse=True)

    logger.info("Ranked %d profiles, %d passed filters", len(profiles), len(kept))

    return TalentSearchResult(
        results=kept[offset:offset + limit],
        total=len(kept),
        page=offset // limit + 1 if limit > 0 else 1,
        limit=limit,
        query_understanding=QueryUnderstanding(
            extracted_skills=query.extracted_skills,
            extracted_requirements=query.extracted_requirements,
            confidence=query.confidence,
        ),
        match_distribution=MatchDistribution(
            by_seniority=_distribution([p.seniority for p in kept]),
            by_location=_distribution([p.location for p in kept]),
            by_availability=_distribution([p.availability for p in kept]),
        ),
    )
