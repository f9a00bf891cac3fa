"""Skill match and gap analysis between a candidate and a set of requirements.

Requirements come either as an explicit list of skill names or as a free-text
job description, which is scanned for taxonomy tokens. The free-text scan is
plain substring search, so short tokens can fire inside longer words ("go"
inside "mongodb"); callers rely on that exact behaviour, so it is kept.
"""

import logging

from models.schemas.resume_document import SkillSet
from models.schemas.skill_match import (
    CategoryStat,
    FitScore,
    MatchedSkill,
    MatchResult,
    MissingSkill,
    SkillCategory,
    SkillSuggestions,
)
from services.rounding import round_half_up
from services.skill_canonicalizer import SkillCanonicalizer
from services.taxonomy import SkillTaxonomy, get_taxonomy

logger = logging.getLogger(__name__)

CRITICAL = "Critical"
IMPORTANT = "Important"
NICE_TO_HAVE = "Nice to have"

MAX_ALTERNATIVES = 3
MAX_STRENGTHS = 3
MAX_IMPROVEMENTS = 5
MAX_RECOMMENDATIONS = 4
MAX_SUGGESTIONS = 5


# ---------------------------------------------------------------------------
# Rubrics
# ---------------------------------------------------------------------------

def _overlaps(skill: str, tokens: tuple[str, ...]) -> bool:
    """True if ``skill`` contains, or is contained in, any category token."""
    return any(token in skill or skill in token for token in tokens)


def _primary_skills(skills: SkillSet) -> list[str]:
    """Skills the candidate lists as technical, frameworks or tools."""
    return [s for s in skills.technical + skills.frameworks + skills.tools if s.strip()]


def skill_level(skill: str, skills: SkillSet) -> str:
    """Advanced if the skill shows up in 2+ of technical/frameworks/tools."""
    needle = skill.lower()
    appearances = sum(
        1
        for bucket in (skills.technical, skills.frameworks, skills.tools)
        if any(needle in s.lower() for s in bucket)
    )
    if appearances >= 2:
        return "Advanced"
    if appearances == 1:
        return "Intermediate"
    return "Beginner"


def skill_importance(skill: str, taxonomy: SkillTaxonomy) -> str:
    lower = skill.lower()
    if any(critical in lower for critical in taxonomy.critical_skills):
        return CRITICAL
    if any(important in lower for important in taxonomy.important_skills):
        return IMPORTANT
    return NICE_TO_HAVE


def technical_fit(matched: list[MatchedSkill], total_required: int) -> float:
    """Mean similarity over all required skills, 100 when nothing is required."""
    if total_required == 0:
        return 100.0
    return min(100.0, sum(m.similarity for m in matched) / total_required)


def experience_fit(skills: SkillSet) -> float:
    """Breadth proxy: number of distinct technologies the candidate lists."""
    distinct = {
        s.strip().lower()
        for s in skills.technical + skills.frameworks + skills.tools + skills.databases
        if s.strip()
    }
    count = len(distinct)
    if count >= 15:
        return 100.0
    if count >= 10:
        return 80.0
    if count >= 5:
        return 60.0
    return float(max(20, count * 10))


def category_breakdown(
    matched_names: list[str],
    required_names: list[str],
    taxonomy: SkillTaxonomy,
) -> dict[str, CategoryStat]:
    breakdown: dict[str, CategoryStat] = {}
    for category, tokens in taxonomy.categories.items():
        total = sum(1 for skill in required_names if _overlaps(skill.lower(), tokens))
        if total == 0:
            continue
        matched = sum(1 for skill in matched_names if _overlaps(skill.lower(), tokens))
        breakdown[category.value] = CategoryStat(matched=matched, total=total)
    return breakdown


def strength_areas(skills: SkillSet, taxonomy: SkillTaxonomy) -> list[str]:
    """Categories where the candidate lists at least three skills."""
    primary = [s.lower() for s in _primary_skills(skills)]
    strengths = [
        category.value.capitalize()
        for category, tokens in taxonomy.categories.items()
        if sum(1 for skill in primary if _overlaps(skill, tokens)) >= 3
    ]
    return strengths[:MAX_STRENGTHS]


def improvement_areas(
    missing: list[MissingSkill],
    breakdown: dict[str, CategoryStat],
) -> list[str]:
    improvements = [
        category.capitalize()
        for category, stat in breakdown.items()
        if stat.total >= 2 and stat.matched / stat.total < 0.5
    ]
    for item in missing:
        if item.importance == CRITICAL and len(improvements) < MAX_IMPROVEMENTS:
            improvements.append(f"Learn {item.skill}")
    return improvements[:MAX_IMPROVEMENTS]


def recommendations(
    missing: list[MissingSkill],
    strengths: list[str],
    skills: SkillSet,
    taxonomy: SkillTaxonomy,
) -> list[str]:
    result: list[str] = []

    critical = [item for item in missing if item.importance == CRITICAL]
    if critical:
        result.append(f"Focus on learning {critical[0].skill} as it's critical for this role")

    if strengths:
        result.append(f"Leverage your {strengths[0].lower()} expertise to stand out")

    primary = [s.lower() for s in _primary_skills(skills)]
    for rule in taxonomy.cross_sell:
        if any(rule.trigger in skill for skill in primary):
            result.append(rule.recommendation)

    return result[:MAX_RECOMMENDATIONS]


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class SkillMatcher:
    def __init__(
        self,
        taxonomy: SkillTaxonomy | None = None,
        canonicalizer: SkillCanonicalizer | None = None,
    ) -> None:
        self.taxonomy = taxonomy or get_taxonomy()
        self.canonicalizer = canonicalizer or SkillCanonicalizer(self.taxonomy)

    def extract_skills_from_text(self, text: str) -> list[str]:
        """Taxonomy tokens found in ``text``, deduplicated, in category order."""
        lower = text.lower()
        found: list[str] = []
        for tokens in self.taxonomy.categories.values():
            for token in tokens:
                if token in lower and token not in found:
                    found.append(token)
        return found

    def required_skills(self, requirement: list[str] | str) -> list[str]:
        if isinstance(requirement, str):
            return self.extract_skills_from_text(requirement)
        if not isinstance(requirement, (list, tuple)):
            raise TypeError(
                "requirement must be a list of skill names or a job description string, "
                f"got {type(requirement).__name__}"
            )
        for item in requirement:
            if not isinstance(item, str):
                raise TypeError(f"required skills must be strings, got {type(item).__name__}")
        return [item for item in requirement if item.strip()]

    def calculate_skill_match(
        self,
        candidate_skills: SkillSet,
        requirement: list[str] | str,
    ) -> MatchResult:
        """Compare a candidate's skills against explicit or free-text requirements."""
        if not isinstance(candidate_skills, SkillSet):
            raise TypeError(f"candidate_skills must be a SkillSet, got {type(candidate_skills).__name__}")

        required = self.required_skills(requirement)
        candidate = [s.lower() for s in candidate_skills.all_skills() if s.strip()]

        matched: list[MatchedSkill] = []
        missing: list[MissingSkill] = []

        for skill in required:
            hit = next((c for c in candidate if self.canonicalizer.matches(c, skill)), None)
            if hit is not None:
                matched.append(MatchedSkill(
                    skill=skill,
                    required=True,
                    candidate_level=skill_level(hit, candidate_skills),
                    required_level="Required",
                    similarity=self.canonicalizer.similarity(hit, skill),
                ))
            else:
                missing.append(MissingSkill(
                    skill=skill,
                    importance=skill_importance(skill, self.taxonomy),
                    alternatives=self.canonicalizer.find_alternatives(
                        skill, candidate, max_count=MAX_ALTERNATIVES
                    ),
                ))

        percentage = len(matched) / len(required) * 100 if required else 0.0
        match_percentage = int(round_half_up(percentage))

        breakdown = category_breakdown([m.skill for m in matched], required, self.taxonomy)
        strengths = strength_areas(candidate_skills, self.taxonomy)
        improvements = improvement_areas(missing, breakdown)
        advice = recommendations(missing, strengths, candidate_skills, self.taxonomy)

        technical = technical_fit(matched, len(required))
        experience = experience_fit(candidate_skills)
        fit = FitScore(
            technical=int(round_half_up(technical)),
            experience=int(round_half_up(experience)),
            overall=int(round_half_up((technical + experience) / 2)),
        )

        logger.debug(
            "Skill match: %d/%d required skills matched (%d%%)",
            len(matched), len(required), match_percentage,
        )

        return MatchResult(
            overall_match=match_percentage,
            matched_skills=matched,
            missing_skills=missing,
            category_breakdown=breakdown,
            strength_areas=strengths,
            improvement_areas=improvements,
            recommendations=advice,
            fit_score=fit,
            match_percentage=match_percentage,
        )

    def _has_category(self, skills: list[str], tokens: tuple[str, ...]) -> bool:
        return any(_overlaps(skill, tokens) for skill in skills)

    def generate_skill_suggestions(self, skills: SkillSet) -> SkillSuggestions:
        """Recommended, trending and complementary skills for a candidate."""
        all_skills = [s.lower() for s in skills.all_skills() if s.strip()]
        categories = self.taxonomy.categories

        recommended: list[str] = []
        if self._has_category(all_skills, categories.get(SkillCategory.FRONTEND, ())):
            recommended.extend(self.taxonomy.frontend_suggestions)
        if self._has_category(all_skills, categories.get(SkillCategory.BACKEND, ())):
            recommended.extend(self.taxonomy.backend_suggestions)

        complementary: list[str] = []
        if not self._has_category(all_skills, categories.get(SkillCategory.AI_ML, ())):
            complementary.extend(self.taxonomy.ai_ml_suggestions)

        return SkillSuggestions(
            recommended=recommended[:MAX_SUGGESTIONS],
            trending=list(self.taxonomy.trending_skills[:MAX_SUGGESTIONS]),
            complementary=complementary[:MAX_SUGGESTIONS],
        )
