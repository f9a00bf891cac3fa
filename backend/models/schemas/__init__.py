"""Pydantic contracts shared by the extraction, matching and ranking services."""

from models.schemas.resume_document import ResumeDocument, SkillSet, WorkExperience
from models.schemas.skill_match import MatchResult, SkillCategory
from models.schemas.talent import RankingScore, SearchFilters, TalentProfile, TalentQuery

__all__ = [
    "ResumeDocument",
    "SkillSet",
    "WorkExperience",
    "MatchResult",
    "SkillCategory",
    "RankingScore",
    "SearchFilters",
    "TalentProfile",
    "TalentQuery",
]
