"""Skill match and gap analysis output."""

from enum import Enum

from pydantic import BaseModel


class SkillCategory(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    CLOUD = "cloud"
    AI_ML = "ai_ml"
    MOBILE = "mobile"


class MatchedSkill(BaseModel):
    skill: str
    required: bool = True
    candidate_level: str = "Beginner"  # Beginner, Intermediate, Advanced
    required_level: str = "Required"
    similarity: int = 0  # 0, 70, 80 or 100


class MissingSkill(BaseModel):
    skill: str
    importance: str = "Nice to have"  # Critical, Important, Nice to have
    alternatives: list[str] = []  # at most 3, all present in the candidate's skills


class CategoryStat(BaseModel):
    matched: int = 0
    total: int = 0


class FitScore(BaseModel):
    technical: int = 0  # 0-100
    experience: int = 0  # 0-100
    overall: int = 0  # 0-100


class MatchResult(BaseModel):
    """Explainable comparison of a candidate skill set against requirements.

    ``match_percentage`` duplicates ``overall_match`` for older callers.
    """
    overall_match: int = 0  # 0-100
    matched_skills: list[MatchedSkill] = []
    missing_skills: list[MissingSkill] = []
    category_breakdown: dict[str, CategoryStat] = {}
    strength_areas: list[str] = []
    improvement_areas: list[str] = []
    recommendations: list[str] = []
    fit_score: FitScore = FitScore()
    match_percentage: int = 0


class SkillSuggestions(BaseModel):
    recommended: list[str] = []
    trending: list[str] = []
    complementary: list[str] = []
