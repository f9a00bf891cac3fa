"""Candidate profiles, parsed search intent and ranking output."""

from typing import Literal

from pydantic import BaseModel

from models.schemas.base import LenientModel

Seniority = Literal["junior", "mid", "senior", "lead", "principal"]
Availability = Literal["immediate", "notice", "open"]
EmploymentType = Literal["full-time", "contract", "part-time"]


class AIProject(LenientModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = []
    impact: str = ""
    year: int = 0


class AIExperience(LenientModel):
    years: float = 0.0
    frameworks: list[str] = []
    domains: list[str] = []
    projects: list[AIProject] = []


class EmploymentPreferences(LenientModel):
    type: EmploymentType = "full-time"
    remote: bool = True
    relocation: bool = False


class ScreeningStatus(LenientModel):
    automated: bool = True
    score: float = 0.0  # 0-100
    notes: list[str] = []
    recommended: bool = False


class TalentProfile(LenientModel):
    """A candidate as seen by the ranking scorer."""
    id: str = ""
    name: str = ""
    title: str = ""
    experience: float = 0.0  # years
    skills: list[str] = []
    canonical_skills: list[str] = []
    location: str = ""
    availability: Availability = "open"
    source: str = "resume"  # linkedin, github, portfolio, resume
    match_score: float = 0.0
    highlights: list[str] = []
    avatar: str = ""
    summary: str = ""
    ai_experience: AIExperience = AIExperience()
    employment_preferences: EmploymentPreferences = EmploymentPreferences()
    seniority: Seniority | None = None
    screening_status: ScreeningStatus | None = None


class AIExperienceFilter(LenientModel):
    frameworks: list[str] = []
    domains: list[str] = []
    years: float | None = None


class SearchFilters(LenientModel):
    """Filters derived from a natural-language search query."""
    experience: float | None = None
    skills: list[str] = []
    location: str | None = None
    availability: Availability | None = None
    employment_type: EmploymentType | None = None
    seniority: Seniority | None = None
    ai_experience: AIExperienceFilter | None = None


class TalentQuery(LenientModel):
    """Structured understanding of a free-text talent search."""
    extracted_skills: list[str] = []
    extracted_requirements: list[str] = []
    confidence: float = 0.0
    derived_filters: SearchFilters = SearchFilters()


class RankingScore(BaseModel):
    """Relevance of one profile to a query, with the terms that produced it."""
    score: float = 0.0  # 0-1
    raw: float = 0.0  # 0-100
    skills: float = 0.0  # <= 40
    requirements: float = 0.0  # <= 30
    experience: float = 0.0  # <= 20
    location: float = 0.0  # <= 10
    base_quality: float = 0.0  # only used when every other term is 0


class QueryUnderstanding(BaseModel):
    extracted_skills: list[str] = []
    extracted_requirements: list[str] = []
    confidence: float = 0.0


class MatchDistribution(BaseModel):
    by_seniority: dict[str, int] = {}
    by_location: dict[str, int] = {}
    by_availability: dict[str, int] = {}


class TalentSearchResult(BaseModel):
    results: list[TalentProfile] = []
    total: int = 0
    page: int = 1
    limit: int = 10
    query_understanding: QueryUnderstanding = QueryUnderstanding()
    match_distribution: MatchDistribution = MatchDistribution()
