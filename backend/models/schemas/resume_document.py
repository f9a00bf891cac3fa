"""Structured resume document produced by the extraction oracle."""

from pydantic import ConfigDict

from models.schemas.base import LenientModel

SKILL_FIELDS = ("technical", "frameworks", "languages", "tools", "databases", "cloud")


class SkillSet(LenientModel):
    """Skills as authored by the extractor, not yet canonicalized."""
    technical: list[str] = []
    frameworks: list[str] = []
    languages: list[str] = []
    tools: list[str] = []
    databases: list[str] = []
    cloud: list[str] = []

    def all_skills(self) -> list[str]:
        """Every skill across the six categories, in category order."""
        return [skill for name in SKILL_FIELDS for skill in getattr(self, name)]

class PersonalInfo(LenientModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None


class WorkExperience(LenientModel):
    """A single work experience entry.

    When ``current`` is set the end date is treated as "now" for duration
    math, whatever ``end_date`` holds.
    """
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: list[str] = []
    technologies: list[str] = []


class Education(LenientModel):
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None
    achievements: list[str] = []


class Project(LenientModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = []
    duration: str = ""
    url: str | None = None
    github: str | None = None
    highlights: list[str] = []


class Certification(LenientModel):
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: str | None = None
    credential_id: str | None = None
    url: str | None = None


class ResumeDocument(LenientModel):
    """A parsed resume. Built once per parse request and never mutated."""

    model_config = ConfigDict(frozen=True)

    personal_info: PersonalInfo = PersonalInfo()
    summary: str = ""
    skills: SkillSet = SkillSet()
    experience: list[WorkExperience] = []
    education: list[Education] = []
    projects: list[Project] = []
    certifications: list[Certification] = []
    extracted_text: str = ""
    confidence: float = 0.0  # 0.0-1.0
    degraded: bool = False  # oracle failed, document is the empty fallback


class ExperienceSummary(LenientModel):
    total_years: float = 0.0
    seniority: str = "junior"  # junior, mid, senior, lead, principal
    primary_role: str = ""
    industries: list[str] = []


class SkillExtraction(LenientModel):
    """Oracle output for the dedicated skill extraction prompt."""
    skills: SkillSet = SkillSet()
    experience: ExperienceSummary = ExperienceSummary()
    confidence: float = 0.0
    suggestions: list[str] = []
