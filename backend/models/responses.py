from pydantic import BaseModel

from models.schemas.resume_document import ResumeDocument
from models.schemas.skill_match import MatchResult, SkillSuggestions
from models.schemas.talent import TalentProfile


class ResumeAnalysis(BaseModel):
    document: ResumeDocument = ResumeDocument()
    profile: TalentProfile = TalentProfile()
    match_analysis: MatchResult = MatchResult()
    suggestions: SkillSuggestions = SkillSuggestions()
    degraded: bool = False


class BatchItemResult(BaseModel):
    file_name: str = ""
    success: bool = False
    analysis: ResumeAnalysis | None = None
    error: str = ""
