"""Completeness rubric for documents structured from noisy resume text.

The point values are a heuristic, not ground truth. Each section is scored by
its own function and capped independently; the total is read on a 100-point
scale.
"""

from models.schemas.resume_document import ResumeDocument

MAX_POINTS = 100


def personal_info_points(document: ResumeDocument) -> int:
    """5 points each for name, email, phone and location (max 20)."""
    info = document.personal_info
    return sum(5 for value in (info.name, info.email, info.phone, info.location) if value)


def skill_points(document: ResumeDocument) -> int:
    """2 points per extracted skill across all six categories (max 25)."""
    return min(25, len(document.skills.all_skills()) * 2)


def experience_points(document: ResumeDocument) -> int:
    """15 for any experience, +10 if some entry has a description bullet."""
    if not document.experience:
        return 0
    points = 15
    if any(len(exp.description) > 0 for exp in document.experience):
        points += 10
    return points


def education_points(document: ResumeDocument) -> int:
    """10 for any education, +5 if some entry names both degree and institution."""
    if not document.education:
        return 0
    points = 10
    if any(edu.degree and edu.institution for edu in document.education):
        points += 5
    return points


def project_points(document: ResumeDocument) -> int:
    return 10 if document.projects else 0


def summary_points(document: ResumeDocument) -> int:
    return 5 if len(document.summary) > 50 else 0


def calculate_confidence(document: ResumeDocument, text: str = "") -> float:
    """Rate how complete ``document`` is, 0.0-1.0.

    ``text`` is the raw source; the rubric only inspects the structured
    fields today.
    """
    points = (
        personal_info_points(document)
        + skill_points(document)
        + experience_points(document)
        + education_points(document)
        + project_points(document)
        + summary_points(document)
    )
    return min(1.0, points / MAX_POINTS)
