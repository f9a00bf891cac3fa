"""Total experience and seniority tier from a work-history timeline."""

import logging
import re
from datetime import datetime

from models.schemas.resume_document import WorkExperience
from models.schemas.talent import Seniority
from services.rounding import round_half_up

logger = logging.getLogger(__name__)

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

_ONGOING = {"present", "current", "now", "ongoing", "today"}

# 2021-06-15 / 2021-06 / 2021/06 / 2021.06
_ISO_RE = re.compile(r"^(\d{4})[-/.](\d{1,2})(?:[-/.]\d{1,2})?(?:[tT ].*)?$")
# 06/2021 / 6-2021
_MONTH_YEAR_RE = re.compile(r"^(\d{1,2})[-/.](\d{4})$")
# Jun 2021 / June, 2021 / Jun. 2021
_NAMED_RE = re.compile(r"^([a-z]+)\.?,?\s+(\d{4})$")
_YEAR_RE = re.compile(r"^(\d{4})$")

LEADERSHIP_TITLE_KEYWORDS = ("lead", "manager", "principal")
LEADERSHIP_DESCRIPTION_KEYWORDS = ("team", "mentor")


def parse_date(value: str, now: datetime | None = None) -> tuple[int, int] | None:
    """Parse a resume date into (year, month). Returns None when unparseable."""
    if not value:
        return None
    text = value.strip().lower()
    if text in _ONGOING:
        now = now or datetime.now()
        return now.year, now.month

    year, month = 0, 0
    iso = _ISO_RE.match(text)
    month_year = _MONTH_YEAR_RE.match(text)
    named = _NAMED_RE.match(text)
    bare_year = _YEAR_RE.match(text)
    if iso:
        year, month = int(iso.group(1)), int(iso.group(2))
    elif month_year:
        month, year = int(month_year.group(1)), int(month_year.group(2))
    elif named:
        month = _MONTH_MAP.get(named.group(1), 0)
        year = int(named.group(2))
    elif bare_year:
        year, month = int(bare_year.group(1)), 1

    if year < 1900 or not 1 <= month <= 12:
        return None
    return year, month


def months_between(start: tuple[int, int], end: tuple[int, int]) -> int:
    """Whole-month span between two (year, month) points, never negative."""
    months = (end[0] - start[0]) * 12 + (end[1] - start[1])
    return max(0, months)


def experience_months(experience: WorkExperience, now: datetime | None = None) -> int:
    now = now or datetime.now()
    start = parse_date(experience.start_date, now)
    if experience.current:
        end = (now.year, now.month)
    else:
        end = parse_date(experience.end_date, now)

    if start is None or end is None:
        logger.debug(
            "Skipping unparseable dates for %r: %r - %r",
            experience.position, experience.start_date, experience.end_date,
        )
        return 0
    return months_between(start, end)


def total_years(experiences: list[WorkExperience], now: datetime | None = None) -> float:
    """Sum of all role durations in years, rounded to one decimal."""
    if not experiences:
        return 0.0
    now = now or datetime.now()
    total_months = sum(experience_months(exp, now) for exp in experiences)
    return round_half_up(total_months / 12, 1)


def has_leadership(experiences: list[WorkExperience]) -> bool:
    for exp in experiences:
        position = exp.position.lower()
        if any(keyword in position for keyword in LEADERSHIP_TITLE_KEYWORDS):
            return True
        for bullet in exp.description:
            bullet = bullet.lower()
            if any(keyword in bullet for keyword in LEADERSHIP_DESCRIPTION_KEYWORDS):
                return True
    return False


def seniority(years: float, experiences: list[WorkExperience]) -> Seniority:
    """Seniority tier; leadership only escalates the two highest bands."""
    leadership = has_leadership(experiences)

    if years >= 8 and leadership:
        return "principal"
    if years >= 6 and leadership:
        return "lead"
    if years >= 4:
        return "senior"
    if years >= 2:
        return "mid"
    return "junior"
