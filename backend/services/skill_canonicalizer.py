"""Normalization and pairwise comparison of free-form skill strings."""

import re

from models.schemas.resume_document import SkillSet
from services.taxonomy import SkillTaxonomy, get_taxonomy

EXACT = 100
PARTIAL = 80
SYNONYM = 70
NONE = 0


def normalize_skill(skill: str) -> str:
    """Lower-case, trim and collapse internal whitespace."""
    return re.sub(r"\s+", " ", skill.strip().lower())


class SkillCanonicalizer:
    def __init__(self, taxonomy: SkillTaxonomy | None = None) -> None:
        self.taxonomy = taxonomy or get_taxonomy()

    @staticmethod
    def matches(a: str, b: str) -> bool:
        """Case-insensitive equality or substring containment either way."""
        a, b = a.lower(), b.lower()
        return a == b or a in b or b in a

    def similarity(self, candidate_skill: str, required_skill: str) -> int:
        """Score a skill pair on the fixed 100 / 80 / 70 / 0 scale."""
        candidate = candidate_skill.lower()
        required = required_skill.lower()

        if candidate == required:
            return EXACT
        if candidate in required or required in candidate:
            return PARTIAL

        for key, aliases in self.taxonomy.synonyms.items():
            if (candidate == key and required in aliases) or (
                required == key and candidate in aliases
            ):
                return SYNONYM
        return NONE

    def find_alternatives(
        self,
        missing_skill: str,
        candidate_skills: list[str],
        max_count: int = 3,
    ) -> list[str]:
        """Substitutes for ``missing_skill`` that the candidate already has."""
        options = self.taxonomy.alternatives.get(missing_skill.lower(), ())
        found = [
            alt for alt in options
            if any(self.matches(alt, skill) for skill in candidate_skills if skill)
        ]
        return found[:max_count]

    def canonicalize(self, skill: str) -> str | None:
        """Map a free-form skill to a taxonomy token, or None if unknown.

        Tries, in order: the token itself, a synonym alias whose key is a
        taxonomy token, and the longest taxonomy token contained in the string.
        """
        norm = normalize_skill(skill)
        if not norm:
            return None

        tokens = self.taxonomy.all_tokens()
        if norm in tokens:
            return norm

        for key, aliases in self.taxonomy.synonyms.items():
            if norm in aliases and key in tokens:
                return key

        contained = [token for token in tokens if token in norm]
        if contained:
            return max(contained, key=lambda t: (len(t), t))
        return None

    def canonical_skills(self, skills: SkillSet) -> list[str]:
        """Canonical tokens for every recognised skill, first-seen order."""
        seen: set[str] = set()
        result: list[str] = []
        for skill in skills.all_skills():
            token = self.canonicalize(skill)
            if token and token not in seen:
                seen.add(token)
                result.append(token)
        return result
