"""Skill taxonomy and the lookup tables used by matching and ranking.

All tables are configuration: the values below are seed defaults and any of
them can be replaced by a JSON file named in ``settings.taxonomy_path``.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_validator

from config import settings
from models.schemas.skill_match import SkillCategory

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: dict[SkillCategory, tuple[str, ...]] = {
    SkillCategory.FRONTEND: (
        "react", "vue", "angular", "javascript", "typescript", "html", "css",
        "sass", "scss", "redux", "vuex", "next.js", "nuxt.js", "svelte",
        "webpack", "vite", "tailwind",
    ),
    SkillCategory.BACKEND: (
        "node.js", "express", "fastify", "python", "django", "flask", "java",
        "spring", "c#", ".net", "php", "laravel", "ruby", "rails", "go",
        "rust", "kotlin",
    ),
    SkillCategory.DATABASE: (
        "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sqlite",
        "oracle", "sql server", "cassandra", "dynamodb", "firebase", "supabase",
    ),
    SkillCategory.CLOUD: (
        "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins",
        "gitlab ci", "github actions", "circleci", "heroku", "vercel", "netlify",
    ),
    SkillCategory.AI_ML: (
        "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy", "keras",
        "opencv", "langchain", "openai", "hugging face", "transformers",
        "machine learning", "deep learning", "natural language processing",
        "computer vision", "data science",
    ),
    SkillCategory.MOBILE: (
        "react native", "flutter", "swift", "kotlin", "ionic", "xamarin", "cordova",
    ),
}

# Pairs scored 70 by the canonicalizer: key ~ any listed alias
DEFAULT_SYNONYMS: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "node.js", "typescript", "ts"),
    "python": ("py", "django", "flask"),
    "java": ("spring", "kotlin"),
    "react": ("react.js", "reactjs", "next.js"),
    "vue": ("vue.js", "vuejs", "nuxt.js"),
    "angular": ("angularjs",),
    "aws": ("amazon web services", "ec2", "s3"),
    "docker": ("containers", "containerization"),
    "kubernetes": ("k8s", "orchestration"),
}

# Substitutes offered for a missing skill when the candidate has them
DEFAULT_ALTERNATIVES: dict[str, tuple[str, ...]] = {
    "react": ("vue", "angular", "svelte"),
    "vue": ("react", "angular"),
    "angular": ("react", "vue"),
    "mysql": ("postgresql", "mongodb"),
    "postgresql": ("mysql", "mongodb"),
    "aws": ("azure", "gcp"),
    "azure": ("aws", "gcp"),
    "docker": ("podman",),
    "kubernetes": ("docker swarm",),
}

DEFAULT_LOCATION_ALIASES: dict[str, tuple[str, ...]] = {
    "bangalore": ("bangalore", "bengaluru", "bangaluru"),
    "mumbai": ("mumbai", "bombay"),
    "delhi": ("delhi", "new delhi", "ncr"),
    "hyderabad": ("hyderabad", "secunderabad"),
    "chennai": ("chennai", "madras"),
    "pune": ("pune", "puna"),
}


class CrossSell(BaseModel):
    """Recommendation emitted when any candidate skill contains ``trigger``."""

    model_config = ConfigDict(frozen=True)

    trigger: str
    recommendation: str


DEFAULT_CROSS_SELL: tuple[CrossSell, ...] = (
    CrossSell(trigger="react", recommendation="Consider learning Next.js to enhance your React skills"),
    CrossSell(
        trigger="javascript",
        recommendation="TypeScript would be a valuable addition to your JavaScript skills",
    ),
)


def _lower_all(values: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(v.strip().lower() for v in values if v.strip())


class SkillTaxonomy(BaseModel):
    """Immutable vocabulary shared read-only by every component.

    Lookup tables are exposed as read-only mappings; defaults go through the
    same validation as overrides.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    categories: Mapping[SkillCategory, tuple[str, ...]] = DEFAULT_CATEGORIES
    synonyms: Mapping[str, tuple[str, ...]] = DEFAULT_SYNONYMS
    alternatives: Mapping[str, tuple[str, ...]] = DEFAULT_ALTERNATIVES
    critical_skills: tuple[str, ...] = ("javascript", "python", "java", "react", "node.js", "sql")
    important_skills: tuple[str, ...] = ("docker", "aws", "git", "api", "database")
    cross_sell: tuple[CrossSell, ...] = DEFAULT_CROSS_SELL
    trending_skills: tuple[str, ...] = (
        "AI/ML", "Kubernetes", "GraphQL", "TypeScript", "Next.js", "Rust", "Go",
    )
    frontend_suggestions: tuple[str, ...] = ("Node.js", "Express", "MongoDB", "REST APIs")
    backend_suggestions: tuple[str, ...] = ("Docker", "AWS", "Kubernetes", "CI/CD")
    ai_ml_suggestions: tuple[str, ...] = ("Machine Learning", "TensorFlow", "Python Data Science")
    location_aliases: Mapping[str, tuple[str, ...]] = DEFAULT_LOCATION_ALIASES

    @field_validator("categories", "synonyms", "alternatives", "location_aliases")
    @classmethod
    def _lower_tables(cls, table: Mapping) -> Mapping:
        return MappingProxyType({
            key if isinstance(key, SkillCategory) else key.strip().lower(): _lower_all(values)
            for key, values in table.items()
        })

    @field_validator("critical_skills", "important_skills")
    @classmethod
    def _lower_lists(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return _lower_all(values)

    def categories_containing(self, token: str) -> set[SkillCategory]:
        """Categories whose token list holds ``token`` (case-insensitive)."""
        token = token.strip().lower()
        return {category for category, tokens in self.categories.items() if token in tokens}

    def all_tokens(self) -> set[str]:
        return {token for tokens in self.categories.values() for token in tokens}


def load_taxonomy(path: str | Path | None = None) -> SkillTaxonomy:
    """Build a taxonomy from the seed defaults, overridden by a JSON file if given."""
    if not path:
        return SkillTaxonomy()
    path = Path(path)
    taxonomy = SkillTaxonomy.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info("Skill taxonomy loaded from %s (%d tokens)", path, len(taxonomy.all_tokens()))
    return taxonomy


_taxonomy: SkillTaxonomy | None = None


def get_taxonomy() -> SkillTaxonomy:
    """Process-wide taxonomy, loaded on first use from settings."""
    global _taxonomy
    if _taxonomy is None:
        _taxonomy = load_taxonomy(settings.taxonomy_path)
    return _taxonomy
