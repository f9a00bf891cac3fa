"""Tests for talent relevance scoring and result ranking."""

import pytest

from models.schemas.talent import SearchFilters, TalentProfile, TalentQuery
from services.ranking import (
    base_quality_component,
    experience_component,
    rank_profiles,
    same_location,
    score,
)


def _profile(**overrides) -> TalentProfile:
    data = {
        "id": "p1",
        "name": "Asha Rao",
        "title": "Senior ML Engineer",
        "experience": 5,
        "skills": ["Python", "React", "AWS"],
        "location": "Bengaluru",
        "highlights": ["Built recommendation system"],
        "ai_experience": {"domains": ["nlp"], "frameworks": ["pytorch"]},
    }
    data.update(overrides)
    return TalentProfile.model_validate(data)


class TestScore:
    def test_all_components(self, taxonomy):
        result = score(
            _profile(),
            ["python", "go"],
            ["ml engineer", "computer vision"],
            SearchFilters(experience=6, location="Bangalore"),
            taxonomy,
        )
        assert result.skills == 20
        assert result.requirements == 15
        assert result.experience == 20
        assert result.location == 10
        assert result.base_quality == 0
        assert result.score == pytest.approx(0.65)

    def test_requirements_match_ai_tags(self, taxonomy):
        result = score(_profile(), [], ["PyTorch", "NLP"], taxonomy=taxonomy)
        assert result.requirements == 30

    def test_base_quality_when_nothing_applies(self, taxonomy):
        result = score(_profile(), [], [], taxonomy=taxonomy)
        assert result.base_quality == 100
        assert result.score == 1.0

    def test_base_quality_when_criteria_score_zero(self, taxonomy):
        result = score(
            _profile(skills=[], ai_experience={}),
            ["rust"],
            [],
            SearchFilters(experience=20),
            taxonomy,
        )
        assert result.skills == 0
        # highlights and years are the only signals left
        assert result.base_quality == 40
        assert result.score == pytest.approx(0.4)

    def test_empty_profile_scores_zero(self, taxonomy):
        assert score(TalentProfile(), [], [], taxonomy=taxonomy).score == 0.0

    @pytest.mark.parametrize("skills,reqs", [
        ([], []),
        (["python"], ["ml engineer"]),
        (["python", "react", "aws"], ["ml engineer", "recommendation"]),
    ])
    def test_score_is_bounded(self, taxonomy, skills, reqs):
        result = score(_profile(), skills, reqs, SearchFilters(experience=5, location="Bengaluru"), taxonomy)
        assert 0.0 <= result.score <= 1.0


class TestComponents:
    @pytest.mark.parametrize("years,wanted,expected", [
        (5, 6, 20),
        (5, 9, 15),
        (14, 20, 10),
        (22, 30, 5),
        (3, 10, 0),
        (5, None, 0),
        (5, 0, 0),
    ])
    def test_experience(self, years, wanted, expected):
        assert experience_component(_profile(experience=years), wanted) == expected

    def test_location_aliases(self, taxonomy):
        assert same_location("Bombay", " mumbai", taxonomy)
        assert same_location("Austin", "austin", taxonomy)
        assert not same_location("Pune", "Chennai", taxonomy)

    def test_base_quality_counts_signals(self):
        assert base_quality_component(TalentProfile(skills=["Go"], experience=2)) == 40


class TestRankProfiles:
    @pytest.fixture
    def profiles(self):
        return [
            _profile(id="a", skills=["Go"], availability="open", seniority="mid", location="Pune"),
            _profile(id="b", skills=["Python", "Go"], availability="immediate", seniority="senior"),
            _profile(id="c", skills=["Python"], availability="immediate", seniority="senior"),
            _profile(
                id="d",
                skills=["Python", "Go"],
                availability="immediate",
                employment_preferences={"type": "contract"},
            ),
        ]

    def test_sorted_by_score(self, profiles, taxonomy):
        query = TalentQuery(extracted_skills=["python", "go"])
        result = rank_profiles(profiles, query, taxonomy=taxonomy)

        scores = [p.match_score for p in result.results]
        assert scores == sorted(scores, reverse=True)
        assert result.results[0].match_score == pytest.approx(0.4)
        assert result.total == 4

    def test_filters_applied(self, profiles, taxonomy):
        query = TalentQuery(
            extracted_skills=["python"],
            derived_filters={"availability": "immediate", "employment_type": "full-time"},
        )
        result = rank_profiles(profiles, query, taxonomy=taxonomy)
        assert {p.id for p in result.results} == {"b", "c"}
        assert result.match_distribution.by_seniority == {"senior": 2}
        assert result.match_distribution.by_availability == {"immediate": 2}

    def test_ai_filters_require_every_tag(self, profiles, taxonomy):
        query = TalentQuery(derived_filters={"ai_experience": {"domains": ["nlp", "vision"]}})
        assert rank_profiles(profiles, query, taxonomy=taxonomy).total == 0

    def test_pagination(self, profiles, taxonomy):
        query = TalentQuery(extracted_skills=["python", "go"])
        result = rank_profiles(profiles, query, limit=2, offset=2, taxonomy=taxonomy)
        assert len(result.results) == 2
        assert result.page == 2
        assert result.total == 4

    def test_input_profiles_untouched(self, profiles, taxonomy):
        rank_profiles(profiles, TalentQuery(extracted_skills=["python"]), taxonomy=taxonomy)
        assert all(p.match_score == 0.0 for p in profiles)

    def test_query_understanding_echoed(self, profiles, taxonomy):
        query = TalentQuery(extracted_skills=["python"], extracted_requirements=["nlp"], confidence=0.8)
        understanding = rank_profiles(profiles, query, taxonomy=taxonomy).query_understanding
        assert understanding.extracted_skills == ["python"]
        assert understanding.confidence == 0.8
