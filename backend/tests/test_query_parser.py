"""Tests for natural-language talent query parsing."""

import pytest

from services.query_parser import QueryParser


class TestQueryParser:
    @pytest.mark.asyncio
    async def test_parses_camel_case_reply(self, oracle_replying):
        reply = {
            "extractedSkills": ["python", "pytorch"],
            "extractedRequirements": ["computer vision"],
            "confidence": 0.9,
            "derivedFilters": {
                "experience": 5,
                "location": "Bengaluru",
                "employmentType": "full-time",
                "aiExperience": {"frameworks": ["pytorch"]},
            },
        }
        oracle = oracle_replying(reply)
        query = await QueryParser(oracle).parse("Senior CV engineer in Bengaluru, 5 years")

        assert query.extracted_skills == ["python", "pytorch"]
        assert query.extracted_requirements == ["computer vision"]
        assert query.derived_filters.experience == 5
        assert query.derived_filters.employment_type == "full-time"
        assert query.derived_filters.ai_experience.frameworks == ["pytorch"]
        assert "Senior CV engineer" in oracle.calls[0]

    @pytest.mark.asyncio
    async def test_confidence_clamped(self, oracle_replying):
        query = await QueryParser(oracle_replying({"confidence": 3})).parse("python")
        assert query.confidence == 1.0

    @pytest.mark.asyncio
    async def test_blank_query_skips_oracle(self, oracle_replying):
        oracle = oracle_replying({"extractedSkills": ["go"]})
        query = await QueryParser(oracle).parse("   ")
        assert query.extracted_skills == []
        assert oracle.calls == []

    @pytest.mark.asyncio
    async def test_oracle_failure(self, oracle_replying):
        query = await QueryParser(oracle_replying(None)).parse("python developer")
        assert query.extracted_skills == []
        assert query.confidence == 0.0

    @pytest.mark.asyncio
    async def test_capitalized_filter_values_are_folded(self, oracle_replying):
        reply = {
            "extractedSkills": ["python", "pytorch"],
            "derivedFilters": {"seniority": "Senior", "employmentType": "Full Time", "availability": "IMMEDIATE"},
        }
        query = await QueryParser(oracle_replying(reply)).parse("senior python developer")

        assert query.extracted_skills == ["python", "pytorch"]
        assert query.derived_filters.seniority == "senior"
        assert query.derived_filters.employment_type == "full-time"
        assert query.derived_filters.availability == "immediate"

    @pytest.mark.asyncio
    async def test_unknown_filter_value_dropped_alone(self, oracle_replying):
        reply = {
            "extractedSkills": ["go"],
            "extractedRequirements": ["distributed systems"],
            "derivedFilters": {"availability": "next year", "seniority": "wizard", "location": "Pune"},
        }
        query = await QueryParser(oracle_replying(reply)).parse("go developer")

        assert query.extracted_skills == ["go"]
        assert query.extracted_requirements == ["distributed systems"]
        assert query.derived_filters.availability is None
        assert query.derived_filters.seniority is None
        assert query.derived_filters.location == "Pune"
