"""Shared test fixtures."""

import json

import pytest

from services.taxonomy import SkillTaxonomy


SAMPLE_RESUME_TEXT = """
Jane Smith
jane.smith@email.com | +1-555-0100 | Bengaluru

Senior Frontend Engineer, Acme
Jan 2022 - Present
- Led the team that rebuilt the checkout in React

Software Engineer, Globex
Jun 2020 - Dec 2021
- Built Node.js services on AWS

Skills: React, Node.js, Express.js, JavaScript, AWS
"""

SAMPLE_RESUME_JSON = {
    "personal_info": {
        "name": "Jane Smith",
        "email": "jane.smith@email.com",
        "phone": "+1-555-0100",
        "location": "Bengaluru",
    },
    "summary": "Frontend engineer with four years of experience building React applications at scale.",
    "skills": {
        "technical": ["React", "Node.js"],
        "frameworks": ["Express.js"],
        "languages": ["JavaScript"],
        "tools": [],
        "databases": [],
        "cloud": ["AWS"],
    },
    "experience": [
        {
            "company": "Acme",
            "position": "Senior Frontend Engineer",
            "start_date": "2022-01",
            "end_date": "",
            "current": True,
            "description": ["Led the team that rebuilt the checkout in React"],
            "technologies": ["React"],
        },
        {
            "company": "Globex",
            "position": "Software Engineer",
            "start_date": "2020-06",
            "end_date": "2021-12",
            "current": False,
            "description": ["Built Node.js services on AWS"],
            "technologies": ["Node.js", "AWS"],
        },
    ],
    "education": [
        {"institution": "State University", "degree": "B.Tech", "field": "Computer Science"},
    ],
    "projects": [
        {"name": "Storefront", "description": "Open source e-commerce UI"},
    ],
    "certifications": [],
}


@pytest.fixture
def taxonomy():
    return SkillTaxonomy()


@pytest.fixture
def oracle_replying():
    """Build a fake oracle coroutine that always returns ``reply``."""

    def factory(reply):
        calls = []

        async def oracle(prompt, system_instruction=None):
            calls.append(prompt)
            if isinstance(reply, dict):
                return json.dumps(reply)
            return reply

        oracle.calls = calls
        return oracle

    return factory


@pytest.fixture
def resume_json():
    return json.loads(json.dumps(SAMPLE_RESUME_JSON))


@pytest.fixture
def resume_text():
    return SAMPLE_RESUME_TEXT
