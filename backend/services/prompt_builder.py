"""All prompt templates for the extraction oracle."""

RESUME_PARSER_SYSTEM = (
    "You are an expert resume parser. Analyze resume text and extract structured "
    "information accurately. Always return valid JSON without any markdown "
    "formatting or explanations."
)

TALENT_QUERY_SYSTEM = (
    "You are a helpful assistant that analyzes job search queries to extract "
    "structured information. Do not include any explanations or markdown formatting."
)

RESUME_SCHEMA = """{
  "personal_info": {
    "name": "string",
    "email": "string",
    "phone": "string",
    "location": "string",
    "linkedin": "string (optional)",
    "github": "string (optional)",
    "portfolio": "string (optional)"
  },
  "summary": "string",
  "skills": {
    "technical": ["array of technical skills"],
    "frameworks": ["array of frameworks/libraries"],
    "languages": ["array of programming languages"],
    "tools": ["array of tools/software"],
    "databases": ["array of databases"],
    "cloud": ["array of cloud platforms/services"]
  },
  "experience": [
    {
      "company": "string",
      "position": "string",
      "location": "string",
      "start_date": "string",
      "end_date": "string",
      "current": "boolean",
      "description": ["array of job responsibilities"],
      "technologies": ["array of technologies used"]
    }
  ],
  "education": [
    {
      "institution": "string",
      "degree": "string",
      "field": "string",
      "location": "string",
      "start_date": "string",
      "end_date": "string",
      "gpa": "string (optional)",
      "achievements": ["array of achievements"]
    }
  ],
  "projects": [
    {
      "name": "string",
      "description": "string",
      "technologies": ["array of technologies"],
      "duration": "string",
      "url": "string (optional)",
      "github": "string (optional)",
      "highlights": ["array of key highlights"]
    }
  ],
  "certifications": [
    {
      "name": "string",
      "issuer": "string",
      "date": "string",
      "expiry_date": "string (optional)",
      "credential_id": "string (optional)",
      "url": "string (optional)"
    }
  ]
}"""

SKILLS_SCHEMA = """{
  "skills": {
    "technical": ["array of core technical skills"],
    "frameworks": ["array of frameworks and libraries"],
    "languages": ["array of programming languages"],
    "tools": ["array of development tools and software"],
    "databases": ["array of database technologies"],
    "cloud": ["array of cloud platforms and services"]
  },
  "experience": {
    "total_years": "number of total years of experience",
    "seniority": "junior|mid|senior|lead|principal",
    "primary_role": "string describing primary role/specialization",
    "industries": ["array of industries worked in"]
  },
  "confidence": "number between 0 and 1",
  "suggestions": ["array of skill development suggestions"]
}"""

TALENT_QUERY_SCHEMA = """{
  "extracted_skills": string[],
  "extracted_requirements": string[],
  "confidence": number,
  "derived_filters": {
    "experience": number,
    "skills": string[],
    "location": string,
    "availability": "immediate" | "notice" | "open",
    "employment_type": "full-time" | "contract" | "part-time",
    "seniority": "junior" | "mid" | "senior" | "lead" | "principal",
    "ai_experience": {
      "frameworks": string[],
      "domains": string[],
      "years": number
    }
  }
}"""


def build_resume_prompt(resume_text: str) -> str:
    """Full structured parse of a resume into the fixed document schema."""
    return f"""Parse the following resume text and extract structured information.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{RESUME_SCHEMA}

Extract as much information as possible. If information is not available, use
empty strings or arrays. For dates, use YYYY-MM-DD format when possible, or the
closest approximation. Set "current" to true for the role the candidate still holds.

RESUME:
---
{resume_text}
---"""


def build_skills_prompt(resume_text: str) -> str:
    """Skill-focused extraction with seniority estimate and suggestions."""
    return f"""Analyze the following resume text and extract detailed skill information.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{SKILLS_SCHEMA}

Be thorough in skill extraction and classify them appropriately. Determine
seniority based on years of experience and complexity of projects.

RESUME:
---
{resume_text}
---"""


def build_talent_query_prompt(query: str) -> str:
    return f"""For the given job search query, extract:
1. Technical skills and programming languages
2. Job requirements and preferences
3. Derive appropriate filters for the search

Return the response in the following JSON format:
{TALENT_QUERY_SCHEMA}

Only include fields that are explicitly mentioned or can be reasonably inferred
from the query. The confidence score should be between 0 and 1, representing
how confident you are in the extraction.

QUERY:
{query}"""
