"""Tests for the Gemini wrapper, with the SDK client mocked out."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config import settings
from services import gemini_client
from services.resume_extractor import ResumeExtractor


def _mock_client(generate_content):
    client = MagicMock()
    client.aio.models.generate_content = generate_content
    return client


class TestGetClient:
    def test_no_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "")
        assert gemini_client.get_client() is None

    @pytest.mark.asyncio
    async def test_generate_without_key_returns_none(self, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "")
        assert await gemini_client.generate_text("hello") is None


class TestGenerate:
    @pytest.mark.asyncio
    async def test_returns_reply_text(self):
        generate = AsyncMock(return_value=MagicMock(text='{"a": 1}'))
        with patch("services.gemini_client.get_client", return_value=_mock_client(generate)):
            text = await gemini_client.generate_text("prompt", "system")

        assert text == '{"a": 1}'
        kwargs = generate.call_args.kwargs
        assert kwargs["contents"] == "prompt"
        assert kwargs["model"] == settings.gemini_model
        assert kwargs["config"].temperature == settings.gemini_temperature

    @pytest.mark.asyncio
    async def test_default_oracle_reply_is_repaired(self):
        reply = '```json\n{"personal_info": {"name": "Jane"}, "skills": {"technical": ["Go"],},}\n```'
        generate = AsyncMock(return_value=MagicMock(text=reply))
        with patch("services.gemini_client.get_client", return_value=_mock_client(generate)):
            doc = await ResumeExtractor().extract("resume text")

        assert doc.degraded is False
        assert doc.personal_info.name == "Jane"
        assert doc.skills.technical == ["Go"]
        assert generate.call_args.kwargs["config"].system_instruction is not None

    @pytest.mark.asyncio
    async def test_api_error_returns_none(self):
        generate = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        with patch("services.gemini_client.get_client", return_value=_mock_client(generate)):
            assert await gemini_client.generate_text("prompt") is None

    @pytest.mark.asyncio
    async def test_empty_reply_returns_none(self):
        generate = AsyncMock(return_value=MagicMock(text=""))
        with patch("services.gemini_client.get_client", return_value=_mock_client(generate)):
            assert await gemini_client.generate_text("prompt") is None

    @pytest.mark.asyncio
    async def test_timeout_returns_none(self, monkeypatch):
        monkeypatch.setattr(settings, "oracle_timeout_seconds", 0.01)

        async def slow(**kwargs):
            await asyncio.sleep(1)
            return MagicMock(text="{}")

        with patch("services.gemini_client.get_client", return_value=_mock_client(slow)):
            assert await gemini_client.generate_text("prompt") is None
