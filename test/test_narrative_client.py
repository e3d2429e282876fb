"""
Tests for the LLM narrative client and prompt templates
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.exceptions import NarrativeContentError
from domain.langgraph.narrative_client import NarrativeClient, extract_text
from domain.langgraph.prompts import build_changelog_prompt, has_existing_content


def make_llm(content):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content=content))
    return llm


class TestPrompts:

    def test_new_entry_template(self):
        system, user = build_changelog_prompt("1.2.0", ["feat: add export", "test: cover export"])

        assert "technical writer" in system
        assert "## 1.2.0" in user
        assert "- feat: add export" in user
        assert "CURRENT CHANGELOG CONTENT" not in user
        assert "maintenance" in user

    def test_refinement_template(self):
        existing = "- Added CSV export"
        _, user = build_changelog_prompt("1.2.0", ["fix: export encoding"], existing)

        assert "CURRENT CHANGELOG CONTENT FOR THIS VERSION:\n- Added CSV export" in user
        assert "NEW GIT COMMITS TO ADD:\n- fix: export encoding" in user
        assert "new information first" in user.lower()

    def test_blank_section_uses_new_template(self):
        _, user = build_changelog_prompt("1.2.0", ["feat: x"], "  \n ")

        assert "CURRENT CHANGELOG CONTENT" not in user

    def test_has_existing_content(self):
        assert has_existing_content("- item")
        assert not has_existing_content(None)
        assert not has_existing_content("\n\n")


class TestNarrativeClient:

    @pytest.mark.asyncio
    async def test_generate_returns_entry(self):
        llm = make_llm("## 1.0.0\n\n- Added login\n")
        client = NarrativeClient(llm=llm)

        entry = await client.generate("1.0.0", ["feat: login"])

        assert entry == "## 1.0.0\n\n- Added login\n"
        messages = llm.ainvoke.await_args.args[0]
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert "- feat: login" in messages[1].content

    @pytest.mark.asyncio
    async def test_generate_with_existing_section(self):
        llm = make_llm("## 1.0.0\n\n- Added logout\n- Added login")
        client = NarrativeClient(llm=llm)

        await client.generate("1.0.0", ["feat: logout"], "- Added login")

        user_prompt = llm.ainvoke.await_args.args[0][1].content
        assert "- Added login" in user_prompt

    @pytest.mark.asyncio
    async def test_generate_empty_content_fails(self):
        client = NarrativeClient(llm=make_llm(""))

        with pytest.raises(NarrativeContentError, match="No content"):
            await client.generate("1.0.0", ["feat: x"])

    @pytest.mark.asyncio
    async def test_generate_blank_content_fails(self):
        client = NarrativeClient(llm=make_llm("   \n"))

        with pytest.raises(NarrativeContentError, match="No valid changelog content"):
            await client.generate("1.0.0", ["feat: x"])

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=ConnectionError("network down"))
        client = NarrativeClient(llm=llm)

        with pytest.raises(ConnectionError, match="network down"):
            await client.generate("1.0.0", ["feat: x"])

    @pytest.mark.asyncio
    async def test_entry_without_header_is_returned(self):
        """Entries are passed through even without a header."""
        client = NarrativeClient(llm=make_llm("- Added login"))

        assert await client.generate("1.0.0", ["feat: login"]) == "- Added login"


class TestExtractText:

    def test_string_content(self):
        assert extract_text(AIMessage(content="## 1.0.0")) == "## 1.0.0"

    def test_list_content(self):
        message = AIMessage(content=[{"type": "text", "text": "## 1.0.0"}, "- Added login"])

        assert extract_text(message) == "## 1.0.0\n- Added login"

    def test_none_response(self):
        with pytest.raises(NarrativeContentError):
            extract_text(None)
