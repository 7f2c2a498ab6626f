"""Tests for system prompt building and the ambient environment."""

import pytest

from conftest import StaticEnvironment
from toolbridge.environment import AmbientEnvironment
from toolbridge.prompts import SystemPromptBuilder


class TestAmbientEnvironment:
    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("GIT_BRANCH", "main")
        monkeypatch.setenv("GIT_STATUS", "clean")
        monkeypatch.setenv("SANDBOX_ENABLED", "true")

        snapshot = AmbientEnvironment().snapshot()

        assert snapshot.branch == "main"
        assert snapshot.status == "clean"
        assert snapshot.sandbox is True

    def test_defaults_when_unset(self, monkeypatch):
        for name in ("GIT_BRANCH", "GIT_STATUS", "SANDBOX_ENABLED"):
            monkeypatch.delenv(name, raising=False)

        snapshot = AmbientEnvironment().snapshot()

        assert snapshot.branch == ""
        assert snapshot.status == ""
        assert snapshot.sandbox is False

    @pytest.mark.parametrize("value", ["TRUE", "1", "yes", "false"])
    def test_sandbox_requires_exact_true(self, monkeypatch, value):
        monkeypatch.setenv("SANDBOX_ENABLED", value)

        assert AmbientEnvironment().snapshot().sandbox is False

    def test_not_cached(self, monkeypatch):
        environment = AmbientEnvironment()
        monkeypatch.setenv("GIT_BRANCH", "one")
        first = environment.snapshot()
        monkeypatch.setenv("GIT_BRANCH", "two")

        assert first.branch == "one"
        assert environment.snapshot().branch == "two"


class TestSystemPromptBuilder:
    @pytest.mark.asyncio
    async def test_full_prompt(self):
        builder = SystemPromptBuilder(StaticEnvironment(branch="main", status="clean", sandbox=True), "Gemini")

        prompt = await builder.build()

        assert prompt == (
            "You are Gemini, a helpful AI assistant.\n\n"
            "Current git branch: main\n"
            "Git status: clean\n\n"
            "Sandbox mode: enabled"
        )

    @pytest.mark.asyncio
    async def test_unknown_branch_and_no_status(self):
        builder = SystemPromptBuilder(StaticEnvironment(branch="", status=""), "Gemini")

        prompt = await builder.build()

        assert "Current git branch: unknown" in prompt
        assert "Git status" not in prompt
        assert "Sandbox mode: disabled" in prompt

    @pytest.mark.asyncio
    async def test_sections_are_optional(self):
        builder = SystemPromptBuilder(StaticEnvironment(), "Helper")

        prompt = await builder.build(include_git_info=False, include_sandbox_status=False)

        assert prompt == "You are Helper, a helpful AI assistant."
