"""Tests for secret sources."""

import pytest

from themeforge.core.secret_source import (
    ChainedSecretSource,
    EnvSecretSource,
    PromptSecretSource,
    StaticSecretSource,
)


class TestEnvSecretSource:
    def test_reads_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THEMEFORGE_TEST_TOKEN", "ghp_env")

        assert EnvSecretSource("THEMEFORGE_TEST_TOKEN").get_secret() == "ghp_env"

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_or_empty_is_none(self, monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
        if value is None:
            monkeypatch.delenv("THEMEFORGE_TEST_TOKEN", raising=False)
        else:
            monkeypatch.setenv("THEMEFORGE_TEST_TOKEN", value)

        assert EnvSecretSource("THEMEFORGE_TEST_TOKEN").get_secret() is None


class TestPromptSecretSource:
    def test_prompt_hides_input(self) -> None:
        calls = []

        def fake_prompt(text, **kwargs):
            calls.append((text, kwargs))
            return "ghp_typed"

        value = PromptSecretSource("Enter token", prompt=fake_prompt).get_secret()

        assert value == "ghp_typed"
        assert calls[0][0] == "Enter token"
        assert calls[0][1]["hide_input"] is True

    def test_empty_entry_is_empty_string(self) -> None:
        source = PromptSecretSource("Enter token", prompt=lambda text, **kwargs: "")

        assert source.get_secret() == ""


class TestChainedSecretSource:
    def test_first_value_wins(self) -> None:
        prompted = []

        def fake_prompt(text, **kwargs):
            prompted.append(text)
            return "from-prompt"

        chain = ChainedSecretSource([StaticSecretSource("from-env"), PromptSecretSource("x", prompt=fake_prompt)])

        assert chain.get_secret() == "from-env"
        assert prompted == []

    def test_falls_through_to_last(self) -> None:
        chain = ChainedSecretSource([StaticSecretSource(None), StaticSecretSource("late")])

        assert chain.get_secret() == "late"

    def test_nothing_available(self) -> None:
        chain = ChainedSecretSource([StaticSecretSource(None), StaticSecretSource("")])

        assert not chain.get_secret()
