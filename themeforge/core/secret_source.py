"""Sources for sensitive values: environment variables and masked prompts."""

import os
from collections.abc import Callable, Iterable

import typer

from ..models.interfaces import SecretSourceInterface


class EnvSecretSource(SecretSourceInterface):
    """Reads a secret from an environment variable."""

    def __init__(self, env_var: str):
        self.env_var = env_var

    def get_secret(self) -> str | None:
        value = os.environ.get(self.env_var)
        return value or None


class PromptSecretSource(SecretSourceInterface):
    """Asks the operator for a secret without echoing it.

    An empty entry is returned as an empty string so callers can tell
    "operator entered nothing" apart from "source has nothing".
    """

    def __init__(self, prompt_text: str, prompt: Callable[..., str] | None = None):
        self.prompt_text = prompt_text
        self._prompt = prompt or typer.prompt

    def get_secret(self) -> str | None:
        value = self._prompt(self.prompt_text, hide_input=True, default="", show_default=False)
        return value or ""


class StaticSecretSource(SecretSourceInterface):
    """Returns a fixed in-memory value."""

    def __init__(self, value: str | None):
        self._value = value

    def get_secret(self) -> str | None:
        return self._value


class ChainedSecretSource(SecretSourceInterface):
    """Returns the first value any source yields, in order."""

    def __init__(self, sources: Iterable[SecretSourceInterface]):
        self.sources = list(sources)

    def get_secret(self) -> str | None:
        value: str | None = None
        for source in self.sources:
            value = source.get_secret()
            if value:
                return value
        return value
