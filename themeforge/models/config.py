"""Settings models with validation."""

import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError

DEFAULT_REMOTE_URL_TEMPLATE = "https://github.com/{owner}/{repo}.git"
DEFAULT_PLACEHOLDER = "[REDACTED_TOKEN]"

_REPOSITORY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


def parse_repository(repository: str) -> tuple[str, str]:
    """Split an ``owner/repo`` identifier.

    Raises:
        ConfigurationError: If the identifier is not in ``owner/repo`` form
    """
    if not repository or not _REPOSITORY_PATTERN.match(repository):
        raise ConfigurationError(f"Repository must be in 'owner/repo' format, got: {repository!r}")
    owner, repo_name = repository.split("/", 1)
    return owner, repo_name


def _coerce_path(value: Any) -> Path:
    return Path(str(value)).expanduser()


@dataclass
class ScaffoldSettings:
    """Settings for the scaffold-and-publish workflow."""

    base_path: Path = field(default_factory=lambda: Path.home() / "Desktop")
    theme_name: str = "sinful-lust-shopify-theme"
    assets_source: Path = field(default_factory=lambda: Path.home() / "Desktop" / "Downloads")
    repository: str | None = None
    branch: str = "main"
    commit_message: str = "Initial commit - Sinful Lust Shopify theme"
    remote_url_template: str = DEFAULT_REMOTE_URL_TEMPLATE
    token_env_var: str = "GITHUB_PAT"
    store_name: str = "Sinful Lust"

    def __post_init__(self) -> None:
        self.base_path = _coerce_path(self.base_path)
        self.assets_source = _coerce_path(self.assets_source)

    @property
    def theme_path(self) -> Path:
        return self.base_path / self.theme_name

    @property
    def archive_path(self) -> Path:
        return self.base_path / f"{self.theme_name}.zip"

    def remote_url(self) -> str:
        """Render the credential-free remote URL for the configured repository."""
        if self.repository is None:
            raise ConfigurationError(
                "No target repository configured. Pass --repo owner/repo or set scaffold.repository in config.yaml.",
            )
        owner, repo_name = parse_repository(self.repository)
        try:
            return self.remote_url_template.format(owner=owner, repo=repo_name)
        except (KeyError, IndexError) as e:
            raise ConfigurationError(f"Invalid remote URL template: {self.remote_url_template}") from e

    def validate(self) -> None:
        """Validate settings that the scaffold workflow depends on."""
        if not self.theme_name or "/" in self.theme_name or self.theme_name in {".", ".."}:
            raise ConfigurationError(f"Invalid theme name: {self.theme_name!r}")
        if not self.branch:
            raise ConfigurationError("Branch name cannot be empty")
        if not self.token_env_var:
            raise ConfigurationError("Token environment variable name cannot be empty")
        self.remote_url()


@dataclass
class RedactSettings:
    """Settings for the history-redaction workflow."""

    repository_url: str | None = None
    placeholder: str = DEFAULT_PLACEHOLDER
    secret_env_var: str = "THEMEFORGE_EXPOSED_SECRET"
    cleanup: bool = False

    def validate(self) -> None:
        if not self.repository_url:
            raise ConfigurationError(
                "No repository URL configured. Pass it as an argument or set redact.repository_url in config.yaml.",
            )
        if not self.placeholder:
            raise ConfigurationError("Placeholder cannot be empty")
        if "==>" in self.placeholder or "\n" in self.placeholder:
            raise ConfigurationError("Placeholder cannot contain '==>' or newlines")


@dataclass
class ThemeforgeSettings:
    """Effective settings for every workflow."""

    scaffold: ScaffoldSettings = field(default_factory=ScaffoldSettings)
    redact: RedactSettings = field(default_factory=RedactSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ThemeforgeSettings":
        """Build settings from a parsed configuration mapping.

        Unknown keys are rejected so typos in config.yaml surface early.
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a mapping")

        unknown = set(data) - {"version", "scaffold", "redact"}
        if unknown:
            raise ConfigurationError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

        return cls(
            scaffold=_build_section(ScaffoldSettings, data.get("scaffold"), "scaffold"),
            redact=_build_section(RedactSettings, data.get("redact"), "redact"),
        )

    def to_dict(self) -> dict[str, Any]:
        scaffold = asdict(self.scaffold)
        scaffold["base_path"] = str(self.scaffold.base_path)
        scaffold["assets_source"] = str(self.scaffold.assets_source)
        return {"version": "1.0", "scaffold": scaffold, "redact": asdict(self.redact)}


def _build_section(section_cls: type, raw: Any, name: str) -> Any:
    if raw is None:
        return section_cls()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration section '{name}' must be a mapping")

    known = {f.name for f in fields(section_cls)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(f"Unknown keys in '{name}': {', '.join(sorted(unknown))}")
    return section_cls(**raw)
