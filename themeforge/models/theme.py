"""Theme directory layout model."""

from dataclasses import dataclass, field
from pathlib import Path

THEME_SUBDIRECTORIES: tuple[str, ...] = ("assets", "layout", "sections", "templates", "config")
SECTION_NAMES: tuple[str, ...] = (
    "age-verification",
    "cart-upsell",
    "email-capture",
    "exit-intent",
    "luxury-toggle",
)
PAGE_TEMPLATE_NAMES: tuple[str, ...] = ("index", "product", "cart")
OPTIONAL_ASSET_NAMES: tuple[str, ...] = ("logo.png", "favicon.ico")


@dataclass(frozen=True)
class TemplateFile:
    """A generated file, relative to the theme root."""

    relative_path: Path
    content: str

    def target(self, theme_path: Path) -> Path:
        return theme_path / self.relative_path


@dataclass
class ThemeLayout:
    """Fixed structure of a generated theme."""

    store_name: str = "Sinful Lust"
    subdirectories: tuple[str, ...] = THEME_SUBDIRECTORIES
    sections: tuple[str, ...] = SECTION_NAMES
    page_templates: tuple[str, ...] = PAGE_TEMPLATE_NAMES
    optional_assets: tuple[str, ...] = OPTIONAL_ASSET_NAMES
    stylesheet: str = "custom.css"
    script: str = "custom.js"
    layout_name: str = "theme.liquid"
    config_files: dict[str, object] = field(
        default_factory=lambda: {"settings_schema.json": [], "settings_data.json": {}},
    )
