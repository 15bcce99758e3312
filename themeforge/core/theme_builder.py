"""Static theme content generation."""

import json
from pathlib import Path

from ..models.theme import TemplateFile, ThemeLayout

STYLESHEET = """:root {
  --sin-red: #c4161c;
  --lust-purple: #7b2cbf;
  --lux-gold: #f2b705;
  --dark-bg: #0b0b0b;
  --panel-bg: #121212;
  --text-main: #f5f5f5;
  --text-muted: #b3b3b3;
}

body {
  background-color: var(--dark-bg);
  color: var(--text-main);
  font-family: 'Helvetica', sans-serif;
}

.btn {
  background: linear-gradient(135deg, var(--sin-red), var(--lust-purple));
  color: #fff;
  border-radius: 999px;
  font-weight: 700;
  padding: 10px 24px;
  box-shadow: 0 0 30px rgba(196,22,28,0.6), 0 0 30px rgba(123,44,191,0.6);
  transition: all 0.25s ease;
  border: none;
}

.btn:hover {
  box-shadow: 0 0 60px rgba(196,22,28,0.8), 0 0 60px rgba(123,44,191,0.8);
  transform: translateY(-2px);
}
"""

SCRIPT_TEMPLATE = """// Example JS for modals, age verification, exit intent
document.addEventListener('DOMContentLoaded', () => {{
  console.log('{store_name} JS loaded.');
}});
"""

SECTION_TEMPLATE = """<div class="{name}">
  <!-- {name} content goes here -->
  <button class="btn">Click Me</button>
</div>
"""

LAYOUT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>{store_name}</title>
  <link rel="stylesheet" href="{{{{ '{stylesheet}' | asset_url }}}}">
  <script src="{{{{ '{script}' | asset_url }}}}"></script>
  {{{{ content_for_header }}}}
</head>
<body>
  {{{{ content_for_layout }}}}
</body>
</html>
"""


class ThemeBuilder:
    """Renders every generated file of a theme.

    Output depends only on the layout, so two builds with the same layout
    are byte-identical.
    """

    def __init__(self, layout: ThemeLayout | None = None):
        self.layout = layout or ThemeLayout()

    def build(self) -> list[TemplateFile]:
        """Return all generated files in write order."""
        files = [self.stylesheet(), self.script()]
        files.extend(self.section(name) for name in self.layout.sections)
        files.append(self.theme_layout())
        files.extend(self.page_template(name) for name in self.layout.page_templates)
        files.extend(self.config_stubs())
        return files

    def stylesheet(self) -> TemplateFile:
        return TemplateFile(Path("assets") / self.layout.stylesheet, STYLESHEET)

    def script(self) -> TemplateFile:
        content = SCRIPT_TEMPLATE.format(store_name=self.layout.store_name)
        return TemplateFile(Path("assets") / self.layout.script, content)

    def section(self, name: str) -> TemplateFile:
        return TemplateFile(Path("sections") / f"{name}.liquid", SECTION_TEMPLATE.format(name=name))

    def theme_layout(self) -> TemplateFile:
        content = LAYOUT_TEMPLATE.format(
            store_name=self.layout.store_name,
            stylesheet=self.layout.stylesheet,
            script=self.layout.script,
        )
        return TemplateFile(Path("layout") / self.layout.layout_name, content)

    def page_template(self, name: str) -> TemplateFile:
        """Render a page template that pulls in every section by name."""
        sections = list(self.layout.sections)
        lines = [f"{{% if template == '{name}' %}}"]
        # age verification first, then the heading, then the remaining sections
        if "age-verification" in sections:
            lines.append("  {% section 'age-verification' %}")
            sections.remove("age-verification")
        lines.append(f"  <h1>Welcome to {self.layout.store_name}</h1>")
        for section in _index_order(sections):
            lines.append(f"  {{% section '{section}' %}}")
        lines.append("{% endif %}")
        return TemplateFile(Path("templates") / f"{name}.liquid", "\n".join(lines) + "\n")

    def config_stubs(self) -> list[TemplateFile]:
        return [
            TemplateFile(Path("config") / filename, json.dumps(value))
            for filename, value in self.layout.config_files.items()
        ]


def _index_order(sections: list[str]) -> list[str]:
    preferred = ["email-capture", "luxury-toggle", "exit-intent", "cart-upsell"]
    ordered = [name for name in preferred if name in sections]
    return ordered + [name for name in sections if name not in preferred]
