"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (headers, rows, footer). Syntax highlighting
style for previews remains a separate Pygments setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    branch: str
    section_header: str
    section_count: str
    marker: str
    preview_marker: str
    preview_text: str
    preview_notice: str
    help_key: str
    help_dim: str
    branch_current: str
    prompt: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    branch="\033[1;38;5;81m",
    section_header="\033[33m",
    section_count="\033[2;38;5;250m",
    marker="\033[38;5;44m",
    preview_marker="\033[32m",
    preview_text="\033[32m",
    preview_notice="\033[2;38;5;250m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    branch_current="\033[33m",
    prompt="\033[1;38;5;81m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    branch="\033[1;38;5;45m",
    section_header="\033[38;5;215m",
    section_count="\033[2;38;5;110m",
    marker="\033[38;5;39m",
    preview_marker="\033[38;5;84m",
    preview_text="\033[38;5;117m",
    preview_notice="\033[2;38;5;110m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    branch_current="\033[38;5;215m",
    prompt="\033[1;38;5;45m",
)

# Reverse video is kept so the cursor row stays visible without color; the
# frame composer resets attributes after every row that carries escapes.
PLAIN_THEME = UITheme(
    name="plain",
    reverse="\033[7m",
    reset="",
    branch="",
    section_header="",
    section_count="",
    marker="",
    preview_marker="",
    preview_text="",
    preview_notice="",
    help_key="",
    help_dim="",
    branch_current="",
    prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
