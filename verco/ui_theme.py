"""UI theme definitions and selection helpers.

Themes are semantic ANSI palettes. Banners pick colours by meaning
(action, done, canceled, error) and never by literal escape code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    header: str
    action: str
    entry: str
    done: str
    cancel: str
    error: str
    dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[38;2;0;0;0m\033[48;2;255;0;255m",
    action="\033[38;2;255;100;180m",
    entry="\033[38;2;255;180;100m",
    done="\033[92m",
    cancel="\033[93m",
    error="\033[31m",
    dim="\033[2m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    header="",
    action="",
    entry="",
    done="",
    cancel="",
    error="",
    dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
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
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
