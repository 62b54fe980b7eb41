"""Looking up the built-in colour schemes by name."""

from __future__ import annotations

from typing import Callable, Dict, List

from .colors import Theme
from .palettes_a_to_m import (
    ayu_dark,
    catppuccin,
    dracula,
    everforest,
    github_dark,
    gruvbox,
    material,
    monokai,
)
from .palettes_n_to_z import (
    night_owl,
    nord,
    one_dark,
    rose_pine,
    solarized_dark,
    solarized_light,
    tokyo_night,
)

_THEMES: Dict[str, Callable[[], Theme]] = {
    "ayu-dark": ayu_dark,
    "catppuccin": catppuccin,
    "dracula": dracula,
    "everforest": everforest,
    "github-dark": github_dark,
    "gruvbox": gruvbox,
    "material": material,
    "monokai": monokai,
    "night-owl": night_owl,
    "nord": nord,
    "one-dark": one_dark,
    "rose-pine": rose_pine,
    "solarized-dark": solarized_dark,
    "solarized-light": solarized_light,
    "tokyo-night": tokyo_night,
}


class UnknownThemeError(ValueError):
    """Raised when a theme name is not one of the built-in themes."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.available = available_themes()
        super().__init__(
            f"Unknown theme: {name}. Available themes: {', '.join(self.available)}"
        )


def load_theme(name: str) -> Theme:
    """Return the built-in theme called ``name``."""
    try:
        factory = _THEMES[name]
    except KeyError:
        raise UnknownThemeError(name) from None
    return factory()


def available_themes() -> List[str]:
    """Names of all built-in themes, in alphabetical order."""
    return list(_THEMES)


def default_theme() -> Theme:
    """The theme used when none is chosen."""
    return tokyo_night()