"""
Colour themes for the query editor.

A Theme is resolved once at startup and injected into the widgets that need
it; nothing mutates it afterwards.
"""

from dataclasses import dataclass

__all__ = ["Theme", "THEMES", "get_theme"]


@dataclass(frozen=True)
class Theme:
    name: str
    primary: str  # container border
    secondary: str  # prompt and suggestion hint
    error: str = "red"


THEMES: dict[str, Theme] = {
    "default": Theme(name="default", primary="#5f87ff", secondary="#87d7af"),
    "nord": Theme(name="nord", primary="#88c0d0", secondary="#a3be8c", error="#bf616a"),
    "monokai": Theme(name="monokai", primary="#f92672", secondary="#a6e22e", error="#fd971f"),
    "mono": Theme(name="mono", primary="white", secondary="grey62", error="bold white"),
}


def get_theme(name: str) -> Theme:
    """
    Look up a built-in theme by name.

    Raises:
        KeyError: If no theme has that name
    """
    try:
        return THEMES[name]
    except KeyError:
        raise KeyError(f"Unknown theme {name!r}; available: {', '.join(sorted(THEMES))}") from None
