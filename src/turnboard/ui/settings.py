"""User-configurable board settings."""

from __future__ import annotations

from dataclasses import dataclass

from turnboard.ui.theme import THEMES, BoardTheme


@dataclass
class BoardSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    highlight_ms: int = 1000  # how long a double-clicked square stays lit
    show_coordinates: bool = True
    show_targets: bool = True

    def theme(self) -> BoardTheme:
        """Resolve :attr:`board_theme`; unknown names fall back to Classic."""
        factory = THEMES.get(self.board_theme, BoardTheme.default)
        return factory()
