"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from turnboard.core.types import Square, parse_square, require_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A transient (from, to) pair. Never stored by the engine."""

    from_sq: Square
    to_sq: Square

    def __post_init__(self) -> None:
        require_square(self.from_sq)
        require_square(self.to_sq)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse a UCI string such as ``'e2e4'``."""
        text = text.strip()
        if len(text) != 4:
            raise ValueError(f"Invalid move string: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
