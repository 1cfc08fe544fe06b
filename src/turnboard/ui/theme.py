"""Visual theme constants and QSS styles for turnboard."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_flash: QColor  # square just double-clicked
    highlight_selected: QColor  # selected piece origin
    highlight_target: QColor  # squares the selected piece may move to
    piece_text: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_flash=QColor(255, 255, 0, 90),
            highlight_selected=QColor(255, 255, 0, 130),
            highlight_target=QColor(0, 0, 0, 40),
            piece_text=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_flash=QColor(255, 255, 0, 90),
            highlight_selected=QColor(255, 255, 0, 130),
            highlight_target=QColor(0, 0, 0, 40),
            piece_text=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QStatusBar {
    color: #e0e0e0;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
"""
