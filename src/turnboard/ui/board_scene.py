"""BoardScene — QGraphicsScene that draws the 64 cells and drives a GameSession."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, QTimer, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from turnboard.core.move import Move
from turnboard.core.piece import piece_symbol
from turnboard.core.types import Square, col_of, make_square, row_of
from turnboard.game.session import GameSession
from turnboard.ui.settings import BoardSettings


class BoardScene(QGraphicsScene):
    """Renders the board and forwards double-clicks to the session.

    Index 0 is drawn top-left and index 63 bottom-right, so White's back
    row is the top row.

    Signals:
        status_changed(str): Human-readable status after each interaction.
    """

    status_changed = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(
        self,
        session: GameSession,
        settings: BoardSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._settings = settings if settings is not None else BoardSettings()
        self._theme = self._settings.theme()

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._glyph_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._flash_items: list[QGraphicsRectItem] = []
        self._selection_items: list[QGraphicsRectItem] = []

        self._draw_board()
        self.refresh()

        events = session.events
        events.on_move.append(self._on_move)
        events.on_invalid_move.append(self._on_invalid_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_reset.append(self._on_reset)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    def refresh(self) -> None:
        """Re-render the symbol of every cell from the engine."""
        cells = self._session.engine.squares
        for sq, item in self._glyph_items.items():
            item.setText(piece_symbol(cells[sq]))
            self._center_glyph(sq, item)

    def apply_settings(self, settings: BoardSettings) -> None:
        self._settings = settings
        self._theme = settings.theme()
        self._draw_board()
        self.refresh()
        self._on_selection_changed(self._session.selected)

    def activate_square(self, sq: Square) -> None:
        """Handle a double-click on *sq*: flash it and pass it to the session."""
        self._flash(sq)
        self._session.click(sq)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares, glyph items and coordinates."""
        for item in [*self._square_items.values(), *self._glyph_items.values()]:
            self.removeItem(item)
        self._square_items.clear()
        self._glyph_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        glyph_font = QFont("DejaVu Sans", int(t * 0.6))
        coord_font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in range(64):
            row, col = row_of(sq), col_of(sq)
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            glyph = QGraphicsSimpleTextItem()
            glyph.setFont(glyph_font)
            glyph.setBrush(QBrush(self._theme.piece_text))
            glyph.setZValue(1)
            self.addItem(glyph)
            self._glyph_items[sq] = glyph

            coord_color = (
                self._theme.coord_dark if is_light else self._theme.coord_light
            )
            # Rank numbers (left edge), file letters (bottom edge)
            if col == 0:
                self._add_coord(
                    str(row + 1), col * t + 2, row * t + 1, coord_font, coord_color
                )
            if row == 7:
                self._add_coord(
                    chr(ord("a") + col),
                    col * t + t - 12,
                    row * t + t - 16,
                    coord_font,
                    coord_color,
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._settings.show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _center_glyph(self, sq: Square, item: QGraphicsSimpleTextItem) -> None:
        t = self.TILE
        bounds = item.boundingRect()
        item.setPos(
            col_of(sq) * t + (t - bounds.width()) / 2,
            row_of(sq) * t + (t - bounds.height()) / 2,
        )

    # ── Mouse interaction ────────────────────────────────────────────────

    def mouseDoubleClickEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mouseDoubleClickEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.activate_square(sq)
        super().mouseDoubleClickEvent(event)

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_move(self, move: Move, _piece: int, _captured: int) -> None:
        self.refresh()
        side = self._session.side_to_move
        self.status_changed.emit(f"{move}; {side.name.capitalize()} to move")

    def _on_invalid_move(self, move: Move) -> None:
        self.status_changed.emit(f"Invalid move {move}")

    def _on_reset(self) -> None:
        self._clear_items(self._flash_items)
        self.refresh()
        self.status_changed.emit("White to move")

    def _on_selection_changed(self, sq: Square | None) -> None:
        self._clear_items(self._selection_items)
        if sq is None:
            return
        rect = self._make_highlight(sq, self._theme.highlight_selected)
        self._selection_items.append(rect)
        if self._settings.show_targets:
            for target in self._session.engine.legal_targets(sq):
                dot = self._make_highlight(target, self._theme.highlight_target)
                self._selection_items.append(dot)

    # ── Highlights ───────────────────────────────────────────────────────

    def _flash(self, sq: Square) -> None:
        rect = self._make_highlight(sq, self._theme.highlight_flash)
        self._flash_items.append(rect)
        QTimer.singleShot(self._settings.highlight_ms, lambda: self._drop_flash(rect))

    def _drop_flash(self, rect: QGraphicsRectItem) -> None:
        if rect in self._flash_items:
            self._flash_items.remove(rect)
            self.removeItem(rect)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(col_of(sq) * t, row_of(sq) * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return make_square(row, col)
