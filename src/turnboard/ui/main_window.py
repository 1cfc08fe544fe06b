"""MainWindow — board view, reset button and turn indicator."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from turnboard.game.session import GameSession
from turnboard.ui.board_view import BoardView
from turnboard.ui.settings import BoardSettings


class MainWindow(QMainWindow):
    """Main application window for turnboard."""

    def __init__(
        self,
        session: GameSession | None = None,
        settings: BoardSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Turnboard")
        self.setMinimumSize(480, 560)

        self._session = session if session is not None else GameSession()
        self._settings = settings if settings is not None else BoardSettings()

        self._setup_ui()
        self._connect_signals()
        self._update_turn_label()

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── Construction ─────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self._board_view = BoardView(self._session, self._settings, central)
        layout.addWidget(self._board_view, stretch=1)

        controls = QHBoxLayout()
        self._turn_label = QLabel()
        self._reset_button = QPushButton("Reset")
        controls.addWidget(self._turn_label)
        controls.addStretch(1)
        controls.addWidget(self._reset_button)
        layout.addLayout(controls)

        self.setCentralWidget(central)
        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

    def _connect_signals(self) -> None:
        self._reset_button.clicked.connect(self._session.reset)
        self._board_view.board_scene.status_changed.connect(self._on_status)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_status(self, message: str) -> None:
        self._status_bar.showMessage(message)
        self._update_turn_label()

    def _update_turn_label(self) -> None:
        side = self._session.side_to_move
        self._turn_label.setText(f"{side.name.capitalize()} to move")
