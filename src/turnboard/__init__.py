"""turnboard — two-player chess move-legality engine with a PyQt6 board."""

__version__ = "0.1.0"
