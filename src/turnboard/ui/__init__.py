"""PyQt6 presentation layer. Talks to the engine only through GameSession."""
