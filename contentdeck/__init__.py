"""contentdeck: CRUD services for content items and decks."""

__version__ = "1.0.0"
