"""Entry points for the content and deck FastAPI apps."""
from contentdeck.app import app as content_app, create_content_app
from contentdeck.deck_app import app as deck_app, create_deck_app

__all__ = ["content_app", "deck_app", "create_content_app", "create_deck_app"]
