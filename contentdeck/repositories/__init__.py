"""
Persistence adapters.

Each module encapsulates how data is stored/retrieved: a relational table
for the content service, a JSON document tree for the deck service.
Services depend on these adapters rather than touching the engine or the
JSON file directly.
"""
