"""
Core utilities shared across the contentdeck services.

This package hosts:
- configuration helpers (env vars, paths)
- the error taxonomy and its HTTP mapping
- logging setup

Routers/services should depend on these primitives instead of reading
os.environ or building error responses by hand.
"""
