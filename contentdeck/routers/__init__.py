"""
FastAPI routers grouped by resource (content, decks, static pages).

Each file inside this package exposes an APIRouter that the app factories
include. Routers stay thin: read path/body, call one service method, shape
the response.
"""
