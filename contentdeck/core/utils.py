"""
Utility helpers shared across the app factories.
"""

import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def mount_static(app: FastAPI, static_dir: str) -> None:
    """Expose static_dir under /static and remember it for page routes."""
    app.state.static_dir = static_dir
    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("static directory %s not found; pages disabled", static_dir)
