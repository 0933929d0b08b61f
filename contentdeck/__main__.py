"""Run one of the services: python -m contentdeck {content,deck}."""
from __future__ import annotations

import argparse
import logging

import uvicorn

from contentdeck.core.config import get_settings
from contentdeck.core.logging import configure_logging

APPS = {
    "content": "contentdeck.app:app",
    "deck": "contentdeck.deck_app:app",
}

logger = logging.getLogger("contentdeck")


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="contentdeck", description="Run a contentdeck service.")
    parser.add_argument("variant", choices=sorted(APPS), help="persistence model to serve")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--reload", action="store_true", help="restart on code changes (dev only)")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    logger.info("Server running on http://localhost:%s (%s)", args.port, args.variant)
    uvicorn.run(APPS[args.variant], host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
