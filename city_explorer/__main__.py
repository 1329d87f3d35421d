"""
Startup script for the City Explorer API
"""

import logging

import uvicorn

from .config import settings


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Starting City Explorer API on {settings.HOST}:{settings.PORT}")
        uvicorn.run(
            "city_explorer.main:app",
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
    return 0


if __name__ == "__main__":
    exit(main())
