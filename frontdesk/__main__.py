"""Run the relay with uvicorn: `python -m frontdesk`."""

import logging

import uvicorn

from frontdesk.config import get_settings

logger = logging.getLogger("frontdesk")


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings.validate()

    logger.info("Listening on port %d", settings.PORT)
    uvicorn.run("frontdesk.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
