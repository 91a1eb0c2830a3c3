import logging

from shared.core.config import settings


def configure_logging(level: str = None):
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
