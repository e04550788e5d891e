# vec3f/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "vec3f"


def init_logger(level: int = logging.WARNING) -> logging.Logger:
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    return log


logger = init_logger()
