"""
Loguru setup. File sink only: stderr is reserved for the shell's own
diagnostic, so without RUSH_LOG_FILE nothing is logged at all.
"""

from loguru import logger

from rush import config


def setup_logging(log_file=None, level=None):
    log_file = log_file or config.LOG_FILE
    logger.remove()

    if not log_file:
        logger.disable("rush")
        return

    logger.enable("rush")
    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,
        level=level or config.LOG_LEVEL,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )
    logger.info(f"Logging to {log_file}")
