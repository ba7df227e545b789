import sys

from loguru import logger

from agenda.runtime.settings import EnvironmentSettings, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(settings: EnvironmentSettings | None = None) -> int:
    """Reset Loguru and install a single stderr sink.

    Returns the id of the new sink.
    """
    settings = settings or get_settings()
    debug_on = settings.environment != "production"

    logger.remove()
    if settings.log_json:
        return logger.add(
            sink=sys.stderr,
            level=settings.log_level.upper(),
            serialize=True,
            backtrace=debug_on,
            diagnose=debug_on,
        )
    return logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        colorize=True,
        backtrace=debug_on,
        diagnose=debug_on,
    )
