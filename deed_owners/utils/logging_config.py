import sys

from loguru import logger

from deed_owners.utils.logging_utils import add_optional_sinks, env_log_level

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logger(level: str | None = None) -> None:
    """
    Configure loguru logger for the command line entry point.

    Library code never calls this; it only emits records. Output goes to
    stderr so stdout stays clean for JSON results.
    """
    # Remove default handler to avoid duplicate logs
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=(level or env_log_level()).upper(),
    )

    add_optional_sinks()
