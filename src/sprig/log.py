"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    FileHandler,
    Formatter,
    Handler,
    Logger,
    StreamHandler,
    getLogger,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init_logging(*, verbose: bool = False, filename: str | None = None) -> None:
    """Initialize logging for a host application embedding the front end.

    Should be called once when the application starts. The front end itself
    only creates module loggers and never configures handlers on import.

    Args:
        verbose: Log at DEBUG instead of INFO.
        filename: Write the log to this file instead of stderr.

    """
    handler: Handler = (
        FileHandler(filename, mode="w") if filename else StreamHandler()
    )
    handler.setFormatter(Formatter(LOG_FORMAT))

    package_logger = getLogger("sprig")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(DEBUG if verbose else INFO)

    if verbose:
        package_logger.debug("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)
