import logging
import os


def configure_logging(default_level: int = logging.WARNING) -> None:
    """Configure root logger with a sane default format.

    Respects SA_LOG_LEVEL env var if present.
    """
    level_name = os.getenv("SA_LOG_LEVEL")
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )


def verbosity_to_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING
