import logging
import os


def get_log_level() -> int:
    name = os.getenv("DECLSIG_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level


def get_source_root() -> str | None:
    return os.getenv("DECLSIG_SOURCE_ROOT") or None


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
