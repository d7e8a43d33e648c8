from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"


def _not_echoed(record) -> bool:
    # echoed lines were already printed as they are
    return not record["extra"].get("echo", False)


def setup_console_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level, format=CONSOLE_FORMAT, filter=_not_echoed)


def setup_session_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Console sink plus, when given, an appending file sink for the whole session."""
    setup_console_logging(level)
    if log_file is None:
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_file),
        level="DEBUG",
        format=FILE_FORMAT,
        encoding="utf-8",
        mode="a",
    )


def echo(text: str = "") -> None:
    """Print a plain console line and copy it into the session log file."""
    print(text)
    if text.strip():
        logger.bind(echo=True).info(text)
