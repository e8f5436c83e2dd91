"""Logging setup for the sitescore CLI and library users."""

import logging
import sys
from pathlib import Path
from typing import Optional

# Console lines sit next to progress output on stderr, so they stay short
CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers and the most verbose level let through for each
QUIET_LOGGERS = {
    'httpx': logging.WARNING,
    'httpcore': logging.WARNING,
    'whois': logging.ERROR,
}


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Route sitescore logs to stderr and, optionally, a file.

    stdout is left alone so --json and --events output can be piped.

    Args:
        level: Level name such as DEBUG or WARNING; unknown names fall back to INFO
        log_file: Also append full, timestamped records to this path
        format_string: Overrides the format of both handlers
    """
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(format_string or CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(format_string or FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=handlers,
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
