from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FILENAME = "alacritty-setup.log"


def default_log_path() -> str:
    state_home = os.environ.get("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
    return str(Path(state_home) / "alacritty-setup" / LOG_FILENAME)


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    Every step and command is recorded to the log file; the console gets the
    same lines so the operator can follow along.

    Notes:
    - If the requested log file can't be opened, we fall back to a file in
      the current working directory.

    Returns the actual file path being used.
    """

    log_path = log_path or default_log_path()

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_alacritty_setup_configured", False):
        return getattr(logger, "_alacritty_setup_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    file_fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError:
        # Fall back to a writable location.
        chosen_path = str(Path.cwd() / LOG_FILENAME)
        file_handler = logging.FileHandler(chosen_path)
    file_handler.setFormatter(file_fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_alacritty_setup_configured", True)
    setattr(logger, "_alacritty_setup_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
