"""
Root logger setup shared by every application the factory builds.

All modules log through ``logging.getLogger(__name__)``; this module
only decides where those records go.  The first call wins: if the root
logger already has handlers (a previous ``create_app`` call, pytest's
capture, uvicorn's own setup) nothing is changed.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, when ``logfile`` is set, a file.

    ``level`` is a level name such as ``"debug"`` or ``"WARNING"``;
    unknown names mean ``INFO``.  A relative ``logfile`` is resolved
    against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
