import functools
import logging
import random
import time
from pathlib import Path
from typing import Optional

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from jetstream.settings import LOG_PATH, LOG_LEVEL, ACCENT_COLOR

_LOGGER_NAME = "jetstream"
_CONFIGURED  = False


def configure_logging(log_path: Optional[Path] = None, level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a single file handler to the ``jetstream`` logger (idempotent)."""
    global _CONFIGURED
    logger = logging.getLogger(_LOGGER_NAME)
    if _CONFIGURED:
        return logger

    path = log_path or LOG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.propagate = False
    _CONFIGURED = True
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    get_logger().info(message)


def apply_dark_palette(app: QApplication) -> None:
    """Apply the dark TV palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#101014"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#1b1b1f"))
    palette.setColor(QPalette.AlternateBase, QColor("#232328"))
    palette.setColor(QPalette.Button,        QColor("#1f1f24"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)


def throttle(min_delay: float = 1.0, jitter: float = 0.3):
    """
    Space successive calls of the wrapped function at least *min_delay*
    seconds apart, plus up to *jitter* seconds of random slack.

    Poster downloads run through this so a full row of cards does not hit
    the image host in one burst.
    """
    def wrap(fn):
        last_call = 0.0
        @functools.wraps(fn)
        def inner(*a, **kw):
            nonlocal last_call
            remaining = min_delay - (time.monotonic() - last_call)
            if remaining > 0:
                time.sleep(remaining + random.uniform(0, jitter))
            try:
                return fn(*a, **kw)
            finally:
                last_call = time.monotonic()
        return inner
    return wrap


def elide(text: str, limit: int = 28) -> str:
    """Shorten *text* to *limit* characters with a trailing ellipsis."""
    text = text.strip()
    return text if len(text) <= limit else text[: limit - 1].rstrip() + "…"
