# logger_utils.py -  logging setup plus timing/metric helpers

import logging
import os
import time
from typing import Optional

# Path to the default log file when file logging is switched on
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "spellcheck.log")

PACKAGE_LOGGER = "spellcheck_assistant"
_metrics_logger = logging.getLogger(PACKAGE_LOGGER + ".metrics")


class ColorFormatter(logging.Formatter):
    """Console formatter: [YYYY-MM-DD HH:MM:SS] LEVEL   | message, coloured by level."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__("[%(asctime)s] %(levelname)-7s | %(message)s", "%Y-%m-%d %H:%M:%S")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if self.use_color and record.levelname in self.COLORS:
            return f"{self.COLORS[record.levelname]}{line}{self.COLORS['RESET']}"
        return line


def setup_logging(level: int = logging.INFO, path: Optional[str] = None, use_color: bool = True) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.
    Safe to call more than once; previous handlers are replaced.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler()
    console.setFormatter(ColorFormatter(use_color=use_color))
    logger.addHandler(console)

    if path:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(ColorFormatter(use_color=False))
        logger.addHandler(fh)
    return logger


class Log:
    """Metric and timing helpers on top of the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: dictionary build: 0.123s
        """
        _metrics_logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("dictionary build"):
                build()
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record the duration unless the block raised."""
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
