# monitoring/html_logger.py
"""
HTML logger for the monitoring application.

This module provides simple logging functions (info, warn, error)
that append log entries to an HTML file and mirror them to the
``orphanage`` logger. The generated log file can be displayed
directly in a browser through the monitoring log view.
"""

from html import escape
from pathlib import Path
import logging

from django.conf import settings
from django.utils.timezone import now

logger = logging.getLogger("orphanage")

# HTML header written when the log file is created
HEADER = """<!doctype html>
<html lang="en"><head><meta charset="utf-8"><title>Application logs</title>
<style>
.log-info{ background:#e3f2fd; color:#0d47a1; padding:.5rem; border-left:4px solid #1976d2; margin:.25rem 0; }
.log-warn{ background:#fff8e1; color:#e65100; padding:.5rem; border-left:4px solid #ff9800; margin:.25rem 0; }
.log-error{ background:#ffebee; color:#b71c1c; padding:.5rem; border-left:4px solid #f44336; margin:.25rem 0; }
.code{ font-family:monospace; }
</style></head><body>
<h3>Application logs</h3>
"""


def log_file() -> Path:
    """
    Return the path of the HTML log file.

    Read from the ``MONITORING_LOG_FILE`` setting, defaulting to
    ``logs/app.log.html`` under ``BASE_DIR``.
    """
    configured = getattr(settings, "MONITORING_LOG_FILE", None)
    if configured:
        return Path(configured)
    return Path(settings.BASE_DIR) / "logs" / "app.log.html"


def _append(css_class: str, label: str, message: str):
    """
    Append a single HTML entry to the log file.

    The file and its parent directory are created on first use.
    """
    path = log_file()
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(HEADER, encoding="utf-8")
    ts = now().strftime("%Y-%m-%d %H:%M:%S")
    line = (
        f'<div class="{css_class}"><strong>[{label} {ts}]</strong> '
        f"{escape(message)}</div>"
    )
    with path.open("a", encoding="utf-8") as f:
        f.write(line + "\n")


def info(message: str):
    """
    Log an informational message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.info(message)
    _append("log-info", "INFO", message)


def warn(message: str):
    """
    Log a warning message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.warning(message)
    _append("log-warn", "WARN", message)


def error(message: str):
    """
    Log an error message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.error(message)
    _append("log-error", "ERROR", message)
