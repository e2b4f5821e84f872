"""Logging configuration with console and optional rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Session log files kept on disk (older ones are deleted on startup)
LOG_RETENTION = 5


def setup_logging(
    log_file: Optional[str] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure root logging for the command line tool.

    The library itself never configures logging; it only emits records on
    module-level loggers (article_ranking.bm25.scorer, ...).

    Destinations:
    - Console (stderr): brief logs, `console_level`
    - File (only when log_file is given): detailed logs, `file_level`,
      one timestamped file per session, rotated at 10MB, last 5 sessions kept

    Args:
        log_file: Base path of the session log file, e.g. "logs/article-ranking.log"
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of the session log file, or None when logging to console only
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # stdout carries command output, so the console handler writes to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    session_log = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Keep only the newest sessions, leaving room for the one created below
        log_pattern = str(log_path.parent / f"{log_path.stem}_*.log")
        existing_logs = sorted(glob.glob(log_pattern), reverse=True)  # Newest first
        for old_log in existing_logs[LOG_RETENTION - 1:]:
            try:
                Path(old_log).unlink()
            except OSError:
                pass  # Another process may have removed it

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

        file_handler = RotatingFileHandler(
            session_log,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=10,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.getLogger(__name__).debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log or 'disabled'}"
    )
    return session_log
