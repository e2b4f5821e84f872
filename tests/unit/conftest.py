"""Unit test configuration - fixed clock and article factories"""

import logging
import os
from datetime import datetime, timedelta, timezone
from logging.handlers import RotatingFileHandler

import pytest

from article_ranking.models import Article


NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """
    Fixed reference instant for every time-dependent test.

    Scorers take `now` explicitly, so no clock patching is needed.
    """
    return NOW


@pytest.fixture
def make_article(now):
    """
    Factory for Article models.

    `days_old` positions created_at relative to the fixed `now`;
    `tags` may be given as names (id = "t-<name>") or full dicts.
    """
    def _make(article_id, tags=(), days_old=0.0, **fields):
        tag_rows = [
            tag if isinstance(tag, dict) else {"id": f"t-{tag}", "name": tag}
            for tag in tags
        ]
        return Article(
            id=article_id,
            tags=tag_rows,
            created_at=now - timedelta(days=days_old),
            **fields,
        )

    return _make


@pytest.fixture
def restore_root_logging():
    """Remove handlers installed by setup_logging() after a test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Run from an empty directory with no RANKING_* variables set.

    load_dotenv() writes os.environ directly, so the whole environment is
    restored afterwards.
    """
    saved = dict(os.environ)
    for name in list(os.environ):
        if name.startswith("RANKING_"):
            del os.environ[name]
    monkeypatch.chdir(tmp_path)

    yield monkeypatch

    os.environ.clear()
    os.environ.update(saved)
