"""
Tuning parameters for the three scorers.

Every scorer takes `config=None` and falls back to the defaults defined here.
Callers may pass a model instance or a plain dict (merged over the defaults).

load_settings() builds all configs from environment variables named
RANKING_<SECTION>_<FIELD> (e.g. RANKING_BM25_K1, RANKING_TRENDING_GRAVITY),
after loading .env.local / .env with python-dotenv. Scorers never read the
environment on their own.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "RANKING"


class BM25Config(BaseModel):
    """Lexical relevance (BM25) parameters."""

    model_config = ConfigDict(extra="forbid")

    # Term frequency saturation. Higher = repeated terms keep adding score longer.
    k1: float = 1.5
    # Length normalization. 0 = ignore document length, 1 = full normalization.
    b: float = 0.75

    # Field boosts, first match wins: title > subtitle > tag name > none
    title_boost: float = 2.0
    subtitle_boost: float = 1.5
    tag_boost: float = 1.3


class RecommendationConfig(BaseModel):
    """Content similarity (weighted Jaccard over tags) parameters."""

    model_config = ConfigDict(extra="forbid")

    # -------------------------------------------------------------------------
    # Engagement boost per tag weight
    # boost = 1 + ln(1 + likes*like_weight + comments*comment_weight + reads*read_weight)
    # -------------------------------------------------------------------------
    like_weight: float = 0.3
    comment_weight: float = 0.5
    read_weight: float = 0.2

    # -------------------------------------------------------------------------
    # Recency decay
    # decayed = similarity * (1 - min(1, days_old / age_horizon_days) * max_age_penalty)
    # -------------------------------------------------------------------------
    max_age_penalty: float = 0.2
    age_horizon_days: float = 365

    # -------------------------------------------------------------------------
    # User (reading history) recommendations
    # -------------------------------------------------------------------------

    # Number of read articles used as seeds.
    history_seed_count: int = 5
    # Only candidates created within this many days are considered.
    history_window_days: float = 365


class TrendingConfig(BaseModel):
    """Time-decayed popularity (hot score) parameters."""

    model_config = ConfigDict(extra="forbid")

    # engagement = ln(1 + likes*like_weight + comments*comment_weight + reads*read_weight)
    like_weight: float = 2.0
    comment_weight: float = 3.0
    read_weight: float = 1.0

    # Exponential decay: exp(-days_old / decay_constant_days)
    decay_constant_days: float = 7.0
    # Logarithmic decay: 1 / (1 + hours_old / gravity_hours) ** gravity
    gravity: float = 1.8
    gravity_hours: float = 12.0

    # Verified author multiplier.
    verified_boost: float = 1.1
    # Quality boost: +quality_step_boost per quality_step points above quality_threshold.
    quality_threshold: float = 70.0
    quality_step: float = 10.0
    quality_step_boost: float = 0.05


class TrendingFilters(BaseModel):
    """Eligibility filters applied before hot scoring."""

    model_config = ConfigDict(extra="forbid")

    # Rejected only when BOTH thresholds fail (likes < min_likes and comments < min_comments).
    min_likes: int = 1
    min_comments: int = 0
    # <= 0 disables the age filter.
    max_age_days: float = 90
    use_logarithmic_decay: bool = False


class RankingSettings(BaseModel):
    """All scorer configs, as loaded from the environment."""

    bm25: BM25Config = Field(default_factory=BM25Config)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)
    trending: TrendingConfig = Field(default_factory=TrendingConfig)
    trending_filters: TrendingFilters = Field(default_factory=TrendingFilters)


ConfigT = TypeVar("ConfigT", bound=BaseModel)


def resolve_config(
    config: Union[ConfigT, Dict[str, Any], None],
    model: Type[ConfigT],
) -> ConfigT:
    """Return `config` as a `model` instance; None means defaults, dicts override defaults."""
    if config is None:
        return model()
    if isinstance(config, model):
        return config
    return model.model_validate(config)


def _section_from_env(section: str, model: Type[BaseModel]) -> Dict[str, str]:
    """Collect RANKING_<SECTION>_<FIELD> values that are set and non-empty."""
    values = {}
    for name in model.model_fields:
        env_name = f"{ENV_PREFIX}_{section}_{name}".upper()
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return values


def load_settings(env_file: Optional[Union[str, Path]] = None) -> RankingSettings:
    """
    Build RankingSettings from environment variables.

    Loads `env_file` if given, otherwise .env.local (highest priority) or .env
    from the current directory, then reads RANKING_* variables. Unset
    variables keep their defaults.

    Args:
        env_file: Explicit dotenv file to load

    Returns:
        RankingSettings with environment overrides applied

    Raises:
        ValueError: env_file does not exist, or a variable cannot be coerced
            (pydantic.ValidationError is a ValueError)
    """
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise ValueError(f"Env file not found: {env_path}")
        load_dotenv(env_path, override=True)
        logger.debug(f"Loaded environment from: {env_path}")
    else:
        env_local = Path.cwd() / ".env.local"
        env_default = Path.cwd() / ".env"
        if env_local.exists():
            load_dotenv(env_local, override=True)
            logger.debug(f"Loaded environment from: {env_local}")
        elif env_default.exists():
            load_dotenv(env_default, override=True)
            logger.debug(f"Loaded environment from: {env_default}")

    settings = RankingSettings(
        bm25=BM25Config.model_validate(_section_from_env("bm25", BM25Config)),
        recommendations=RecommendationConfig.model_validate(
            _section_from_env("recommendations", RecommendationConfig)
        ),
        trending=TrendingConfig.model_validate(_section_from_env("trending", TrendingConfig)),
        trending_filters=TrendingFilters.model_validate(
            _section_from_env("trending_filters", TrendingFilters)
        ),
    )
    logger.debug(f"Ranking settings: {settings.model_dump()}")
    return settings
