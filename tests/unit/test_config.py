"""
Unit tests for scorer configuration and environment loading.
"""

import pytest
from pydantic import ValidationError

from article_ranking.config import (
    BM25Config,
    RecommendationConfig,
    TrendingConfig,
    TrendingFilters,
    load_settings,
    resolve_config,
)


class TestDefaults:
    """Test documented defaults"""

    def test_bm25_defaults(self):
        """Test k1, b and field boosts"""
        config = BM25Config()
        assert (config.k1, config.b) == (1.5, 0.75)
        assert (config.title_boost, config.subtitle_boost, config.tag_boost) == (2.0, 1.5, 1.3)

    def test_recommendation_defaults(self):
        """Test engagement weights, decay and history parameters"""
        config = RecommendationConfig()
        assert (config.like_weight, config.comment_weight, config.read_weight) == (0.3, 0.5, 0.2)
        assert config.max_age_penalty == 0.2
        assert config.age_horizon_days == 365
        assert config.history_seed_count == 5

    def test_trending_defaults(self):
        """Test hot score parameters"""
        config = TrendingConfig()
        assert config.decay_constant_days == 7.0
        assert config.gravity == 1.8
        assert config.verified_boost == 1.1
        assert config.quality_threshold == 70.0

    def test_filter_defaults(self):
        """Test trending filter defaults"""
        filters = TrendingFilters()
        assert filters.min_likes == 1
        assert filters.min_comments == 0
        assert filters.max_age_days == 90
        assert filters.use_logarithmic_decay is False


class TestResolveConfig:
    """Test config normalization"""

    def test_none_means_defaults(self):
        """Test that None resolves to a default instance"""
        assert resolve_config(None, BM25Config) == BM25Config()

    def test_instance_passes_through(self):
        """Test that a model instance is returned unchanged"""
        config = BM25Config(k1=2.0)
        assert resolve_config(config, BM25Config) is config

    def test_dict_overrides_defaults(self):
        """Test partial dict overrides keep other defaults"""
        config = resolve_config({"k1": 2.0}, BM25Config)
        assert config.k1 == 2.0
        assert config.b == 0.75

    def test_unknown_keys_rejected(self):
        """Test that typos in override dicts are reported"""
        with pytest.raises(ValidationError):
            resolve_config({"k_1": 2.0}, BM25Config)


class TestLoadSettings:
    """Test environment-based settings"""

    def test_defaults_without_env(self, clean_env):
        """Test that no variables means default settings"""
        settings = load_settings()

        assert settings.bm25 == BM25Config()
        assert settings.trending_filters == TrendingFilters()

    def test_environment_overrides(self, clean_env):
        """Test RANKING_<SECTION>_<FIELD> variables"""
        clean_env.setenv("RANKING_BM25_K1", "2.0")
        clean_env.setenv("RANKING_TRENDING_GRAVITY", "1.5")
        clean_env.setenv("RANKING_TRENDING_FILTERS_USE_LOGARITHMIC_DECAY", "true")
        clean_env.setenv("RANKING_RECOMMENDATIONS_HISTORY_SEED_COUNT", "3")

        settings = load_settings()

        assert settings.bm25.k1 == 2.0
        assert settings.bm25.b == 0.75
        assert settings.trending.gravity == 1.5
        assert settings.trending_filters.use_logarithmic_decay is True
        assert settings.recommendations.history_seed_count == 3

    def test_empty_values_ignored(self, clean_env):
        """Test that blank variables keep defaults"""
        clean_env.setenv("RANKING_BM25_K1", "  ")

        assert load_settings().bm25.k1 == 1.5

    def test_env_file(self, clean_env, tmp_path):
        """Test loading overrides from an explicit dotenv file"""
        env_file = tmp_path / "ranking.env"
        env_file.write_text("RANKING_TRENDING_DECAY_CONSTANT_DAYS=3\n")

        settings = load_settings(env_file)

        assert settings.trending.decay_constant_days == 3.0

    def test_env_local_in_working_directory(self, clean_env, tmp_path):
        """Test that .env.local in the working directory is picked up"""
        (tmp_path / ".env.local").write_text("RANKING_BM25_B=0.5\n")

        assert load_settings().bm25.b == 0.5

    def test_missing_env_file(self, clean_env, tmp_path):
        """Test that an explicit missing file is an error"""
        with pytest.raises(ValueError, match="not found"):
            load_settings(tmp_path / "missing.env")

    def test_invalid_value(self, clean_env):
        """Test that malformed numbers raise a ValueError"""
        clean_env.setenv("RANKING_BM25_K1", "fast")

        with pytest.raises(ValueError):
            load_settings()
