"""Tests for Settings validation of the ranking configuration."""

import pytest
from pydantic import ValidationError

from recommender.core.config import Settings, get_settings


class TestSettings:
    def test_required_ranking_values(self, fresh_settings):
        fresh_settings.delenv("MINIMUM_UTILITY", raising=False)
        fresh_settings.delenv("RESULT_LIMIT", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_values_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MINIMUM_UTILITY=-1, RESULT_LIMIT=3)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MINIMUM_UTILITY=0, RESULT_LIMIT=-3)

    def test_reads_environment(self, fresh_settings):
        fresh_settings.setenv("MINIMUM_UTILITY", "2")
        fresh_settings.setenv("RESULT_LIMIT", "7")
        fresh_settings.setenv("REDIS_URL", "redis://localhost:6379/0")
        settings = get_settings()
        assert settings.MINIMUM_UTILITY == 2
        assert settings.RESULT_LIMIT == 7
        assert settings.REDIS_URL == "redis://localhost:6379/0"

    def test_defaults(self):
        settings = Settings(_env_file=None, MINIMUM_UTILITY=0, RESULT_LIMIT=3)
        assert settings.api_prefix == "/ennvas/rcm/rest"
        assert settings.rank_cache_ttl > 0
