# tests/test_config.py

"""
Settings Tests - defaults, environment overrides and production guard
"""

import pytest
from pydantic import ValidationError

from opportunity_matrix.config import Settings
from opportunity_matrix.core.dependencies import get_dashboard_controller, get_opportunity_repository
from opportunity_matrix.models.enumerations import TechnologyType


class TestSettings:

    def test_defaults(self, test_settings):
        assert test_settings.APP_NAME == "AI Opportunities Prioritization Matrix"
        assert test_settings.APP_ENV == "development"
        assert test_settings.LOAD_SEED_DATA is True
        assert test_settings.DRAFT_DEFAULT_SCORE == 5
        assert test_settings.DEFAULT_TECHNOLOGY_TYPE == TechnologyType.MACHINE_LEARNING

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DRAFT_DEFAULT_SCORE", "3")
        monkeypatch.setenv("LOG_FORMAT", "json")
        settings = Settings(_env_file=None)
        assert settings.DRAFT_DEFAULT_SCORE == 3
        assert settings.LOG_FORMAT == "json"

    def test_default_score_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DRAFT_DEFAULT_SCORE=11)

    def test_production_with_debug_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, APP_ENV="production", DEBUG=True)
        assert "DEBUG must be False in production" in str(exc_info.value)

    def test_production_without_debug_passes(self):
        assert Settings(_env_file=None, APP_ENV="production", DEBUG=False).APP_ENV == "production"


class TestDependencies:

    def test_seeded_repository(self, test_settings):
        assert len(get_opportunity_repository(test_settings)) == 14

    def test_empty_repository(self):
        settings = Settings(_env_file=None, LOAD_SEED_DATA=False)
        assert len(get_opportunity_repository(settings)) == 0

    def test_controller_uses_draft_defaults(self):
        settings = Settings(
            _env_file=None,
            DRAFT_DEFAULT_SCORE=2,
            DEFAULT_TECHNOLOGY_TYPE=TechnologyType.CONVERSATIONAL_AI,
        )
        controller = get_dashboard_controller(settings)
        assert controller.form.draft["data_quality"] == 2
        assert controller.form.draft["technology_type"] == "Conversational AI"
        assert controller.form.visible is False
        assert controller.selected is None
