"""Edge case tests for Settings configuration."""

from unittest.mock import patch

from tubesummary.config import Settings


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_default_environment(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.environment == "development"

    def test_default_database_url(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert "postgresql" in s.database_url

    def test_default_gateway_key_empty(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.ai_gateway_api_key == ""

    def test_default_sampling(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.summarization_temperature == 0.7
            assert s.summarization_max_tokens == 1000

    def test_default_timeout_is_bounded(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert 10 <= s.http_timeout_seconds <= 15

    def test_default_cors_allows_any_origin(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.cors_allow_origins == ["*"]


class TestSettingsProperties:
    """Tests for computed properties."""

    def test_is_production_true(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is True

    def test_is_production_false_for_development(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "development"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is False

    def test_is_production_false_for_arbitrary(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "staging"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is False


class TestSettingsEnvOverrides:
    """Tests for environment variable overrides."""

    def test_override_gateway_key(self):
        with patch.dict("os.environ", {"AI_GATEWAY_API_KEY": "sk-test"}, clear=True):
            s = Settings(_env_file=None)
            assert s.ai_gateway_api_key == "sk-test"

    def test_override_temperature(self):
        with patch.dict("os.environ", {"SUMMARIZATION_TEMPERATURE": "0.3"}, clear=True):
            s = Settings(_env_file=None)
            assert s.summarization_temperature == 0.3

    def test_override_cors_origins_from_json(self):
        with patch.dict(
            "os.environ", {"CORS_ALLOW_ORIGINS": '["https://app.example.com"]'}, clear=True
        ):
            s = Settings(_env_file=None)
            assert s.cors_allow_origins == ["https://app.example.com"]

    def test_case_insensitive_env_vars(self):
        """Pydantic Settings with case_sensitive=False accepts any case."""
        with patch.dict("os.environ", {"environment": "production"}, clear=True):
            s = Settings(_env_file=None)
            assert s.environment == "production"
