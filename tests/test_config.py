"""
Tests for settings defaults and overrides.
"""

from podracer.config import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.pod.RADIUS == 400
        assert settings.pod.DRAG_FACTOR == 0.85
        assert settings.pod.MAX_THRUST == 100
        assert settings.checkpoint.RADIUS == 600
        assert settings.strategy.NAME == "drift_compensation"
        assert settings.strategy.VELOCITY_PROJECTION == 3.0
        assert settings.strategy.ALWAYS_BOOST is False

    def test_global_instance(self):
        assert get_settings() is get_settings()

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("PODRACER_LOG_LEVEL", "warning")
        assert Settings().LOG_LEVEL == "WARNING"

    def test_debug_forces_debug_logging(self, monkeypatch):
        monkeypatch.delenv("PODRACER_LOG_LEVEL", raising=False)
        assert Settings(DEBUG=True).LOG_LEVEL == "DEBUG"
        assert Settings().LOG_LEVEL == "INFO"

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("PODRACER_LOG_LEVEL", "verbose")
        assert Settings().LOG_LEVEL == "INFO"
