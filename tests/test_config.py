"""
Unit Tests for Configuration, Logging and Exceptions

Run with: pytest tests/test_config.py -v
"""

import logging

import pytest

from tweenkit.config import TweenConfig
from tweenkit.core.exceptions import OptionsError, PropertyFormatError, TweenException
from tweenkit.core.logging_config import LogContext, get_logger, log_performance, setup_logging


class TestTweenConfig:
    """Tests for TweenConfig."""

    def test_defaults(self):
        config = TweenConfig()
        assert config.default_duration == 300
        assert config.default_easing == "ease"
        assert config.fade_cut_group == 1
        assert config.fps_limit is None
        assert not config.reduced_motion

    def test_from_env(self):
        config = TweenConfig.from_env({
            "TWEENKIT_DEFAULT_DURATION": "500",
            "TWEENKIT_DEFAULT_EASING": "ease-out",
            "TWEENKIT_FPS_LIMIT": "30",
            "TWEENKIT_SPEED": "0.5",
            "TWEENKIT_REDUCED_MOTION": "yes",
            "TWEENKIT_FADE_CUT_GROUP": "fades",
            "TWEENKIT_LOG_LEVEL": "DEBUG",
        })
        assert config.default_duration == 500.0
        assert config.default_easing == "ease-out"
        assert config.fps_limit == 30.0
        assert config.speed == 0.5
        assert config.reduced_motion is True
        assert config.fade_cut_group == "fades"
        assert config.log_level == "DEBUG"

    def test_from_env_ignores_unrelated(self):
        config = TweenConfig.from_env({"HOME": "/root", "TWEENKIT_FADE_CUT_GROUP": "7"})
        assert config.fade_cut_group == 7
        assert config.default_duration == 300

    def test_invalid_env_value(self):
        with pytest.raises(OptionsError) as exc_info:
            TweenConfig.from_env({"TWEENKIT_SPEED": "fast"})
        assert "TWEENKIT_SPEED" in str(exc_info.value)

    def test_invalid_bool(self):
        with pytest.raises(OptionsError):
            TweenConfig.from_env({"TWEENKIT_REDUCED_MOTION": "maybe"})

    def test_negative_values_rejected(self):
        with pytest.raises(OptionsError):
            TweenConfig(default_duration=-5)
        with pytest.raises(OptionsError):
            TweenConfig(speed=-1)


class TestLogging:
    """Tests for logging helpers."""

    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("tweenkit")
        level = logger.level
        yield logger
        for handler in list(logger.handlers):
            if getattr(handler, "_tweenkit_handler", False):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(level)

    def test_get_logger_namespacing(self):
        assert get_logger("scheduler").name == "tweenkit.scheduler"
        assert get_logger("tweenkit.driver").name == "tweenkit.driver"
        assert get_logger("tweenkit").name == "tweenkit"

    def test_setup_logging_replaces_handlers(self, package_logger, tmp_path):
        setup_logging("DEBUG")
        setup_logging("INFO", log_file=str(tmp_path / "tween.log"))
        tagged = [h for h in package_logger.handlers if getattr(h, "_tweenkit_handler", False)]
        assert len(tagged) == 2
        assert package_logger.level == logging.INFO

    def test_setup_logging_unknown_level(self, package_logger):
        setup_logging("LOUD")
        assert package_logger.level == logging.INFO

    def test_configure_logging_from_config(self, package_logger):
        TweenConfig(log_level="ERROR").configure_logging()
        assert package_logger.level == logging.ERROR

    def test_log_context_restores(self):
        logger = logging.getLogger("tweenkit.scheduler")
        before = logger.level
        with LogContext("tweenkit.scheduler", logging.DEBUG) as inner:
            assert inner.level == logging.DEBUG
        assert logger.level == before

    def test_log_performance(self, caplog):
        @log_performance
        def work(x):
            return x * 2

        assert work(2) == 4
        with caplog.at_level(logging.DEBUG, logger=__name__):
            assert work(3) == 6
        assert "took" in caplog.text


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_details_in_str(self):
        err = PropertyFormatError("bad", property_name="opacity", value=[1, 2, 3])
        assert err.details == {"property": "opacity", "value": [1, 2, 3]}
        assert str(err) == "bad (property='opacity', value=[1, 2, 3])"

    def test_plain_message(self):
        assert str(TweenException("plain")) == "plain"

    def test_options_error_is_value_error(self):
        err = OptionsError("nope", option="repeat", value=-4)
        assert isinstance(err, ValueError)
        assert isinstance(err, TweenException)
        assert err.details["option"] == "repeat"
