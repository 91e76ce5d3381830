"""Tests for logging configuration"""
import logging

from profile_builder.app.core.logging_config import get_logger, resolve_level, setup_logging


def test_get_logger_uses_package_namespace():
    assert get_logger("api.resume").name == "profile_builder.api.resume"


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO


def test_setup_logging_sets_package_level_when_root_already_configured():
    package_logger = logging.getLogger("profile_builder")
    previous = package_logger.level
    try:
        setup_logging("DEBUG")
        assert package_logger.level == logging.DEBUG
        assert get_logger("db.storage").isEnabledFor(logging.DEBUG)
        setup_logging("WARNING")
        assert package_logger.level == logging.WARNING
        assert not get_logger("db.storage").isEnabledFor(logging.INFO)
    finally:
        package_logger.setLevel(previous)
