import logging

from validated_actions.logging.logger import setup_logger


def test_logger_level_from_settings_and_single_handler():
    first = setup_logger("validated_actions.tests.level_default")
    again = setup_logger("validated_actions.tests.level_default")

    assert first is again
    assert len(first.handlers) == 1
    assert first.level == logging.INFO
    assert first.propagate is False


def test_logger_explicit_level():
    assert setup_logger("validated_actions.tests.level_debug", level="debug").level == logging.DEBUG
    assert setup_logger("validated_actions.tests.level_warn", level=logging.WARNING).level == logging.WARNING
