import logging
from sassimport.logging_setup import configure_logging

def test_configure_logging_sets_level_and_single_handler():
    configure_logging("debug")
    configure_logging("info", force_json_logs=True)
    package_logger = logging.getLogger("sassimport")
    assert package_logger.level == logging.INFO
    assert len(package_logger.handlers) == 1
    assert package_logger.propagate is False

def test_unknown_level_falls_back_to_warning():
    configure_logging("chatty")
    assert logging.getLogger("sassimport").level == logging.WARNING
