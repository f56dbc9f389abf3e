import logging
from unittest.mock import patch

import pytest

import gisframe
import gisframe.logging
from gisframe.logging import LoggerType, LogLevel
from gisframe.logging.logging_decorators import standard_log_decorator
from gisframe.logging.logurulogger import LoguruLogger
from gisframe.logging.nulllogger import NullLogger
from gisframe.logging.pythonlogger import PythonLogger


def test_logging_no_configuration():
    logger = gisframe.logging.logger
    assert isinstance(logger.instance, NullLogger)


@pytest.mark.parametrize(
    ("logger_type", "logger_class"),
    [
        (LoggerType.NULL, NullLogger),
        (LoggerType.PYTHON, PythonLogger),
        (LoggerType.LOGURU, LoguruLogger),
    ],
)
def test_logging_configure_logger(logger_type, logger_class):
    gisframe.logging.configure(logger_type, add_default_stream_handler=False)
    assert isinstance(gisframe.logging.logger.instance, logger_class)


def test_logging_change_logger_during_runtime():
    def uses_logger(logger=gisframe.logging.logger):
        assert isinstance(logger.instance, LoguruLogger)

    gisframe.logging.configure(LoggerType.PYTHON, add_default_stream_handler=False)
    assert isinstance(gisframe.logging.logger.instance, PythonLogger)

    gisframe.logging.configure(LoggerType.LOGURU, add_default_stream_handler=False)

    uses_logger()
    assert isinstance(gisframe.logging.logger.instance, LoguruLogger)


@pytest.mark.parametrize(
    ("logger_type", "patched_logger"),
    [
        (LoggerType.PYTHON, "gisframe.logging.config.PythonLogger"),
        (LoggerType.LOGURU, "gisframe.logging.config.LoguruLogger"),
    ],
)
def test_logging_calls_forwarded_to_loggers(logger_type, patched_logger):
    with patch(patched_logger) as MockClass:
        gisframe.logging.configure(logger_type)
        logger = gisframe.logging.logger

        logger.debug("debug message")
        logger.info("info message")
        logger.warning("warning message")
        logger.error("error message")
        logger.critical("critical message")

        logger_instance = MockClass.return_value
        logger_instance.debug.assert_called_with("debug message", 0)
        logger_instance.info.assert_called_with("info message", 0)
        logger_instance.warning.assert_called_with("warning message", 0)
        logger_instance.error.assert_called_with("error message", 0)
        logger_instance.critical.assert_called_with("critical message", 0)


@pytest.mark.parametrize("logger_level", list(LogLevel))
@pytest.mark.parametrize("add_default_stream_handler", [True, False])
@pytest.mark.parametrize("add_default_file_handler", [True, False])
@pytest.mark.parametrize(
    ("logger_type", "patched_logger"),
    [
        (LoggerType.PYTHON, "gisframe.logging.config.PythonLogger"),
        (LoggerType.LOGURU, "gisframe.logging.config.LoguruLogger"),
    ],
)
def test_logging_configure_param_forwarded_to_loggers(
    logger_type,
    patched_logger,
    logger_level,
    add_default_stream_handler,
    add_default_file_handler,
):
    with patch(patched_logger) as MockClass:
        gisframe.logging.configure(
            logger_type,
            logger_level,
            add_default_stream_handler,
            add_default_file_handler,
        )
        MockClass.assert_called_with(
            logger_level, add_default_stream_handler, add_default_file_handler
        )


def test_python_logger_records_verbs(caplog, small_df):
    gisframe.logging.configure(
        LoggerType.PYTHON, LogLevel.DEBUG, add_default_stream_handler=False
    )
    with caplog.at_level(logging.DEBUG, logger="gisframe"):
        gisframe.filter(small_df, "count > 1")
    assert "filter: kept 4 of 6 rows" in caplog.text


def test_python_logger_file_handler(tmp_path):
    with gisframe.util.cd(tmp_path):
        gisframe.logging.configure(
            LoggerType.PYTHON,
            LogLevel.INFO,
            add_default_stream_handler=False,
            add_default_file_handler=True,
        )
        gisframe.logging.logger.info("written to file")
        python_logger = logging.getLogger("gisframe")
        for handler in list(python_logger.handlers):
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()
                python_logger.removeHandler(handler)
    assert "written to file" in (tmp_path / "gisframe.log").read_text()


def test_log_with_unknown_level():
    with pytest.raises(ValueError):
        gisframe.logging.logger.instance.log("verbose", "message")


def test_standard_log_decorator():
    @standard_log_decorator()
    def double(x):
        return 2 * x

    with patch("gisframe.logging.config.PythonLogger") as MockClass:
        gisframe.logging.configure(LoggerType.PYTHON)
        assert double(4) == 8
        instance = MockClass.return_value
        start_message = instance.info.call_args.args[0]
        end_message = instance.debug.call_args.args[0]

    assert start_message.startswith("Beginning")
    assert "double for int" in start_message
    assert end_message.startswith("Finished")


def test_null_logger_is_silent(caplog, small_df):
    gisframe.logging.configure(LoggerType.NULL)
    with caplog.at_level(logging.DEBUG):
        gisframe.verbs.filter(small_df, "count > 1")
    assert caplog.records == []
