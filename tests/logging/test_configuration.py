import logging
from typing import Collection

import pytest

from colltools.helpers.loggers import Formatter, JsonFormatter, LogFormat, TextFormatter, \
                                      configure, make_formatter


@pytest.fixture(autouse=True)
def _clear_own_handlers():
    logger = logging.getLogger()
    original_handlers = logger.handlers[:]
    original_level = logger.level
    yield
    logger.handlers[:] = original_handlers
    logger.setLevel(original_level)


def _get_own_handlers(logger: logging.Logger) -> Collection[logging.Handler]:
    return [
        handler for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler) and
           isinstance(handler.formatter, Formatter)
    ]


def test_own_formatter_is_used():
    configure()
    logger = logging.getLogger()
    own_handlers = _get_own_handlers(logger)
    assert len(own_handlers) == 1


@pytest.mark.parametrize('log_format', [LogFormat.FULL, LogFormat.PLAIN, '%(message)s'])
def test_formatter_text(log_format):
    configure(log_format=log_format)
    logger = logging.getLogger()
    own_handlers = _get_own_handlers(logger)
    assert len(own_handlers) == 1
    assert type(own_handlers[0].formatter) is TextFormatter


def test_formatter_json():
    configure(log_format=LogFormat.JSON)
    logger = logging.getLogger()
    own_handlers = _get_own_handlers(logger)
    assert len(own_handlers) == 1
    assert type(own_handlers[0].formatter) is JsonFormatter


@pytest.mark.parametrize('kwargs, level', [
    pytest.param(dict(), logging.INFO, id='default'),
    pytest.param(dict(debug=True), logging.DEBUG, id='debug'),
    pytest.param(dict(verbose=True), logging.DEBUG, id='verbose'),
    pytest.param(dict(quiet=True), logging.WARNING, id='quiet'),
])
def test_levels(kwargs, level):
    configure(**kwargs)
    logger = logging.getLogger()
    assert logger.level == level


@pytest.mark.parametrize('log_format', [None, 123, object()])
def test_unsupported_format(log_format):
    with pytest.raises(ValueError) as e:
        make_formatter(log_format=log_format)
    assert "Unsupported log format" in str(e.value)
