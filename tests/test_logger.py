import logging

import pytest
from lama.curried import curry, compose
from lama.logger import logger, setup_logger


@pytest.fixture
def debug_records():
    records = []
    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = records.append
    saved_level = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    yield records
    logger.removeHandler(handler)
    logger.setLevel(saved_level)


def test_package_logger_only_has_null_handler():
    assert logger.name == 'lama'
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]
    assert logger.propagate is True


def test_setup_logger_uses_requested_level():
    configured = setup_logger('lama.tests.level', level='warning')
    assert configured.level == logging.WARNING


def test_setup_logger_reads_level_from_environment(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    configured = setup_logger('lama.tests.env')
    assert configured.level == logging.DEBUG


def test_setup_logger_adds_stream_handler_once():
    configured = setup_logger('lama.tests.once')
    setup_logger('lama.tests.once')
    assert len(configured.handlers) == 1


@pytest.mark.parametrize('level', ['verbose', 'loud'])
def test_setup_logger_rejects_unknown_level(level):
    with pytest.raises(ValueError, match='Unknown log level'):
        setup_logger('lama.tests.unknown', level=level)


def test_contract_violations_are_logged_at_debug(debug_records):
    with pytest.raises(ValueError):
        curry(lambda: 0)
    with pytest.raises(TypeError):
        compose(lambda x, y: x, lambda x: x)

    assert [r.levelno for r in debug_records] == [logging.DEBUG, logging.DEBUG]


def test_happy_path_logs_nothing(debug_records):
    assert curry(lambda x, y: x * y)(3)(4) == 12
    assert compose(lambda x: x + 1, lambda x: x * 2)(3) == 7

    assert debug_records == []
