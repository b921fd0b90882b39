import logging

import pytest

import funkit.funkit_log as funkit_log
from funkit.funkit_log import StdoutHandler, logger, setup_logger
from funkit import curry, map


@pytest.fixture
def scratch_logger():
    name = "funkit.scratch"
    yield name
    log = logging.getLogger(name)
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)
    log.propagate = True


def _stdout_handlers(log):
    return [h for h in log.handlers if isinstance(h, StdoutHandler)]


def test_package_logger_is_silent_by_default():
    assert logger.name == "funkit"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert _stdout_handlers(logger) == []


@pytest.mark.parametrize("value", ["verbose", "trace", "", "  "])
def test_unknown_log_level_resolves_to_info(monkeypatch, value):
    monkeypatch.setenv("LOG_LEVEL", value)
    assert funkit_log._resolve_level(None) == logging.INFO


@pytest.mark.parametrize("value, expected", [("debug", logging.DEBUG), (" Error ", logging.ERROR), (15, 15)])
def test_resolve_level_names_and_numbers(value, expected):
    assert funkit_log._resolve_level(value) == expected


def test_setup_logger_adds_one_stdout_handler(scratch_logger):
    log = setup_logger(scratch_logger)
    again = setup_logger(scratch_logger)
    assert again is log
    assert len(_stdout_handlers(log)) == 1
    assert log.propagate is False


def test_setup_logger_reads_level_from_env(monkeypatch, scratch_logger):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert setup_logger(scratch_logger).level == logging.WARNING


def test_setup_logger_explicit_level_wins(monkeypatch, scratch_logger):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert setup_logger(scratch_logger, level="debug").level == logging.DEBUG


def test_setup_logger_unknown_level_means_info(monkeypatch, scratch_logger):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert setup_logger(scratch_logger).level == logging.INFO
    assert setup_logger(scratch_logger, level="nonsense").level == logging.INFO


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_debug_messages_for_curry_and_dispatch():
    collect = _Collect()
    previous = logger.level
    logger.addHandler(collect)
    logger.setLevel(logging.DEBUG)
    try:
        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2, 3)
        map(str, [1])
    finally:
        logger.setLevel(previous)
        logger.removeHandler(collect)
    assert "curry bind <lambda>: 1 of 3" in collect.messages
    assert "curry fire <lambda> with 1 bound + 2 new" in collect.messages
    assert "classify list -> sequence" in collect.messages
