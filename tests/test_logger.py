import pytest

from nomadpack import logger


@pytest.mark.parametrize("method", ["debug", "error", "info", "trace", "warning"])
def test_fmt_logger_prints_message(capsys, method):
    getattr(logger.FmtLogger(), method)("hello there")
    assert capsys.readouterr().out == "hello there\n"


def test_fmt_logger_error_with_context(capsys):
    logger.FmtLogger().error_with_context(ValueError("boom"), "subject", "ctx one", "ctx two")
    assert capsys.readouterr().out == "err: boom\nsubject\nctx one\nctx two\n"


def test_default_logger_prints(capsys):
    log = logger.default()
    log.info("from default")
    assert isinstance(log, logger.FmtLogger)
    assert capsys.readouterr().out == "from default\n"


@pytest.mark.parametrize("method", ["debug", "error", "info", "trace", "warning"])
def test_test_logger_forwards_message(method):
    seen = []
    getattr(logger.TestLogger(seen.append), method)("a message")
    assert seen == ["a message"]


def test_test_logger_error_with_context():
    seen = []
    logger.TestLogger(seen.append).error_with_context(RuntimeError("bad"), "sub", "c1", "c2")
    assert seen == ["err: bad", "sub", "c1", "c2"]


def test_test_logger_error_with_context_without_extra_lines():
    seen = []
    logger.TestLogger(seen.append).error_with_context("plain", "sub")
    assert seen == ["err: plain", "sub"]


def test_logger_interface_is_abstract():
    with pytest.raises(TypeError):
        logger.Logger()