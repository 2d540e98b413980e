# tests/test_logger_utils.py
import logging

from spellcheck_assistant.utils.logger_utils import ColorFormatter, Log, setup_logging


def test_time_block_records_metric(caplog):
    with caplog.at_level(logging.INFO, logger="spellcheck_assistant.metrics"):
        with Log.time_block("dictionary build") as t:
            pass
    assert t.elapsed >= 0.0
    assert any("dictionary build done" in r.getMessage() for r in caplog.records)


def test_color_formatter():
    rec = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert ColorFormatter(use_color=True).format(rec).startswith("\033[93m")
    plain = ColorFormatter(use_color=False).format(rec)
    assert "WARNING" in plain and plain.endswith("careful")


def test_setup_logging_file_handler(tmp_path):
    path = tmp_path / "logs" / "spellcheck.log"
    logger = setup_logging(logging.INFO, str(path), use_color=False)
    try:
        logging.getLogger("spellcheck_assistant.core.test").info("hello log")
        for h in logger.handlers:
            h.flush()
        assert "hello log" in path.read_text(encoding="utf-8")
        # calling again replaces handlers rather than stacking them
        assert len(setup_logging(logging.INFO).handlers) == 1
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        logger.setLevel(logging.NOTSET)
