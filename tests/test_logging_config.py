# Area: Shared Tests
"""Tests for logging setup, formatters and protocol mode."""

import json
import logging
import sys

import pytest

from game_bridge._shared import (
    disable_protocol_mode,
    enable_protocol_mode,
    is_protocol_mode_enabled,
    log_protocol_error,
    request_context,
    setup_logging,
)
from game_bridge._shared.logging_config import (
    JSONFormatter,
    ProtocolFilter,
    TerminalFormatter,
)
from game_bridge.errors import EnvelopeError


def _record(msg="hello", level=logging.INFO):
    return logging.LogRecord("game_bridge", level, __file__, 1, msg, None, None)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    yield
    disable_protocol_mode()
    pkg_logger = logging.getLogger("game_bridge")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()


class TestSetupLogging:

    def test_file_handler_writes_json_lines(self, tmp_path):
        log_file = tmp_path / "logs" / "bridge.log"
        setup_logging(log_file_path=str(log_file))
        logging.getLogger("game_bridge.test").info("listening")
        for handler in logging.getLogger("game_bridge").handlers:
            handler.flush()
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "listening"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "game_bridge.test"

    def test_empty_path_disables_file_handler(self):
        setup_logging(log_file_path="")
        handlers = logging.getLogger("game_bridge").handlers
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(log_file_path="")
        setup_logging(log_file_path="")
        assert len(logging.getLogger("game_bridge").handlers) == 1

    def test_level_by_name(self):
        setup_logging(log_file_path="", level="debug")
        assert logging.getLogger("game_bridge").level == logging.DEBUG

    def test_unknown_level_name_falls_back_to_info(self):
        setup_logging(log_file_path="", level="chatty")
        assert logging.getLogger("game_bridge").level == logging.INFO

    def test_does_not_propagate(self):
        setup_logging(log_file_path="")
        assert logging.getLogger("game_bridge").propagate is False


class TestFormatters:

    def test_terminal_formatter_colours_level(self):
        formatted = TerminalFormatter(fmt="%(levelname)s %(message)s").format(_record())
        assert "\033[32mINFO\033[0m hello" == formatted

    def test_terminal_formatter_leaves_record_untouched(self):
        record = _record()
        TerminalFormatter().format(record)
        assert record.levelname == "INFO"

    def test_json_formatter_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("game_bridge", logging.ERROR, __file__, 1,
                                       "failed", None, sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "failed"
        assert "RuntimeError: boom" in data["exception"]


class TestProtocolMode:

    def test_filter_follows_protocol_mode(self):
        record_filter = ProtocolFilter()
        assert record_filter.filter(_record())
        enable_protocol_mode()
        assert is_protocol_mode_enabled()
        assert not record_filter.filter(_record())
        disable_protocol_mode()
        assert record_filter.filter(_record())


class TestLogProtocolError:

    def test_prints_block_and_logs(self, capsys, caplog):
        error = EnvelopeError("xx player", "callback port 'xx' is not a number")
        with caplog.at_level(logging.ERROR, logger="game_bridge"):
            logging.getLogger("game_bridge").propagate = True
            log_protocol_error(error)
        assert "MALFORMED_ENVELOPE" in capsys.readouterr().err
        assert "EnvelopeError" in caplog.text


class TestRequestContext:
    """Bridge request fields flow from ``extra`` into both formatters."""

    def _record_with(self, **extra):
        record = _record("routed")
        for name, value in extra.items():
            setattr(record, name, value)
        return record

    def test_none_values_dropped(self):
        assert request_context(callback_port=5001) == {"callback_port": 5001}
        assert request_context() == {}

    def test_json_includes_port_and_action(self):
        record = self._record_with(**request_context(callback_port=5001, action="move"))
        data = json.loads(JSONFormatter().format(record))
        assert data["callback_port"] == 5001
        assert data["action"] == "move"
        assert "error_type" not in data

    def test_json_without_context_has_no_bridge_fields(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert "callback_port" not in data
        assert "action" not in data

    def test_terminal_appends_context_tag(self):
        record = self._record_with(**request_context(callback_port=5001, action="legal"))
        formatted = TerminalFormatter(fmt="%(message)s").format(record)
        assert formatted == "routed [port=5001 action=legal]"

    def test_log_protocol_error_records_port(self, caplog):
        error = EnvelopeError("1234 resign", "unsupported action", callback_port=1234)
        logging.getLogger("game_bridge").propagate = True
        with caplog.at_level(logging.ERROR, logger="game_bridge"):
            log_protocol_error(error)
        record = caplog.records[-1]
        assert record.callback_port == 1234
        assert record.error_type == "EnvelopeError"
