"""Tests for logging setup (logging_config.py)."""

from __future__ import annotations

import io
import logging

from bohr_energy.logging_config import get_logger, setup_logging


class TestGetLogger:
    def test_prefixes_bare_names(self) -> None:
        assert get_logger("session").name == "bohr_energy.session"

    def test_keeps_package_module_names(self) -> None:
        assert get_logger("bohr_energy.cli.prompts").name == "bohr_energy.cli.prompts"

    def test_root_name(self) -> None:
        assert get_logger("bohr_energy").name == "bohr_energy"


class TestSetupLogging:
    def test_level_is_case_insensitive(self) -> None:
        setup_logging("debug", stream=io.StringIO())
        assert logging.getLogger().level == logging.DEBUG

    def test_records_reach_stream(self) -> None:
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        get_logger("test").info("hello %s", "world")
        output = stream.getvalue()
        assert "bohr_energy.test - INFO - hello world" in output

    def test_below_level_is_dropped(self) -> None:
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)
        get_logger("test").info("quiet")
        assert stream.getvalue() == ""

    def test_rejected_input_is_logged_at_debug(self) -> None:
        from bohr_energy.cli.prompts import read_bounded_integer

        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        read_bounded_integer(1, 10, stream=io.StringIO("abc\n3\n"))
        assert "Rejected integer input 'abc'" in stream.getvalue()
