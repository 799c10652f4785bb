"""
Integration tests for loggers writing real log files.

Exercises a Logger with file and live transports end to end and reads the
resulting files back.
"""

import re

import pytest
from freezegun import freeze_time

from threadlog import LoggerConfig, LogLevel, Logger, ThreadIdAllocator

RECORD = re.compile(
    r"^\[(\d{2}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] - "
    r"(INFO|INIT|DEBUG|ERROR|WARN|THREAD) - "
    r"(?:(0x[0-9a-f]+) - )?(.*)$"
)


@pytest.mark.integration
class TestFileRoundTrip:

    @pytest.fixture
    def log_path(self, temp_dir):
        return temp_dir / "nested" / "dir" / "app.log"

    @freeze_time("2024-03-05 14:07:09")
    def test_session(self, log_path, plain_console):
        logger = Logger([log_path], console=plain_console, ids=ThreadIdAllocator())

        logger.log("Server starting", LogLevel.INIT)
        logger.debug("config loaded")
        worker = logger.start_thread()
        worker.log("\x1b[33mfetching\x1b[0m page", LogLevel.WARN)
        worker.end()

        assert log_path.read_text(encoding="utf-8").splitlines() == [
            "[05-03-24 14:07:09] - INIT - Server starting",
            "[05-03-24 14:07:09] - DEBUG - config loaded",
            "[05-03-24 14:07:09] - THREAD - 0x1 - Started thread ID 0x1",
            "[05-03-24 14:07:09] - WARN - 0x1 - fetching page",
            "[05-03-24 14:07:09] - THREAD - 0x1 - Ended thread ID 0x1",
        ]
        assert plain_console.file.getvalue() == (
            "[INIT] Server starting\n"
            "[WARN] 0x1 fetching page\n"
        )

    def test_every_line_matches_record_format(self, log_path, plain_console):
        logger = Logger([log_path], console=plain_console)
        threads = [logger.start_thread() for _ in range(3)]
        for level in LogLevel:
            logger.log(f"top {level.value}", level)
            for t in threads:
                t.log(f"in {t.id}", level)
        logger.end_all_threads()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3 + len(LogLevel) * 4 + 3
        for line in lines:
            assert RECORD.match(line), line

    def test_new_logger_starts_fresh_file(self, log_path, plain_console):
        Logger([log_path], console=plain_console).log("first run")
        Logger([log_path], console=plain_console).log("second run")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert lines[0].endswith(" - INFO - second run")

    def test_file_and_connection_receive_same_record(self, log_path, plain_console, connection):
        logger = Logger([log_path, connection], console=plain_console)
        logger.warn("disk at 91%")

        file_record = log_path.read_text(encoding="utf-8")
        assert connection.emitted == [("logger", file_record)]

    def test_unwritable_file_does_not_block_connection(self, temp_dir, plain_console, connection):
        blocker = temp_dir / "app.log"
        logger = Logger([blocker, connection], console=plain_console)
        blocker.mkdir()

        assert logger.log("still delivered") == "still delivered"
        assert len(connection.emitted) == 1
        assert plain_console.file.getvalue() == "[INFO] still delivered\n"

    def test_from_config(self, temp_dir, plain_console):
        config = LoggerConfig(
            log_files=[temp_dir / "a.log", temp_dir / "b" / "b.log"],
            timestamp_format="%H:%M:%S",
        )
        logger = Logger.from_config(config, console=plain_console)
        logger.log("both")

        for path in config.log_files:
            line = path.read_text(encoding="utf-8")
            assert re.match(r"^\[\d{2}:\d{2}:\d{2}\] - INFO - both\n$", line)
