#!/usr/bin/env python3

# torrentrpc - Client library for the Transmission BitTorrent daemon RPC
# Copyright (C) 2025  Anton Larionov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

import logging
import time
from unittest.mock import MagicMock, patch

from src.torrentrpc.util.log import (
    LOGGER_NAME,
    get_log_path,
    get_logger,
    init_logger,
    log_time,
)


class TestGetLogger:
    """Test cases for get_logger function."""

    def test_returns_library_logger(self):
        """Test that get_logger returns the torrentrpc logger."""
        logger = get_logger()
        assert isinstance(logger, logging.Logger)
        assert logger.name == LOGGER_NAME == "torrentrpc"

    def test_returns_same_instance(self):
        """Test that get_logger returns the same instance on multiple calls."""
        assert get_logger() is get_logger()


class TestInitLogger:
    """Test cases for init_logger function."""

    @patch("src.torrentrpc.util.log.user_log_dir")
    def test_log_path(self, mock_user_log_dir):
        """Test the log file location."""
        mock_user_log_dir.return_value = "/tmp/test_logs"

        path = get_log_path()

        mock_user_log_dir.assert_called_once_with(
            "torrentrpc", appauthor=False
        )
        assert path.name == "torrentrpc.log"
        assert str(path.parent) == "/tmp/test_logs"

    @patch("src.torrentrpc.util.log.user_log_dir")
    @patch("src.torrentrpc.util.log.Path.mkdir")
    @patch("src.torrentrpc.util.log.logging.basicConfig")
    def test_init_logger(
        self, mock_basic_config, mock_mkdir, mock_user_log_dir
    ):
        """Test that init_logger configures a UTF-8 file log."""
        mock_user_log_dir.return_value = "/tmp/test_logs"

        init_logger("debug")

        mock_mkdir.assert_called_once_with(parents=True, exist_ok=True)
        mock_basic_config.assert_called_once()
        call_kwargs = mock_basic_config.call_args[1]

        assert call_kwargs["filename"].endswith("torrentrpc.log")
        assert call_kwargs["encoding"] == "utf-8"
        assert call_kwargs["level"] == logging.DEBUG
        assert "format" in call_kwargs
        assert "datefmt" in call_kwargs

    @patch("src.torrentrpc.util.log.user_log_dir")
    @patch("src.torrentrpc.util.log.Path.mkdir")
    @patch("src.torrentrpc.util.log.logging.basicConfig")
    def test_unknown_level(
        self, mock_basic_config, mock_mkdir, mock_user_log_dir
    ):
        """Test that an unknown level falls back to WARNING."""
        mock_user_log_dir.return_value = "/tmp/test_logs"

        init_logger("verbose")

        assert mock_basic_config.call_args[1]["level"] == logging.WARNING


class TestLogTimeDecorator:
    """Test cases for log_time decorator."""

    def test_decorated_function_returns_value(self):
        """Test that decorated function returns its value."""

        @log_time
        def add(a, b=0):
            return a + b

        assert add(5, b=3) == 8

    @patch("src.torrentrpc.util.log.get_logger")
    def test_logs_when_execution_exceeds_threshold(self, mock_get_logger):
        """Test that log_time logs when execution time exceeds 1ms."""
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        @log_time
        def slow_function():
            time.sleep(0.002)
            return "done"

        assert slow_function() == "done"
        mock_logger.debug.assert_called_once()
        call_args = mock_logger.debug.call_args[0][0]
        assert "slow_function" in call_args
        assert "ms" in call_args

    def test_preserves_function_metadata(self):
        """Test that decorator preserves name and docstring."""

        @log_time
        def documented_function():
            """This is a docstring."""

        assert documented_function.__name__ == "documented_function"
        assert documented_function.__doc__ == "This is a docstring."
