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

from datetime import datetime, timedelta

from src.torrentrpc.util.print import (
    print_duration,
    print_percent,
    print_size,
    print_speed,
    print_time,
)


class TestPrintSize:
    """Test cases for print_size function."""

    def test_bytes(self):
        """Test formatting of byte values."""
        assert print_size(0) == "0 B"
        assert print_size(999) == "999 B"
        assert print_size(1023) == "1023 B"

    def test_iec(self):
        """Test formatting with 1024-based units."""
        assert print_size(1024) == "1.00 KiB"
        assert print_size(1536) == "1.50 KiB"
        assert print_size(1048576) == "1.00 MiB"
        assert print_size(5 * 1024**3) == "5.00 GiB"

    def test_si(self):
        """Test formatting with 1000-based units."""
        assert print_size(999, iec=False) == "999 B"
        assert print_size(1500, iec=False) == "1.50 kB"
        assert print_size(2_000_000, iec=False) == "2.00 MB"

    def test_precision(self):
        """Test the number of decimals."""
        assert print_size(1536, prec=0) == "2 KiB"
        assert print_size(1536, prec=1) == "1.5 KiB"

    def test_negative_values(self):
        """Test formatting of negative values."""
        assert print_size(-1536) == "-1.50 KiB"

    def test_custom_suffix(self):
        """Test formatting with custom suffix."""
        assert print_size(100, suffix="/s") == "100 B/s"


class TestPrintSpeed:
    """Test cases for print_speed function."""

    def test_speed(self):
        """Test formatting of transfer rates."""
        assert print_speed(0) == "0 B/s"
        assert print_speed(2048) == "2.00 KiB/s"
        assert print_speed(2000, iec=False) == "2.00 kB/s"


class TestPrintPercent:
    """Test cases for print_percent function."""

    def test_percent(self):
        """Test formatting of fractions."""
        assert print_percent(0) == "0%"
        assert print_percent(0.42) == "42%"
        assert print_percent(1.0) == "100%"


class TestPrintDuration:
    """Test cases for print_duration function."""

    def test_none(self):
        """Test an unset duration."""
        assert print_duration(None) == "-"

    def test_markers(self):
        """Test Transmission's done and unknown ETA markers."""
        assert print_duration(timedelta(seconds=-1)) == "Done"
        assert print_duration(timedelta(seconds=-2)) == "Unknown"

    def test_compact(self):
        """Test the compact duration format."""
        assert print_duration(timedelta(0)) == "0s"
        assert print_duration(timedelta(seconds=59)) == "59s"
        assert print_duration(timedelta(hours=1)) == "1h"
        assert (
            print_duration(timedelta(days=1, hours=2, minutes=3, seconds=4))
            == "1d2h3m4s"
        )

    def test_negative(self):
        """Test that other negative durations keep their sign."""
        assert print_duration(timedelta(seconds=-5)) == "-5s"
        assert print_duration(timedelta(hours=-1, seconds=-1)) == "-1h1s"

    def test_exported(self):
        """Test that the helpers are available from the package."""
        import src.torrentrpc as torrentrpc

        assert torrentrpc.print_duration is print_duration
        assert torrentrpc.print_size is print_size


class TestPrintTime:
    """Test cases for print_time function."""

    def test_time(self):
        """Test formatting of timestamps."""
        assert print_time(datetime(2024, 1, 2, 3, 4, 5)) == (
            "2024-01-02 03:04:05"
        )

    def test_none(self):
        """Test an unset timestamp."""
        assert print_time(None) == "-"
