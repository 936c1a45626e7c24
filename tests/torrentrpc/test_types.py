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

import pytest

from src.torrentrpc.errors import (
    InvalidBoolError,
    InvalidDurationError,
    InvalidEncryptionError,
    InvalidEnumError,
    InvalidModeError,
    InvalidPriorityError,
    InvalidStateError,
    InvalidStatusError,
    InvalidTimeError,
)
from src.torrentrpc.types import (
    Encryption,
    Mode,
    Priority,
    State,
    Status,
    decode_bool,
    decode_duration,
    decode_encryption,
    decode_mode,
    decode_priority,
    decode_state,
    decode_status,
    decode_time,
    encode_value,
)


class TestEnumDecoders:
    """Test cases for the enumerated value decoders."""

    def test_status(self):
        """Test decoding every torrent status."""
        assert decode_status(0) is Status.STOPPED
        assert decode_status(4) is Status.DOWNLOADING
        assert decode_status(6) is Status.SEEDING

    def test_priority(self):
        """Test decoding priorities, including the negative one."""
        assert decode_priority(-1) is Priority.LOW
        assert decode_priority(0) is Priority.NORMAL
        assert decode_priority(1) is Priority.HIGH

    def test_mode(self):
        """Test decoding limit modes."""
        assert decode_mode(2) is Mode.UNLIMITED

    def test_state(self):
        """Test decoding tracker states."""
        assert decode_state(3) is State.ACTIVE

    def test_encryption(self):
        """Test decoding encryption preferences."""
        assert decode_encryption("required") is Encryption.REQUIRED
        assert str(Encryption.TOLERATED) == "tolerated"

    @pytest.mark.parametrize(
        "decoder, value, error",
        [
            (decode_status, 7, InvalidStatusError),
            (decode_status, -1, InvalidStatusError),
            (decode_status, "4", InvalidStatusError),
            (decode_status, True, InvalidStatusError),
            (decode_priority, 2, InvalidPriorityError),
            (decode_mode, 3, InvalidModeError),
            (decode_state, 4, InvalidStateError),
            (decode_encryption, "always", InvalidEncryptionError),
            (decode_encryption, 1, InvalidEncryptionError),
        ],
    )
    def test_out_of_range(self, decoder, value, error):
        """Test that values outside the closed set are rejected."""
        with pytest.raises(error) as exc_info:
            decoder(value)

        assert isinstance(exc_info.value, InvalidEnumError)
        assert exc_info.value.value == value
        assert repr(value) in str(exc_info.value)


class TestScalarDecoders:
    """Test cases for time, duration and bool decoders."""

    def test_time(self):
        """Test that Unix seconds become a datetime."""
        assert decode_time(1700000000) == datetime.fromtimestamp(1700000000)

    def test_time_zero_is_unset(self):
        """Test that 0 means no time."""
        assert decode_time(0) is None

    @pytest.mark.parametrize("value", ["2024-01-01", 1.5, None, True])
    def test_time_invalid(self, value):
        """Test that non-integer times are rejected."""
        with pytest.raises(InvalidTimeError):
            decode_time(value)

    def test_duration(self):
        """Test that seconds become a timedelta."""
        assert decode_duration(3661) == timedelta(hours=1, seconds=61)

    def test_duration_markers(self):
        """Test that negative ETA markers are kept."""
        assert decode_duration(-1) == timedelta(seconds=-1)
        assert decode_duration(-2) == timedelta(seconds=-2)

    def test_duration_invalid(self):
        """Test that non-integer durations are rejected."""
        with pytest.raises(InvalidDurationError):
            decode_duration("60")

    def test_bool(self):
        """Test JSON booleans and integer booleans."""
        assert decode_bool(True) is True
        assert decode_bool(False) is False
        assert decode_bool(1) is True
        assert decode_bool(5) is True
        assert decode_bool(0) is False

    @pytest.mark.parametrize("value", ["true", None, 1.0, []])
    def test_bool_invalid(self, value):
        """Test that other tokens are rejected."""
        with pytest.raises(InvalidBoolError):
            decode_bool(value)


class TestEncodeValue:
    """Test cases for encode_value function."""

    def test_enums(self):
        """Test that enums are sent as their values."""
        assert encode_value(Mode.SINGLE) == 1
        assert encode_value(Priority.LOW) == -1
        assert encode_value(Encryption.PREFERRED) == "preferred"

    def test_time_and_duration(self):
        """Test that times and durations are sent as seconds."""
        moment = datetime.fromtimestamp(1700000000)
        assert encode_value(moment) == 1700000000
        assert encode_value(timedelta(minutes=2)) == 120

    def test_bytes(self):
        """Test that bytes are sent base64-encoded."""
        assert encode_value(b"abc") == "YWJj"

    def test_nested(self):
        """Test that lists, tuples and dicts are converted recursively."""
        assert encode_value((Mode.GLOBAL, [Priority.HIGH])) == [0, [1]]
        assert encode_value({"mode": Mode.UNLIMITED}) == {"mode": 2}

    def test_plain_values(self):
        """Test that JSON values pass through."""
        assert encode_value(0) == 0
        assert encode_value(False) is False
        assert encode_value("x") == "x"
