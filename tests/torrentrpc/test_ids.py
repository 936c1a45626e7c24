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

import pytest

from src.torrentrpc.errors import InvalidIdentifierError
from src.torrentrpc.ids import (
    INT64_MAX,
    INT64_MIN,
    RECENTLY_ACTIVE,
    TorrentHash,
    check_identifier,
    check_identifier_list,
)

HASH = "a0b1c2d3e4f5a6b7c8d9e0f1a2b3c4d5e6f7a8b9"


class TestTorrentHash:
    """Test cases for TorrentHash construction."""

    def test_full_hash(self):
        """Test that a 40-character hex string is accepted."""
        value = TorrentHash(HASH)
        assert value == HASH
        assert not value.is_short

    def test_uppercase_is_lowered(self):
        """Test that hashes are normalised to lowercase."""
        assert TorrentHash(HASH.upper()) == HASH

    def test_short_hash(self):
        """Test that a 7-character hash is accepted."""
        value = TorrentHash("A0B1C2D")
        assert value == "a0b1c2d"
        assert value.is_short

    def test_bytes(self):
        """Test that ASCII bytes are accepted."""
        assert TorrentHash(HASH.encode("ascii")) == HASH
        assert TorrentHash(bytearray(HASH, "ascii")) == HASH

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "abc",
            HASH[:-1],
            HASH + "0",
            "z" * 40,
            "g0b1c2d",
            b"\xff" * 40,
        ],
    )
    def test_invalid(self, value):
        """Test that wrong lengths and non-hex text are rejected."""
        with pytest.raises(InvalidIdentifierError):
            TorrentHash(value)


class TestCheckIdentifier:
    """Test cases for check_identifier function."""

    def test_int(self):
        """Test that integers pass through unchanged."""
        assert check_identifier(42) == 42
        assert check_identifier(0) == 0

    def test_int_bounds(self):
        """Test the signed 64-bit range."""
        assert check_identifier(INT64_MAX) == INT64_MAX
        assert check_identifier(INT64_MIN) == INT64_MIN

        with pytest.raises(InvalidIdentifierError):
            check_identifier(INT64_MAX + 1)
        with pytest.raises(InvalidIdentifierError):
            check_identifier(INT64_MIN - 1)

    def test_recently_active(self):
        """Test the recently-active keyword."""
        assert check_identifier("recently-active") == RECENTLY_ACTIVE

    def test_hash_returns_plain_string(self):
        """Test that hashes come back as plain lowercase str."""
        value = check_identifier(HASH.upper())
        assert value == HASH
        assert type(value) is str

    @pytest.mark.parametrize(
        "value", [True, False, 1.5, None, [1], {"id": 1}, "Recently-Active"]
    )
    def test_invalid(self, value):
        """Test that other values are rejected."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            check_identifier(value)

        assert exc_info.value.value == value


class TestCheckIdentifierList:
    """Test cases for check_identifier_list function."""

    def test_empty(self):
        """Test that an empty list means the ids key is omitted."""
        assert check_identifier_list() is None

    def test_mixed(self):
        """Test a list mixing every identifier kind."""
        result = check_identifier_list(1, HASH.upper(), "recently-active")
        assert result == [1, HASH, "recently-active"]

    def test_idempotent(self):
        """Test that normalising twice gives the same list."""
        once = check_identifier_list(7, HASH.upper().encode("ascii"))
        assert check_identifier_list(*once) == once

    def test_one_invalid_fails_all(self):
        """Test that a single bad element rejects the whole list."""
        with pytest.raises(InvalidIdentifierError):
            check_identifier_list(1, 2, "nope")
