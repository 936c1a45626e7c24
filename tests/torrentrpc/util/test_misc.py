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

from src.torrentrpc.util.misc import is_hex, is_torrent_link


class TestIsTorrentLink:
    """Test cases for is_torrent_link function."""

    def test_magnet_link(self):
        """Test that magnet links are recognized."""
        assert is_torrent_link("magnet:?xt=urn:btih:abc123")
        assert is_torrent_link("MAGNET:?xt=urn:btih:abc123")

    def test_http_urls(self):
        """Test that http and https URLs are recognized."""
        assert is_torrent_link("http://example.com/file.torrent")
        assert is_torrent_link("  https://example.com/file.torrent  ")

    def test_file_paths(self):
        """Test that local paths are not links."""
        assert not is_torrent_link("/home/user/file.torrent")
        assert not is_torrent_link("~/file.torrent")
        assert not is_torrent_link("")


class TestIsHex:
    """Test cases for is_hex function."""

    def test_hex(self):
        """Test hexadecimal strings in either case."""
        assert is_hex("0123456789abcdef")
        assert is_hex("ABCDEF")

    def test_not_hex(self):
        """Test empty and non-hex strings."""
        assert not is_hex("")
        assert not is_hex("xyz")
        assert not is_hex("12 34")
