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

from unittest.mock import patch

import pytest

from src.torrentrpc.client import Client
from src.torrentrpc.errors import ClientError
from src.torrentrpc.factory import create_client


class TestCreateClient:
    """Test cases for create_client function."""

    @patch("src.torrentrpc.factory.load_config", return_value={})
    def test_defaults(self, mock_load_config):
        """Test a client with no configuration at all."""
        client = create_client()

        assert isinstance(client, Client)
        assert client.url == "http://localhost:9091/transmission/rpc/"
        assert client.retries == 3
        assert client.timeout == 10
        mock_load_config.assert_called_once_with(None)

    @patch(
        "src.torrentrpc.factory.load_config",
        return_value={"host": "nas:9091", "retries": 5, "timeout": 2.0},
    )
    def test_file_values(self, mock_load_config):
        """Test that config file values are used."""
        client = create_client("nas")

        assert client.url == "http://nas:9091/transmission/rpc/"
        assert client.retries == 5
        assert client.timeout == 2.0
        mock_load_config.assert_called_once_with("nas")

    @patch(
        "src.torrentrpc.factory.load_config",
        return_value={"host": "nas:9091", "retries": 5},
    )
    def test_overrides(self, mock_load_config):
        """Test that explicit options win and None values do not."""
        client = create_client(
            url="http://other:1/rpc", retries=None, csrf="ABC"
        )

        assert client.url == "http://other:1/rpc"
        assert client.retries == 5
        assert client.csrf == "ABC"

    @patch(
        "src.torrentrpc.factory.load_config",
        side_effect=ClientError("Profile config not found"),
    )
    def test_missing_profile(self, mock_load_config):
        """Test that config errors propagate."""
        with pytest.raises(ClientError):
            create_client("missing")
