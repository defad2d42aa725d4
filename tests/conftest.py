#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

"""Pytest configuration for hpademo tests."""

import os
import socket
import sys

import pytest

# Add the project root to sys.path so the tests run against the checkout
# even when the package is not installed.
root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)


@pytest.fixture
def myhost(monkeypatch):
    monkeypatch.setattr(socket, "gethostname", lambda: "myhost")
    return "myhost"
