#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Numeric ID Obfuscation Codec
# Copyright (C) 2025 [Your Name/Institution]
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
#
# Filename: tests/conftest.py

import sys
import os

# Add the 'src' directory to the Python path so tests can import the
# modules directly (e.g. `import id_codec`).
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)


import pytest


@pytest.fixture
def default_codec():
    """A codec built with every option at its default."""
    import id_codec
    return id_codec.new()


@pytest.fixture(autouse=True)
def clear_codec_registry():
    """Keeps the shared codec cache from leaking between tests."""
    import codec_registry
    codec_registry.clear()
    yield
    codec_registry.clear()


@pytest.fixture
def write_blocklist_file(tmp_path):
    """A fixture to create a temporary one-word-per-line blocklist file."""
    def _create_file(words, name="blocklist.txt"):
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return path
    return _create_file

# === End of tests/conftest.py ===
