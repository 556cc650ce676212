# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Pytest configuration and fixtures for licensed tests.
"""
import logging

import pytest

from licensed.core.config import LicensedConfig


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    package_level = logging.getLogger("licensed").level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("licensed").setLevel(package_level)


@pytest.fixture
def one_line_license():
    """Fixture providing a rendered single-line license."""
    return "Copyright 2025 Bob. Licensed under the MIT License."


@pytest.fixture
def licenses_dir(tmp_path):
    """A local licenses/ directory with a one-line template."""
    directory = tmp_path / "licenses"
    directory.mkdir()
    (directory / "short.txt").write_text("Copyright [year] [fullname]. All rights reserved.\n")
    return directory


@pytest.fixture
def project_dir(tmp_path):
    """A small project tree with sources, an ignored file and a vendored directory."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.go").write_text("package main\n\nfunc main() {}\n")
    (root / "a.min.js").write_text("var a=1;")
    (root / "pkg").mkdir()
    (root / "pkg" / "util.py").write_text("def util():\n    return 1\n")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "dep.js").write_text("module.exports = {};\n")
    return root


@pytest.fixture
def make_config(project_dir):
    """Build a LicensedConfig for the project fixture."""
    def _make(**kwargs):
        return LicensedConfig.build(project_dir, **kwargs)
    return _make
