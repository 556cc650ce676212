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

import dataclasses
import logging
from pathlib import Path

import pytest

from licensed.core.config import LicensedConfig, load_project_settings
from licensed.core.errors import ConfigError


def test_build_collects_patterns_and_syntax(project_dir):
    (project_dir / ".licensed-ignore").write_text("*.pb.go\n")
    config = LicensedConfig.build(project_dir)

    assert config.project_dir == project_dir
    assert "*.pb.go" in config.ignore_patterns
    assert config.comment_syntax[".py"] == "#"
    assert config.replace_existing is None
    assert config.license_output == Path("license.txt")


def test_config_is_immutable(project_dir):
    config = LicensedConfig.build(project_dir)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.replace_existing = True


def test_project_settings_missing_file_is_empty(tmp_path):
    assert load_project_settings(tmp_path / ".licensed.yaml") == {}


def test_project_settings_missing_explicit_file_is_error(tmp_path):
    with pytest.raises(ConfigError):
        load_project_settings(tmp_path / "custom.yaml", required=True)


def test_project_settings_reads_known_keys(tmp_path, caplog):
    path = tmp_path / ".licensed.yaml"
    path.write_text("license: mit\nname: Bob\nyear: 2025\nreplace: false\ncolour: blue\n")

    with caplog.at_level(logging.WARNING, logger="licensed"):
        settings = load_project_settings(path)

    assert settings == {"license": "mit", "name": "Bob", "year": "2025", "replace": False}
    assert "Ignoring unknown key 'colour'" in caplog.text


def test_project_settings_invalid_yaml(tmp_path):
    path = tmp_path / ".licensed.yaml"
    path.write_text("license: [mit\n")
    with pytest.raises(ConfigError):
        load_project_settings(path)


def test_project_settings_must_be_mapping(tmp_path):
    path = tmp_path / ".licensed.yaml"
    path.write_text("- mit\n- apache-2.0\n")
    with pytest.raises(ConfigError):
        load_project_settings(path)


def test_project_settings_replace_must_be_bool(tmp_path):
    path = tmp_path / ".licensed.yaml"
    path.write_text("replace: sometimes\n")
    with pytest.raises(ConfigError):
        load_project_settings(path)


def test_project_settings_numbers_become_text(tmp_path):
    path = tmp_path / ".licensed.yaml"
    path.write_text("license: 0bsd\nname: 1234\nyear: 2025\noutput: 42\n")

    settings = load_project_settings(path)

    assert settings == {"license": "0bsd", "name": "1234", "year": "2025", "output": "42"}


@pytest.mark.parametrize("document", [
    "name: No\n",
    "license: [mit, isc]\n",
    "licenses_dir: {path: licenses}\n",
    "output: true\n",
])
def test_project_settings_rejects_non_text_values(tmp_path, document):
    path = tmp_path / ".licensed.yaml"
    path.write_text(document)
    with pytest.raises(ConfigError) as excinfo:
        load_project_settings(path)
    assert "must be a plain value" in str(excinfo.value)
