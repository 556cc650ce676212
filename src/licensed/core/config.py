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

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional

import yaml

from licensed.core.errors import ConfigError
from licensed.core.logger import get_logger
from licensed.core.patterns import load_ignore_patterns
from licensed.core.syntax import load_comment_syntax

logger = get_logger("core.config")

PROJECT_CONFIG_NAME = ".licensed.yaml"
DEFAULT_LICENSE_OUTPUT = "license.txt"

# Keys accepted in .licensed.yaml
KNOWN_KEYS = ("license", "name", "year", "licenses_dir", "output", "replace")
TEXT_KEYS = ("license", "name", "year", "licenses_dir", "output")


@dataclass(frozen=True)
class LicensedConfig:
    """Run configuration, built once before the walk and never mutated."""

    project_dir: Path
    ignore_patterns: FrozenSet[str]
    comment_syntax: Mapping[str, str]
    # None asks interactively; True/False answer every prompt up front.
    replace_existing: Optional[bool] = None
    license_output: Path = Path(DEFAULT_LICENSE_OUTPUT)

    @classmethod
    def build(
        cls,
        project_dir: Path,
        replace_existing: Optional[bool] = None,
        license_output: Optional[Path] = None,
    ) -> "LicensedConfig":
        project_dir = Path(project_dir)
        return cls(
            project_dir=project_dir,
            ignore_patterns=load_ignore_patterns(project_dir),
            comment_syntax=load_comment_syntax(project_dir),
            replace_existing=replace_existing,
            license_output=Path(license_output or DEFAULT_LICENSE_OUTPUT),
        )


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML file safely."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML from {path}: {e}")
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_project_settings(path: Path, required: bool = False) -> Dict[str, Any]:
    """
    Read the optional .licensed.yaml project file.

    Only KNOWN_KEYS are returned; anything else is logged and dropped.
    When required is set (an explicit --config), a missing file is an error.
    """
    path = Path(path)
    try:
        data = load_yaml(path)
    except FileNotFoundError:
        if required:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug(f"No project config at {path}")
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")

    settings = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown key '{key}' in {path}")
            continue
        settings[key] = value

    # YAML reads unquoted numbers as int/float and yes/no as bool
    for key in TEXT_KEYS:
        value = settings.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ConfigError(
                f"'{key}' in {path} must be a plain value, got {type(value).__name__}"
                f" (quote it if you meant the text {value!r})"
            )
        settings[key] = str(value)
    if "replace" in settings and not isinstance(settings["replace"], bool):
        raise ConfigError(f"'replace' in {path} must be true or false")
    return settings
