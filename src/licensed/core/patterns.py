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

from pathlib import Path
from typing import FrozenSet, List

from licensed.core.logger import get_logger
from licensed.core.resources import IGNORE_DEFAULTS, read_data

logger = get_logger("core.patterns")

IGNORE_FILE_NAME = ".licensed-ignore"


def split_lines(content: str) -> List[str]:
    """
    Split override/default content into usable entries.

    Lines are trimmed; blank lines and '#' comments are dropped so a trailing
    newline never turns into an empty pattern.
    """
    entries = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def merge_lines(defaults: str, overrides: str) -> FrozenSet[str]:
    """Union the lines of both sources, deduplicated by exact value."""
    merged = set(split_lines(defaults))
    merged.update(split_lines(overrides))
    return frozenset(merged)


def read_override(path: Path) -> str:
    """
    Return the content of an optional project override file.

    Missing or unreadable files yield an empty string; they never stop a run.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No override file at {path}")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable override file {path}: {e}")
    return ""


def load_ignore_patterns(project_dir: Path) -> FrozenSet[str]:
    """Embedded default ignore globs merged with <project_dir>/.licensed-ignore."""
    defaults = read_data(IGNORE_DEFAULTS)
    overrides = read_override(Path(project_dir) / IGNORE_FILE_NAME)
    patterns = merge_lines(defaults, overrides)
    logger.debug(f"Loaded {len(patterns)} ignore patterns for {project_dir}")
    return patterns
