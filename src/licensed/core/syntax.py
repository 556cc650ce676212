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
from types import MappingProxyType
from typing import Dict, Mapping

from licensed.core.logger import get_logger
from licensed.core.patterns import read_override, split_lines
from licensed.core.resources import COMMENT_SYNTAX_DEFAULTS, read_data

logger = get_logger("core.syntax")

SYNTAX_FILE_NAME = "comment-syntax.txt"
DEFAULT_COMMENT_TOKEN = "//"


def parse_comment_syntax(content: str) -> Dict[str, str]:
    """
    Parse '<extension> <token>' lines into a mapping.

    Extensions are normalised to carry a leading dot. Lines without a token
    are skipped with a warning.
    """
    table = {}
    for line in split_lines(content):
        parts = line.split(None, 1)
        if len(parts) != 2:
            logger.warning(f"Ignoring malformed comment syntax entry: {line!r}")
            continue
        ext, token = parts
        if not ext.startswith("."):
            ext = "." + ext
        table[ext] = token.strip()
    return table


def load_comment_syntax(project_dir: Path) -> Mapping[str, str]:
    """Embedded extension table updated with <project_dir>/comment-syntax.txt."""
    table = parse_comment_syntax(read_data(COMMENT_SYNTAX_DEFAULTS))
    overrides = parse_comment_syntax(read_override(Path(project_dir) / SYNTAX_FILE_NAME))
    if overrides:
        logger.info(f"Applying {len(overrides)} comment syntax override(s) from {project_dir}")
    table.update(overrides)
    return MappingProxyType(table)


def resolve(extension: str, table: Mapping[str, str]) -> str:
    """Return the line comment token for a file extension, '//' when unknown."""
    return table.get(extension, DEFAULT_COMMENT_TOKEN)
