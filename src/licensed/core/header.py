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

from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from licensed.core.errors import ReadError, WriteError
from licensed.core.logger import get_logger
from licensed.core.template import NAME_PLACEHOLDER, YEAR_PLACEHOLDER

console = Console()
logger = get_logger("core.header")

ConfirmFn = Callable[[Path], bool]


class HeaderOutcome(str, Enum):
    PRESENT = "present"
    UPDATED = "updated"
    INSERTED = "inserted"
    DECLINED = "declined"


class ReplaceConfirm(Confirm):
    """Only "y" or "yes" agree; any other answer is a no instead of a re-prompt."""

    def process_response(self, value: str) -> bool:
        return value.strip().lower() in ("y", "yes")


def ask_replace(path: Path) -> bool:
    """Ask on the terminal whether a foreign header in path may be replaced."""
    try:
        return ReplaceConfirm.ask(
            f"A different license header is detected in {escape(str(path))}. Do you want to replace it?",
            console=console,
            default=False,
        )
    except EOFError:
        # stdin closed: nobody can answer, keep the file as it is
        logger.warning(f"No answer on stdin for {path}; keeping existing header")
        return False


def header_lines(rendered_license: str, comment_token: str) -> List[str]:
    """
    Comment out every line of the rendered license.

    A one-line license yields exactly '<token> <license>'.
    """
    lines = rendered_license.splitlines() or [""]
    return [f"{comment_token} {line}" if line else comment_token for line in lines]


def find_header(lines: List[str], block: List[str]) -> int:
    """Index of the first line where the trimmed lines start with the header block, or -1."""
    keys = [line.rstrip() for line in block]
    for i in range(len(lines) - len(keys) + 1):
        if all(lines[i + k].strip().startswith(key) for k, key in enumerate(keys)):
            return i
    return -1


def has_comment_line(lines: List[str], comment_token: str) -> bool:
    for index, line in enumerate(lines):
        # A shebang is not a license header even when it shares the '#' token.
        if index == 0 and line.startswith("#!"):
            continue
        if line.strip().startswith(comment_token):
            return True
    return False


def read_lines(path: Path) -> List[str]:
    try:
        # newline="" keeps '\r\n' intact so untouched files round-trip exactly
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e


def write_lines(path: Path, lines: List[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write("\n".join(lines))
    except OSError as e:
        raise WriteError(path, e) from e


def apply(
    path: Path,
    rendered_license: str,
    comment_token: str,
    name: str,
    year: str,
    confirm: Optional[ConfirmFn] = None,
) -> HeaderOutcome:
    """
    Make sure path starts with the license header.

    An exact header is left alone (placeholders left inside it are filled in).
    A different comment header triggers confirm(path); a refusal leaves the
    file untouched. Otherwise the header and a blank line are prepended,
    after the shebang if there is one.

    Raises:
        ReadError: the file could not be read or decoded.
        WriteError: the new content could not be written.
    """
    path = Path(path)
    confirm = confirm or ask_replace
    lines = read_lines(path)
    block = header_lines(rendered_license, comment_token)

    start = find_header(lines, block)
    if start >= 0:
        changed = False
        for i in range(start, start + len(block)):
            updated = lines[i].replace(NAME_PLACEHOLDER, name).replace(YEAR_PLACEHOLDER, year)
            if updated != lines[i]:
                lines[i] = updated
                changed = True
        if not changed:
            logger.debug(f"Header already present in {path}")
            return HeaderOutcome.PRESENT
        write_lines(path, lines)
        logger.info(f"Filled header placeholders in {path}")
        return HeaderOutcome.UPDATED

    if has_comment_line(lines, comment_token) and not confirm(path):
        logger.info(f"Kept existing header in {path}")
        return HeaderOutcome.DECLINED

    # Inserted lines follow the file's own line endings.
    cr = "\r" if lines[0].endswith("\r") else ""
    inserted = [line + cr for line in block] + [cr]
    if lines[0].startswith("#!"):
        new_lines = [lines[0], cr] + inserted + lines[1:]
    else:
        new_lines = inserted + lines
    write_lines(path, new_lines)
    logger.info(f"Inserted header into {path}")
    return HeaderOutcome.INSERTED
