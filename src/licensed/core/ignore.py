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

import fnmatch
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Pattern, Union

from licensed.core.errors import GlobSyntaxError
from licensed.core.logger import get_logger

logger = get_logger("core.ignore")


def check_glob(pattern: str) -> str:
    """
    Validate a glob and return it in fnmatch syntax.

    Raises GlobSyntaxError if a character class is never closed. A class
    negated with '^' is rewritten to fnmatch's '!' form.
    """
    chars = list(pattern)
    i, n = 0, len(chars)
    while i < n:
        if chars[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and chars[j] in "!^":
            chars[j] = "!"
            j += 1
        # A ']' right after the opening bracket is a literal member.
        if j < n and chars[j] == "]":
            j += 1
        while j < n and chars[j] != "]":
            j += 1
        if j >= n:
            raise GlobSyntaxError(pattern, "unterminated character class")
        i = j + 1
    return "".join(chars)


@lru_cache(maxsize=None)
def compile_glob(pattern: str) -> Optional[Pattern[str]]:
    """
    Compile a shell glob into a case-sensitive regex.

    Returns None for malformed patterns; the warning is logged once per pattern.
    """
    try:
        return re.compile(fnmatch.translate(check_glob(pattern)))
    except GlobSyntaxError as e:
        logger.warning(str(e))
    except re.error as e:
        logger.warning(str(GlobSyntaxError(pattern, str(e))))
    return None


def matches(name: str, pattern: str) -> bool:
    regex = compile_glob(pattern)
    if regex is None:
        return False
    return regex.match(name) is not None


def should_ignore(path: Union[str, Path], patterns: Iterable[str]) -> bool:
    """Check whether the base name of path matches any ignore pattern."""
    name = os.path.basename(os.fspath(path))
    for pattern in patterns:
        if matches(name, pattern):
            logger.debug(f"Ignoring {path} (matched {pattern})")
            return True
    return False
