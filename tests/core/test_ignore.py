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

import logging

import pytest

from licensed.core.errors import GlobSyntaxError
from licensed.core.ignore import check_glob, compile_glob, should_ignore

PATTERNS = frozenset({"*.min.js", "vendor", "file?.c", "[ab]x.go"})


@pytest.mark.parametrize("path", [
    "a.min.js",
    "src/deep/dir/lib.min.js",
    "vendor",
    "file1.c",
    "ax.go",
    "pkg/bx.go",
])
def test_should_ignore_matching_names(path):
    assert should_ignore(path, PATTERNS)


@pytest.mark.parametrize("path", [
    "a.js",
    "vendor/lib.go",
    "file10.c",
    "cx.go",
    "A.MIN.JS",
])
def test_should_not_ignore_other_names(path):
    assert not should_ignore(path, PATTERNS)


def test_only_base_name_is_matched():
    # A directory component matching a pattern does not hide the file itself.
    assert not should_ignore("vendor/main.go", {"vendor"})
    assert not should_ignore("build/main.go", {"build/*"})


def test_empty_pattern_set_ignores_nothing():
    assert not should_ignore("a.go", frozenset())


def test_check_glob_rejects_unterminated_class():
    with pytest.raises(GlobSyntaxError) as excinfo:
        check_glob("[abc")
    assert excinfo.value.pattern == "[abc"


@pytest.mark.parametrize("pattern", ["*.go", "[]x]", "[!a]*", "plain"])
def test_check_glob_accepts_valid_patterns(pattern):
    check_glob(pattern)


def test_malformed_pattern_is_logged_and_treated_as_non_match(caplog):
    compile_glob.cache_clear()
    with caplog.at_level(logging.WARNING, logger="licensed"):
        assert not should_ignore("[abc", {"[abc"})
        assert should_ignore("x.min.js", {"[abc", "*.min.js"})
    assert "Error matching pattern [abc" in caplog.text


@pytest.mark.parametrize("name,expected", [
    ("bx.go", True),
    ("ax.go", False),
    ("cx.go", True),
    # Only "a" is excluded; a literal caret is an ordinary non-"a" character.
    ("^x.go", True),
])
def test_caret_negates_character_class(name, expected):
    assert should_ignore(name, {"[^a]x.go"}) is expected


def test_check_glob_rewrites_caret_negation():
    assert check_glob("[^a]x.go") == "[!a]x.go"
    assert check_glob("a^b[!c]") == "a^b[!c]"
