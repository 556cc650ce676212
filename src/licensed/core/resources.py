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

from importlib.resources import files
from importlib.resources.abc import Traversable
from typing import Dict

DATA_PACKAGE = "licensed"

IGNORE_DEFAULTS = "licensed-ignore"
COMMENT_SYNTAX_DEFAULTS = "comment-syntax.txt"


def data_dir() -> Traversable:
    return files(DATA_PACKAGE).joinpath("data")


def read_data(name: str) -> str:
    """Read one of the text files shipped inside the package."""
    return data_dir().joinpath(name).read_text(encoding="utf-8")


def bundled_templates() -> Dict[str, Traversable]:
    """Map license id -> bundled template resource."""
    templates = {}
    licenses = data_dir().joinpath("licenses")
    if not licenses.is_dir():
        return templates
    for entry in licenses.iterdir():
        if entry.is_file() and entry.name.endswith(".txt"):
            templates[entry.name[:-len(".txt")]] = entry
    return templates
