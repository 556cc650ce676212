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
from typing import Optional

from rich.console import Console

from licensed.core.logger import get_logger
from licensed.core.template import available_licenses

console = Console()
logger = get_logger("commands.list")


def list_licenses(licenses_dir: Optional[Path] = None) -> None:
    """Print every license id that can be passed to --license."""
    names = available_licenses(licenses_dir)
    logger.debug(f"Found {len(names)} license template(s)")
    console.print("Supported licenses:")
    for name in names:
        console.print(f"- {name}", markup=False)
