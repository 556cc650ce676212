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
from typing import List, Optional

from licensed.core.errors import TemplateReadError
from licensed.core.logger import get_logger
from licensed.core.resources import bundled_templates

logger = get_logger("core.template")

YEAR_PLACEHOLDER = "[year]"
NAME_PLACEHOLDER = "[fullname]"

DEFAULT_LICENSES_DIR = "licenses"


def render(template: str, name: str, year: str) -> str:
    """Substitute every [year] and [fullname] placeholder in the template."""
    rendered = template.replace(YEAR_PLACEHOLDER, year)
    return rendered.replace(NAME_PLACEHOLDER, name)


def load_template(license_id: str, licenses_dir: Optional[Path] = None) -> str:
    """
    Load the raw template for a license id.

    Looks for <licenses_dir>/<license_id>.txt first and falls back to the
    templates bundled with the package.
    """
    local_dir = Path(licenses_dir or DEFAULT_LICENSES_DIR)
    local_path = local_dir / f"{license_id}.txt"
    if local_path.is_file():
        try:
            logger.info(f"Using license template {local_path}")
            return local_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateReadError(license_id, str(e)) from e

    bundled = bundled_templates().get(license_id)
    if bundled is None:
        raise TemplateReadError(license_id, f"{local_path} does not exist")
    logger.info(f"Using bundled license template '{license_id}'")
    return bundled.read_text(encoding="utf-8")


def available_licenses(licenses_dir: Optional[Path] = None) -> List[str]:
    """Sorted license ids from the local licenses directory and the bundled set."""
    names = set(bundled_templates())
    local_dir = Path(licenses_dir or DEFAULT_LICENSES_DIR)
    if local_dir.is_dir():
        for entry in local_dir.iterdir():
            if entry.is_file() and entry.suffix == ".txt":
                names.add(entry.stem)
    return sorted(names)
