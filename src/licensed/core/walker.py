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

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from rich.console import Console

from licensed.core import header
from licensed.core.config import LicensedConfig
from licensed.core.errors import FileProcessingError, LicensedError, TraversalError
from licensed.core.ignore import should_ignore
from licensed.core.logger import get_logger
from licensed.core.syntax import resolve

console = Console()
logger = get_logger("core.walker")


@dataclass
class WalkReport:
    outcomes: Dict[Path, header.HeaderOutcome] = field(default_factory=dict)
    ignored: List[Path] = field(default_factory=list)
    failures: List[Tuple[Path, LicensedError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def count(self, outcome: header.HeaderOutcome) -> int:
        return sum(1 for o in self.outcomes.values() if o == outcome)


def iter_files(config: LicensedConfig, report: WalkReport):
    """
    Yield candidate files under the project directory in lexical order.

    Directories whose name matches an ignore pattern are pruned; ignored
    files are recorded on the report.
    """
    def on_error(err: OSError):
        path = Path(err.filename) if err.filename else config.project_dir
        logger.error(f"Cannot list {path}: {err}")
        report.failures.append((path, TraversalError(f"Cannot list {path}: {err.strerror}")))

    for root, dirs, files in os.walk(config.project_dir, onerror=on_error):
        # We modify dirs in-place to prune the walk
        dirs[:] = sorted(d for d in dirs if not should_ignore(d, config.ignore_patterns))
        for file in sorted(files):
            filepath = Path(root) / file
            if should_ignore(filepath, config.ignore_patterns):
                report.ignored.append(filepath)
                continue
            yield filepath


def walk(
    config: LicensedConfig,
    rendered_license: str,
    name: str,
    year: str,
    confirm: Optional[header.ConfirmFn] = None,
) -> WalkReport:
    """
    Add the license header to every non-ignored file under config.project_dir.

    Per-file read/write errors are collected on the report and the walk
    continues with the next file.
    """
    root = config.project_dir
    if not root.exists():
        raise TraversalError(f"Project directory {root} does not exist")
    if not root.is_dir():
        raise TraversalError(f"Project path {root} is not a directory")

    if confirm is None and config.replace_existing is not None:
        answer = config.replace_existing
        confirm = lambda path: answer  # noqa: E731

    report = WalkReport()
    for filepath in iter_files(config, report):
        token = resolve(filepath.suffix, config.comment_syntax)
        console.print(f"Adding modified license header to {filepath}", markup=False, soft_wrap=True)
        try:
            report.outcomes[filepath] = header.apply(
                filepath, rendered_license, token, name, year, confirm=confirm
            )
        except FileProcessingError as e:
            logger.error(str(e))
            report.failures.append((filepath, e))

    logger.info(
        f"Walk finished: {report.count(header.HeaderOutcome.INSERTED)} inserted, "
        f"{report.count(header.HeaderOutcome.PRESENT)} present, "
        f"{len(report.ignored)} ignored, {len(report.failures)} failed"
    )
    return report
