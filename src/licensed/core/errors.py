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


class LicensedError(Exception):
    """Base class for every error raised by licensed."""


class ConfigError(LicensedError):
    """Raised when required settings are missing or the project config is invalid."""


class TemplateReadError(LicensedError):
    """Raised when a license template cannot be found or read."""

    def __init__(self, license_id: str, reason: str):
        self.license_id = license_id
        super().__init__(f"Failed to read license file for '{license_id}': {reason}")


class TraversalError(LicensedError):
    """Raised when the project directory cannot be walked at all."""


class GlobSyntaxError(LicensedError):
    """Raised for an ignore pattern that is not a valid shell glob."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Error matching pattern {pattern}: {reason}")


class FileProcessingError(LicensedError):
    """A failure confined to a single source file."""

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"{self.path}: {self.cause}"


class ReadError(FileProcessingError):
    def _build_message(self) -> str:
        return f"Failed to read {self.path}: {self.cause}"


class WriteError(FileProcessingError):
    def _build_message(self) -> str:
        return f"Failed to write {self.path}: {self.cause}"
