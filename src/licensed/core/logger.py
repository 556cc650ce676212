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

# We do NOT call basicConfig here to avoid side effects on import.
# The CLI calls configure_logging() once it knows the verbosity.

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(verbosity: int = 0):
    """
    Configure logging based on verbosity level.
    0 = WARNING (default)
    1 = INFO (-v)
    2 = DEBUG (licensed DEBUG, everything else WARNING) (-vv)
    3 = DEBUG (Full DEBUG) (-vvv)
    """
    root_level = logging.WARNING
    package_level = logging.WARNING

    if verbosity == 1:
        package_level = logging.INFO
    elif verbosity == 2:
        package_level = logging.DEBUG
    elif verbosity >= 3:
        package_level = logging.DEBUG
        root_level = logging.DEBUG

    # Remove existing handlers to avoid duplicates
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler()
        ]
    )

    logging.getLogger("licensed").setLevel(package_level)


logger = logging.getLogger("licensed")

def get_logger(name: str):
    """Get a logger instance with the specified name."""
    return logging.getLogger(f"licensed.{name}")
