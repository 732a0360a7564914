# Copyright 2025 TIER IV, inc.
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

"""Supported on-disk formats for project and collection files."""

from enum import Enum
from pathlib import Path
from typing import Union


class FileFormat(Enum):
    JSON = "JSON"
    YAML = "YAML"


DEFAULT_FORMAT = FileFormat.YAML

FILE_ENCODING = "utf-8"

_EXTENSIONS = {
    ".json": FileFormat.JSON,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
}


def supported_extensions() -> tuple:
    return tuple(_EXTENSIONS)


def format_from_path(file_path: Union[str, Path]) -> FileFormat:
    """Infer the file format from a file extension.

    Raises:
        ValueError: If the extension is not one of .json, .yaml or .yml
    """
    suffix = Path(file_path).suffix.lower()
    if suffix not in _EXTENSIONS:
        raise ValueError(
            f"Cannot infer file format from '{file_path}'. "
            f"Expected one of: {', '.join(_EXTENSIONS)}"
        )
    return _EXTENSIONS[suffix]
