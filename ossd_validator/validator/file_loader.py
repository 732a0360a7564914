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

"""Async loaders for project and collection files."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..models.files import DEFAULT_FORMAT, FILE_ENCODING, FileFormat
from ..models.json_schema_loader import COLLECTION_SCHEMA, PROJECT_SCHEMA
from ..models.records import Collection, Project
from ..models.schema_registry import SchemaRegistry
from ..parsers.document_parser import parse_content
from .validate import safe_cast_object

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text(file_path: PathLike) -> str:
    """Read a whole file as UTF-8 text. OSError propagates untranslated."""
    with open(file_path, "r", encoding=FILE_ENCODING) as stream:
        return stream.read()


async def read_file_to_object(
    file_path: PathLike,
    fmt: FileFormat,
    schema_name: str,
    *,
    registry: Optional[SchemaRegistry] = None,
) -> Any:
    """Read, parse and validate a file.

    Args:
        file_path: Path to the file
        fmt: Whether the file is JSON or YAML
        schema_name: The schema to validate against
        registry: Registry to validate with (defaults to the bundled one)

    Raises:
        OSError: If the file cannot be read
        ParseError: If the content is malformed for ``fmt``
        ValidationError: If the parsed value does not conform to ``schema_name``
    """
    logger.debug(f"Loading {file_path} as {schema_name} ({fmt})")
    content = await asyncio.to_thread(read_text, file_path)
    obj = parse_content(content, fmt, source=str(file_path))
    return safe_cast_object(obj, schema_name, registry=registry)


async def read_project_file(
    file_path: PathLike,
    format: Optional[FileFormat] = None,
    *,
    registry: Optional[SchemaRegistry] = None,
) -> Project:
    """Read a project file. ``format`` defaults to DEFAULT_FORMAT."""
    return await read_file_to_object(
        file_path,
        format if format is not None else DEFAULT_FORMAT,
        PROJECT_SCHEMA,
        registry=registry,
    )


async def read_collection_file(
    file_path: PathLike,
    format: Optional[FileFormat] = None,
    *,
    registry: Optional[SchemaRegistry] = None,
) -> Collection:
    """Read a collection file. ``format`` defaults to DEFAULT_FORMAT."""
    return await read_file_to_object(
        file_path,
        format if format is not None else DEFAULT_FORMAT,
        COLLECTION_SCHEMA,
        registry=registry,
    )
