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

"""Linter reporting schema violations in project and collection files."""

import logging
from pathlib import Path
from typing import List, Optional

from ..exceptions import ParseError
from ..models.files import format_from_path
from ..models.schema_registry import SchemaRegistry
from ..parsers.document_parser import build_source_map, parse_content
from ..validator import read_text, validate_object
from .report import LintResult

__all__ = ['lint_file', 'lint_files', 'LintResult']

logger = logging.getLogger(__name__)


def lint_file(
    file_path: Path,
    schema_name: str,
    *,
    registry: Optional[SchemaRegistry] = None,
) -> LintResult:
    """Validate one file and collect every violation with its location."""
    result = LintResult(file_path)

    try:
        fmt = format_from_path(file_path)
    except ValueError as e:
        result.add_error(str(e))
        return result

    try:
        content = read_text(file_path)
    except (OSError, UnicodeDecodeError) as e:
        result.add_error(f"Failed to read file: {e}")
        return result

    if not content.strip():
        result.add_warning("File is empty")

    try:
        obj = parse_content(content, fmt, source=str(file_path))
    except ParseError as e:
        result.add_error(str(e))
        return result

    validation = validate_object(obj, schema_name, registry=registry)
    if validation.valid:
        return result

    if not validation.issues:
        # Nothing to locate, e.g. the schema itself is not registered.
        for key, message in validation.errors.items():
            result.add_error(f"{key}: {message}")
        return result

    source_map = build_source_map(content)
    for issue in validation.issues:
        location = source_map.get(issue.path, {})
        result.add_error(
            issue.message,
            line=location.get('line'),
            column=location.get('column'),
            path=issue.path,
        )
    logger.debug(f"{file_path}: {len(result.errors)} schema violation(s)")
    return result


def lint_files(
    file_paths: List[Path],
    schema_name: str,
    *,
    registry: Optional[SchemaRegistry] = None,
) -> List[LintResult]:
    """Lint a list of files against one schema.

    Returns:
        List of LintResult objects, one per file
    """
    return [lint_file(file_path, schema_name, registry=registry) for file_path in file_paths]
