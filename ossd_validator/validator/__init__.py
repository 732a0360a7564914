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

"""Validate, cast and load project and collection records."""

from .file_loader import read_collection_file, read_file_to_object, read_project_file, read_text
from .validate import (
    SchemaIssue,
    ValidationResult,
    safe_cast_collection,
    safe_cast_object,
    safe_cast_project,
    validate_collection,
    validate_object,
    validate_project,
)

__all__ = [
    "SchemaIssue",
    "ValidationResult",
    "validate_object",
    "validate_project",
    "validate_collection",
    "safe_cast_object",
    "safe_cast_project",
    "safe_cast_collection",
    "read_text",
    "read_file_to_object",
    "read_project_file",
    "read_collection_file",
]
