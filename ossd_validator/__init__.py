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

"""Validate and load project and collection description files."""

from .exceptions import OssdValidatorError, ParseError, ValidationError
from .models.files import DEFAULT_FORMAT, FileFormat
from .models.json_schema_loader import (
    BLOCKCHAIN_ADDRESS_SCHEMA,
    COLLECTION_SCHEMA,
    PROJECT_SCHEMA,
    URL_SCHEMA,
)
from .models.records import Collection, Project
from .models.schema_registry import SchemaRegistry, default_registry
from .validator import (
    SchemaIssue,
    ValidationResult,
    read_collection_file,
    read_project_file,
    safe_cast_collection,
    safe_cast_project,
    validate_collection,
    validate_project,
)

__all__ = [
    "DEFAULT_FORMAT",
    "FileFormat",
    "PROJECT_SCHEMA",
    "COLLECTION_SCHEMA",
    "URL_SCHEMA",
    "BLOCKCHAIN_ADDRESS_SCHEMA",
    "Project",
    "Collection",
    "SchemaRegistry",
    "default_registry",
    "SchemaIssue",
    "ValidationResult",
    "validate_project",
    "validate_collection",
    "safe_cast_project",
    "safe_cast_collection",
    "read_project_file",
    "read_collection_file",
    "OssdValidatorError",
    "ValidationError",
    "ParseError",
]
