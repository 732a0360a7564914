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

"""Custom exceptions for the ossd_validator package."""

from typing import Optional


class OssdValidatorError(Exception):
    """Base exception for project/collection file ingestion errors."""
    pass


class ValidationError(OssdValidatorError):
    """Raised when a value does not conform to the schema it was cast to.

    Only the schema name is carried. Field-level detail is logged before the
    raise and is available from the non-throwing ``validate_*`` functions.
    """

    def __init__(self, schema_name: str):
        super().__init__(f"Invalid {schema_name}")
        self.schema_name = schema_name


class ParseError(OssdValidatorError):
    """Raised when file content is not well-formed for its declared format."""

    def __init__(self, message: str, *, format: Optional[str] = None, source: Optional[str] = None):
        super().__init__(message)
        self.format = format
        self.source = source
