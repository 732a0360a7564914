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

"""Schema validation and trusted casting of generic values.

``validate_*`` never raise: every failure is encoded in the returned
``ValidationResult``. ``safe_cast_*`` never return a failure: an invalid value
raises ``ValidationError`` after the field errors have been logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, cast

from ..exceptions import ValidationError
from ..models.json_schema_loader import COLLECTION_SCHEMA, PROJECT_SCHEMA
from ..models.records import Collection, Project
from ..models.schema_registry import SchemaRegistry, default_registry

logger = logging.getLogger(__name__)

SCHEMA_NOT_FOUND = "Schema not found"
OTHER_ERROR_KEY = "other"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: str = ""  # JSON pointer into the validated value
    keyword: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value against one schema.

    ``errors`` is keyed by the name of a missing required property, or by
    ``"other"`` for every other kind of violation. Entries sharing a key
    overwrite each other, so the map holds at most one "other" message (the
    last one reported). ``issues`` keeps every violation in reporting order.
    """

    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)
    issues: Tuple[SchemaIssue, ...] = ()


def _error_key(error) -> str:
    return getattr(error, "missing_property", None) or OTHER_ERROR_KEY


def _pointer(error) -> str:
    return "".join(f"/{str(p).replace('~', '~0').replace('/', '~1')}" for p in error.absolute_path)


def validate_object(
    obj: Any,
    schema_name: str,
    *,
    registry: Optional[SchemaRegistry] = None,
) -> ValidationResult:
    """Validate a generic value against a named schema.

    Args:
        obj: Parsed value to validate
        schema_name: Name the schema was registered under
        registry: Registry to look the schema up in (defaults to the bundled one)

    Returns:
        A ``ValidationResult``; ``{"schema": "Schema not found"}`` if the
        schema is not registered
    """
    registry = registry if registry is not None else default_registry()
    validator = registry.lookup(schema_name)

    if validator is None:
        return ValidationResult(valid=False, errors={"schema": SCHEMA_NOT_FOUND})

    errors: Dict[str, str] = {}
    issues = []
    for error in validator.iter_errors(obj):
        issues.append(SchemaIssue(message=error.message, path=_pointer(error), keyword=error.validator))
        if error.message:
            errors[_error_key(error)] = error.message

    if not issues:
        return ValidationResult(valid=True)
    return ValidationResult(valid=False, errors=errors, issues=tuple(issues))


def safe_cast_object(obj: Any, schema_name: str, *, registry: Optional[SchemaRegistry] = None) -> Any:
    """Return ``obj`` unchanged if it conforms to ``schema_name``.

    Raises:
        ValidationError: If ``obj`` does not validate (message "Invalid <schema_name>")
    """
    result = validate_object(obj, schema_name, registry=registry)
    if not result.valid:
        logger.warning(f"Validation failed for {schema_name}: {result.errors}")
        raise ValidationError(schema_name)
    return obj


def validate_project(obj: Any, *, registry: Optional[SchemaRegistry] = None) -> ValidationResult:
    """Validate a parsed value against project.json."""
    return validate_object(obj, PROJECT_SCHEMA, registry=registry)


def validate_collection(obj: Any, *, registry: Optional[SchemaRegistry] = None) -> ValidationResult:
    """Validate a parsed value against collection.json."""
    return validate_object(obj, COLLECTION_SCHEMA, registry=registry)


def safe_cast_project(obj: Any, *, registry: Optional[SchemaRegistry] = None) -> Project:
    """Cast a parsed value to a Project.

    Raises:
        ValidationError: If not a valid Project
    """
    return cast(Project, safe_cast_object(obj, PROJECT_SCHEMA, registry=registry))


def safe_cast_collection(obj: Any, *, registry: Optional[SchemaRegistry] = None) -> Collection:
    """Cast a parsed value to a Collection.

    Raises:
        ValidationError: If not a valid Collection
    """
    return cast(Collection, safe_cast_object(obj, COLLECTION_SCHEMA, registry=registry))
