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

"""Named registry of compiled JSON Schema validators.

Schemas are registered under their file name, which is also their ``$id``.
Cross-schema ``$ref`` (e.g. ``project.json`` -> ``url.json``) resolves through
a shared ``referencing.Registry``, so every schema a document refers to must be
registered before the first validation against it.

Documents without ``$schema`` are Draft-07. Bundled documents leave ``$schema``
out: jsonschema picks the validator class of a ``$ref`` target from its
``$schema``, and a declared dialect would swap in the stock class and lose the
``required`` override below.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, Dict, Iterator, Optional

from jsonschema import Draft7Validator, FormatChecker, validators
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT7

from .json_schema_loader import load_bundled_schemas

logger = logging.getLogger(__name__)

EVM_ADDRESS_FORMAT = "evm-address"

_EVM_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _is_evm_address(instance: Any) -> bool:
    # Formats only constrain strings; other types are left to "type".
    if not isinstance(instance, str):
        return True
    return _EVM_ADDRESS_RE.match(instance) is not None


def _required(validator, required, instance, schema) -> Iterator[JsonSchemaValidationError]:
    """``required`` keyword that records which property is missing."""
    if not validator.is_type(instance, "object"):
        return
    for property_name in required:
        if property_name not in instance:
            error = JsonSchemaValidationError(f"must have required property '{property_name}'")
            error.missing_property = property_name
            yield error


@lru_cache(maxsize=None)
def _extended_validator_class(base: type) -> type:
    return validators.extend(base, validators={"required": _required})


def build_format_checker() -> FormatChecker:
    """Format checker with the stock formats plus the domain-specific ones."""
    checker = FormatChecker()
    checker.checks(EVM_ADDRESS_FORMAT)(_is_evm_address)
    return checker


class SchemaRegistry:
    """Holds named schema documents and hands out compiled validators."""

    def __init__(self, format_checker: Optional[FormatChecker] = None):
        self._documents: Dict[str, dict] = {}
        self._compiled: Dict[str, Any] = {}
        self._resources: Registry = Registry()
        self._format_checker = format_checker or build_format_checker()

    def __contains__(self, schema_name: object) -> bool:
        return schema_name in self._documents

    def names(self) -> tuple:
        return tuple(self._documents)

    def register(self, schema_name: str, document: dict) -> None:
        """Register a schema document under ``schema_name``.

        Raises:
            jsonschema.exceptions.SchemaError: If the document is not a valid schema
        """
        validator_cls = validators.validator_for(document, default=Draft7Validator)
        validator_cls.check_schema(document)

        resource = Resource.from_contents(document, default_specification=DRAFT7)
        self._resources = self._resources.with_resource(uri=schema_name, resource=resource)
        self._documents[schema_name] = document
        # Compiled validators are bound to the referencing registry they were built with.
        self._compiled.clear()
        logger.debug(f"Registered schema: {schema_name}")

    def lookup(self, schema_name: str):
        """Return the compiled validator for ``schema_name``, or None if it is not registered."""
        document = self._documents.get(schema_name)
        if document is None:
            return None

        compiled = self._compiled.get(schema_name)
        if compiled is None:
            base = validators.validator_for(document, default=Draft7Validator)
            validator_cls = _extended_validator_class(base)
            compiled = validator_cls(
                document,
                registry=self._resources,
                format_checker=self._format_checker,
            )
            self._compiled[schema_name] = compiled
        return compiled

    @classmethod
    def from_documents(cls, documents: Dict[str, dict], **kwargs) -> "SchemaRegistry":
        registry = cls(**kwargs)
        for schema_name, document in documents.items():
            registry.register(schema_name, document)
        return registry


@lru_cache(maxsize=None)
def default_registry() -> SchemaRegistry:
    """Process-wide registry holding the four bundled schemas.

    Built on first use and never mutated afterwards.
    """
    registry = SchemaRegistry.from_documents(load_bundled_schemas())
    logger.debug(f"Initialized schema registry with: {', '.join(registry.names())}")
    return registry
