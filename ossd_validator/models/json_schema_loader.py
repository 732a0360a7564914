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

"""Loader for the JSON Schema documents bundled with the package."""

import json
from pathlib import Path
from typing import Dict


PROJECT_SCHEMA = "project.json"
COLLECTION_SCHEMA = "collection.json"
URL_SCHEMA = "url.json"
BLOCKCHAIN_ADDRESS_SCHEMA = "blockchain-address.json"

BUNDLED_SCHEMAS = (
    PROJECT_SCHEMA,
    COLLECTION_SCHEMA,
    URL_SCHEMA,
    BLOCKCHAIN_ADDRESS_SCHEMA,
)


def get_schema_path(schema_name: str) -> Path:
    """Get the path to a bundled JSON Schema file.

    Args:
        schema_name: Schema file name (e.g., "project.json")

    Returns:
        Path to the schema file
    """
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / schema_name


def load_schema(schema_name: str) -> dict:
    """Load a bundled JSON Schema document.

    Args:
        schema_name: Schema file name (e.g., "project.json")

    Returns:
        Schema dictionary

    Raises:
        FileNotFoundError: If the schema is not bundled
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    schema_path = get_schema_path(schema_name)
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema file not found for {schema_name}: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e


def load_bundled_schemas() -> Dict[str, dict]:
    """Load all four bundled schema documents keyed by schema name."""
    return {name: load_schema(name) for name in BUNDLED_SCHEMAS}
