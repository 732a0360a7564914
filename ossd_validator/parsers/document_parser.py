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

"""Parsers turning raw JSON/YAML text into generic structured values."""

import json
import logging
import re
from typing import Any, Callable, Dict, Optional, assert_never

import yaml

from ..exceptions import ParseError
from ..models.files import FileFormat

logger = logging.getLogger(__name__)


_YAML11_ONLY_TAGS = {"tag:yaml.org,2002:bool", "tag:yaml.org,2002:timestamp"}


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader without the YAML 1.1 yes/no/on/off booleans and timestamps.

    Plain scalars such as ``no`` or ``2024-01-01`` stay strings, as they do in
    YAML 1.2 and in the equivalent JSON file.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _YAML11_ONLY_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def parse_json(content: str) -> Any:
    return json.loads(content)


def parse_yaml(content: str) -> Any:
    # An empty document parses to None and is left for the schema to reject.
    return yaml.load(content, Loader=CoreSchemaLoader)


_PARSERS: Dict[FileFormat, Callable[[str], Any]] = {
    FileFormat.JSON: parse_json,
    FileFormat.YAML: parse_yaml,
}

_missing = set(FileFormat) - set(_PARSERS)
if _missing:
    raise RuntimeError(f"No parser registered for file formats: {sorted(f.value for f in _missing)}")


def parse_content(content: str, fmt: FileFormat, source: Optional[str] = None) -> Any:
    """Parse text in the given format.

    Args:
        content: Raw text
        fmt: Declared format of the text
        source: Optional file name used in error messages

    Returns:
        The generic parsed value (mapping, sequence or scalar)

    Raises:
        ParseError: If the text is not well-formed for ``fmt``
        AssertionError: If ``fmt`` is not a known FileFormat
    """
    where = source or "<string>"
    logger.debug(f"Parsing {getattr(fmt, 'value', fmt)} content from {where}")
    if fmt is FileFormat.JSON:
        try:
            return _PARSERS[fmt](content)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Failed to parse JSON {where}: {exc}", format=fmt.value, source=source) from exc
    elif fmt is FileFormat.YAML:
        try:
            return _PARSERS[fmt](content)
        except yaml.YAMLError as exc:
            raise ParseError(f"Failed to parse YAML {where}: {exc}", format=fmt.value, source=source) from exc
    else:
        assert_never(fmt)


def _json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def build_source_map(content: str) -> Dict[str, Dict[str, int]]:
    """Build a mapping from JSON-pointer paths to 1-based line/column.

    Uses PyYAML's node tree (yaml.compose), which also accepts JSON text, so
    locations are tracked without changing the values returned by the parsers.
    """
    source_map: Dict[str, Dict[str, int]] = {}

    try:
        root = yaml.compose(content, Loader=CoreSchemaLoader)
    except yaml.YAMLError:
        # Malformed text is reported by parse_content.
        return source_map

    if root is None:
        return source_map

    def _record(path: str, node) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is None:
            return
        # PyYAML uses 0-based line/column
        source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

    def _walk(node, path: str) -> None:
        _record(path, node)

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, f"{path}/{_json_pointer_escape(str(key))}")
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, f"{path}/{idx}")

    _walk(root, "")
    return source_map
