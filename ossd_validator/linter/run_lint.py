#!/usr/bin/env python3
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

"""CLI entry point for validating project and collection files."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..config import ValidatorConfig
from ..models.files import supported_extensions
from ..models.json_schema_loader import COLLECTION_SCHEMA, PROJECT_SCHEMA
from . import lint_files
from .report import LintResult

logger = logging.getLogger(__name__)

KIND_SCHEMAS = {
    'project': PROJECT_SCHEMA,
    'collection': COLLECTION_SCHEMA,
}


def find_data_files(paths: List[str]) -> List[Path]:
    """Find all JSON/YAML files in the given paths."""
    extensions = supported_extensions()
    found = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.suffix.lower() in extensions:
                found.append(path)
            else:
                logger.warning(f"File is not a JSON or YAML file: {path}")
        elif path.is_dir():
            for ext in extensions:
                found.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(found))


def print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    line_info = f":{error['line']}" if 'line' in error else ""
                    print(f"  ERROR{line_info}: {error['message']}")
                for warning in result.warnings:
                    line_info = f":{warning['line']}" if 'line' in warning else ""
                    print(f"  WARNING{line_info}: {warning['message']}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        description='Validate project and collection files against the bundled schemas',
    )
    parser.add_argument(
        'kind',
        choices=sorted(KIND_SCHEMAS),
        help='Record kind the files describe',
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to validate (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )

    args = parser.parse_args(argv)
    ValidatorConfig.from_env().set_logging()

    data_files = find_data_files(args.paths or ['.'])
    if not data_files:
        logger.error("No JSON or YAML files found.")
        sys.exit(1)

    results = lint_files(data_files, KIND_SCHEMAS[args.kind])
    print_results(results, args.format)

    if any(not r.ok for r in results):
        sys.exit(1)
    if args.format == 'human':
        print(f"Validated {len(results)} {args.kind} file(s) with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
