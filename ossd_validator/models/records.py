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

"""Typed record shapes handed back by the cast and load operations.

The shapes mirror the bundled JSON Schemas. Nothing here is enforced at
runtime: a value only becomes a ``Project`` or ``Collection`` after it has
passed validation against ``project.json`` or ``collection.json``.
"""

from typing import List, NotRequired, TypedDict


class Url(TypedDict):
    url: str


class BlockchainAddress(TypedDict):
    address: str
    networks: List[str]
    tags: List[str]
    name: NotRequired[str]


class Project(TypedDict):
    version: float
    slug: str
    name: str
    description: NotRequired[str]
    websites: NotRequired[List[Url]]
    github: NotRequired[List[Url]]
    npm: NotRequired[List[Url]]
    blockchain: NotRequired[List[BlockchainAddress]]


class Collection(TypedDict):
    version: float
    slug: str
    name: str
    projects: List[str]
    description: NotRequired[str]
