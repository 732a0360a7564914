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

"""Runtime configuration for the ossd_validator tools."""

import logging
import os
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging

ENV_PREFIX = "OSSD_VALIDATOR_"


@dataclass
class ValidatorConfig:
    """Logging configuration for the command line tools."""
    log_level: str = "INFO"
    print_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ValidatorConfig":
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
            print_level=os.getenv(f"{ENV_PREFIX}PRINT_LEVEL", "WARNING"),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            logger_name="ossd_validator",
        )
