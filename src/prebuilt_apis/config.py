"""Configuration for a prebuilt_apis generation run.

Configuration is read from environment variables; CLI options override it.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from prebuilt_apis.models import PrebuiltApisModule


@dataclass
class PrebuiltApisConfig:
    """Generation configuration container.

    Attributes:
        root: Host root directory that globs are evaluated against
        dir: Meta-module directory relative to root
        name: Meta-module name used to attribute diagnostics
        log_level: Logging level name for the CLI
    """

    root: Path
    dir: str = "."
    name: str = "prebuilt_apis"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "PrebuiltApisConfig":
        """Create configuration from environment variables.

        Environment variables:
            PREBUILT_APIS_ROOT: Host root directory (default: ".")
            PREBUILT_APIS_DIR: Module directory under the root (default: ".")
            PREBUILT_APIS_NAME: Meta-module name (default: "prebuilt_apis")
            PREBUILT_APIS_LOG_LEVEL: Logging level (default: "WARNING")
        """
        return cls(
            root=Path(os.getenv("PREBUILT_APIS_ROOT", ".")).resolve(),
            dir=os.getenv("PREBUILT_APIS_DIR", "."),
            name=os.getenv("PREBUILT_APIS_NAME", "prebuilt_apis"),
            log_level=os.getenv("PREBUILT_APIS_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If the root is missing or the module dir leaves it.
        """
        if not self.root.is_dir():
            raise ValueError(f"Root directory does not exist: {self.root}")
        d = PurePosixPath(self.dir)
        if d.is_absolute() or ".." in d.parts:
            raise ValueError(f"Module dir must be relative to the root: {self.dir}")
        if not self.name:
            raise ValueError("PREBUILT_APIS_NAME must not be empty")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def module(self) -> PrebuiltApisModule:
        return PrebuiltApisModule(name=self.name, dir=self.dir)
