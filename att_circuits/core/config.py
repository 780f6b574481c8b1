"""
att-circuits Configuration

Centralized configuration for circuit building: which prefab catalog to
check component savability against, the name of the baked container
prefab, and logging.

Author: ATT Circuits Team
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .catalog import DEFAULT_CATALOG_PATH
from .constants import CONTEXT_PREFAB_NAME

PACKAGE_LOGGER = "att_circuits"


@dataclass
class CircuitConfig:
    """
    Configuration for circuit building.

    Controls:
    - Prefab catalog used for savability checks
    - Name of the container prefab produced by Circuit.finalize()
    - Package logging
    """

    # ===== Catalog =====
    catalog_path: Path = field(default_factory=lambda: DEFAULT_CATALOG_PATH)

    # ===== Baking =====
    context_prefab_name: str = CONTEXT_PREFAB_NAME

    # ===== Logging =====
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self):
        self.catalog_path = Path(self.catalog_path)

    @classmethod
    def from_env(cls) -> "CircuitConfig":
        """Create config from environment variables."""
        catalog_path = os.environ.get("ATT_CIRCUITS_CATALOG_PATH")
        return cls(
            catalog_path=Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH,
            log_level=os.environ.get("ATT_CIRCUITS_LOG_LEVEL", "INFO"),
        )

    def validate(self) -> list:
        """
        Validate configuration and return list of issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        if not self.catalog_path.is_file():
            issues.append(f"Prefab catalog not found at {self.catalog_path}")

        if not self.context_prefab_name:
            issues.append("context_prefab_name must not be empty")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            issues.append(f"Unknown log level '{self.log_level}'")

        return issues

    def to_dict(self) -> dict:
        """Convert config to dictionary for serialization."""
        return {
            "catalog_path": str(self.catalog_path),
            "context_prefab_name": self.context_prefab_name,
            "log_level": self.log_level,
        }


def setup_logging(config: Optional[CircuitConfig] = None) -> logging.Logger:
    """Configure the package logger from `config`. Adds a stream handler only once."""
    cfg = config or get_config()
    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(cfg.log_format))
        package_logger.addHandler(handler)

    return package_logger


# Singleton config instance
_config_instance: Optional[CircuitConfig] = None


def get_config() -> CircuitConfig:
    """Get or create the global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = CircuitConfig.from_env()
    return _config_instance


def set_config(config: Optional[CircuitConfig]):
    """Set the global configuration instance. None resets to environment defaults."""
    global _config_instance
    _config_instance = config
