# Task board - configuration
# Override the catalog, current user and id prefixes via a YAML file
# (path argument or TASKBOARD_CONFIG).

import logging
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .catalog import DEFAULT_CATALOG_PATH

CONFIG_ENV = "TASKBOARD_CONFIG"
LOG_FORMAT = "%(asctime)s [taskboard] %(levelname)s: %(message)s"


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""
    pass


@dataclass
class BoardConfig:
    """Runtime configuration for a board session."""

    # Reference data
    catalog_path: str = ""             # empty = packaged catalog.yaml
    seed_tasks: bool = True            # load sample tasks from the catalog file

    # Comment author when the caller does not name one
    current_user_id: str = "user4"

    # Identity
    id_prefix_task: str = "task"
    id_prefix_comment: str = "comment"
    sequential_ids: bool = False       # task-001 style instead of timestamp ids

    # Behavior
    strict_columns: bool = False       # reject moves to unknown columns
    log_level: str = "INFO"

    def resolve_paths(self):
        """Expand ~ and fall back to the packaged catalog."""
        if not self.catalog_path:
            self.catalog_path = str(DEFAULT_CATALOG_PATH)
        self.catalog_path = str(Path(self.catalog_path).expanduser())

    @classmethod
    def load(cls, path: Optional[str] = None) -> "BoardConfig":
        """
        Load config from YAML, falling back to defaults.

        Lookup order: ``path`` argument, then $TASKBOARD_CONFIG, then defaults.
        Unknown keys are ignored.
        """
        source = path or os.environ.get(CONFIG_ENV)
        if not source:
            cfg = cls()
            cfg.resolve_paths()
            return cfg

        cfg_path = Path(source).expanduser()
        if not cfg_path.exists():
            raise ConfigError(f"Config file not found: {cfg_path}")
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {cfg_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {cfg_path} must be a mapping")

        known = {f.name for f in fields(cls)}
        cfg = cls(**{k: v for k, v in data.items() if k in known})
        # Relative catalog paths are relative to the config file
        if cfg.catalog_path and not Path(cfg.catalog_path).expanduser().is_absolute():
            cfg.catalog_path = str(cfg_path.parent / cfg.catalog_path)
        cfg.resolve_paths()
        return cfg


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for scripts and front-ends (not called on import)."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
