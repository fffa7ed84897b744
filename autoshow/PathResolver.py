# PathResolver.py
"""
Path resolution for source checkouts and installed packages.

Encapsulates all logic for detecting how autoshow is run and resolving
the configuration and log directories for that environment.
"""
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

DistributionMode = Literal["installed", "development"]

APP_NAME = "autoshow"


@dataclass(frozen=True)
class ResolvedPaths:
    """Immutable container for all resolved application paths."""
    app_dir: Path
    root_dir: Path
    config_dir: Path
    logs_dir: Path
    bundled_config_dir: Path
    environment: DistributionMode


class PathResolver:
    """
    Resolves application paths for different environments.

    Environments:
    - installed: main.py lives in site-packages/dist-packages; configuration
      and logs follow the XDG base directory layout
    - development: running from a source checkout; config/ and logs/ sit
      next to main.py
    """

    def __init__(self, script_path: Path):
        self._script_path = script_path.resolve()
        self._mode = self._detect_distribution_mode()
        self._paths = self._resolve_paths()

    @property
    def paths(self) -> ResolvedPaths:
        """Returns resolved paths for current environment."""
        return self._paths

    @property
    def mode(self) -> DistributionMode:
        """Returns current distribution mode."""
        return self._mode

    def _detect_distribution_mode(self) -> DistributionMode:
        parts = self._script_path.parts
        if "site-packages" in parts or "dist-packages" in parts:
            return "installed"
        return "development"

    def _resolve_paths(self) -> ResolvedPaths:
        app_dir = root_dir = self._script_path.parent
        bundled_config_dir = Path(__file__).resolve().parent / "config"

        if self._mode == "installed":
            home = Path.home()
            config_home = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
            state_home = Path(os.environ.get("XDG_STATE_HOME") or home / ".local" / "state")
            config_dir = config_home / APP_NAME
            logs_dir = state_home / APP_NAME / "logs"
        else:  # development
            config_dir = root_dir / "config"
            logs_dir = root_dir / "logs"

        return ResolvedPaths(
            app_dir=app_dir,
            root_dir=root_dir,
            config_dir=config_dir,
            logs_dir=logs_dir,
            bundled_config_dir=bundled_config_dir,
            environment=self._mode,
        )

    def get_config_path(self, config_name: str) -> Path:
        return self._paths.config_dir / config_name

    def ensure_local_dir_structure(self) -> None:
        """
        Ensures config and logs directories exist and seeds missing config
        files from the copies bundled with the package.
        """
        self._paths.config_dir.mkdir(parents=True, exist_ok=True)
        self._paths.logs_dir.mkdir(parents=True, exist_ok=True)

        bundled_config_dir = self._paths.bundled_config_dir
        if not bundled_config_dir.exists():
            logging.warning(f"Bundled config directory not found: {bundled_config_dir}")
            return

        for bundled_config in bundled_config_dir.iterdir():
            if bundled_config.is_file() and bundled_config.suffix == ".json":
                target = self._paths.config_dir / bundled_config.name
                if not target.exists():
                    shutil.copy2(bundled_config, target)
                    logging.info(f"Copied bundled config: {bundled_config.name}")
