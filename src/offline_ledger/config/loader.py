"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files, merges an optional profile and
environment overrides, and validates the result with Pydantic.

Environment overrides use the form OFFLINE_LEDGER__<SECTION>__<FIELD>,
e.g. OFFLINE_LEDGER__TRANSPORT__BASE_URL=https://ledger.example.com.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from offline_ledger.config.models import LedgerConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "OFFLINE_LEDGER__"


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
            environ: Environment to read overrides from (os.environ if None)
        """
        self._base_path = base_path or Path(".")
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> LedgerConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file (defaults only if None)
            profile: Optional profile name to merge

        Returns:
            Validated LedgerConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        config_dict: Dict[str, Any] = {}
        if config_path is not None:
            config_dict = self._load_yaml(self._resolve_path(config_path))

        if profile:
            config_dict = self._merge_configs(config_dict, self._load_profile(profile))

        config_dict = self._merge_configs(config_dict, self._env_overrides())
        return LedgerConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> LedgerConfig:
        """Validate configuration given as a dictionary."""
        return LedgerConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

    def _env_overrides(self) -> Dict[str, Any]:
        """Nested dict built from OFFLINE_LEDGER__SECTION__FIELD variables."""
        overrides: Dict[str, Any] = {}
        for name, value in self._environ.items():
            if not name.startswith(ENV_PREFIX):
                continue
            parts = [p.lower() for p in name[len(ENV_PREFIX):].split("__") if p]
            if len(parts) < 2:
                logger.warning(f"Ignoring malformed config override {name}")
                continue
            node = overrides
            for part in parts[:-1]:
                node = node.setdefault(part, {})
            node[parts[-1]] = yaml.safe_load(value)
        return overrides

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> LedgerConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated LedgerConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)
