"""
Configuration loader with environment variable support.

Loads configuration from YAML files with hierarchical overrides:
1. config/default.yaml (base configuration)
2. config/{RINGSIZER_ENV}.yaml (environment-specific)
3. Environment variables (RINGSIZER_*)
4. Values set in code with Config.set (CLI flags)
"""

import os
from pathlib import Path
from typing import Any

import yaml

ENV_PREFIX = "RINGSIZER_"


class Config:
    """
    Hierarchical configuration loader.

    Load order (later overrides earlier):
    1. default.yaml
    2. {RINGSIZER_ENV}.yaml (development, production, etc.)
    3. Environment variables (RINGSIZER_*)
    4. Config.set overrides

    Usage:
        config = Config()
        lower = config.get('dial.lower_bound', 50)
        # or
        lower = config['dial']['lower_bound']
    """

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Path to configuration directory. Defaults to project config/
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self.config_dir = Path(config_dir)
        self.env = os.getenv("RINGSIZER_ENV", "production")
        self._overrides: dict[str, Any] = {}
        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load and merge configuration files."""
        config: dict[str, Any] = {}

        default_path = self.config_dir / "default.yaml"
        if default_path.exists():
            with open(default_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}

        env_path = self.config_dir / f"{self.env}.yaml"
        if env_path.exists():
            with open(env_path, encoding="utf-8") as f:
                env_config = yaml.safe_load(f) or {}
                config = self._deep_merge(config, env_config)

        config = self._apply_env_overrides(config)

        # Programmatic overrides (e.g. CLI flags) win over everything
        for key, value in self._overrides.items():
            self._set_nested(config, key.split("."), value)

        return config

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: dict) -> dict:
        """
        Apply RINGSIZER_* environment variables.

        Example: RINGSIZER_DIAL_LOWER_BOUND=40 -> config['dial']['lower_bound'] = 40
        """
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX) and key != "RINGSIZER_ENV":
                parts = key[len(ENV_PREFIX) :].lower().split("_")
                self._set_nested(config, self._resolve_path(config, parts), self._parse_value(value))
        return config

    def _resolve_path(self, config: dict, parts: list[str]) -> list[str]:
        """
        Group underscore-separated parts into keys.

        Prefers the longest prefix that names an existing key at each level, so
        keys that themselves contain underscores can be overridden. Unknown keys
        fall back to one level per part.
        """
        path: list[str] = []
        node: Any = config
        i = 0
        while i < len(parts):
            for j in range(len(parts), i, -1):
                candidate = "_".join(parts[i:j])
                if isinstance(node, dict) and candidate in node:
                    path.append(candidate)
                    node = node[candidate]
                    i = j
                    break
            else:
                path.append(parts[i])
                node = None
                i += 1
        return path

    def _set_nested(self, d: dict, keys: list, value: Any) -> None:
        """Set a nested dictionary value."""
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            pass
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Dot-separated path like 'dial.lower_bound'
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Override a value using dot notation.

        Overrides stay in effect across ``reload`` and take precedence over
        files and environment variables.
        """
        self._overrides[key] = value
        self._set_nested(self._config, key.split("."), value)

    def __getitem__(self, key: str) -> Any:
        """Get top-level configuration section."""
        return self._config.get(key, {})

    @property
    def as_dict(self) -> dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from files."""
        self._config = self._load_config()
