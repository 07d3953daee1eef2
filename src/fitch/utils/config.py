"""YAML configuration for the proof editor."""

import copy
import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


class Config:
    """Configuration loaded from a YAML file.

    Values are read with dot-separated keys (``config.get("display.width")``).
    ``${VAR}`` and ``${VAR:default}`` inside string values are replaced by
    environment variables when the file is loaded.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = str(config_path) if config_path else self._find_config_file()
        self.config = self._load_config()
        self._resolve_environment_variables()

    def _find_config_file(self) -> str:
        """Find the config file: $FITCH_CONFIG, ./configs, ~/.fitch, then the bundled default."""
        possible_paths = [
            Path.cwd() / "configs" / "default.yaml",
            Path.home() / ".fitch" / "config.yaml",
            Path(__file__).parent.parent / "configs" / "default.yaml",
        ]
        if os.environ.get("FITCH_CONFIG"):
            possible_paths.insert(0, Path(os.environ["FITCH_CONFIG"]))

        for path in possible_paths:
            if path.exists():
                return str(path)

        raise FileNotFoundError("No configuration file found")

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def _resolve_environment_variables(self):
        def substitute(match):
            return os.environ.get(match.group(1), match.group(2) or "")

        def resolve_value(value):
            if isinstance(value, str):
                return _ENV_PATTERN.sub(substitute, value)
            elif isinstance(value, dict):
                return {k: resolve_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [resolve_value(v) for v in value]
            return value

        self.config = resolve_value(self.config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key."""
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Merge nested ``updates`` into the configuration."""
        def deep_update(d, u):
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        self.config = deep_update(self.config, updates)

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)


_config = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
