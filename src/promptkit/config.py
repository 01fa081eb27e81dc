"""Read-only settings with env override support."""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger("promptkit.config")

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting PROMPTKIT_CONFIG_DIR env var."""
    config_dir = os.environ.get("PROMPTKIT_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "promptkit"


class ConfigMeta:
    """Schema definition - separate from runtime state."""

    TOGGLES: dict[str, str] = {
        "ascii_figures": "Use the ASCII-safe glyph set on every platform",
        "color": "Colour prompt output when writing to a terminal",
    }

    SETTINGS: dict[str, str] = {
        "select_hint": "Hint line shown under select menus",
        "answer_label": "Label of the select answer line",
        "invalid_number_message": "Error message for unparsable numbers",
    }


class Config:
    """Runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        # Toggles
        "ascii_figures": False,
        "color": True,
        # Settings
        "select_hint": "Use arrow-keys or type number. Return to submit.",
        "answer_label": "Answer (number or name)",
        "invalid_number_message": "Please Enter A Valid Value",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def as_dict(self) -> dict[str, Any]:
        """Effective values for every known key."""
        return {key: getattr(self, key) for key in self.DEFAULTS}

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    data = json.loads(content)
                    self._data = {k: v for k, v in data.items() if k in self.DEFAULTS}
            except json.JSONDecodeError:
                logger.warning("Ignoring corrupted config file %s", self._config_file)
                self._data = {}

    def _apply_env_overrides(self) -> None:
        """Apply PROMPTKIT_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"PROMPTKIT_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value
