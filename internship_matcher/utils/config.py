"""
Configuration management for Internship Matcher.

Settings live in a JSON file (default: ~/.internship_matcher/config.json)
and are layered over DEFAULT_CONFIG, so a file only needs the keys it
changes. Keys are addressed with dot notation, e.g. "matching.bulk_max".
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _merge(defaults: dict, overrides: dict) -> dict:
    """Overlay overrides on defaults, section by section."""
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Matching settings, catalog location and the catalog API key."""

    DEFAULT_CONFIG = {
        "api_keys": {
            "catalog": "",
        },
        "catalog": {
            "path": "./internships.json",
            "url": "",
            "timeout": 30,
        },
        "matching": {
            "recommendation_limit": 10,
            "bulk_max": 50,
            "parallel": False,
            "max_workers": 4,
            "cap_per_requirement": False,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".internship_matcher" / "config.json"

        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                self.config = _merge(self.config, json.load(f))

    def save(self) -> None:
        """Write the current settings back to the config file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None):
        """Look up a dotted key, returning default if any part is missing."""
        section = self.config
        for part in key.split('.'):
            if not isinstance(section, dict) or part not in section:
                return default
            section = section[part]
        return section

    def set(self, key: str, value) -> None:
        """Set a dotted key, creating sections as needed."""
        *sections, name = key.split('.')
        target = self.config
        for part in sections:
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]
        target[name] = value

    def get_api_key(self, provider: str) -> str:
        """API key from <PROVIDER>_API_KEY, falling back to the config file."""
        return os.environ.get(f"{provider.upper()}_API_KEY") or self.get(f"api_keys.{provider}", "")

    def get_catalog_config(self) -> dict:
        """Settings needed to build a catalog provider."""
        return {
            "path": self.get("catalog.path", "./internships.json"),
            "url": self.get("catalog.url", ""),
            "timeout": self.get("catalog.timeout", 30),
            "api_key": self.get_api_key("catalog"),
        }

    def get_recommendation_limit(self) -> int:
        return int(self.get("matching.recommendation_limit", 10))

    def get_bulk_max(self) -> int:
        return int(self.get("matching.bulk_max", 50))

    def get_max_workers(self) -> int:
        return int(self.get("matching.max_workers", 4))

    def is_parallel(self) -> bool:
        return bool(self.get("matching.parallel", False))

    def caps_per_requirement(self) -> bool:
        return bool(self.get("matching.cap_per_requirement", False))

    def get_log_level(self) -> str:
        level = str(self.get("logging.level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown logging level '{level}', expected one of {', '.join(LOG_LEVELS)}")
        return level

    def masked(self) -> dict:
        """Copy of the settings with API keys masked for display."""
        shown = copy.deepcopy(self.config)
        keys = shown.get("api_keys")
        if isinstance(keys, dict):
            for provider, value in keys.items():
                if not value:
                    keys[provider] = "(not set)"
                else:
                    value = str(value)
                    keys[provider] = f"{value[:4]}...{value[-4:]}" if len(value) > 8 else "****"
        return shown
