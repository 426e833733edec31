"""Configuration loader for todolist (global + project with TOML-based defaults)."""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for Python <3.11
    import tomli as tomllib  # type: ignore

DEFAULT_VERSION_LABEL = "v1.0.0"


class ConfigLoader:
    """
    Handles configuration loading from multiple sources with priority resolution.

    Priority (highest → lowest):
    1. Command-line arguments (applied through ``set``)
    2. Environment variables (TODOLIST_*)
    3. Project config (.todolist/config.toml)
    4. Global config (~/.config/todolist/config.toml)
    5. Built-in defaults
    """

    env_prefix = "TODOLIST_"

    def __init__(
        self,
        global_dir: Path | None = None,
        project_dir: Path | None = None,
        environ: Dict[str, str] | None = None,
    ) -> None:
        self.global_dir = global_dir or self.get_global_config_dir()
        self.project_dir = project_dir if project_dir is not None else self.get_project_config_dir()
        self.environ = os.environ if environ is None else environ

        self.config: Dict[str, Any] = {}
        self._load_all()

    # ------------------------------------------------------------------ #
    # Public getters
    # ------------------------------------------------------------------ #
    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-separated key."""
        keys = key.split(".")
        value: Any = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def set(self, key: str, value: Any) -> None:
        """Override a value in memory (used for CLI options)."""
        self._set_nested(self.config, key, value)

    @property
    def api_url(self) -> str:
        return str(self.get("api.url", "http://localhost:3500"))

    @property
    def api_timeout(self) -> float:
        try:
            return float(self.get("api.timeout", 10.0))
        except (TypeError, ValueError):
            return 10.0

    @property
    def version_label(self) -> str:
        return str(self.get("app.version") or DEFAULT_VERSION_LABEL)

    @property
    def log_file(self) -> Path:
        return Path(str(self.get("general.log_file", "~/.config/todolist/events.log"))).expanduser()

    # ------------------------------------------------------------------ #
    # Load/merge helpers
    # ------------------------------------------------------------------ #
    def _load_all(self) -> None:
        """Load all configuration files with proper priority."""
        self._load_global_config()
        if self.project_dir:
            self._load_project_config()
        self._apply_env_overrides()

    def _load_global_config(self) -> None:
        """Load global configuration, writing the defaults on first run."""
        self.config = self._get_default_config()
        config_file = self.global_dir / "config.toml"
        if config_file.exists():
            with open(config_file, "rb") as f:
                self._deep_merge(self.config, tomllib.load(f))
        else:
            self._create_default_config()

    def _load_project_config(self) -> None:
        """Load project-specific config and merge with global."""
        config_file = self.project_dir / "config.toml"
        if config_file.exists():
            with open(config_file, "rb") as f:
                project_config = tomllib.load(f)
                self._deep_merge(self.config, project_config)

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides (TODOLIST_*)."""
        for key, value in self.environ.items():
            if not key.startswith(self.env_prefix):
                continue
            config_key = self._env_key_to_path(key[len(self.env_prefix) :])
            self._set_nested(self.config, config_key, value)

    def _env_key_to_path(self, raw: str) -> str:
        """Map API_URL to api.url; the section is the first word, the rest is one key."""
        section, _, rest = raw.lower().partition("_")
        if rest and isinstance(self.config.get(section), dict):
            return f"{section}.{rest}"
        return raw.lower().replace("_", ".")

    # ------------------------------------------------------------------ #
    # Static paths/helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def get_global_config_dir() -> Path:
        """Get platform-specific global config directory following XDG spec."""
        system = platform.system()
        if system == "Windows":
            base = Path(os.environ.get("APPDATA", "~\\AppData\\Roaming")).expanduser()
        elif system == "Darwin":
            xdg = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg) if xdg else Path.home() / ".config"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
        return base / "todolist"

    @staticmethod
    def get_project_config_dir() -> Path | None:
        """Find .todolist directory in current or parent directories."""
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_dir = parent / ".todolist"
            if config_dir.is_dir():
                return config_dir
        return None

    # ------------------------------------------------------------------ #
    # Persistence helpers
    # ------------------------------------------------------------------ #
    def _create_default_config(self) -> None:
        try:
            self.global_dir.mkdir(parents=True, exist_ok=True)
            config_file = self.global_dir / "config.toml"
            with open(config_file, "w", encoding="utf-8") as f:
                f.write(self._get_default_config_toml())
        except OSError:
            # read-only home directories still get the built-in defaults
            pass

    # ------------------------------------------------------------------ #
    # Default content
    # ------------------------------------------------------------------ #
    def _get_default_config(self) -> Dict[str, Any]:
        """Built-in defaults."""
        return {
            "general": {
                "log_file": "~/.config/todolist/events.log",
            },
            "api": {
                "url": "http://localhost:3500",
                "timeout": 10.0,
            },
            "app": {
                "version": DEFAULT_VERSION_LABEL,
            },
        }

    def _get_default_config_toml(self) -> str:
        """Default config TOML text for first-run creation."""
        default = self._get_default_config()
        return "\n".join(
            [
                "[general]",
                f'log_file = "{default["general"]["log_file"]}"',
                "",
                "[api]",
                f'url = "{default["api"]["url"]}"',
                f'timeout = {default["api"]["timeout"]}',
                "",
                "[app]",
                f'version = "{default["app"]["version"]}"',
                "",
            ]
        )

    # ------------------------------------------------------------------ #
    # Utility helpers
    # ------------------------------------------------------------------ #
    def _deep_merge(self, base: dict, override: dict) -> None:
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, d: dict, path: str, value: Any) -> None:
        keys = path.split(".")
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value


Config = ConfigLoader

__all__ = ["ConfigLoader", "Config", "DEFAULT_VERSION_LABEL"]
