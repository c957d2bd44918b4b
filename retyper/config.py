"""Configuration loader and validator for ReTyper.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/retyper/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = os.path.expanduser('~/.config/retyper/config.json')

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'debug': False,
    # Layout ids the host reports as installed, in priority order
    'layouts': ['com.apple.keylayout.US', 'com.apple.keylayout.Russian'],
    # User-selected subset of 'layouts'; empty means "all relevant"
    'active_keyboards': [],
}


def _defaults() -> dict:
    return {k: list(v) if isinstance(v, list) else v for k, v in DEFAULT_CONFIG.items()}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments
    s = re.sub(r"^[ \t]*//.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r"[ \t]+//[^\"\n]*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _validate_id_list(conf: dict, key: str, default: list) -> list[str]:
    value = conf.get(key, default)
    if not isinstance(value, list) or not all(isinstance(x, str) and x for x in value):
        raise ValueError(f"Invalid '{key}': must be a list of non-empty strings")
    return list(value)


def _write_atomic(path: str, conf: dict) -> None:
    """Write *conf* to *path* through a temp file and ``os.replace``."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".config-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(conf, f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}
    if not isinstance(conf, dict):
        raise ValueError("Config must be a JSON object")

    defaults = _defaults()
    out = dict(defaults)

    # debug: boolean
    dbg = conf.get('debug', defaults['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    # layouts: list of layout ids
    out['layouts'] = _validate_id_list(conf, 'layouts', defaults['layouts'])

    # active_keyboards: list of layout ids, may be empty
    out['active_keyboards'] = _validate_id_list(
        conf, 'active_keyboards', defaults['active_keyboards'])

    return out


def _parse_file(path: str) -> dict:
    """Read and validate one config file. Raises ``ValueError`` on any problem."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        raise ValueError(f"Cannot read config {path}: {exc}") from exc

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            raise ValueError(f"JSON parse error in {path}: {exc}") from exc

    validated = validate_config(cfg)
    # Only keys explicitly present in the file
    return {k: validated[k] for k in cfg if k in validated}


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        target_config.update(_parse_file(path))
        return True
    except ValueError as verr:
        if debug:
            logger.warning("Invalid config %s: %s", path, verr)
        return False


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False,
                strict: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/retyper/config.json``.

    With *strict* a missing explicit file, a parse error or an invalid
    value raises ``ValueError`` instead of being ignored.

    Returns the effective configuration dict (always has all default keys).
    """
    config = _defaults()
    path = config_path if config_path is not None else USER_CONFIG_PATH
    if strict:
        if config_path is not None or os.path.exists(path):
            config.update(_parse_file(path))
        return config
    if os.path.exists(path):
        _read_and_merge(path, config, debug=debug)
    return config


# ------------------------------------------------------------------
# ConfigManager
# ------------------------------------------------------------------

class ConfigManager:
    """Centralized configuration management with load/save/validate."""

    def __init__(self, config_path: str | None = None, debug: bool = False):
        self._config_path = config_path or USER_CONFIG_PATH
        self._debug = debug
        self._config: dict = _defaults()
        self._load_config()

    # -- internal -------------------------------------------------------

    def _load_config(self) -> None:
        """Reset to defaults, then overlay from file (if exists)."""
        self._config = _defaults()
        if os.path.exists(self._config_path):
            _read_and_merge(self._config_path, self._config, debug=self._debug)

    # -- public ---------------------------------------------------------

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save(self, target_path: str | None = None) -> bool:
        """Atomically save configuration to file. Returns True on success."""
        save_path = target_path or self._config_path
        try:
            _write_atomic(save_path, self.get_all())
            return True
        except OSError as exc:
            logger.warning("Cannot save config to %s: %s", save_path, exc)
            return False

    def get(self, key: str, default=None):
        """Get a single configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value) -> None:
        """Set a single configuration value."""
        self._config[key] = value

    def update(self, updates: dict) -> None:
        """Update multiple configuration values."""
        self._config.update(updates)

    def get_all(self) -> dict:
        """Return all configuration (excluding internal keys)."""
        return {k: v for k, v in self._config.items() if not k.startswith('_')}

    def reset_to_defaults(self) -> None:
        self._config = _defaults()

    def validate(self) -> bool:
        """Validate current configuration. Returns True if valid."""
        try:
            validate_config(self._config)
            return True
        except ValueError:
            return False

    @property
    def config_path(self) -> str:
        return self._config_path
