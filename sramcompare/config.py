"""
Config and key binding files.

Config files are JSON objects with one key per Options field; flag sets are
stored as lists of member names so the files stay hand-editable. Key binding
files map a custom token to a canonical command name.
"""

import dataclasses
import json
import logging
import os

from sramcompare.errors import ConfigError, KeyBindingError
from sramcompare.flags import active_flags, flags_from_names, parse_flags
from sramcompare.options import FLAG_FIELDS, INT_FIELDS, Options

log = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "Config"
CONFIG_EXTENSION = ".json"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_NAME + CONFIG_EXTENSION
KEY_BINDINGS_FILE = "KeyBindings.json"


# ── Config ──────────────────────────────────────────────────────────────────

def get_config_file_path(config_file_path, config_name=None):
    """Resolve the file a config command works on.

    No name: the active config file, else the default one. A name without
    extension gets .json appended.
    """
    if not config_name:
        return config_file_path or DEFAULT_CONFIG_FILE
    if not os.path.splitext(config_name)[1]:
        return config_name + CONFIG_EXTENSION
    return config_name


def options_to_dict(options):
    data = {}
    for field in dataclasses.fields(options):
        value = getattr(options, field.name)
        if field.name in FLAG_FIELDS:
            value = active_flags(value)
        data[field.name] = value
    return data


def _flag_value(key, value):
    flag_type = FLAG_FIELDS[key]
    try:
        if value is None:
            return flag_type(0)
        if isinstance(value, str):
            # "A, B" as written by other tools
            return parse_flags(flag_type, value)
        if isinstance(value, int) and not isinstance(value, bool):
            return parse_flags(flag_type, str(value))
        if isinstance(value, list):
            return flags_from_names(flag_type, value)
    except ValueError as e:
        raise ConfigError(f"Invalid {key}: {e}") from e
    raise ConfigError(f"Invalid {key}: expected a list of flag names, got {value!r}")


def _field_value(key, value):
    if value is None:
        return None
    if key in INT_FIELDS:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"Invalid {key}: expected a non-negative integer, got {value!r}")
        return value
    if not isinstance(value, str):
        raise ConfigError(f"Invalid {key}: expected a string, got {value!r}")
    return value


def options_from_dict(data, options=None):
    """Apply a config dict onto `options` (a fresh Options if None).

    Every key is validated before anything is applied, so a bad config
    leaves `options` untouched.
    """
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object")
    options = options if options is not None else Options()
    known = {f.name for f in dataclasses.fields(options)}

    values = {}
    for key, value in data.items():
        if key not in known:
            log.warning("ignoring unknown config key %r", key)
            continue
        if key in FLAG_FIELDS:
            values[key] = _flag_value(key, value)
        else:
            values[key] = _field_value(key, value)

    for key, value in values.items():
        setattr(options, key, value)
    return options


def save_config(options, path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(options_to_dict(options), f, indent=2)
    log.debug("config saved to %s", path)
    return path


def read_config(path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e


def load_config(path, options=None):
    """Load a config file onto `options` and return it."""
    return options_from_dict(read_config(path), options)


def load_auto_config(default_path=DEFAULT_CONFIG_FILE):
    """Options from the config the default file points at, or None.

    AutoLoadOn stores the active config path in the default config; this
    follows that pointer at startup.
    """
    if not os.path.exists(default_path):
        return None
    defaults = load_config(default_path)
    target = defaults.config_file_path
    if not target:
        return None
    if os.path.abspath(target) == os.path.abspath(default_path):
        return defaults
    if not os.path.exists(target):
        log.warning("auto-load config %s does not exist", target)
        return None
    return load_config(target)


# ── Key bindings ────────────────────────────────────────────────────────────

def validate_key_bindings(data, command_names):
    """Check a raw key binding mapping and return {token.lower(): command}.

    Rejects duplicate tokens (case-insensitive), unknown target commands and
    two tokens bound to the same command.
    """
    if not isinstance(data, dict):
        raise KeyBindingError("Key bindings file must contain a JSON object")
    canonical = {name.lower(): name for name in command_names}
    bindings = {}
    targets = {}
    for token, target in data.items():
        key = str(token).strip().lower()
        if not key:
            raise KeyBindingError("Empty key binding token")
        command = canonical.get(str(target).strip().lower())
        if command is None:
            raise KeyBindingError(f"Key binding {token!r} targets unknown command {target!r}")
        if key in bindings:
            raise KeyBindingError(f"Duplicate key binding token {token!r}")
        if command in targets:
            raise KeyBindingError(f"Command {command} is bound to both {targets[command]!r} and {token!r}")
        bindings[key] = command
        targets[command] = token
    return bindings


class KeyBindings:
    """Custom token -> command table, loaded from disk on first use."""

    def __init__(self, path, command_names):
        self.path = path
        self.command_names = list(command_names)
        self._bindings = None
        self._mtime = None

    def _load(self):
        if not os.path.exists(self.path):
            self._bindings, self._mtime = {}, None
            return
        mtime = os.path.getmtime(self.path)
        if self._bindings is not None and mtime == self._mtime:
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise KeyBindingError(f"Key bindings file {self.path} is not valid JSON: {e}") from e
        self._bindings = validate_key_bindings(data, self.command_names)
        self._mtime = mtime
        log.debug("loaded %d key bindings from %s", len(self._bindings), self.path)

    def lookup(self, token):
        """Canonical command bound to `token`, or None."""
        self._load()
        return self._bindings.get(token.strip().lower())


def create_key_bindings_file(path, command_names):
    """Write an identity mapping of every command as a starting template."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump({name: name for name in command_names}, f, indent=2)
    return path
