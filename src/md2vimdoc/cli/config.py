#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2vimdoc CLI.

Settings are read from ``.md2vimdoc.toml``, ``.md2vimdoc.yaml``/``.yml``,
``.md2vimdoc.json`` or the ``[tool.md2vimdoc]`` table of ``pyproject.toml``.
Keys are the long option names without dashes, for example::

    # .md2vimdoc.toml
    cols = 78
    pascal = true
    prefix = "myplugin"

"""

import argparse
import json
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2vimdoc.cli.custom_actions import env_key_for
from md2vimdoc.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION

# Config keys and the type each one must have
CONFIG_KEYS: Dict[str, type] = {
    "cols": int,
    "tabs": int,
    "notoc": bool,
    "norules": bool,
    "pascal": bool,
    "generate_tags": bool,
    "desc": str,
    "prefix": str,
    "no_modeline": bool,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.md2vimdoc] table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict when the file has no such table

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    section = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(section).__name__}"
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for the dedicated config files (in ``CONFIG_FILENAMES`` order)
    and then for a pyproject.toml that has a ``[tool.md2vimdoc]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject.toml files are skipped during discovery
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Validated configuration dictionary

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read or parsed, or holds unknown keys or
        values of the wrong type

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")

    return validate_config(config, config_path)


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def validate_config(config: Dict[str, Any], source: Path | str = "config") -> Dict[str, Any]:
    """Check config keys and value types.

    Keys may use dashes or underscores (``generate-tags`` or
    ``generate_tags``); they are returned with underscores.

    Raises
    ------
    argparse.ArgumentTypeError
        If a key is unknown or a value has the wrong type

    """
    validated: Dict[str, Any] = {}
    for raw_key, value in config.items():
        key = str(raw_key).replace("-", "_")
        expected = CONFIG_KEYS.get(key)
        if expected is None:
            raise argparse.ArgumentTypeError(
                f"Unknown option '{raw_key}' in {source}. Valid options: {', '.join(sorted(CONFIG_KEYS))}"
            )
        # bool is a subclass of int, so reject it explicitly for numeric keys
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise argparse.ArgumentTypeError(
                f"Option '{raw_key}' in {source} must be {expected.__name__}, got {type(value).__name__}"
            )
        if expected is int and value <= 0:
            raise argparse.ArgumentTypeError(f"Option '{raw_key}' in {source} must be a positive integer")
        validated[key] = value
    return validated


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2VIMDOC_CONFIG)
    3. Auto-discovered config file, searched from cwd upward

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def apply_config_defaults(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Apply config values to arguments not set on the command line or environment.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed arguments; updated in place
    config : dict
        Validated configuration dictionary

    """
    provided = getattr(parsed_args, "_provided_args", set())
    for key, value in config.items():
        if key in provided or env_key_for(key) in os.environ:
            continue
        setattr(parsed_args, key, value)
