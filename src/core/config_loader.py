"""
Configuration loading utilities.

This module builds the SuiteConfig for a verifier run.

Loading Order (later wins):
    1. Defaults from src/constants.py
    2. config_e2e.json (optional)
    3. Environment overrides (GOOGLE_CLOUD_PROJECT, ASSET_E2E_ZONE, ...)
    4. Application Default Credentials project, if project_id is still unset

Usage:
    from src.core.config_loader import load_suite_config

    config = load_suite_config(Path("config_e2e.json"))
"""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import src.constants as CONSTANTS
from src.logger import logger
from src.util import get_project_id

from .context import SuiteConfig
from .exceptions import ConfigurationError


def _load_json_file(file_path: Path, required: bool = True) -> Dict[str, Any]:
    """
    Load a JSON file and return its contents as a dictionary.

    Args:
        file_path: Path to the JSON file
        required: If True, raise error when file is missing. If False, return empty dict.

    Returns:
        Parsed JSON content as dictionary

    Raises:
        ConfigurationError: If file is missing (when required), has invalid JSON
                            or is not a JSON object
    """
    if not file_path.exists():
        if required:
            raise ConfigurationError(
                f"Required configuration file not found: {file_path.name}",
                config_file=str(file_path)
            )
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file: {e}",
            config_file=str(file_path)
        )

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object",
            config_file=str(file_path)
        )
    return data


def load_suite_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    project_resolver: Callable[[], Optional[str]] = get_project_id,
) -> SuiteConfig:
    """
    Load the suite configuration.

    Args:
        config_path: Explicit config file; must exist when given. Defaults to
                     ./config_e2e.json, which is optional.
        environ: Environment mapping (defaults to os.environ)
        project_resolver: Fallback for the project id when neither file nor
                          environment set one

    Returns:
        SuiteConfig with every field resolved

    Raises:
        ConfigurationError: If the file is invalid, contains unknown keys, or
                            no project id can be resolved
    """
    if environ is None:
        environ = os.environ

    if config_path is None:
        values = _load_json_file(Path(CONSTANTS.CONFIG_E2E_FILE), required=False)
        source = CONSTANTS.CONFIG_E2E_FILE
    else:
        values = _load_json_file(Path(config_path), required=True)
        source = str(config_path)

    unknown = sorted(set(values) - set(CONSTANTS.CONFIG_E2E_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {unknown}", config_file=source)

    for env_var, key in CONSTANTS.ENV_OVERRIDES.items():
        if environ.get(env_var):
            logger.debug(f"Config override from {env_var}: {key}")
            values[key] = environ[env_var]

    if not values.get("project_id"):
        values["project_id"] = project_resolver()
    if not values.get("project_id"):
        raise ConfigurationError(
            "No project id configured. Set GOOGLE_CLOUD_PROJECT, add 'project_id' "
            f"to {CONSTANTS.CONFIG_E2E_FILE}, or configure Application Default Credentials."
        )

    mode = str(values.get("mode", CONSTANTS.DEFAULT_MODE)).upper()
    if mode not in ("DEBUG", "INFO"):
        raise ConfigurationError(f"Invalid mode '{mode}'. Expected DEBUG or INFO.", config_file=source)
    values["mode"] = mode

    return SuiteConfig(**values)
