"""
Configuration loading for xsdiff.

Configuration is optional. When present it is a YAML file (by default
`xsdiff.yaml` in the current directory) validated against
schema/config.schema.json; missing keys fall back to DEFAULT_CONFIG.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from xsdiff.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).parent

CONFIG_FILE_NAME = "xsdiff.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "analyzer": {
        "preset": "full",
        "namespaces": ["http://www.w3.org/2001/XMLSchema"],
    },
    "batch": {
        "listing_file": "schema.lst",
        "failure_policy": "fail_fast",
    },
    "report": {
        "formats": ["html", "xlsx"],
    },
}


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge two configuration dicts section by section.

    Values in `override` win; nested dicts are merged recursively, lists are replaced.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _validate_config_schema(config: dict) -> None:
    """Validate config against JSON schema."""
    schema_file = PACKAGE_ROOT / "schema/config.schema.json"
    if not schema_file.exists():
        raise FileNotFoundError(
            f"Configuration schema file not found: {schema_file}\n"
            f"This indicates an incomplete installation. Please reinstall xsdiff:\n"
            f"  pip install --force-reinstall xsdiff"
        )

    schema = json.loads(schema_file.read_text())
    try:
        validate(instance=config, schema=schema)
    except ValidationError as e:
        path = ".".join(str(p) for p in e.path)
        raise InvalidConfigError(f"{e.message} (at: {path or '<root>'})") from e


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """
    Load configuration, falling back to defaults.

    Args:
        config_file: Explicit config path. When None, `xsdiff.yaml` in the
            current directory is used if it exists.

    Returns:
        Complete configuration dict (defaults merged with the file's contents)

    Raises:
        InvalidConfigError: If the file is not valid YAML or fails schema validation
        FileNotFoundError: If an explicit config file does not exist
    """
    if config_file is None:
        candidate = Path.cwd() / CONFIG_FILE_NAME
        if not candidate.exists():
            return copy.deepcopy(DEFAULT_CONFIG)
        config_file = candidate
    elif not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    logger.debug(f"Loading configuration from {config_file}")
    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"{config_file}: {e}") from e

    if config is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(config).__name__}")

    _validate_config_schema(config)

    return merge_config(DEFAULT_CONFIG, config)
