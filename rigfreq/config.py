"""Configuration handling for rigfreq.

Settings only supply defaults for the command line tool: which frequency
convention its input uses, what it prints, how much it logs, and which
N1MM+ radio number it listens to. Every value is checked against what the
package actually supports, so a bad config file degrades to the built-in
defaults instead of failing later.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from rigfreq.core.parsers import FrequencyFormat

logger = logging.getLogger(__name__)

# Configuration keys
INPUT_FORMAT_KEY = "input_format"
OUTPUT_FORMAT_KEY = "output_format"
LOG_LEVEL_KEY = "log_level"
N1MM_RADIO_NR_KEY = "n1mm_radio_nr"

INPUT_FORMATS = tuple(f.value for f in FrequencyFormat)
OUTPUT_FORMATS = ("dotted", "short", "mhz", "band", "bcd")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG = {
    INPUT_FORMAT_KEY: FrequencyFormat.CAT.value,
    OUTPUT_FORMAT_KEY: "dotted",
    LOG_LEVEL_KEY: "WARNING",
    # None accepts RadioInfo broadcasts from any radio
    N1MM_RADIO_NR_KEY: None,
}

CONFIG_FILENAME = "rigfreq.json"


def get_config_file_path() -> Optional[Path]:
    """Find the configuration file.

    Looks in the current working directory first, then in the user's config
    directory ($XDG_CONFIG_HOME/rigfreq, or ~/.config/rigfreq).

    Returns:
        Optional[Path]: Path of the first config file found, or None
    """
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    config_home = Path(xdg_home) if xdg_home else Path.home() / ".config"

    for path in (Path.cwd() / CONFIG_FILENAME, config_home / "rigfreq" / CONFIG_FILENAME):
        if path.is_file():
            return path
    return None


def _check_choice(key: str, value: Any, choices) -> Optional[str]:
    if isinstance(value, str) and value in choices:
        return value
    logger.warning(f"Config key '{key}' must be one of {', '.join(choices)}, "
                   f"got {value!r}. Using default.")
    return None


def _check_radio_nr(value: Any) -> Optional[str]:
    # N1MM+ numbers radios from 1; JSON files often hold it as a number
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if isinstance(value, str) and value.isdigit() and int(value) > 0:
        return value
    logger.warning(f"Config key '{N1MM_RADIO_NR_KEY}' must be a radio number, "
                   f"got {value!r}. Accepting any radio.")
    return None


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check a raw configuration against the supported formats.

    Args:
        config: Settings as read from the config file

    Returns:
        Dict[str, Any]: A complete settings dictionary; missing or invalid
        values are replaced by their defaults and unknown keys are dropped
    """
    settings = DEFAULT_CONFIG.copy()

    if INPUT_FORMAT_KEY in config:
        value = _check_choice(INPUT_FORMAT_KEY, config[INPUT_FORMAT_KEY], INPUT_FORMATS)
        if value is not None:
            settings[INPUT_FORMAT_KEY] = value

    if OUTPUT_FORMAT_KEY in config:
        value = _check_choice(OUTPUT_FORMAT_KEY, config[OUTPUT_FORMAT_KEY], OUTPUT_FORMATS)
        if value is not None:
            settings[OUTPUT_FORMAT_KEY] = value

    if LOG_LEVEL_KEY in config:
        level = config[LOG_LEVEL_KEY]
        if isinstance(level, str):
            level = level.upper()
        value = _check_choice(LOG_LEVEL_KEY, level, LOG_LEVELS)
        if value is not None:
            settings[LOG_LEVEL_KEY] = value

    if config.get(N1MM_RADIO_NR_KEY) is not None:
        settings[N1MM_RADIO_NR_KEY] = _check_radio_nr(config[N1MM_RADIO_NR_KEY])

    for key in config:
        if key not in DEFAULT_CONFIG:
            logger.warning(f"Ignoring unknown config key '{key}'")

    return settings


def load_settings(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load and validate settings.

    A missing file, invalid JSON, a file that does not hold a JSON object or
    an unreadable file all give the default settings.

    Args:
        config_path: Explicit config file; searched for when not given

    Returns:
        Dict[str, Any]: Validated settings
    """
    if config_path is None:
        config_path = get_config_file_path()
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_path) as json_data_file:
            config = json.load(json_data_file)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file at {config_path}: {e}. Using defaults")
        return DEFAULT_CONFIG.copy()
    except OSError as e:
        logger.error(f"Error reading config file at {config_path}: {e}. Using defaults")
        return DEFAULT_CONFIG.copy()

    if not isinstance(config, dict):
        logger.error(f"Config file at {config_path} does not hold a JSON object, using defaults")
        return DEFAULT_CONFIG.copy()

    logger.info(f"Configuration loaded from {config_path}")
    return validate_config(config)
