"""Configuration utilities for the settings layer."""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import load_dotenv

from ..formatting.settings import (
    DEFAULT_CULTURE,
    DEFAULT_NUMBER_FORMAT,
    GlobalSettings,
    QuantitySettings,
    default_settings,
)

CULTURE_VAR = "QUANTIQ_CULTURE"
NUMBER_FORMAT_VAR = "QUANTIQ_NUMBER_FORMAT"
USE_ABBREVIATION_VAR = "QUANTIQ_USE_ABBREVIATION"


def get_culture(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get default culture.

    Returns:
        Culture from QUANTIQ_CULTURE env var, defaults to "en-US"
    """
    env = os.environ if environ is None else environ
    return env.get(CULTURE_VAR, DEFAULT_CULTURE)


def get_number_format(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get default number pattern.

    Returns:
        Pattern from QUANTIQ_NUMBER_FORMAT env var, defaults to "n2"
    """
    env = os.environ if environ is None else environ
    return env.get(NUMBER_FORMAT_VAR, DEFAULT_NUMBER_FORMAT)


def get_use_abbreviation(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Raw QUANTIQ_USE_ABBREVIATION value ("true"/"false"), None if unset."""
    env = os.environ if environ is None else environ
    return env.get(USE_ABBREVIATION_VAR)


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> QuantitySettings:
    """
    Build a settings snapshot from environment variables.

    Example .env:
        QUANTIQ_CULTURE=it-IT
        QUANTIQ_NUMBER_FORMAT=n1
        QUANTIQ_USE_ABBREVIATION=false

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    values: Dict[str, Union[str, bool]] = {
        "culture": get_culture(environ),
        "number_format": get_number_format(environ),
    }
    use_abbreviation = get_use_abbreviation(environ)
    if use_abbreviation is not None:
        values["use_abbreviation"] = use_abbreviation.strip().lower()
    return QuantitySettings(**values)


def apply_env_settings(
    target: Optional[GlobalSettings] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> QuantitySettings:
    """
    Load settings from the environment into ``target``.

    Args:
        target: Settings holder (default: process-wide settings)
        env_file: Optional .env file loaded first; existing variables win

    Returns:
        QuantitySettings: The applied snapshot
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    settings = settings_from_env()
    (target or default_settings).replace(settings)
    return settings
