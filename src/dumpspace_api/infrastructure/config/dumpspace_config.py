#!/usr/bin/env python3

"""Configuration for the remote Dumpspace document service."""

import os
from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    # Remote layout
    "BASE_URL": "https://dumpspace.spuckwaffel.com/Games",
    "CATALOG_NAME": "GameList.json",

    # HTTP behaviour
    "REQUEST_TIMEOUT": 30.0,  # seconds, per request
    "VERIFY_TLS": True,
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Every key can be overridden with a ``DUMPSPACE_<KEY>`` variable. Values
    that cannot be converted to the default's type are ignored.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"DUMPSPACE_{key}")
        if env_value is None:
            continue

        if isinstance(config[key], bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                config[key] = int(env_value)
            except ValueError:
                pass
        elif isinstance(config[key], float):
            try:
                config[key] = float(env_value)
            except ValueError:
                pass
        else:
            config[key] = env_value

    return config
