# Area: Shared
"""
game_bridge._runner_config — Runner Configuration
==================================================

Defaults, validation and environment mapping for BridgeRunner config dicts.
"""

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "host": "127.0.0.1",
    "reply_host": "localhost",
    "log_file": "game_bridge.log",
    "log_level": "INFO",
    "read_timeout_seconds": None,
    "reply_connect_timeout_seconds": None,
    "protocol_mode": False,
    "demo_mode": False,
}

# Required config keys
REQUIRED_CONFIG_KEYS = [
    "port",
]


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


# Environment variable → (config key, converter)
ENV_MAPPINGS = {
    "BRIDGE_PORT": ("port", int),
    "BRIDGE_HOST": ("host", str),
    "BRIDGE_REPLY_HOST": ("reply_host", str),
    "BRIDGE_LOG_FILE": ("log_file", str),
    "BRIDGE_LOG_LEVEL": ("log_level", str),
    "BRIDGE_READ_TIMEOUT": ("read_timeout_seconds", float),
    "BRIDGE_REPLY_TIMEOUT": ("reply_connect_timeout_seconds", float),
    "BRIDGE_PROTOCOL_MODE": ("protocol_mode", parse_bool),
    "DEMO_MODE": ("demo_mode", parse_bool),
}


def with_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``config`` with every missing key defaulted."""
    merged = dict(DEFAULT_CONFIG)
    merged.update(config)
    return merged


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate required configuration keys and their values.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If required keys are missing or hold invalid values
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if k not in config]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    port = config["port"]
    # Port 0 asks the OS for a free port
    if not isinstance(port, int) or isinstance(port, bool) or not 0 <= port <= 65535:
        raise ValueError(f"Invalid port {port!r}: expected an integer in 0..65535")

    for key in ("read_timeout_seconds", "reply_connect_timeout_seconds"):
        value = config.get(key)
        if value is not None and (not isinstance(value, (int, float)) or value <= 0):
            raise ValueError(f"Invalid {key} {value!r}: expected a positive number or None")
