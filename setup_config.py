#!/usr/bin/env python3
# Area: Shared
"""
Game Bridge - Configuration Setup Script
=========================================

Interactive script to generate config.json and .env files.

Usage:
    python setup_config.py
"""

import json
from pathlib import Path


def prompt(question: str, default: str = "", required: bool = True) -> str:
    """Prompt user for input with optional default value."""
    if default:
        display = f"{question} [{default}]: "
    else:
        display = f"{question}: "

    while True:
        value = input(display).strip()
        if not value and default:
            return default
        if value:
            return value
        if not required:
            return ""
        print("  This field is required. Please enter a value.")


def prompt_int(question: str, default: str, low: int, high: int) -> int:
    """Prompt until the answer is an integer in ``low..high``."""
    while True:
        value = prompt(question, default=default)
        if value.isdigit() and low <= int(value) <= high:
            return int(value)
        print(f"  Please enter a number between {low} and {high}.")


def print_header():
    """Print welcome header."""
    print()
    print("=" * 60)
    print("  Game Bridge - Configuration Setup")
    print("=" * 60)
    print()
    print("This script will help you create config.json and .env files.")
    print("Press Enter to accept default values shown in [brackets].")
    print()


def print_section(title: str):
    """Print section header."""
    print()
    print(f"--- {title} ---")
    print()


def get_config_values() -> dict:
    """Interactively collect configuration values."""
    config = {}

    print_section("Listening Socket")
    print("External agents connect to this port to send requests.")
    print()
    config["port"] = prompt_int("Port to listen on", default="5555", low=1, high=65535)
    config["host"] = prompt("Interface to bind", default="127.0.0.1")

    print_section("Replies")
    print("Replies are pushed to the callback port named in each request,")
    print("on this host.")
    print()
    config["reply_host"] = prompt("Reply host", default="localhost")

    print_section("Logging")
    config["log_file"] = prompt("Log file path", default="game_bridge.log")
    config["log_level"] = prompt("Log level", default="INFO").upper()
    protocol_mode = prompt(
        "Show only request/reply lines on the terminal? (y/n)",
        default="n", required=False,
    )
    config["protocol_mode"] = protocol_mode.lower().startswith("y")

    return config


def write_config_json(config: dict, path: Path) -> None:
    """Write config.json file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
    print(f"  Created: {path}")


def write_env_file(config: dict, path: Path) -> None:
    """Write .env file."""
    env_mapping = {
        "port": "BRIDGE_PORT",
        "host": "BRIDGE_HOST",
        "reply_host": "BRIDGE_REPLY_HOST",
        "log_file": "BRIDGE_LOG_FILE",
        "log_level": "BRIDGE_LOG_LEVEL",
        "protocol_mode": "BRIDGE_PROTOCOL_MODE",
    }

    lines = []
    for config_key, env_key in env_mapping.items():
        if config_key in config and config[config_key] not in ("", None):
            value = config[config_key]
            if isinstance(value, bool):
                value = "true" if value else "false"
            lines.append(f"{env_key}={value}")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    print(f"  Created: {path}")


def main():
    """Main entry point."""
    print_header()

    try:
        config = get_config_values()
    except KeyboardInterrupt:
        print("\n\nSetup cancelled.")
        return 1

    print_section("Generating Files")

    base_path = Path.cwd()
    write_config_json(config, base_path / "config.json")
    write_env_file(config, base_path / ".env")

    print()
    print("=" * 60)
    print("  Setup Complete!")
    print("=" * 60)
    print()
    print("Next steps:")
    print()
    print("  1. Run the demo session to test your setup:")
    print("     python -m game_bridge --demo --config config.json")
    print()
    print("  2. Try a request from another terminal:")
    print("     python examples/agent.py")
    print()
    print("  3. Once working, wrap your own game in a GameSession subclass")
    print()
    return 0


if __name__ == "__main__":
    exit(main())
