# Area: Shared
"""
game_bridge.cli — Command-line interface
=========================================

Provides CLI entry point for running the bridge.

Usage:
    python -m game_bridge --demo --port 5555        # Run with DemoSession
    python -m game_bridge --demo --config config.json

Settings are merged in this order (later wins):
    1. Built-in defaults
    2. JSON config file (--config)
    3. Environment variables (a .env file in the working directory is loaded)
    4. CLI flags
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from ._runner_config import ENV_MAPPINGS
from .demo_session import DemoSession
from .session import GameSession


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Game Bridge - drive a game session over local TCP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m game_bridge --demo --port 5555
  python -m game_bridge --demo --config config.json
  BRIDGE_PORT=5555 DEMO_MODE=true python -m game_bridge
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Serve the built-in tic-tac-toe DemoSession",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on for requests",
    )

    parser.add_argument(
        "--host",
        type=str,
        help="Interface to bind (default 127.0.0.1)",
    )

    parser.add_argument(
        "--protocol-mode",
        action="store_true",
        help="Show only request/reply lines on the terminal",
    )

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load config from file, then override from environment."""
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)

    load_dotenv(find_dotenv(usecwd=True))

    for env_key, (config_key, convert) in ENV_MAPPINGS.items():
        if env_key in os.environ:
            try:
                config[config_key] = convert(os.environ[env_key])
            except ValueError:
                print(f"Warning: ignoring invalid {env_key}={os.environ[env_key]!r}",
                      file=sys.stderr)

    return config


def apply_args(args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Let explicit CLI flags override file and environment settings."""
    if args.port is not None:
        config["port"] = args.port
    if args.host:
        config["host"] = args.host
    if args.protocol_mode:
        config["protocol_mode"] = True
    if args.demo:
        config["demo_mode"] = True
    return config


def get_session(config: Dict[str, Any]) -> GameSession:
    """Get the session to serve based on mode."""
    if config.get("demo_mode"):
        return DemoSession()

    # A real game session can only be supplied from Python code
    print("Error: Non-demo mode requires running from Python code.", file=sys.stderr)
    print("Use --demo or pass your own GameSession to BridgeRunner.", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = apply_args(args, load_config(args.config))

    if "port" not in config:
        print("Error: Missing required config: port", file=sys.stderr)
        print("Set via --port, config file or BRIDGE_PORT.", file=sys.stderr)
        return 1

    session = get_session(config)

    from .runner import BridgeRunner
    try:
        runner = BridgeRunner(config=config, session=session)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    runner.run()
    return 0
