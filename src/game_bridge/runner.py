"""
game_bridge.runner — Main entry point
======================================

The BridgeRunner wires a GameSession to the command server: it sets up
logging, validates the config, puts the session behind a SessionOwner
and starts listening. ``run()`` blocks until Ctrl+C; ``start()`` and
``stop()`` let a larger application embed the bridge next to its own UI.
"""

from __future__ import annotations
import logging
import signal
import threading
from typing import Any, Dict

from ._bridge.session_owner import SessionOwner
from ._runner_config import validate_config, with_defaults
from ._shared import enable_protocol_mode, setup_logging
from .command_server import CommandServer
from .reply_dispatcher import ReplyDispatcher
from .session import GameSession

logger = logging.getLogger("game_bridge")


class BridgeRunner:
    """
    Runs the bridge for one game session.

    Usage
    -----
        from game_bridge import BridgeRunner, DemoSession

        config = {
            "port": 5555,                  # port the bridge listens on
            "host": "127.0.0.1",
            "reply_host": "localhost",     # where callback ports live
            "log_file": "game_bridge.log",
        }

        runner = BridgeRunner(config=config, session=DemoSession())
        runner.run()
    """

    def __init__(self, config: Dict[str, Any], session: GameSession):
        self.config = with_defaults(config)
        self.session = session
        self._stopped = threading.Event()

        setup_logging(
            log_file_path=self.config["log_file"],
            level=self.config["log_level"],
        )

        validate_config(self.config)

        self.owner = SessionOwner(session)
        self.dispatcher = ReplyDispatcher(
            host=self.config["reply_host"],
            connect_timeout=self.config["reply_connect_timeout_seconds"],
        )
        self.server = CommandServer(
            owner=self.owner,
            port=self.config["port"],
            host=self.config["host"],
            dispatcher=self.dispatcher,
            read_timeout=self.config["read_timeout_seconds"],
        )

        if self.config["protocol_mode"]:
            enable_protocol_mode()

    # ── Main loop ─────────────────────────────────────────────

    def start(self) -> None:
        """Start listening on a background thread and return."""
        self._stopped.clear()
        self.server.start()
        self._log_startup()

    def stop(self) -> None:
        """Stop the server and release the session owner thread."""
        self.server.stop()
        self.owner.shutdown()
        self._stopped.set()
        logger.info("Bridge runner stopped.")

    def run(self) -> None:
        """
        Start the bridge and block until interrupted (Ctrl+C).
        """
        def _signal_handler(sig, frame):
            logger.info("Shutting down gracefully...")
            self._stopped.set()
        signal.signal(signal.SIGINT, _signal_handler)

        self.start()
        try:
            while not self._stopped.wait(timeout=1.0):
                if not self.server.is_running:
                    logger.error("Command server exited unexpectedly")
                    break
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()

    def _log_startup(self) -> None:
        logger.info("=" * 60)
        logger.info("  Game Bridge — Starting")
        logger.info(f"  Game:    {self.owner.call(lambda s: s.game_name())}")
        logger.info(f"  Listen:  {self.config['host']}:{self.server.port}")
        logger.info(f"  Replies: {self.config['reply_host']}:<callback port>")
        logger.info("=" * 60)
