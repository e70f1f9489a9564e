"""
main.py — Run the bridge in front of your own game
===================================================

This is the entry point. Wrap your game in a GameSession, configure
the port, and run.

    python main.py

The runner will:
  1. Listen for requests on the configured port
  2. Run each command against YOUR session, one at a time
  3. Push every reply to the callback port named in the request

Press Ctrl+C to stop.
"""

from game_bridge import BridgeRunner, DemoSession

# ── Configuration ──
config = {
    # Port external agents send requests to
    "port": 5555,
    "host": "127.0.0.1",

    # Replies are pushed to <reply_host>:<callback port>
    "reply_host": "localhost",

    # Logging
    "log_file": "game_bridge.log",
    "log_level": "INFO",
}

# ── Pick your session and run ──
# Replace DemoSession() with your own GameSession subclass.
runner = BridgeRunner(config=config, session=DemoSession())
runner.run()
