"""
agent.py — A random agent that plays through the bridge
========================================================

Start the bridge first:

    python -m game_bridge --demo --port 5555

then, in another terminal:

    python agent.py

The agent asks who is to move, lists the legal moves, picks one at
random and plays it, until no legal moves remain.
"""

import random
import sys

from game_bridge import ReplyListener, format_request, send_request

BRIDGE_PORT = 5555
TIMEOUT = 5.0


def ask(listener: ReplyListener, action: str, argument: str = "") -> str:
    send_request(BRIDGE_PORT, format_request(listener.port, action, argument))
    return listener.wait_for_reply(timeout=TIMEOUT)


def main() -> int:
    with ReplyListener() as listener:
        print(f"Game: {ask(listener, 'info', 'game_name')}")

        while True:
            legal = ask(listener, "legal").splitlines()[1:]
            if not legal:
                break
            mover = ask(listener, "player")
            choice = random.randrange(len(legal))
            print(f"P{mover} plays {legal[choice]}")
            if ask(listener, "move", str(choice)) != "move success":
                print("Move rejected", file=sys.stderr)
                return 1

        print(ask(listener, "info", "board"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
