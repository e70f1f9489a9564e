# Area: Session
"""
game_bridge.session — The game session the bridge drives
=========================================================

The bridge never implements game rules itself. It talks to a live game
through a ``GameSession``: subclass it, wrap your rules engine and player
interface, and hand an instance to the runner.

The bridge calls these methods when the matching request arrives. All
calls are made from a single session-owner thread, one at a time.

    from game_bridge import GameSession, BridgeRunner

    class MySession(GameSession): ...  # Implement the abstract methods
    BridgeRunner(config={"port": 5555}, session=MySession()).run()
"""

from abc import ABC, abstractmethod
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Move(Protocol):
    """A legal move as returned by :meth:`GameSession.current_legal_moves`."""

    def describe_with_consequences(self) -> str:
        """Human-readable action text, including consequences."""
        ...


class GameSession(ABC):
    """
    Abstract base class for the game session behind the bridge.

    Query methods must not mutate the session. Only :meth:`apply_move`
    and the player-interface hooks at the bottom have side effects.
    """

    # ──────────────────────────────────────────────────────────────
    # Moves and turn
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def current_legal_moves(self) -> Sequence[Move]:
        """
        Return the moves the session currently permits, in a stable order.

        The index of a move in this sequence is the index callers use
        in ``move <index>`` requests.
        """
        ...

    @abstractmethod
    def apply_move(self, move: Move) -> None:
        """
        Apply ``move`` to the session.

        ``move`` is always an object taken from the most recent
        :meth:`current_legal_moves` call made for the same request.
        """
        ...

    @abstractmethod
    def current_mover_seat(self) -> int:
        """Return the seat index of the player to move."""
        ...

    # ──────────────────────────────────────────────────────────────
    # Text renderings
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def game_name(self) -> str:
        ...

    @abstractmethod
    def game_description_raw(self) -> str:
        """Game description exactly as written by its author."""
        ...

    @abstractmethod
    def game_description_expanded(self) -> str:
        """Game description with defines and options expanded."""
        ...

    @abstractmethod
    def player_count_description(self) -> str:
        """E.g. ``"two players: (P1 and P2)"``."""
        ...

    @abstractmethod
    def rules_description(self) -> str:
        ...

    @abstractmethod
    def game_summary(self) -> str:
        """Full summary: description, mode, equipment and meta rules."""
        ...

    @abstractmethod
    def equipment_description(self) -> str:
        ...

    @abstractmethod
    def per_container_description(self) -> str:
        """One block per container (board, hands, decks)."""
        ...

    @abstractmethod
    def board_representation(self) -> str:
        """Current board, including where the pieces are."""
        ...

    @abstractmethod
    def state_dump(self) -> str:
        """Raw dump of the session state, for debugging."""
        ...

    @abstractmethod
    def has_session_started(self) -> bool:
        """True once at least one move has been played."""
        ...

    # ──────────────────────────────────────────────────────────────
    # Player interface hooks
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def restart_session(self) -> None:
        """Restart the game from its initial position."""
        ...

    @abstractmethod
    def post_status_text(self, text: str) -> None:
        """Append ``text`` to the player interface's status panel."""
        ...

    def set_temporary_message(self, text: str) -> None:
        """
        Show ``text`` briefly in the player interface.

        Optional: sessions without a transient message area can keep this
        default, which posts to the status panel instead.
        """
        self.post_status_text(text)
