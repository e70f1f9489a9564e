# Area: Session
"""
game_bridge.demo_session — Demo Game Session
=============================================

A ready-to-use GameSession: tic-tac-toe on a 3x3 board for two seats.
It lets the bridge run without a real rules engine and gives external
agents something to practise against.

Usage:
    from game_bridge import DemoSession, BridgeRunner

    runner = BridgeRunner(config={"port": 5555}, session=DemoSession())
    runner.run()
"""

from dataclasses import dataclass
from typing import List, Optional

from .session import GameSession

BOARD_SIZE = 3
NUM_SITES = BOARD_SIZE * BOARD_SIZE
SEATS = (1, 2)
MARKS = {0: ".", 1: "X", 2: "O"}

LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

DESCRIPTION_RAW = """(game "Tic-Tac-Toe"
    (players 2)
    (equipment { (board (square 3)) (piece "Cross" P1) (piece "Disc" P2) })
    (rules
        (play (move Add (to (sites Empty))))
        (end (if (is Line 3) (result Mover Win)))
    )
)"""

DESCRIPTION_EXPANDED = """(game "Tic-Tac-Toe"
    (players 2)
    (equipment {
        (board (square 3))
        (piece "Cross" P1)
        (piece "Disc" P2)
    })
    (rules
        (play (move Add (to (sites Empty))))
        (end (if (is Line 3) (result Mover Win)))
    )
)"""

RULES = (
    "Players take turns placing a piece on an empty site. "
    "A player who makes a line of 3 wins. "
    "The game is a draw when the board is full."
)

EQUIPMENT = (
    "on a 3x3 square board with square tiling.\n"
    "Player 1 plays with Crosses (X). Player 2 plays with Discs (O)."
)


@dataclass(frozen=True)
class DemoMove:
    """Placement of ``seat``'s piece on ``site``."""

    seat: int
    site: int

    def describe_with_consequences(self) -> str:
        row, col = divmod(self.site, BOARD_SIZE)
        return (
            f"[Add {MARKS[self.seat]} to site {self.site} "
            f"(row {row}, col {col}), mover P{self.seat}]"
        )


class DemoSession(GameSession):
    """
    Tic-tac-toe session.

    Seat 1 moves first. Legal moves are the empty sites in ascending order;
    once a line is made or the board is full there are no legal moves left.
    Status panel posts and temporary messages are kept in
    ``status_messages`` and ``temporary_message`` so they can be inspected.
    """

    def __init__(self):
        self.status_messages: List[str] = []
        self.temporary_message: Optional[str] = None
        self.restart_count = 0
        self._reset()

    def _reset(self) -> None:
        self._sites = [0] * NUM_SITES
        self._mover = SEATS[0]
        self._history: List[DemoMove] = []
        self._winner: Optional[int] = None

    # ── Moves and turn ─────────────────────────────────────────

    def current_legal_moves(self) -> List[DemoMove]:
        if self.is_over():
            return []
        return [
            DemoMove(seat=self._mover, site=site)
            for site, who in enumerate(self._sites)
            if who == 0
        ]

    def apply_move(self, move: DemoMove) -> None:
        if self._sites[move.site] != 0 or move.seat != self._mover:
            raise ValueError(f"Illegal move {move}")
        self._sites[move.site] = move.seat
        self._history.append(move)
        if self._makes_line(move.seat):
            self._winner = move.seat
        self._mover = SEATS[1] if self._mover == SEATS[0] else SEATS[0]

    def current_mover_seat(self) -> int:
        return self._mover

    def is_over(self) -> bool:
        return self._winner is not None or all(self._sites)

    def _makes_line(self, seat: int) -> bool:
        return any(all(self._sites[i] == seat for i in line) for line in LINES)

    # ── Text renderings ────────────────────────────────────────

    def game_name(self) -> str:
        return "Tic-Tac-Toe"

    def game_description_raw(self) -> str:
        return DESCRIPTION_RAW

    def game_description_expanded(self) -> str:
        return DESCRIPTION_EXPANDED

    def player_count_description(self) -> str:
        return "two players: (P1 and P2)"

    def rules_description(self) -> str:
        return RULES

    def game_summary(self) -> str:
        return (
            f"{self.game_name()}: {RULES}"
            f"\nMode:\n\tAlternating"
            f"\nEquipment:\n\t{EQUIPMENT}"
            f"\nMetaRules:\n\tnone"
        )

    def equipment_description(self) -> str:
        return EQUIPMENT

    def per_container_description(self) -> str:
        return (
            "[3x3 square board with square tiling"
            f"\n\tnumSites: {NUM_SITES}"
            "\n\tlabel: Board"
            "\n\tindex: 0"
            "\n\trole: Shared"
            "]\n"
        )

    def board_representation(self) -> str:
        rows = []
        for row in range(BOARD_SIZE):
            cells = self._sites[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            rows.append(" ".join(MARKS[who] for who in cells))
        return "\n".join(rows)

    def state_dump(self) -> str:
        nxt = SEATS[1] if self._mover == SEATS[0] else SEATS[0]
        empty = [site for site, who in enumerate(self._sites) if who == 0]
        who = {site: seat for site, seat in enumerate(self._sites) if seat}
        return (
            f"mvr={self._mover}, nxt={nxt}, moves={len(self._history)}, "
            f"winner={self._winner or 0}.\n"
            f"Empty = {empty}\n"
            f"Who = {who}"
        )

    def has_session_started(self) -> bool:
        return bool(self._history)

    # ── Player interface hooks ─────────────────────────────────

    def restart_session(self) -> None:
        self._reset()
        self.restart_count += 1

    def post_status_text(self, text: str) -> None:
        self.status_messages.append(text)

    def set_temporary_message(self, text: str) -> None:
        self.temporary_message = text
