"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import dataclasses
import logging
import random
from collections.abc import Callable, Sequence

from backend.config import GameConfig
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, Phase
from backend.errors import InvalidBoard
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

RenderListener = Callable[[Sequence[int]], None]
WinListener = Callable[[], None]


class GamePlay:
    """Orchestrates a single game session.

    A new session starts on the solved board; call :meth:`shuffle` to
    scramble it.  Frontends subscribe with :meth:`add_render_listener`
    (called with the cell list after every accepted move) and
    :meth:`add_win_listener` (called once, on the move that solves the
    board).
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.size = self.config.grid_size
        self.rng = rng or random.Random(self.config.seed)
        self.state = GameState(GameGenerator.solved(self.size))
        self._render_listeners: list[RenderListener] = []
        self._win_listeners: list[WinListener] = []

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Create a game session from an existing board."""
        if not board.is_permutation():
            raise InvalidBoard("Board cells are not a permutation.")
        if not Solver.is_solvable(board):
            raise InvalidBoard("Board cannot be solved by legal moves.")
        config = config or GameConfig()
        if config.grid_size != board.size:
            config = dataclasses.replace(config, grid_size=board.size)
        obj = cls(config, rng)
        obj.state = GameState(board)
        return obj

    # -- listeners ------------------------------------------------------------

    def add_render_listener(self, listener: RenderListener) -> None:
        self._render_listeners.append(listener)

    def add_win_listener(self, listener: WinListener) -> None:
        self._win_listeners.append(listener)

    # -- board operations -----------------------------------------------------

    def neighbors(self, index: int) -> list[int]:
        return self.state.board.neighbors(index)

    def shuffle(self, moves: int | None = None) -> list[int]:
        """Scramble the board and return the trail of empty-cell positions."""
        if moves is None:
            moves = self.config.shuffle_moves
        return GameGenerator.shuffle(self.state.board, moves, self.rng)

    def apply_move(self, tile_value: int) -> bool:
        """Slide the tile with value *tile_value* into the empty cell.

        Returns True if the tile was adjacent to the empty cell and the
        move was applied.  Once the board has been solved every call is
        rejected.
        """
        if self.state.solved:
            return False

        board = self.state.board
        if not 0 <= tile_value < board.empty_value:
            logger.debug("Rejected move: %r is not a movable tile", tile_value)
            return False

        tile_index = board.index_of(tile_value)
        empty_index = board.empty_index
        if tile_index not in board.neighbors(empty_index):
            logger.debug(
                "Rejected move: tile %d at cell %d is not next to the empty cell %d",
                tile_value, tile_index, empty_index,
            )
            return False

        board.swap(empty_index, tile_index)
        snapshot = tuple(board.cells)
        for listener in self._render_listeners:
            listener(snapshot)

        if self.is_win():
            self.state.advance(Phase.WON)
            logger.info("Puzzle solved")
            for win_listener in self._win_listeners:
                win_listener()
        return True

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent empty cell.

        E.g. ``Direction.UP`` moves the tile **below** the empty cell
        upward.  Returns True if the move was valid.
        """
        board = self.state.board
        er, ec = board.coords(board.empty_index)

        # The offset points to the tile that will slide into the empty cell.
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = er + dr, ec + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return False

        return self.apply_move(board.cells[tr * board.size + tc])

    # -- queries --------------------------------------------------------------

    def is_win(self) -> bool:
        return self.state.board.is_solved()

    @property
    def is_won(self) -> bool:
        return self.state.solved
