"""
Game orchestrator — timing state machine, hold, scoring, and spawning.

This module ties the Board, the 7-bag queue, and the ActivePiece into a
complete game. Time only moves through TetrisGame.advance(elapsed_ms), so
the simulation can be driven by a display loop or by tests alike.

Per-frame order inside advance():
  1. Game-over dwell (then full reset) or pause short-circuit.
  2. Gravity accumulation, one row per elapsed cell budget.
  3. Horizontal auto-repeat (DAS/ARR).
  4. Lock delay: time on the ground locks the piece once it reaches
     lock_delay_ms. Any successful move or rotation restarts it.
"""

from __future__ import annotations

import enum
import random
from typing import Callable

from src.game.board import Board
from src.game.config import GameConfig
from src.game.pieces import CCW, CW
from src.game.player import ActivePiece
from src.game.randomizer import PieceQueue, SevenBag
from src.game.scoring import Scoring
from src.game.timing import LEFT, RIGHT, ShiftRepeat


class InputEvent(enum.IntEnum):
    """Edge-triggered input events accepted by TetrisGame.handle()."""
    MOVE_LEFT_START = 0
    MOVE_LEFT_STOP = 1
    MOVE_RIGHT_START = 2
    MOVE_RIGHT_STOP = 3
    SOFT_DROP_START = 4
    SOFT_DROP_STOP = 5
    ROTATE_CW = 6
    ROTATE_CCW = 7
    HARD_DROP = 8
    HOLD = 9
    PAUSE_TOGGLE = 10
    RESET = 11


class Phase(enum.Enum):
    """Lifecycle of the active piece."""
    EMPTY = "empty"
    FALLING = "falling"
    LOCKING = "locking"
    GAME_OVER = "game_over"


# Audio cue names emitted through on_cue
CUE_MOVE = "move"
CUE_ROTATE = "rotate"
CUE_HOLD = "hold"
CUE_HARD_DROP = "hard-drop"
CUE_LOCK = "lock"
CUE_LINE_CLEAR = "line-clear"
CUE_GAME_OVER = "game-over"


class TetrisGame:
    """Full falling-block game with 7-bag queue, hold, lock delay, and DAS/ARR.

    Attributes:
        config: Tunables, re-read every frame.
        board: The playfield.
        bag: 7-bag randomizer.
        queue: Lookahead queue fed by the bag.
        scoring: Score, lines, level, and highscore.
        shift: Horizontal auto-repeat state.
        current: The falling piece, or None between lock and spawn.
        held: Kind in the hold slot, or None.
        hold_used: Whether hold was used since the last spawn.
        soft_drop: Whether the soft-drop input is held.
        paused: Whether the simulation is paused.
        game_over: Whether the game is in its game-over dwell.
        last_cleared: Rows cleared by the most recent lock.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        on_cue: Callable[[str], None] | None = None,
        highscore: int = 0,
        on_highscore: Callable[[int], None] | None = None,
    ) -> None:
        """Create a game and spawn its first piece.

        Args:
            config: Gameplay tunables (defaults if None).
            rng: Random source for the bag; seeded from config.seed if None.
            on_cue: Called with a cue name after each audible event.
            highscore: Best score loaded from persistence.
            on_highscore: Called with the new best whenever it is raised.
        """
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.board_width, self.config.board_height)
        self.bag = SevenBag(rng if rng is not None else random.Random(self.config.seed))
        self.queue = PieceQueue(self.bag, self.config.queue_size)
        self.scoring = Scoring(highscore=highscore)
        self.shift = ShiftRepeat()
        self.on_cue = on_cue
        self.on_highscore = on_highscore

        self.current: ActivePiece | None = None
        self.held: str | None = None
        self.hold_used: bool = False
        self.soft_drop: bool = False
        self.paused: bool = False
        self.game_over: bool = False
        self.last_cleared: int = 0

        # Internal timers
        self._gravity_ms: float = 0.0
        self._game_over_ms: float = 0.0

        self.reset()

    # ── Read-only views for the renderer ─────────────────────────────────

    @property
    def score(self) -> int:
        return self.scoring.score

    @property
    def lines(self) -> int:
        return self.scoring.lines

    @property
    def level(self) -> int:
        return self.scoring.level

    @property
    def highscore(self) -> int:
        return self.scoring.highscore

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.current is None:
            return Phase.EMPTY
        if self.current.grounded:
            return Phase.LOCKING
        return Phase.FALLING

    @property
    def fall_fraction(self) -> float:
        """Sub-cell progress toward the next gravity step, in [0, 1).

        Renderers add this to current.y for smooth motion. It is 0 while
        the piece rests on a surface.
        """
        piece = self.current
        if piece is None or self.game_over or not piece.can_fall(self.board):
            return 0.0
        cell_ms = self.config.cell_ms(self.level, self.soft_drop)
        return min(self._gravity_ms / cell_ms, 0.999)

    def ghost_y(self) -> int | None:
        """Return the row the current piece would land on if hard-dropped."""
        if self.current is None:
            return None
        return self.current.y + self.current.drop_distance(self.board)

    def preview(self) -> list[str]:
        """Return the upcoming piece kinds, front first."""
        return self.queue.peek()

    # ── Lifecycle ─────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a new game, keeping only the highscore.

        Clears the board, score, hold slot, queue, bag, and all timers,
        then spawns the first piece. A board whose configured size changed
        is rebuilt at the new size.
        """
        width, height = self.config.board_width, self.config.board_height
        if (self.board.width, self.board.height) != (width, height):
            self.board = Board(width, height)
        else:
            self.board.reset()
        self.scoring.reset()
        self.held = None
        self.hold_used = False
        self.bag.reset()
        self.queue.clear()
        self.queue.size = self.config.queue_size
        self.shift.clear()
        self.soft_drop = False
        self.paused = False
        self.game_over = False
        self.last_cleared = 0
        self.current = None
        self._gravity_ms = 0.0
        self._game_over_ms = 0.0
        self._spawn()

    def toggle_pause(self) -> bool:
        """Pause or resume; has no effect during game over.

        Returns:
            The new paused state.
        """
        if not self.game_over:
            self.paused = not self.paused
        return self.paused

    # ── Input ─────────────────────────────────────────────────────────────

    def handle(self, event: InputEvent) -> bool:
        """Apply one input event.

        Every event is ignored during game over; entering game over already
        clears the held direction and soft drop, so no key can stay stuck.
        While paused, only releases and pause/reset are accepted.

        Args:
            event: The input event.

        Returns:
            True if the event changed the game state.
        """
        if self.game_over:
            return False

        if event == InputEvent.MOVE_LEFT_STOP:
            self.shift.release(LEFT)
            return True
        if event == InputEvent.MOVE_RIGHT_STOP:
            self.shift.release(RIGHT)
            return True
        if event == InputEvent.SOFT_DROP_STOP:
            self.soft_drop = False
            return True
        if event == InputEvent.PAUSE_TOGGLE:
            self.toggle_pause()
            return True
        if event == InputEvent.RESET:
            self.reset()
            return True

        if self.paused:
            return False

        if event == InputEvent.MOVE_LEFT_START:
            self.shift.press(LEFT)
            return self.move(LEFT)
        if event == InputEvent.MOVE_RIGHT_START:
            self.shift.press(RIGHT)
            return self.move(RIGHT)
        if event == InputEvent.SOFT_DROP_START:
            self.soft_drop = True
            return True
        if event == InputEvent.ROTATE_CW:
            return self.rotate(CW)
        if event == InputEvent.ROTATE_CCW:
            return self.rotate(CCW)
        if event == InputEvent.HARD_DROP:
            return self.hard_drop()
        if event == InputEvent.HOLD:
            return self.hold()
        return False

    def move(self, direction: int) -> bool:
        """Shift the current piece one column; resets lock delay on success."""
        if not self._accepts_input():
            return False
        if not self.current.move(self.board, direction):
            return False
        self._emit(CUE_MOVE)
        return True

    def rotate(self, direction: int) -> bool:
        """Rotate the current piece with horizontal kicks; resets lock delay on success."""
        if not self._accepts_input():
            return False
        if not self.current.rotate(self.board, direction):
            return False
        self._emit(CUE_ROTATE)
        return True

    def hard_drop(self) -> bool:
        """Drop the current piece to its landing row and lock it immediately.

        Returns:
            True if a piece was dropped.
        """
        if not self._accepts_input():
            return False
        self.current.y += self.current.drop_distance(self.board)
        self._emit(CUE_HARD_DROP)
        self._lock()
        return True

    def hold(self) -> bool:
        """Swap the current piece with the hold slot, once per spawn.

        If the slot is empty, the current kind is stored and the next piece
        spawns normally (that spawn may hold again). Otherwise the kinds are
        swapped and the previously held kind re-enters at the spawn
        position without a collision check.

        Returns:
            True if hold was performed, False if it was not allowed.
        """
        if not self._accepts_input() or self.hold_used:
            return False

        kind = self.current.kind
        self._emit(CUE_HOLD)
        if self.held is None:
            self.held = kind
            self.current = None
            self._spawn()
        else:
            swapped_in = self.held
            self.held = kind
            self.current = ActivePiece.spawn(swapped_in, self.board.width)
            self._gravity_ms = 0.0
            self.hold_used = True
        return True

    # ── Timing ────────────────────────────────────────────────────────────

    def advance(self, elapsed_ms: float) -> None:
        """Run one frame of simulation.

        Args:
            elapsed_ms: Wall-clock time since the previous frame.
        """
        elapsed_ms = max(0.0, float(elapsed_ms))

        if self.game_over:
            self._game_over_ms += elapsed_ms
            if self._game_over_ms >= self.config.game_over_delay_ms:
                self.reset()
            return
        if self.paused or self.current is None:
            return

        config = self.config
        piece = self.current

        # Gravity
        self._gravity_ms += elapsed_ms
        cell_ms = config.cell_ms(self.level, self.soft_drop)
        fell = landed = False
        while self._gravity_ms >= cell_ms:
            if not piece.step_down(self.board):
                landed = True
                break
            self._gravity_ms -= cell_ms
            fell = True
        # A piece that dropped this frame has only rested since its last step.
        rest_ms = min(self._gravity_ms, elapsed_ms) if fell else elapsed_ms
        if landed:
            piece.grounded = True
            self._gravity_ms = 0.0

        # Horizontal auto-repeat
        steps = self.shift.update(elapsed_ms, config.das_ms, config.arr_ms, self.board.width)
        direction = 1 if steps > 0 else -1
        for _ in range(abs(steps)):
            if not self.move(direction):
                break

        # Lock delay
        if piece.can_fall(self.board):
            piece.grounded = False
            piece.lock_ms = 0.0
            return
        piece.grounded = True
        piece.lock_ms += rest_ms
        if piece.lock_ms >= config.lock_delay_ms:
            self._lock()

    # ── Internals ─────────────────────────────────────────────────────────

    def _accepts_input(self) -> bool:
        return self.current is not None and not self.paused and not self.game_over

    def _spawn(self) -> bool:
        """Spawn the next queued piece at the top center.

        Returns:
            True if the piece fits, False if it collides (game over).
        """
        kind = self.queue.take()
        self.current = ActivePiece.spawn(kind, self.board.width)
        self.hold_used = False
        self._gravity_ms = 0.0
        if self.current.collides(self.board):
            self._enter_game_over()
            return False
        return True

    def _lock(self) -> None:
        """Merge the current piece, sweep full rows, score, and spawn the next."""
        piece = self.current
        self.board.merge(piece.x, piece.y, piece.shape, piece.piece_id)
        self.current = None
        cleared = self.board.sweep()
        self.last_cleared = cleared
        self._emit(CUE_LOCK)

        new_best = False
        if cleared:
            self.scoring.award(cleared)
            self._emit(CUE_LINE_CLEAR)
            new_best = self.scoring.beat_highscore()

        self._spawn()
        # Notify only once the next piece is in play.
        if new_best and self.on_highscore is not None:
            self.on_highscore(self.scoring.highscore)

    def _enter_game_over(self) -> None:
        self.game_over = True
        self._game_over_ms = 0.0
        self.shift.clear()
        self.soft_drop = False
        self._emit(CUE_GAME_OVER)

    def _emit(self, cue: str) -> None:
        if self.on_cue is not None:
            self.on_cue(cue)
