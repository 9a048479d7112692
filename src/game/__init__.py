"""Game logic: board, pieces, randomizer, timing, scoring, and game orchestrator."""

from src.game.pieces import PIECE_TYPES, PIECE_BY_NAME, PIECE_BY_ID, create_piece, rotate
from src.game.board import Board
from src.game.randomizer import SevenBag, PieceQueue
from src.game.player import ActivePiece
from src.game.timing import ShiftRepeat
from src.game.scoring import Scoring
from src.game.config import GameConfig
from src.game.tetris import TetrisGame, InputEvent, Phase

__all__ = [
    "PIECE_TYPES",
    "PIECE_BY_NAME",
    "PIECE_BY_ID",
    "create_piece",
    "rotate",
    "Board",
    "SevenBag",
    "PieceQueue",
    "ActivePiece",
    "ShiftRepeat",
    "Scoring",
    "GameConfig",
    "TetrisGame",
    "InputEvent",
    "Phase",
]
