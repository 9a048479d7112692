"""
Pygame renderer for the Tetris game.

Draws the board grid, active piece (with sub-cell interpolation), ghost
piece, the next-piece queue, held piece preview, and a sidebar with score /
level / lines / best information. An optional neon glow is drawn around
filled cells unless reduced effects are enabled.
"""

from __future__ import annotations

import numpy as np

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from src.game.tetris import TetrisGame
from src.game.pieces import PIECE_BY_NAME, PIECE_TYPES


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (0, 0, 0)
GRID_LINE_COLOR = (30, 30, 40)
BORDER_COLOR = (0, 200, 200)
TEXT_COLOR = (255, 255, 255)
GHOST_ALPHA = 70  # transparency for ghost piece (0-255)
GLOW_ALPHA = 60   # transparency for the neon halo
SIDEBAR_BG_COLOR = (10, 10, 16)
EMPTY_CELL_COLOR = (12, 12, 18)
OVERLAY_ALPHA = 150

# ── Piece ID -> RGB color mapping (built from PIECE_TYPES at import) ─────
PIECE_COLORS: dict[int, tuple[int, int, int]] = {
    piece["id"]: piece["color"] for piece in PIECE_TYPES
}


class TetrisRenderer:
    """Pygame-based renderer for a TetrisGame.

    The window is divided into:
      - Left: board area (cell_size * board width) x (cell_size * board height)
      - Right: sidebar with next queue, held piece, score, level, lines, best

    Attributes:
        game: Reference to the TetrisGame being rendered.
        cell_size: Pixel size of each grid cell.
        glow: Whether the neon halo is drawn around blocks.
        preview_count: Number of queued pieces shown in the sidebar.
        board_pixel_width: Pixel width of the board area.
        board_pixel_height: Pixel height of the board area.
        sidebar_width: Pixel width of the sidebar.
        window_width: Total window width.
        window_height: Total window height.
        screen: Pygame display surface (created on first draw).
    """

    # Sidebar dimensions
    SIDEBAR_WIDTH_CELLS: int = 7  # sidebar width in cell units

    def __init__(
        self,
        game: TetrisGame,
        cell_size: int = 30,
        glow: bool = True,
        preview_count: int = 3,
    ) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet — that happens on the first
        call to draw(), so headless code paths never open a window.

        Args:
            game: The TetrisGame instance to render.
            cell_size: Size of each grid cell in pixels.
            glow: Draw a neon halo around filled cells.
            preview_count: How many upcoming pieces to show.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.game = game
        self.cell_size = cell_size
        self.glow = glow
        self.preview_count = preview_count

        self.board_pixel_width = cell_size * game.board.width
        self.board_pixel_height = cell_size * game.board.height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def draw(self) -> None:
        """Draw the current game state and flip the display.

        Initializes Pygame on the first call.
        """
        if not self._initialized:
            self._init_pygame()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board()
        if not self.game.game_over:
            self._draw_ghost_piece()
            self._draw_current_piece()
        self._draw_sidebar()

        # Draw border around the board
        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )

        if self.game.game_over:
            self._draw_banner("GAME OVER", "Restarting...")
        elif self.game.paused:
            self._draw_banner("PAUSED", "Press P to resume")

        pygame.display.flip()

    def _init_pygame(self) -> None:
        """Initialize Pygame display and fonts.

        Called once on the first draw() invocation.
        """
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Neon Tetris")
        self._font = pygame.font.SysFont("monospace", 20)
        self._small_font = pygame.font.SysFont("monospace", 14)
        self._big_font = pygame.font.SysFont("monospace", 36, bold=True)
        self._initialized = True

    def _draw_block(self, x: float, y: float, color: tuple[int, int, int], size: int | None = None) -> None:
        """Draw one filled cell at pixel (x, y), with optional glow."""
        size = size or self.cell_size
        if self.glow:
            pad = size // 4
            halo = pygame.Surface((size + 2 * pad, size + 2 * pad), pygame.SRCALPHA)
            halo.fill((*color, GLOW_ALPHA))
            self.screen.blit(halo, (x - pad, y - pad))
        pygame.draw.rect(self.screen, color, (x, y, size, size))
        # Draw a slightly darker border for 3D effect
        darker = tuple(max(0, c - 40) for c in color)
        pygame.draw.rect(self.screen, darker, (x, y, size, size), 1)

    def _draw_board(self) -> None:
        """Draw the board grid with filled cells and grid lines."""
        grid = self.game.board.grid

        for row in range(self.game.board.height):
            for col in range(self.game.board.width):
                x = col * self.cell_size
                y = row * self.cell_size
                pygame.draw.rect(
                    self.screen, EMPTY_CELL_COLOR, (x, y, self.cell_size, self.cell_size)
                )
                # Grid lines
                pygame.draw.rect(
                    self.screen, GRID_LINE_COLOR, (x, y, self.cell_size, self.cell_size), 1
                )

        rows, cols = np.nonzero(grid)
        for row, col in zip(rows, cols):
            color = PIECE_COLORS.get(int(grid[row, col]), (128, 128, 128))
            self._draw_block(col * self.cell_size, row * self.cell_size, color)

    def _draw_current_piece(self) -> None:
        """Draw the active piece, offset by the gravity interpolation fraction."""
        piece = self.game.current
        if piece is None:
            return

        color = PIECE_BY_NAME[piece.kind]["color"]
        render_y = piece.y + self.game.fall_fraction

        self.screen.set_clip(pygame.Rect(0, 0, self.board_pixel_width, self.board_pixel_height))
        for col, row in piece.cells():
            y = row - piece.y + render_y
            if y <= -1:
                continue
            self._draw_block(col * self.cell_size, y * self.cell_size, color)
        self.screen.set_clip(None)

    def _draw_ghost_piece(self) -> None:
        """Draw the ghost piece (drop preview) with transparency.

        Shows where the current piece would land if hard-dropped.
        """
        piece = self.game.current
        ghost_y = self.game.ghost_y()
        if piece is None or ghost_y is None:
            return

        # Don't draw ghost if it's at the same position as the piece
        if ghost_y == piece.y:
            return

        color = PIECE_BY_NAME[piece.kind]["color"]
        ghost_surface = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        ghost_surface.fill((*color, GHOST_ALPHA))

        for col, row in piece.cells():
            board_row = row - piece.y + ghost_y
            if 0 <= board_row < self.game.board.height:
                x = col * self.cell_size
                y = board_row * self.cell_size
                self.screen.blit(ghost_surface, (x, y))
                # Draw outline
                pygame.draw.rect(
                    self.screen, color, (x, y, self.cell_size, self.cell_size), 1
                )

    def _draw_sidebar(self) -> None:
        """Draw the sidebar with next queue, held piece, score, level, lines, and best."""
        sidebar_x = self.board_pixel_width
        # Fill sidebar background
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )

        margin = 15
        x_left = sidebar_x + margin
        preview = self.game.preview()

        self._draw_piece_preview(preview[0] if preview else None, x_left, 15, "NEXT")

        # Smaller previews for the rest of the queue
        small_cell = self.cell_size // 3
        y = 15 + 25 + self.cell_size * 2 * 5 // 3 + 10
        for kind in preview[1:self.preview_count]:
            self._draw_shape(kind, x_left, y, small_cell)
            y += small_cell * 3

        hold_label = "HOLD (used)" if self.game.hold_used else "HOLD"
        self._draw_piece_preview(self.game.held, x_left, y + 10, hold_label)

        text_y = y + 10 + 25 + self.cell_size * 2 * 5 // 3 + 20
        for label, value in (
            ("SCORE", self.game.score),
            ("LEVEL", self.game.level),
            ("LINES", self.game.lines),
            ("BEST", self.game.highscore),
        ):
            self._draw_text(label, x_left, text_y)
            self._draw_text(str(value), x_left, text_y + 22)
            text_y += 55

    def _draw_piece_preview(
        self,
        kind: str | None,
        x_offset: int,
        y_offset: int,
        label: str,
    ) -> None:
        """Draw a small piece preview box (for next/held piece display).

        Args:
            kind: Piece letter to preview, or None (draws empty box).
            x_offset: Pixel X position for the preview box.
            y_offset: Pixel Y position for the preview box.
            label: Text label to display above the preview (e.g., 'NEXT').
        """
        preview_cell = self.cell_size * 2 // 3  # smaller cells for preview
        box_size = preview_cell * 5

        # Label
        self._draw_text(label, x_offset, y_offset)

        # Preview box background
        box_y = y_offset + 25
        pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, (x_offset, box_y, box_size, box_size))
        pygame.draw.rect(self.screen, BORDER_COLOR, (x_offset, box_y, box_size, box_size), 1)

        if kind is None:
            return

        shape = PIECE_BY_NAME[kind]["shape"]
        rows, cols = shape.shape
        offset_x = x_offset + (box_size - cols * preview_cell) // 2
        offset_y = box_y + (box_size - rows * preview_cell) // 2
        self._draw_shape(kind, offset_x, offset_y, preview_cell)

    def _draw_shape(self, kind: str, x_offset: int, y_offset: int, cell: int) -> None:
        piece = PIECE_BY_NAME[kind]
        rows, cols = np.nonzero(piece["shape"])
        for r, c in zip(rows, cols):
            px = x_offset + int(c) * cell
            py = y_offset + int(r) * cell
            pygame.draw.rect(self.screen, piece["color"], (px, py, cell, cell))
            darker = tuple(max(0, cv - 40) for cv in piece["color"])
            pygame.draw.rect(self.screen, darker, (px, py, cell, cell), 1)

    def _draw_banner(self, title: str, subtitle: str) -> None:
        """Dim the board and print a centered title with a hint below it."""
        overlay = pygame.Surface(
            (self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA
        )
        overlay.fill((0, 0, 0, OVERLAY_ALPHA))
        self.screen.blit(overlay, (0, 0))

        text_title = self._big_font.render(title, True, (255, 50, 50))
        text_sub = self._small_font.render(subtitle, True, TEXT_COLOR)
        cx = self.board_pixel_width // 2
        cy = self.board_pixel_height // 2
        self.screen.blit(text_title, (cx - text_title.get_width() // 2, cy - 30))
        self.screen.blit(text_sub, (cx - text_sub.get_width() // 2, cy + 15))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        """Render text onto the screen.

        Args:
            text: String to display.
            x: Pixel X position.
            y: Pixel Y position.
            color: RGB color tuple for the text.
        """
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
