"""Pygame GUI frontend.

Slices the puzzle image into tiles, slides a tile when it is clicked next
to the empty slot, and plays the reveal sequence once the picture is
complete: the missing last tile fades in, then a modal appears.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from pathlib import Path

import pygame

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.engine.reveal import PolledScheduler, RevealSequence
from backend.models.board import Direction
from backend.models.layout import Layout

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
MARGIN = 20
HEADER_H = 56
FOOTER_H = 28
MODAL_W, MODAL_H = 300, 150

_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, ((surf.get_width() - rendered.get_width()) // 2, y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self._rng = random.Random(config.seed)
        self._base_layout = Layout(
            size=config.grid_size,
            tile_size=config.tile_size,
            gap=config.gap_size,
        )

        pygame.init()
        extent = self._base_layout.extent
        self._surf = pygame.display.set_mode(
            (extent + 2 * MARGIN, extent + HEADER_H + FOOTER_H + MARGIN),
            pygame.RESIZABLE,
        )
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_big = pygame.font.SysFont("Helvetica", 30, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._image = self._load_image(config.image_path)
        self._layout = self._base_layout
        self._origin = (MARGIN, HEADER_H)
        # Indexed by tile value.
        self._tile_images: list[pygame.Surface | None] = []
        self._positions: list[int] = []

        self._relayout()
        self._new_session()

    # ── session ─────────────────────────────────────────────────────────────

    def _new_session(self) -> None:
        self._scheduler = PolledScheduler(lambda: pygame.time.get_ticks() / 1000)
        self._game = GamePlay(self._config, self._rng)
        self._sequence = RevealSequence(
            self._game.state,
            self._scheduler,
            self._config,
            on_modal=lambda: logger.info("Puzzle complete"),
        )
        self._positions = list(range(self._config.tile_count))
        self._game.add_render_listener(self._on_render)
        self._game.add_win_listener(self._sequence.start)
        self._game.shuffle()
        self._on_render(self._game.state.board.cells)

    def _on_render(self, cells: Sequence[int]) -> None:
        for index, value in enumerate(cells):
            self._positions[value] = index

    # ── image tile preparation ──────────────────────────────────────────────

    @staticmethod
    def _load_image(path: Path | None) -> pygame.Surface | None:
        if path is None:
            return None
        if not path.is_file():
            logger.warning("Puzzle image %s not found; using numbered tiles", path)
            return None
        return pygame.image.load(str(path)).convert()

    def _relayout(self) -> None:
        """Fit the grid to the current window and re-slice the image."""
        w, h = self._surf.get_size()
        room = min(w - 2 * MARGIN, h - HEADER_H - FOOTER_H - MARGIN)
        self._layout = self._base_layout.scaled_to(max(room, 1))
        self._origin = ((w - self._layout.extent) // 2, HEADER_H)
        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._layout.tile_size // 3), bold=True
        )
        self._slice_image()

    def _slice_image(self) -> None:
        layout = self._layout
        self._tile_images = [None] * self._config.tile_count
        if self._image is None:
            return
        # The image spans the whole grid, gaps included, so tile value v
        # shows the piece under cell v of the solved board.
        full = pygame.transform.smoothscale(
            self._image, (layout.extent, layout.extent)
        )
        for value in range(self._config.tile_count):
            x, y = layout.offset(value)
            self._tile_images[value] = full.subsurface(
                pygame.Rect(x, y, layout.tile_size, layout.tile_size)
            ).copy()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _tile_rect(self, index: int) -> pygame.Rect:
        x, y = self._layout.offset(index)
        ox, oy = self._origin
        t = self._layout.tile_size
        return pygame.Rect(ox + x, oy + y, t, t)

    def _tile_surface(self, value: int) -> pygame.Surface:
        image = self._tile_images[value]
        if image is not None:
            return image.copy()
        t = self._layout.tile_size
        surf = pygame.Surface((t, t), pygame.SRCALPHA)
        col = COL_GREEN if self._positions[value] == value else COL_BLUE
        pygame.draw.rect(surf, col, surf.get_rect(), border_radius=6)
        lbl = self._f_tile.render(str(value + 1), True, COL_BASE)
        surf.blit(
            lbl,
            ((t - lbl.get_width()) // 2, (t - lbl.get_height()) // 2),
        )
        return surf

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        size = self._config.grid_size
        _blit_center(
            self._surf,
            self._f_title.render(f"Sliding Puzzle  {size}×{size}", True, COL_TEXT),
            16,
        )

        ox, oy = self._origin
        extent = self._layout.extent
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(ox - 4, oy - 4, extent + 8, extent + 8),
            border_radius=10,
        )

        empty = self._config.tile_count - 1
        for value, index in enumerate(self._positions):
            rect = self._tile_rect(index)
            if value == empty:
                alpha = round(255 * self._sequence.opacity())
                if alpha == 0:
                    pygame.draw.rect(self._surf, COL_SURFACE0, rect, border_radius=6)
                    continue
                tile = self._tile_surface(value)
                tile.set_alpha(alpha)
                self._surf.blit(tile, rect.topleft)
            else:
                self._surf.blit(self._tile_surface(value), rect.topleft)

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile next to the gap     Arrows / WASD  slide"
                "     R  restart     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            oy + extent + 10,
        )

        if self._sequence.modal_visible:
            self._draw_modal()

    def _draw_modal(self) -> None:
        w, h = self._surf.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 150))
        self._surf.blit(shade, (0, 0))

        box = pygame.Rect((w - MODAL_W) // 2, (h - MODAL_H) // 2, MODAL_W, MODAL_H)
        pygame.draw.rect(self._surf, COL_SURFACE0, box, border_radius=12)
        pygame.draw.rect(self._surf, COL_GREEN, box, width=2, border_radius=12)
        _blit_center(
            self._surf,
            self._f_big.render("★  Complete  ★", True, COL_GREEN),
            box.y + 34,
        )
        _blit_center(
            self._surf,
            self._f_body.render("Press R to play again", True, COL_SUBTEXT),
            box.y + 92,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _on_click(self, pos: tuple[int, int]) -> None:
        ox, oy = self._origin
        index = self._layout.hit_test(pos[0] - ox, pos[1] - oy)
        if index is None:
            return
        value = self._game.state.board.cells[index]
        if value != self._config.tile_count - 1:
            self._game.apply_move(value)

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.VIDEORESIZE:
            self._relayout()
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            self._on_click(ev.pos)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEYS:
                self._game.move(_KEYS[ev.key])
            elif ev.key == pygame.K_r:
                self._scheduler.cancel_all()
                self._new_session()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if not self._handle(ev):
                    running = False
                    break

            self._scheduler.poll()
            self._draw()
            pygame.display.flip()
            self._clock.tick(60)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config)
    app.run_loop()
