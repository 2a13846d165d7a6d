"""Window, drawing and text output."""

from __future__ import annotations

import logging

import pygame

from cellconnect.game import Cell
from cellconnect.settings import (
    BOARD_LEFT,
    BOARD_TOP,
    CELL_SIZE,
    MESSAGE_FONT,
    MESSAGE_FONT_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TEXT_COLOR,
    TIMER_POSITION,
    WINDOW_TITLE,
)

log = logging.getLogger(__name__)

_CELL_COLORS = {
    Cell.END: (253, 253, 150, 255),
    Cell.START: (119, 221, 119, 255),
    Cell.EMPTY: (255, 255, 255, 255),
    Cell.PATH: (174, 198, 207, 10),
}
_BORDER_COLOR = (0, 0, 0, 255)


def cell_color(value) -> tuple[int, int, int, int]:
    """Fill colour for a cell value; anything unknown is drawn as path."""
    try:
        return _CELL_COLORS[Cell(value)]
    except ValueError:
        return _CELL_COLORS[Cell.PATH]


def cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(
        col * CELL_SIZE + BOARD_LEFT, row * CELL_SIZE + BOARD_TOP, CELL_SIZE, CELL_SIZE
    )


def wait_until_key_pressed() -> None:
    """Block until a key is pressed or the window is closed."""
    while True:
        event = pygame.event.poll()
        if event.type in (pygame.KEYDOWN, pygame.QUIT):
            return
        pygame.time.delay(100)


class Graphics:
    """Owns the display surface and draws onto it."""

    def __init__(self):
        self.screen: pygame.Surface | None = None

    def init(self) -> None:
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            raise RuntimeError(f"could not create window: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.font.init()
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            log.error("could not initialise audio: %s", exc)

    def quit(self) -> None:
        pygame.mixer.quit()
        pygame.font.quit()
        pygame.quit()
        self.screen = None

    def prepare_scene(self, background) -> None:
        self.screen.fill((0, 0, 0))
        if background is not None:
            scaled = pygame.transform.scale(background, self.screen.get_size())
            self.screen.blit(scaled, (0, 0))

    def present_scene(self) -> None:
        pygame.display.flip()

    def load_texture(self, filename):
        log.info("Loading %s", filename)
        try:
            return pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            log.error("Load texture %s", exc)
            return None

    def render_texture(self, texture, x: int, y: int) -> None:
        self.screen.blit(texture, (x, y))

    def draw_board(self, board) -> None:
        for row, cells in enumerate(board):
            for col, value in enumerate(cells):
                rect = cell_rect(row, col)
                pygame.draw.rect(self.screen, cell_color(value), rect)
                pygame.draw.rect(self.screen, _BORDER_COLOR, rect, 1)

    def render_timer(self, font, countdown) -> None:
        if font is None:
            return
        surface = font.render(countdown.label(), False, TEXT_COLOR[:3])
        self.screen.blit(surface, TIMER_POSITION)

    def load_font(self, path, size: int):
        """Open a font file, falling back to the default font."""
        try:
            return pygame.font.Font(path, size)
        except (pygame.error, OSError) as exc:
            log.error("Load font %s", exc)
            return pygame.font.Font(None, size)

    def show_text(
        self,
        text: str,
        x: int,
        y: int,
        background,
        font_size: int = MESSAGE_FONT_SIZE,
        color=TEXT_COLOR,
    ) -> None:
        """Draw a message over the background and wait for a key."""
        self.prepare_scene(background)
        self.present_scene()
        font = self.load_font(MESSAGE_FONT, font_size)
        surface = font.render(text, False, tuple(color)[:3])
        self.render_texture(surface, x, y)
        self.present_scene()
        wait_until_key_pressed()

    def show_background(self, filename: str) -> None:
        """Show an image full screen until a key is pressed."""
        self.prepare_scene(self.load_texture(filename))
        self.present_scene()
        wait_until_key_pressed()