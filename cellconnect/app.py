"""Entry point: runs the game window and its event loop."""

from __future__ import annotations

import argparse

import pygame

from cellconnect import music
from cellconnect.game import Direction, Game, Outcome
from cellconnect.graphics import Graphics
from cellconnect.settings import (
    BACKGROUND,
    BACKGROUND_1,
    BACKGROUND_2,
    MUSIC,
    TIME_LIMIT,
    TIMER_FONT,
    TIMER_FONT_SIZE,
)
from cellconnect.timer import Countdown

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def key_to_direction(key: int) -> Direction | None:
    """Map an arrow key to a direction; other keys give None."""
    return _KEY_DIRECTIONS.get(key)


def _announce(graphics: Graphics, outcome: Outcome, game: Game, time_left: int) -> None:
    end_screen = graphics.load_texture(BACKGROUND_2)
    if outcome is Outcome.LOST:
        graphics.prepare_scene(end_screen)
        graphics.show_text("GAME OVER!", 220, 150, end_screen)
        graphics.present_scene()
        pygame.time.delay(2000)
    else:
        graphics.prepare_scene(end_screen)
        graphics.show_text(f"WIN - Score: {game.score(time_left)}", 190, 150, end_screen)


def main(argv=None) -> int:
    argparse.ArgumentParser(prog="cellconnect", description="Connect the cells.").parse_args(argv)

    graphics = Graphics()
    graphics.init()
    track = music.load_music(MUSIC)
    music.play(track)
    graphics.show_background(BACKGROUND_1)
    font = graphics.load_font(TIMER_FONT, TIMER_FONT_SIZE)
    countdown = Countdown(TIME_LIMIT)
    countdown.start()
    background = graphics.load_texture(BACKGROUND)

    game = Game()
    playing = True
    running = True
    clock = pygame.time.Clock()

    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif playing:
                    if event.type != pygame.KEYDOWN:
                        continue
                    direction = key_to_direction(event.key)
                    if direction is None:
                        continue
                    time_left = countdown.time_left()
                    outcome = game.move(direction, time_left)
                    if outcome is not Outcome.PLAYING:
                        _announce(graphics, outcome, game, time_left)
                        playing = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_1:
                        game.reset()
                        countdown.reset()
                        playing = True
                    elif event.key == pygame.K_0:
                        running = False

            if playing:
                graphics.prepare_scene(background)
                graphics.render_timer(font, countdown)
                graphics.draw_board(game.board)
                graphics.present_scene()
            clock.tick(60)
    finally:
        graphics.quit()
    return 0