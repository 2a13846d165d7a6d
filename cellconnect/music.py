"""Background music."""

from __future__ import annotations

import logging

import pygame

log = logging.getLogger(__name__)


def load_music(path: str):
    """Load a music track; return its path, or None if it cannot be loaded."""
    try:
        pygame.mixer.music.load(path)
    except (pygame.error, OSError) as exc:
        log.error("Could not load music! %s", exc)
        return None
    return path


def play(music) -> None:
    """Loop the loaded track unless it is already playing."""
    if music is None:
        return
    if not pygame.mixer.music.get_busy():
        pygame.mixer.music.play(-1)
    else:
        pygame.mixer.music.unpause()