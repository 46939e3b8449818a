"""
App shell: window and main loop for the reaction-diffusion background. One simulation
step per frame, timed by the frame clock; the dissolve timer runs on wall-clock ticks.
Session, UI and config are wired here.
"""

import logging

import pygame

from world import Session
from ui.grid_view import draw_session
import config

logger = logging.getLogger(__name__)


def open_window(width: int, height: int, title: str) -> pygame.Surface | None:
    """The host view. None (logged) when no display can be created."""
    try:
        pygame.init()
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    except pygame.error as e:
        logger.error("Could not open display %dx%d: %s", width, height, e)
        pygame.quit()
        return None
    pygame.display.set_caption(title)
    return screen


def pointer_state() -> tuple[int, int] | None:
    """Pointer position while the primary button is held, else None."""
    if not pygame.mouse.get_pressed()[0]:
        return None
    return pygame.mouse.get_pos()


def run(cfg: dict | None = None) -> bool:
    """Attach to a window and run frames until it is closed. False if the window never opened."""
    cfg = cfg or config.load_config()
    win = cfg["window"]
    sim = cfg["sim"]
    screen = open_window(win["width"], win["height"], win.get("title", "Tool Hub"))
    if screen is None:
        return False
    clock = pygame.time.Clock()
    width, height = screen.get_size()
    session = Session(width, height, params=sim, seed=sim.get("seed", -1), now_ms=pygame.time.get_ticks())
    logger.info(
        "Reaction-diffusion started: %dx%d cells, colour %s, seed %d",
        session.shape[0], session.shape[1], session.color, session.seed_used,
    )

    def render(s: Session) -> None:
        draw_session(screen, s)

    running = True
    while running:
        clock.tick(win.get("fps", 60))

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                if session.resize(event.w, event.h, pygame.time.get_ticks()):
                    logger.info("Viewport %dx%d: grid rebuilt at %dx%d", event.w, event.h, *session.shape)
        if not running:
            break

        session.frame(pygame.time.get_ticks(), pointer=pointer_state(), render=render)
        pygame.display.flip()

    pygame.quit()
    return True
