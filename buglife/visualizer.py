"""A window that shows the board while it is tapped repeatedly."""

from __future__ import annotations

import pygame

from buglife.board import Board
from buglife.bugs import Bishop, Bug, Crawler, Hopper

WINDOW_SIZE = (1000, 1000)
GRID_SIZE = 80.0
MARGIN = 5.0
RADIUS = 10

BLACK = (0, 0, 0)
DEAD_RED = (150, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
MAGENTA = (255, 0, 255)
WHITE = (255, 255, 255)


def bug_colour(bug: Bug) -> tuple[int, int, int]:
    """Colour a bug is drawn in: dark red when dead, else by its kind."""
    if not bug.alive:
        return DEAD_RED
    if isinstance(bug, Crawler):
        return GREEN
    if isinstance(bug, Hopper):
        return BLUE
    if isinstance(bug, Bishop):
        return MAGENTA
    return WHITE


def screen_position(bug: Bug) -> tuple[float, float]:
    """Top-left corner, in pixels, of the circle drawn for ``bug``."""
    return (
        bug.position.x * GRID_SIZE + MARGIN,
        bug.position.y * GRID_SIZE + MARGIN,
    )


def run(board: Board, max_moves: int = 50, delay_ms: int = 800) -> int:
    """Show the board, tapping it every ``delay_ms`` until ``max_moves`` taps.

    Closing the window stops early. Returns the number of taps made.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Bug Simulation")
        clock = pygame.time.Clock()
        last_tap = pygame.time.get_ticks()
        moves = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            now = pygame.time.get_ticks()
            if now - last_tap >= delay_ms and moves < max_moves:
                board.tap()
                last_tap = now
                moves += 1
            if moves >= max_moves:
                running = False

            screen.fill(BLACK)
            for bug in board.bugs:
                left, top = screen_position(bug)
                pygame.draw.circle(
                    screen, bug_colour(bug), (left + RADIUS, top + RADIUS), RADIUS
                )
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return moves