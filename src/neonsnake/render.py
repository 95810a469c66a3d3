from __future__ import annotations

import math
from collections import namedtuple

import pygame

from . import config
from .state import Intent, Snapshot, Status

Layout = namedtuple("Layout", ["board", "buttons"])
# board: pygame.Rect, the square playfield at the top of the window
# buttons: dict[Intent, pygame.Rect], on-screen d-pad below the board

BUTTON_LABELS = {Intent.UP: "^", Intent.DOWN: "v", Intent.LEFT: "<", Intent.RIGHT: ">"}


def compute_layout(width: int, height: int) -> Layout:
    side = max(1, min(width, height - config.CONTROLS_HEIGHT))
    board = pygame.Rect((width - side) // 2, 0, side, side)

    b, g = config.BUTTON_SIZE, config.BUTTON_GAP
    cx = width // 2
    cy = side + (height - side) // 2
    buttons = {
        Intent.UP: pygame.Rect(cx - b // 2, cy - b // 2 - b - g, b, b),
        Intent.DOWN: pygame.Rect(cx - b // 2, cy + b // 2 + g, b, b),
        Intent.LEFT: pygame.Rect(cx - b // 2 - b - g, cy - b // 2, b, b),
        Intent.RIGHT: pygame.Rect(cx + b // 2 + g, cy - b // 2, b, b),
    }
    return Layout(board=board, buttons=buttons)


def cell_rect(board: pygame.Rect, grid_size: int, x: int, y: int, pad: int = 0) -> pygame.Rect:
    cell = board.width / grid_size
    left = board.x + int(x * cell)
    top = board.y + int(y * cell)
    size = max(1, int(cell) - 2 * pad)
    return pygame.Rect(left + pad, top + pad, size, size)


def draw_grid(screen: pygame.Surface, board: pygame.Rect, grid_size: int) -> None:
    cell = board.width / grid_size
    for i in range(grid_size + 1):
        pos = int(i * cell)
        pygame.draw.line(screen, config.GRID_LINE, (board.x + pos, board.y), (board.x + pos, board.bottom))
        pygame.draw.line(screen, config.GRID_LINE, (board.x, board.y + pos), (board.right, board.y + pos))


def draw_snake(screen: pygame.Surface, board: pygame.Rect, snapshot: Snapshot) -> None:
    glow = pygame.Surface(board.size, pygame.SRCALPHA)
    for x, y in snapshot.snake:
        halo = cell_rect(board, snapshot.grid_size, x, y).move(-board.x, -board.y).inflate(6, 6)
        pygame.draw.rect(glow, (*config.SNAKE, config.GLOW_ALPHA), halo, border_radius=8)
    screen.blit(glow, board.topleft)

    for i, (x, y) in enumerate(snapshot.snake):
        rect = cell_rect(board, snapshot.grid_size, x, y, pad=2)
        pygame.draw.rect(screen, config.SNAKE, rect, border_radius=6)
        if i == 0:
            pygame.draw.rect(screen, config.SNAKE_HEAD, rect.inflate(-4, -4), border_radius=4)


def lerp_color(a, b, t: float) -> tuple[int, int, int]:
    return tuple(round(a[i] + (b[i] - a[i]) * t) for i in range(3))


def pulse_radius(radius: int, now: int) -> int:
    return round(radius * 1.5 + math.sin(now / 200) * radius / 4)


def draw_food(screen: pygame.Surface, board: pygame.Rect, snapshot: Snapshot, now: int = 0) -> None:
    if snapshot.food is None:
        return
    rect = cell_rect(board, snapshot.grid_size, *snapshot.food)
    radius = max(2, rect.width // 3)

    # Translucent halo and pulsing ring around the orb.
    size = radius * 4 + 4
    halo = pygame.Surface((size, size), pygame.SRCALPHA)
    center = (size // 2, size // 2)
    pygame.draw.circle(halo, (*config.FOOD, config.GLOW_ALPHA), center, radius * 2)
    pygame.draw.circle(halo, (*config.FOOD, config.PULSE_ALPHA), center, pulse_radius(radius, now), width=2)
    screen.blit(halo, halo.get_rect(center=rect.center))

    # Radial gradient: white core fading out to the food colour.
    for r in range(radius, 0, -1):
        t = r / radius
        pygame.draw.circle(screen, lerp_color(config.FOOD_CORE, config.FOOD, min(1.0, t / 0.6)), rect.center, r)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, board: pygame.Rect, snapshot: Snapshot) -> None:
    text = font.render(f"Score {snapshot.score}   Best {snapshot.best_score}", True, config.TEXT)
    screen.blit(text, (board.x + 8, board.y + 6))


def draw_buttons(screen: pygame.Surface, font: pygame.font.Font, buttons: dict[Intent, pygame.Rect]) -> None:
    for intent, rect in buttons.items():
        pygame.draw.rect(screen, config.BUTTON, rect, border_radius=8)
        label = font.render(BUTTON_LABELS[intent], True, config.BUTTON_LABEL)
        screen.blit(label, label.get_rect(center=rect.center))


def overlay_lines(snapshot: Snapshot) -> list[str]:
    if snapshot.status is Status.NOT_STARTED:
        return ["NEON SNAKE", "Tap or press Space to start"]
    if snapshot.status is Status.GAME_OVER:
        return ["GAME OVER", f"Score {snapshot.score}", "Tap or press R to restart"]
    if snapshot.status is Status.WON:
        return ["YOU WIN", f"Score {snapshot.score}", "Tap or press R to play again"]
    return []


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, board: pygame.Rect, snapshot: Snapshot) -> None:
    lines = overlay_lines(snapshot)
    if not lines:
        return
    shade = pygame.Surface(board.size, pygame.SRCALPHA)
    shade.fill(config.OVERLAY)
    screen.blit(shade, board.topleft)

    line_h = font.get_linesize()
    top = board.centery - line_h * len(lines) // 2
    for i, line in enumerate(lines):
        text = font.render(line, True, config.TEXT)
        screen.blit(text, text.get_rect(center=(board.centerx, top + i * line_h + line_h // 2)))


def draw_state(
    screen: pygame.Surface, layout: Layout, font: pygame.font.Font, snapshot: Snapshot, now: int = 0
) -> None:
    screen.fill(config.BACKGROUND)

    draw_grid(screen, layout.board, snapshot.grid_size)
    draw_food(screen, layout.board, snapshot, now)
    draw_snake(screen, layout.board, snapshot)
    draw_hud(screen, font, layout.board, snapshot)
    draw_buttons(screen, font, layout.buttons)
    draw_overlay(screen, font, layout.board, snapshot)

    pygame.display.flip()
