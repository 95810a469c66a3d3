from __future__ import annotations

import random

from .config import Settings
from .state import LEFT, Functor, State, Status, add_vectors, in_bounds, is_reversal


def initial_snake(grid_size: int) -> tuple[tuple[int, int], ...]:
    c = grid_size // 2
    return ((c, c), (c + 1, c), (c + 2, c))


def spawn_food(snake, grid_size: int, rng: random.Random):
    """Pick a random free cell by rejection sampling; None when the snake fills the grid."""
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        return None
    while True:
        pos = (rng.randrange(grid_size), rng.randrange(grid_size))
        if pos not in occupied:
            return pos


def new_game(settings: Settings, rng: random.Random) -> State:
    snake = initial_snake(settings.grid_size)
    return State(
        grid_size=settings.grid_size,
        snake=snake,
        direction=LEFT,
        pending_direction=LEFT,
        food=spawn_food(snake, settings.grid_size, rng),
        score=0,
        speed=settings.initial_speed,
        status=Status.RUNNING,
    )


def change_direction(state: State, requested: tuple[int, int]) -> State:
    # Compared against the committed direction, not the pending one.
    if state.status is not Status.RUNNING:
        return state
    if is_reversal(state.direction, requested):
        return state
    return state._replace(pending_direction=requested)


def commit_direction(state: State) -> State:
    return state._replace(direction=state.pending_direction)


def next_head(state: State) -> tuple[int, int]:
    return add_vectors(state.snake[0], state.direction)


def check_collisions(state: State) -> State:
    head = next_head(state)
    if not in_bounds(head, state.grid_size):
        return state._replace(status=Status.GAME_OVER)
    # The tail cell counts too: it has not moved out yet.
    if head in state.snake:
        return state._replace(status=Status.GAME_OVER)
    return state


def move_snake(state: State) -> State:
    new_head = next_head(state)
    if new_head == state.food:
        new_snake = (new_head,) + state.snake
    else:
        new_snake = (new_head,) + state.snake[:-1]
    return state._replace(snake=new_snake)


def update_food_and_score(state: State, settings: Settings, rng: random.Random) -> State:
    if state.snake[0] != state.food:
        return state
    food = spawn_food(state.snake, state.grid_size, rng)
    state = state._replace(
        score=state.score + settings.food_score,
        speed=max(settings.min_speed, state.speed - settings.speed_step),
        food=food,
    )
    if food is None:
        return state._replace(status=Status.WON)
    return state


def game_tick(state: State, settings: Settings, rng: random.Random) -> State:
    if state.status is not Status.RUNNING:
        return state
    return (
        Functor(state)
        .map(commit_direction)
        .map(check_collisions)
        .map(lambda s: move_snake(s) if s.status is Status.RUNNING else s)
        .map(lambda s: update_food_and_score(s, settings, rng) if s.status is Status.RUNNING else s)
        .get()
    )
