"""Readings of a game's state that the steering network sees as input."""

from __future__ import annotations

import math

import numpy as np

from snakeai.snakegame import (
    BOARD_SIZE,
    Direction,
    RelativeDirection,
    SnakeGame,
    relative_to_absolute,
)

_SNAKE_PROXIMITY_SCORES = (1.0, 0.8, 0.5, 0.1)
_FRUIT_PROXIMITY_REWARDS = (1.0, 0.9, 0.7, 0.4, 0.0)

_UNIT_VECTORS = {
    Direction.NORTH: (0.0, -1.0),
    Direction.SOUTH: (0.0, 1.0),
    Direction.EAST: (1.0, 0.0),
    Direction.WEST: (-1.0, 0.0),
}

_SPAN = BOARD_SIZE - 1


def current_input(game: SnakeGame) -> np.ndarray:
    """The seven sensor readings as a column vector of shape (7, 1)."""
    readings = [
        distance_to_wall(game, RelativeDirection.INFRONT),
        distance_to_wall(game, RelativeDirection.LEFT),
        distance_to_wall(game, RelativeDirection.RIGHT),
        distance_to_snake(game, RelativeDirection.INFRONT),
        distance_to_snake(game, RelativeDirection.LEFT),
        distance_to_snake(game, RelativeDirection.RIGHT),
        apple_relative_direction(game),
    ]
    return np.array(readings, dtype=float).reshape(-1, 1)


def snake_in_direction(game: SnakeGame, direction: Direction) -> float:
    """A score for body found within four cells of the head; -1.0 if none."""
    body = set(game.snake)
    position = game.head
    for score in _SNAKE_PROXIMITY_SCORES:
        position = direction.step(position)
        if position in body:
            return score
    return -1.0


def apple_relative_direction(game: SnakeGame) -> float:
    """Signed angle from the heading to the apple, scaled to [-1, 1]."""
    dir_x, dir_y = _UNIT_VECTORS[game.direction]
    head = game.head
    dx = float(game.apple_position.x - head.x)
    dy = float(game.apple_position.y - head.y)
    norm = math.hypot(dx, dy)
    if norm == 0.0:
        return 0.0
    ux, uy = dx / norm, dy / norm
    dot = dir_x * ux + dir_y * uy
    cross = dir_x * uy - dir_y * ux
    return math.atan2(cross, dot) / math.pi


def distance_to_wall(game: SnakeGame, relative_direction: RelativeDirection) -> float:
    """Closeness of the wall in a relative direction: 1.0 adjacent, 0.0 far."""
    head = game.head
    target = relative_to_absolute(game.direction, relative_direction)
    if target is Direction.NORTH:
        distance = head.y
    elif target is Direction.SOUTH:
        distance = BOARD_SIZE - head.y
    elif target is Direction.WEST:
        distance = head.x
    else:
        distance = BOARD_SIZE - head.x
    normalized = 1.0 - distance / _SPAN
    return min(max(normalized, 0.0), 1.0)


def distance_to_snake(game: SnakeGame, relative_direction: RelativeDirection) -> float:
    """Closeness of the nearest body cell in a relative direction; 0.0 if none."""
    direction = relative_to_absolute(game.direction, relative_direction)
    body = set(game.snake)
    current = game.head
    for distance in range(1, BOARD_SIZE):
        current = direction.step(current)
        if not game.is_inside_board(current):
            break
        if current in body:
            return 1.0 - distance / _SPAN
    return 0.0


def distance_to_north_south_wall(game: SnakeGame) -> float:
    """The head's row mapped onto a [-1, 1] scale."""
    percentage = (game.head.y - 1.0) / (BOARD_SIZE - 1.0)
    return percentage * 2.0 - 1.0


def distance_to_west_east_wall(game: SnakeGame) -> float:
    """The head's column mapped onto a [-1, 1] scale."""
    percentage = (game.head.x - 1.0) / (BOARD_SIZE - 1.0)
    return percentage * 2.0 - 1.0


def distance_fruit_infront(game: SnakeGame) -> float:
    """A reward for the apple within five cells straight ahead; -1.0 if not."""
    position = game.head
    for reward in _FRUIT_PROXIMITY_REWARDS:
        position = game.direction.step(position)
        if position == game.apple_position:
            return reward
    return -1.0


def fruit_north_south_distance(game: SnakeGame) -> float:
    """Vertical offset from apple to head, scaled by the board span."""
    return (game.head.y - game.apple_position.y) / (BOARD_SIZE - 1.0)


def fruit_east_west_distance(game: SnakeGame) -> float:
    """Horizontal offset from apple to head, scaled by the board span."""
    return (game.head.x - game.apple_position.x) / (BOARD_SIZE - 1.0)