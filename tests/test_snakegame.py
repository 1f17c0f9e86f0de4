import random

import pytest

from snakeai.point import Point
from snakeai.snakegame import (
    BOARD_SIZE,
    MAX_SCORE,
    POINTS_PER_APPLE,
    POINTS_PER_STEP,
    STEPS_UNTIL_DEATH,
    Direction,
    RelativeDirection,
    SnakeGame,
    new_fruit,
    relative_to_absolute,
)


def make_game(snake, direction, apple, steps=STEPS_UNTIL_DEATH):
    return SnakeGame(snake, direction, apple, steps, random.Random(7))


def test_new_fruit_not_on_snake():
    snake = [Point(9, 12), Point(9, 11), Point(9, 10), Point(9, 9)]
    for seed in range(50):
        fruit = new_fruit(snake, random.Random(seed))
        assert fruit not in snake
        assert 0 <= fruit.x < BOARD_SIZE
        assert 0 <= fruit.y < BOARD_SIZE


def test_new_fruit_finds_only_free_cell():
    snake = [Point(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]
    snake.remove(Point(4, 11))
    assert new_fruit(snake, random.Random(1)) == Point(4, 11)


def test_head_of_new_game():
    game = SnakeGame(rng=random.Random(3))
    assert game.head == Point(9, 9)
    assert game.direction is Direction.NORTH
    assert game.apple_position not in game.snake
    assert game.steps_until_death == STEPS_UNTIL_DEATH
    assert game.alive


def test_valid_movement_without_eating_apple():
    game = make_game([Point(5, 5)], Direction.NORTH, Point(0, 0))
    game.move(Direction.EAST)
    assert game.head == Point(6, 5)
    assert game.alive
    assert len(game.snake) == 1
    assert game.score == POINTS_PER_STEP
    assert game.total_steps == 1
    assert game.steps_until_death == STEPS_UNTIL_DEATH - 1


def test_snake_grows_when_eating_apple():
    game = make_game([Point(5, 5)], Direction.EAST, Point(6, 5))
    game.move(Direction.EAST)
    assert game.head == Point(6, 5)
    assert game.alive
    assert game.apples_eaten == 1
    assert game.score == POINTS_PER_APPLE + POINTS_PER_STEP
    assert len(game.snake) == 2
    assert game.apple_position not in game.snake
    assert game.steps_until_death == STEPS_UNTIL_DEATH


def test_direction_reversal_kills_snake():
    game = make_game([Point(5, 5)], Direction.NORTH, Point(0, 0))
    game.move(Direction.SOUTH)
    assert not game.alive
    assert game.killed_by_myself
    assert game.head == Point(5, 5)


def test_steps_until_death_kills_snake():
    game = make_game([Point(5, 5)], Direction.EAST, Point(0, 0), steps=1)
    game.move(Direction.EAST)
    assert not game.alive
    assert game.killed_by_hunger
    assert game.score == 0


def test_wall_collision_kills_snake():
    game = make_game([Point(5, 0)], Direction.NORTH, Point(0, 0))
    game.move(Direction.NORTH)
    assert not game.alive
    assert not game.killed_by_myself
    assert not game.killed_by_hunger
    assert game.snake == [Point(5, 0)]


@pytest.mark.parametrize(
    "start, direction",
    [
        (Point(BOARD_SIZE - 1, 5), Direction.EAST),
        (Point(0, 5), Direction.WEST),
        (Point(5, BOARD_SIZE - 1), Direction.SOUTH),
    ],
)
def test_other_walls_kill_snake(start, direction):
    game = make_game([start], direction, Point(9, 9))
    game.move(direction)
    assert not game.alive


def test_snake_dies_on_self_collision():
    snake = [Point(2, 2), Point(3, 2), Point(4, 2), Point(4, 3), Point(3, 3), Point(2, 3)]
    game = make_game(snake, Direction.EAST, Point(0, 0), steps=10)
    game.move(Direction.NORTH)
    assert not game.alive
    assert game.killed_by_myself


def test_eating_max_apples_ends_game(capsys):
    game = make_game([Point(5, 5)], Direction.EAST, Point(6, 5))
    game.apples_eaten = 2
    game.move(Direction.EAST)
    assert not game.alive
    assert game.score == MAX_SCORE
    assert "bingo!" in capsys.readouterr().out


@pytest.mark.parametrize(
    "direction, relative, expected",
    [
        (Direction.NORTH, RelativeDirection.INFRONT, Direction.NORTH),
        (Direction.NORTH, RelativeDirection.LEFT, Direction.WEST),
        (Direction.NORTH, RelativeDirection.RIGHT, Direction.EAST),
        (Direction.SOUTH, RelativeDirection.LEFT, Direction.EAST),
        (Direction.SOUTH, RelativeDirection.RIGHT, Direction.WEST),
        (Direction.EAST, RelativeDirection.LEFT, Direction.NORTH),
        (Direction.EAST, RelativeDirection.RIGHT, Direction.SOUTH),
        (Direction.WEST, RelativeDirection.LEFT, Direction.SOUTH),
        (Direction.WEST, RelativeDirection.RIGHT, Direction.NORTH),
    ],
)
def test_relative_to_absolute(direction, relative, expected):
    assert relative_to_absolute(direction, relative) is expected


def test_direction_from_index():
    assert Direction(0) is Direction.NORTH
    assert Direction(3) is Direction.WEST
    with pytest.raises(ValueError):
        Direction(4)


def test_is_inside_board():
    game = make_game([Point(5, 5)], Direction.NORTH, Point(0, 0))
    assert game.is_inside_board(Point(0, 0))
    assert game.is_inside_board(Point(BOARD_SIZE - 1, BOARD_SIZE - 1))
    assert not game.is_inside_board(Point(-1, 3))
    assert not game.is_inside_board(Point(3, BOARD_SIZE))


def test_render_layout():
    game = make_game([Point(1, 1), Point(1, 2)], Direction.SOUTH, Point(3, 4))
    lines = game.render().splitlines()
    assert len(lines) == BOARD_SIZE + 2
    assert lines[0] == "X" * (BOARD_SIZE + 2)
    assert lines[-1] == "X" * (BOARD_SIZE + 2)
    assert lines[2][3] == "H"
    assert lines[2][2] == "S"
    assert lines[4][5] == "A"
    assert all(line.startswith("X") and line.endswith("X") for line in lines)