"""Snake game on a square board, driven one move at a time."""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum

from snakeai.point import Point

BOARD_SIZE = 18
STEPS_UNTIL_DEATH = 2 * BOARD_SIZE + 1  # enough to cross the board for the apple

POINTS_PER_APPLE = 300
POINTS_PER_STEP = 5

MAX_APPLES_EATEN = 3
MAX_SCORE = 10000

INITIAL_SNAKE = (Point(9, 12), Point(9, 11), Point(9, 10), Point(9, 9))


class Direction(Enum):
    """Absolute heading on the board; values match the network's output indices."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    def step(self, point: Point) -> Point:
        """The cell next to ``point`` in this direction."""
        if self is Direction.NORTH:
            return point.north()
        if self is Direction.SOUTH:
            return point.south()
        if self is Direction.EAST:
            return point.east()
        return point.west()


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class RelativeDirection(Enum):
    """Heading relative to where the snake is currently facing."""

    LEFT = 0
    INFRONT = 1
    RIGHT = 2


_RELATIVE = {
    (Direction.NORTH, RelativeDirection.INFRONT): Direction.NORTH,
    (Direction.NORTH, RelativeDirection.LEFT): Direction.WEST,
    (Direction.NORTH, RelativeDirection.RIGHT): Direction.EAST,
    (Direction.SOUTH, RelativeDirection.INFRONT): Direction.SOUTH,
    (Direction.SOUTH, RelativeDirection.LEFT): Direction.EAST,
    (Direction.SOUTH, RelativeDirection.RIGHT): Direction.WEST,
    (Direction.EAST, RelativeDirection.INFRONT): Direction.EAST,
    (Direction.EAST, RelativeDirection.LEFT): Direction.NORTH,
    (Direction.EAST, RelativeDirection.RIGHT): Direction.SOUTH,
    (Direction.WEST, RelativeDirection.INFRONT): Direction.WEST,
    (Direction.WEST, RelativeDirection.LEFT): Direction.SOUTH,
    (Direction.WEST, RelativeDirection.RIGHT): Direction.NORTH,
}


def relative_to_absolute(direction: Direction, relative: RelativeDirection) -> Direction:
    """The absolute direction reached by turning ``relative`` from ``direction``."""
    return _RELATIVE[(direction, relative)]


def new_fruit(snake: Iterable[Point], rng: random.Random | None = None) -> Point:
    """A random board cell not occupied by the snake."""
    rng = rng or random.Random()
    occupied = set(snake)
    while True:
        x = rng.randrange(BOARD_SIZE)
        y = rng.randrange(BOARD_SIZE)
        point = Point(x, y)
        if point not in occupied:
            return point


class SnakeGame:
    """State of one game; the last element of ``snake`` is the head."""

    def __init__(
        self,
        snake: Iterable[Point] | None = None,
        direction: Direction = Direction.NORTH,
        apple_position: Point | None = None,
        steps_until_death: int = STEPS_UNTIL_DEATH,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.snake: list[Point] = list(INITIAL_SNAKE if snake is None else snake)
        self.direction = direction
        self.apple_position = (
            new_fruit(self.snake, self.rng) if apple_position is None else apple_position
        )
        self.steps_until_death = steps_until_death
        self.apples_eaten = 0
        self.alive = True
        self.total_steps = 0
        self.score = 0
        self.killed_by_wall = False
        self.killed_by_myself = False
        self.killed_by_hunger = False

    @property
    def head(self) -> Point:
        """Position of the snake's head."""
        return self.snake[-1]

    def render(self) -> str:
        """Text picture of the board: walls X, head H, body S, apple A."""
        border = "X" * (BOARD_SIZE + 2)
        head = self.head
        body = set(self.snake)
        lines = [border]
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                if head.x == row and head.y == col:
                    cells.append("H")
                elif Point(row, col) in body:
                    cells.append("S")
                elif self.apple_position.x == row and self.apple_position.y == col:
                    cells.append("A")
                else:
                    cells.append(" ")
            lines.append("X" + "".join(cells) + "X")
        lines.append(border)
        return "\n".join(lines) + "\n"

    def is_inside_board(self, point: Point) -> bool:
        """Whether ``point`` lies on the board."""
        return 0 <= point.x < BOARD_SIZE and 0 <= point.y < BOARD_SIZE

    def move(self, new_direction: Direction) -> None:
        """Advance the snake one cell in ``new_direction`` and update the game state."""
        if new_direction is self.direction.opposite:
            self.alive = False
            self.killed_by_myself = True
            return

        self.direction = new_direction
        next_head = new_direction.step(self.head)

        got_apple = False
        if next_head == self.apple_position:
            self.score += POINTS_PER_APPLE
            self.apples_eaten += 1
            self.steps_until_death = STEPS_UNTIL_DEATH + 1
            got_apple = True
        elif next_head.x in (-1, BOARD_SIZE) or next_head.y in (-1, BOARD_SIZE):
            # Wall deaths end the game without setting any cause flag.
            self.alive = False
            return
        elif next_head in self.snake:
            self.alive = False
            self.killed_by_myself = True
            return

        self.snake.append(next_head)
        if got_apple:
            self.apple_position = new_fruit(self.snake, self.rng)
        else:
            self.snake.pop(0)

        self.steps_until_death -= 1
        if self.steps_until_death == 0:
            self.alive = False
            self.killed_by_hunger = True
            return

        self.total_steps += 1
        self.score += POINTS_PER_STEP

        if self.apples_eaten == MAX_APPLES_EATEN:
            self.alive = False
            self.score = MAX_SCORE
            print("bingo!")