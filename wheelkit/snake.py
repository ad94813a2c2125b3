"""Game logic of a grid snake with an automatic breadth-first pilot."""

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum

from .dequeue import Dequeue

WIDTH, HEIGHT = 800, 450
UNIT = 10
N_WIDTH, N_HEIGHT = WIDTH // UNIT, HEIGHT // UNIT

NORMAL_FPS = 10
FASTFORWARD_FPS = 0

_FREE, _TARGET, _HEAD, _SEEN = 0, -1, 1, 2


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def opposite(self):
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Key(Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    S = "s"
    A = "a"
    D = "d"
    K = "k"
    J = "j"
    H = "h"
    L = "l"
    R = "r"
    M = "m"
    P = "p"
    F = "f"
    B = "b"


_STEERING = {
    Key.UP: Direction.UP,
    Key.W: Direction.UP,
    Key.K: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.S: Direction.DOWN,
    Key.J: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.A: Direction.LEFT,
    Key.H: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.D: Direction.RIGHT,
    Key.L: Direction.RIGHT,
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int


def position_out_of_screen(position):
    """Whether a block at ``position`` would stick out of the playing field."""
    return (
        position.x < 0
        or position.x + UNIT > WIDTH
        or position.y < 0
        or position.y + UNIT > HEIGHT
    )


class Snake:
    """A snake of blocks, head first, moving one unit per step."""

    def __init__(self):
        self.direction = Direction.RIGHT
        cx, cy = N_WIDTH // 2 * UNIT, N_HEIGHT // 2 * UNIT
        self._body = Dequeue([Position(cx + UNIT, cy), Position(cx, cy)])

    @property
    def head(self):
        return self._body.first()

    def next_position(self):
        """Where the head goes on the next step."""
        head = self.head
        if self.direction == Direction.UP:
            return Position(head.x, head.y - UNIT)
        if self.direction == Direction.DOWN:
            return Position(head.x, head.y + UNIT)
        if self.direction == Direction.LEFT:
            return Position(head.x - UNIT, head.y)
        return Position(head.x + UNIT, head.y)

    def move(self):
        """Advance one step without growing."""
        position = self.next_position()
        self._body.pop_back()
        self._body.push_front(position)

    def turn(self, direction):
        """Turn, unless ``direction`` points straight back."""
        direction = Direction(direction)
        if self.direction != direction.opposite:
            self.direction = direction

    def grow(self, position):
        """Add a new head at ``position``."""
        self._body.push_front(position)

    def contains(self, position):
        return any(block == position for block in self._body)

    def __len__(self):
        return len(self._body)

    def __iter__(self):
        return iter(self._body)


def random_fruit(snake, rng=None):
    """Pick a random grid cell not covered by ``snake``."""
    rng = rng if rng is not None else random
    while True:
        fruit = Position(
            UNIT * rng.randint(0, N_WIDTH - 1), UNIT * rng.randint(0, N_HEIGHT - 1)
        )
        if not snake.contains(fruit):
            return fruit


class SnakeGame:
    """State of one game: the snake, the fruit and the player's switches.

    ``played`` records the sounds the game asks for ("eat", "die").
    """

    def __init__(self, rng=None):
        self._rng = rng
        self.snake = Snake()
        self.fruit = random_fruit(self.snake, self._rng)
        self.is_over = False
        self.automatic = False
        self.paused = False
        self.fastforward = False
        self.fps = NORMAL_FPS
        self.music_playing = False
        self.played = []

    def score(self):
        return len(self.snake) - 2

    def reset(self):
        self.is_over = False
        self.snake = Snake()
        self.fruit = random_fruit(self.snake, self._rng)
        self.paused = False

    def _grid(self):
        grid = [[_FREE] * N_HEIGHT for _ in range(N_WIDTH)]
        grid[self.fruit.x // UNIT][self.fruit.y // UNIT] = _TARGET
        blocks = iter(self.snake)
        head = next(blocks)
        grid[head.x // UNIT][head.y // UNIT] = _HEAD
        for block in blocks:
            grid[block.x // UNIT][block.y // UNIT] = _TARGET
        return grid

    def search_path(self):
        """Choose a direction for the head along a shortest path to the fruit.

        Without such a path, head for a free cell the search did not reach,
        or keep the current direction.
        """
        grid = self._grid()
        queue = deque([(self.fruit.x // UNIT, self.fruit.y // UNIT)])

        while queue:
            x, y = queue.popleft()
            # each neighbour paired with the direction the head would take from it
            neighbours = (
                (x > 0, x - 1, y, Direction.RIGHT),
                (x + 1 < N_WIDTH, x + 1, y, Direction.LEFT),
                (y > 0, x, y - 1, Direction.DOWN),
                (y + 1 < N_HEIGHT, x, y + 1, Direction.UP),
            )
            for inside, nx, ny, direction in neighbours:
                if not inside:
                    continue
                if grid[nx][ny] == _HEAD:
                    return direction
                if grid[nx][ny] == _FREE:
                    grid[nx][ny] = _SEEN
                    queue.append((nx, ny))

        head = self.snake.head
        x, y = head.x // UNIT, head.y // UNIT
        if x > 0 and grid[x - 1][y] == _FREE:
            return Direction.LEFT
        if x + 1 < N_WIDTH and grid[x + 1][y] == _FREE:
            return Direction.RIGHT
        if y > 0 and grid[x][y - 1] == _FREE:
            return Direction.UP
        if y + 1 < N_HEIGHT and grid[x][y + 1] == _FREE:
            return Direction.DOWN
        return self.snake.direction

    def handle_key(self, key):
        """React to a key press; steering keys only count in manual mode."""
        if key is None:
            return
        key = Key(key)
        if key in _STEERING:
            if not self.automatic:
                self.snake.turn(_STEERING[key])
        elif key is Key.R:
            self.reset()
        elif key is Key.M:
            self.automatic = not self.automatic
        elif key is Key.P:
            self.paused = not self.paused
        elif key is Key.F:
            self.fastforward = not self.fastforward
            self.fps = FASTFORWARD_FPS if self.fastforward else NORMAL_FPS
        elif key is Key.B:
            self.music_playing = not self.music_playing

    def update(self, key=None):
        """Process an optional key press, then advance the game one step."""
        was_automatic = self.automatic
        self.handle_key(key)

        if self.is_over or self.paused:
            return
        if was_automatic:
            self.snake.direction = self.search_path()

        position = self.snake.next_position()
        if self.snake.contains(position) or position_out_of_screen(position):
            self.played.append("die")
            self.is_over = True
            return

        if position == self.fruit:
            self.played.append("eat")
            self.snake.grow(position)
            if len(self.snake) == N_WIDTH * N_HEIGHT:
                self.is_over = True
            else:
                self.fruit = random_fruit(self.snake, self._rng)
        else:
            self.snake.move()