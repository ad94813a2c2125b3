import random

import pytest

from wheelkit.snake import (
    HEIGHT,
    N_HEIGHT,
    N_WIDTH,
    UNIT,
    WIDTH,
    Direction,
    Key,
    Position,
    Snake,
    SnakeGame,
    position_out_of_screen,
    random_fruit,
)


class _SequenceRng:
    def __init__(self, values):
        self._values = iter(values)

    def randint(self, low, high):
        value = next(self._values)
        assert low <= value <= high
        return value


def _game():
    return SnakeGame(random.Random(7))


def test_new_snake_is_two_blocks_facing_right():
    snake = Snake()
    head, tail = list(snake)
    assert len(snake) == 2
    assert snake.direction == Direction.RIGHT
    assert head.x - tail.x == UNIT
    assert head.y == tail.y


@pytest.mark.parametrize(
    "direction, dx, dy",
    [
        (Direction.UP, 0, -UNIT),
        (Direction.DOWN, 0, UNIT),
        (Direction.RIGHT, UNIT, 0),
    ],
)
def test_next_position_follows_direction(direction, dx, dy):
    snake = Snake()
    head = snake.head
    snake.turn(direction)
    assert snake.next_position() == Position(head.x + dx, head.y + dy)


def test_turn_refuses_reversal():
    snake = Snake()
    snake.turn(Direction.LEFT)
    assert snake.direction == Direction.RIGHT
    snake.turn(Direction.UP)
    snake.turn(Direction.DOWN)
    assert snake.direction == Direction.UP


def test_move_keeps_length_and_advances_head():
    snake = Snake()
    old = list(snake)
    expected = snake.next_position()
    snake.move()
    assert len(snake) == len(old)
    assert list(snake) == [expected] + old[:-1]


def test_grow_adds_head():
    snake = Snake()
    target = snake.next_position()
    snake.grow(target)
    assert len(snake) == 3
    assert snake.head == target
    assert snake.contains(target)


@pytest.mark.parametrize(
    "position, outside",
    [
        (Position(0, 0), False),
        (Position(WIDTH - UNIT, HEIGHT - UNIT), False),
        (Position(-UNIT, 0), True),
        (Position(0, -UNIT), True),
        (Position(WIDTH, 0), True),
        (Position(0, HEIGHT), True),
    ],
)
def test_position_out_of_screen(position, outside):
    assert position_out_of_screen(position) is outside


def test_random_fruit_is_free_grid_cell():
    snake = Snake()
    rng = random.Random(3)
    for _ in range(50):
        fruit = random_fruit(snake, rng)
        assert not snake.contains(fruit)
        assert fruit.x % UNIT == 0 and fruit.y % UNIT == 0
        assert not position_out_of_screen(fruit)


def test_random_fruit_skips_snake_cells():
    snake = Snake()
    head = snake.head
    rng = _SequenceRng([head.x // UNIT, head.y // UNIT, 0, 0])
    assert random_fruit(snake, rng) == Position(0, 0)


def test_new_game_state():
    game = _game()
    assert game.score() == 0
    assert not game.snake.contains(game.fruit)
    assert not game.is_over and not game.paused and not game.automatic


def test_search_path_straight_ahead():
    game = _game()
    head = game.snake.head
    game.fruit = Position(head.x + 3 * UNIT, head.y)
    assert game.search_path() == Direction.RIGHT


def test_search_path_above():
    game = _game()
    head = game.snake.head
    game.fruit = Position(head.x, head.y - 3 * UNIT)
    assert game.search_path() == Direction.UP


def test_update_eats_fruit():
    game = _game()
    game.fruit = game.snake.next_position()
    game.update()
    assert len(game.snake) == 3
    assert game.score() == 1
    assert game.played == ["eat"]
    assert not game.snake.contains(game.fruit)


def test_update_collision_ends_game():
    game = _game()
    game.snake.direction = Direction.LEFT
    game.update()
    assert game.is_over
    assert game.played == ["die"]
    body = list(game.snake)
    game.update()
    assert list(game.snake) == body


def test_pause_stops_movement():
    game = _game()
    head = game.snake.head
    game.update(Key.P)
    assert game.paused
    assert game.snake.head == head
    game.update(Key.P)
    assert not game.paused
    assert game.snake.head != head


def test_reset_after_game_over():
    game = _game()
    game.snake.direction = Direction.LEFT
    game.update()
    assert game.is_over
    game.handle_key(Key.R)
    assert not game.is_over
    assert len(game.snake) == 2
    assert game.snake.direction == Direction.RIGHT


@pytest.mark.parametrize("key", [Key.UP, Key.W, Key.K])
def test_manual_keys_turn_up(key):
    game = _game()
    game.handle_key(key)
    assert game.snake.direction == Direction.UP


def test_steering_ignored_in_automatic_mode():
    game = _game()
    game.handle_key(Key.M)
    assert game.automatic
    game.handle_key(Key.UP)
    assert game.snake.direction == Direction.RIGHT
    game.handle_key(Key.M)
    assert not game.automatic


def test_automatic_mode_reaches_fruit():
    game = _game()
    game.handle_key(Key.M)
    head = game.snake.head
    game.fruit = Position(head.x, head.y + 2 * UNIT)
    for _ in range(3):
        game.update()
    assert game.score() == 1
    assert not game.is_over


def test_fastforward_toggles_fps():
    game = _game()
    game.handle_key(Key.F)
    assert game.fastforward and game.fps == 0
    game.handle_key(Key.F)
    assert not game.fastforward and game.fps == 10


def test_music_toggle():
    game = _game()
    before = game.music_playing
    game.handle_key(Key.B)
    assert game.music_playing is (not before)


def test_grid_corners_are_on_screen():
    last = Position((N_WIDTH - 1) * UNIT, (N_HEIGHT - 1) * UNIT)
    assert position_out_of_screen(last) is False
    assert position_out_of_screen(Position(N_WIDTH * UNIT, 0)) is True
    assert position_out_of_screen(Position(0, N_HEIGHT * UNIT)) is True