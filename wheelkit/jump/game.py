"""State and rules of the platform jumping game."""

import math

from .entity import PlatformColor, PlatformSize, Vec2, collision_rect, new_platform
from .player import FPS_K, HEIGHT, WIDTH, PlayerState, new_player

JUMP_SPEED = -13
WALK_SPEED = 5

_U32 = (1 << 32) - 1


def _float_equals(x, y):
    return abs(x - y) <= 1e-6 * max(1.0, abs(x), abs(y))


def _time_to_retreat(distance, speed):
    """How long moving at ``speed`` takes to cover ``distance``."""
    if speed == 0:
        return math.nan if distance == 0 else math.inf
    return abs(distance / speed)


class JumpGame:
    """One game: the player, the platforms and a camera following the player.

    ``played`` records the sounds the game asks for ("jump").
    """

    def __init__(self):
        self.frame_counter = 0
        self.player = new_player(WIDTH // 2, 0)
        self.camera_offset = Vec2()
        self.played = []

        self.tiles = [
            new_platform(i * 64, HEIGHT - 18, size=PlatformSize.LARGE)
            for i in range((WIDTH + 63) // 64)
        ]
        self.tiles.append(new_platform(100, HEIGHT - 80, color=PlatformColor.BROWN))
        self.tiles.append(new_platform(200, HEIGHT - 80, color=PlatformColor.GOLD))
        self.tiles.append(
            new_platform(300, HEIGHT - 80, color=PlatformColor.BLUE, size=PlatformSize.LARGE)
        )

    def hit_and_correct(self):
        """Push the player out of every platform it overlaps.

        The player is moved back along its velocity until it leaves the
        platform on the side hit first; velocity on that axis is dropped.
        """
        player = self.player
        for tile in self.tiles:
            box = player.entity.hitbox
            other = tile.hitbox
            hit = collision_rect(box, other)
            if _float_equals(hit.width, 0):
                continue

            width, height = hit.width, hit.height
            if player.v.y > 0:
                height = box.y + box.height - other.y
            elif player.v.y < 0:
                height = other.y + other.height - box.y
            if player.v.x > 0:
                width = box.x + box.width - other.x
            elif player.v.x < 0:
                width = other.x + other.width - box.x

            dt_x = _time_to_retreat(width, player.v.x)
            dt_y = _time_to_retreat(height, player.v.y)
            dt = dt_x if dt_x < dt_y else dt_y

            player.move(player.v.scale(-dt))
            if dt_x < dt_y:
                player.v.x = 0
            else:
                # ties stop the fall, otherwise walking on flat ground can stick
                player.v.y = 0
            player.move(player.v.scale(dt))

    def input(self, pressed=(), down=(), released=()):
        """Apply keys: ``k`` jumps, ``a``/``d`` walk left/right while held."""
        pressed = {key.lower() for key in pressed}
        down = {key.lower() for key in down}
        released = {key.lower() for key in released}
        player = self.player
        source = player.entity.source

        if "k" in pressed:
            player.v.y = JUMP_SPEED
            player.state = PlayerState.RUN
            self.played.append("jump")
        if "a" in down:
            player.v.x = -WALK_SPEED
            player.state = PlayerState.RUN
            source.width = -abs(source.width)
        if "d" in down:
            player.v.x = WALK_SPEED
            player.state = PlayerState.RUN
            source.width = abs(source.width)
        if "a" in released or "d" in released:
            player.state = PlayerState.IDLE
            player.v.x = 0

    def update(self):
        """Advance the game by one frame."""
        self.frame_counter = (self.frame_counter + 1) & _U32
        if self.frame_counter % FPS_K == 0:
            self.player.update_frame()

        self.player.update()
        self.hit_and_correct()
        if _float_equals(self.player.v.x, 0):
            self.player.state = PlayerState.IDLE

        self.camera_offset.y = HEIGHT // 2 - self.player.entity.dest.y