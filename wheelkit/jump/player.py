"""The player character of the platform game."""

from dataclasses import dataclass, field, replace
from enum import Enum

from ..core import clamp
from .entity import Entity, Rect, Vec2

WIDTH = 450
HEIGHT = 600
FPS = 60
SPRITE_FPS = 10
FPS_K = FPS // SPRITE_FPS

MAX_SPEED_Y = 50.0
MAX_SPEED_X = 50.0

PLAYER_TEXTURE = "assets/brackeys_platformer_assets/sprites/knight.png"

_ANIMATION_FRAMES = 16


class PlayerState(Enum):
    IDLE = 0
    RUN = 1
    ROLL = 2
    HIT = 3
    DEATH = 4

    def __str__(self):
        return self.name.lower()


@dataclass
class Player:
    """The player's sprite, velocity and animation state."""

    entity: Entity
    v: Vec2 = field(default_factory=Vec2)
    frame_counter: int = 0
    state: PlayerState = PlayerState.IDLE

    def update_frame(self):
        """Advance the sprite animation by one frame."""
        self.frame_counter = (self.frame_counter + 1) % _ANIMATION_FRAMES
        n = self.frame_counter
        source = self.entity.source
        if self.state is PlayerState.IDLE:
            source.y = 9
            source.x = 8 + n % 4 * 32
        elif self.state is PlayerState.RUN:
            source.y = 74 + n // 8 * 32
            source.x = 8 + n % 8 * 32
        elif self.state is PlayerState.ROLL:
            source.y = 169
            source.x = 8 + n % 8 * 32
        elif self.state is PlayerState.HIT:
            source.y = 201
            source.x = 8 + n % 4 * 32
        elif self.state is PlayerState.DEATH:
            source.y = 233
            source.x = 8 + n % 4 * 32

    def move(self, v):
        """Move by ``v``, keeping the player horizontally inside the screen."""
        dest, hitbox = self.entity.dest, self.entity.hitbox
        x = clamp(dest.x + v.x, 0, WIDTH - hitbox.width)
        hitbox.x += x - dest.x
        dest.x = x
        dest.y += v.y
        hitbox.y += v.y

    def update(self):
        """Apply gravity, then move by the current velocity."""
        self.v.y = min(self.v.y + 1, MAX_SPEED_Y)
        self.move(self.v)


def new_player(x, y):
    """Create an idle player with its top-left corner at (x, y)."""
    source = Rect(9, 9, 14, 19)
    dest = Rect(x, y, source.width * 2, source.height * 2)
    entity = Entity(source=source, dest=dest, hitbox=replace(dest), texture=PLAYER_TEXTURE)
    return Player(entity=entity)