"""Geometry and sprite entities of the platform game."""

from dataclasses import dataclass, field, replace
from enum import Enum

PLATFORM_TEXTURE = "assets/brackeys_platformer_assets/sprites/platforms.png"


@dataclass
class Vec2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def scale(self, factor):
        """Return a new vector multiplied by ``factor``."""
        return Vec2(self.x * factor, self.y * factor)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class Entity:
    """A sprite: the part of its texture to draw, where to draw it and its hitbox."""

    source: Rect
    dest: Rect
    hitbox: Rect
    texture: str = field(default="")


class PlatformColor(Enum):
    GREEN = 0
    BROWN = 1
    GOLD = 2
    BLUE = 3


class PlatformSize(Enum):
    SMALL = 0
    LARGE = 1


_PLATFORM_ROWS = {
    PlatformColor.GREEN: 0,
    PlatformColor.BROWN: 16,
    PlatformColor.GOLD: 32,
    PlatformColor.BLUE: 48,
}


def _overlaps(a, b):
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def collision_rect(a, b):
    """Return the overlap of two rectangles, or an empty rectangle if they miss."""
    if not _overlaps(a, b):
        return Rect()
    left = max(a.x, b.x)
    top = max(a.y, b.y)
    right = min(a.x + a.width, b.x + b.width)
    bottom = min(a.y + a.height, b.y + b.height)
    return Rect(left, top, right - left, bottom - top)


def new_platform(x, y, color=PlatformColor.GREEN, size=PlatformSize.SMALL):
    """Create a platform drawn at twice its sprite size with its top-left at (x, y)."""
    color = PlatformColor(color)
    size = PlatformSize(size)
    source = Rect(0, _PLATFORM_ROWS[color], 16, 9)
    if size is PlatformSize.LARGE:
        source.x = 16
        source.width = 32
    dest = Rect(x, y, 2 * source.width, 2 * source.height)
    return Entity(source=source, dest=dest, hitbox=replace(dest), texture=PLATFORM_TEXTURE)