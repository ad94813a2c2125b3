import pytest

from wheelkit.jump.entity import (
    Entity,
    PlatformColor,
    PlatformSize,
    Rect,
    Vec2,
    collision_rect,
    new_platform,
)


def test_vec2_scale_multiplies_both_components():
    v = Vec2(3.0, -4.0)
    assert v.scale(2) == Vec2(6.0, -8.0)
    assert v.scale(-1) == Vec2(-3.0, 4.0)
    assert v == Vec2(3.0, -4.0)


def test_collision_with_itself_is_itself():
    r = Rect(3, 4, 10, 20)
    assert collision_rect(r, r) == r


def test_collision_of_contained_rect_is_inner():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(10, 20, 30, 40)
    assert collision_rect(outer, inner) == inner
    assert collision_rect(inner, outer) == inner


def test_collision_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 7, 10, 10)
    assert collision_rect(a, b) == collision_rect(b, a)


def test_collision_lies_within_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 7, 10, 10)
    hit = collision_rect(a, b)
    for r in (a, b):
        assert hit.x >= r.x and hit.y >= r.y
        assert hit.x + hit.width <= r.x + r.width
        assert hit.y + hit.height <= r.y + r.height


@pytest.mark.parametrize(
    "b",
    [Rect(20, 0, 5, 5), Rect(10, 0, 5, 5), Rect(0, 10, 5, 5), Rect(-50, -50, 5, 5)],
)
def test_missing_or_touching_rects_have_empty_collision(b):
    hit = collision_rect(Rect(0, 0, 10, 10), b)
    assert hit.width == 0
    assert hit.height == 0


def test_platform_is_placed_at_position():
    p = new_platform(100, 520)
    assert p.dest.x == 100
    assert p.dest.y == 520


def test_platform_is_drawn_at_double_size():
    for size in PlatformSize:
        p = new_platform(0, 0, size=size)
        assert p.dest.width == 2 * p.source.width
        assert p.dest.height == 2 * p.source.height


def test_platform_hitbox_equals_dest_but_is_separate():
    p = new_platform(10, 20, PlatformColor.GOLD, PlatformSize.LARGE)
    assert p.hitbox == p.dest
    p.hitbox.x += 1
    assert p.hitbox != p.dest


def test_large_platform_is_twice_as_wide():
    small = new_platform(0, 0, size=PlatformSize.SMALL)
    large = new_platform(0, 0, size=PlatformSize.LARGE)
    assert large.dest.width == 2 * small.dest.width
    assert large.dest.height == small.dest.height
    assert large.source.x != small.source.x


def test_colors_use_distinct_sprite_rows():
    rows = {new_platform(0, 0, color).source.y for color in PlatformColor}
    assert len(rows) == len(PlatformColor)


def test_default_platform_is_green_and_small():
    assert new_platform(5, 6) == new_platform(5, 6, PlatformColor.GREEN, PlatformSize.SMALL)


def test_platform_accepts_enum_values():
    assert new_platform(0, 0, 2, 1) == new_platform(0, 0, PlatformColor.GOLD, PlatformSize.LARGE)


def test_unknown_color_is_rejected():
    with pytest.raises(ValueError):
        new_platform(0, 0, color=17)


def test_entity_keeps_its_parts():
    source, dest = Rect(1, 2, 3, 4), Rect(5, 6, 7, 8)
    e = Entity(source=source, dest=dest, hitbox=dest)
    assert e.source == source
    assert e.texture == ""