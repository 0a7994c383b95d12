# src/tests/obstacle_tests.py
"""
Obstacle construction, wall layout and collision checks.

Usage (from repo root):
  python -m src.tests.obstacle_tests
"""

from __future__ import annotations
import random
import sys

from src.game.obstacle import Obstacle
from src.game.player import Player
from src.game.terminal import Layer
from src.game.config import SCREEN_HEIGHT, SHEET_WALL


def test_gap_drawn_from_injected_rng():
    rng = random.Random(1234)
    gaps = [Obstacle.new(80, 0, rng).gap_y for _ in range(500)]
    assert all(10 <= g < 40 for g in gaps), "gap_y outside [10, 40)"
    assert min(gaps) == 10 and max(gaps) == 39, "Expected the full range over 500 draws"

    a = [Obstacle.new(80, 0, random.Random(7)).gap_y for _ in range(3)]
    b = [Obstacle.new(80, 0, random.Random(7)).gap_y for _ in range(3)]
    assert a == b, "Same seed must give the same gaps"


def test_size_shrinks_with_score():
    rng = random.Random(0)
    for score, size in ((0, 20), (5, 15), (12, 8), (13, 8), (40, 8)):
        ob = Obstacle.new(100, score, rng)
        assert ob.size == size, f"score={score}: size {ob.size} != {size}"
        assert ob.x == 100


def test_gap_bounds():
    ob = Obstacle(x=22, gap_y=25, size=8)
    assert (ob.upper_bound, ob.lower_bound) == (21, 29)
    ob = Obstacle(x=22, gap_y=25, size=15)
    assert (ob.upper_bound, ob.lower_bound) == (18, 32)


def test_hit_inside_gap_is_safe():
    ob = Obstacle(x=22, gap_y=25, size=8)
    assert not ob.hit_obstacle(Player(x=20, y=25.0)), "hit box [23,27] sits inside [21,29]"


def test_hit_above_gap():
    ob = Obstacle(x=22, gap_y=25, size=8)
    assert ob.hit_obstacle(Player(x=20, y=10.0)), "hit box top 8 is above the gap"


def test_hit_below_gap():
    ob = Obstacle(x=22, gap_y=25, size=8)
    assert ob.hit_obstacle(Player(x=20, y=40.0)), "hit box bottom 42 is below the gap"


def test_hit_box_edges_touching_gap_are_safe():
    ob = Obstacle(x=22, gap_y=25, size=8)
    # hit box [21,25] and [25,29]: touching the gap edges is not a hit
    assert not ob.hit_obstacle(Player(x=20, y=23.0))
    assert not ob.hit_obstacle(Player(x=20, y=27.0))
    assert ob.hit_obstacle(Player(x=20, y=22.0))
    assert ob.hit_obstacle(Player(x=20, y=28.0))


def test_hit_requires_horizontal_overlap():
    ob = Obstacle(x=22, gap_y=25, size=8)
    assert not ob.hit_obstacle(Player(x=22, y=10.0)), "left edge must be strictly before the wall"
    assert ob.hit_obstacle(Player(x=21, y=10.0))
    assert ob.hit_obstacle(Player(x=14, y=10.0)), "right edge reaching the wall counts"
    assert not ob.hit_obstacle(Player(x=13, y=10.0))


def test_wall_rows_leave_gap_open():
    for gap_y in range(10, 40):
        for size in (8, 11, 20):
            ob = Obstacle(x=0, gap_y=gap_y, size=size)
            rows = ob.wall_rows()
            upper = [y for y in rows if y < ob.upper_bound]
            lower = [y for y in rows if y >= ob.lower_bound]
            assert len(upper) + len(lower) == len(rows), "A block starts inside the gap"
            assert all(y + 2 <= ob.upper_bound for y in upper), "Upper block overlaps the gap"
            if ob.upper_bound > 0:
                assert upper[0] <= 0 and upper[-1] + 2 == ob.upper_bound, "Upper wall must reach the gap edge"
            else:
                assert upper == [], "Gap touching the top leaves no upper wall"
            assert lower[0] == ob.lower_bound and lower[-1] + 2 >= SCREEN_HEIGHT


def test_render_scrolls_with_player():
    layer = Layer()
    ob = Obstacle(x=22, gap_y=25, size=8)
    ob.render(layer, player_x=20)
    ys = [sp.rect.y for sp in layer.sprites]
    assert ys == list(range(-1, 21, 2)) + list(range(29, 50, 2)), f"Unexpected wall rows {ys}"
    assert all(sp.rect.x == 2 and sp.rect.size == (2, 2) for sp in layer.sprites)
    assert all(sp.sheet == SHEET_WALL for sp in layer.sprites)

    ob.render(layer, player_x=21)
    assert all(sp.rect.x == 1 for sp in layer.sprites), "render clears and redraws one cell closer"
    assert len(ys) == len(layer.sprites)


def main():
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_")]
    try:
        for t in tests:
            t()
            print(f"✓ {t.__name__}")
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    print("🎉 All obstacle tests passed")


if __name__ == "__main__":
    main()
