"""test_movement.py — All-or-nothing moves against the tile grid.

Cases use a 10×10 grid of 8 px tiles with a single solid tile at
(2, 2), i.e. pixels [16, 24) × [16, 24), and an 8×8 box.  With the
default 4 px margin all four corner samples of an 8×8 box meet at its
centre, so a move is blocked exactly when the centre lands in a wall.

Run: python test_movement.py
"""
from __future__ import annotations
import sys, traceback

from components import Animation, Collider, Facing, Player, Position
from core.camera import MapBounds
from core.collision import box_hits_solid, corner_points
from core.ecs import World
from core.tilegrid import Layer, Tile, TileGrid
from logic.animation import step_animation
from logic.movement import direction_delta, move_box, movement_system

passed = 0
failed = 0

def ok(label: str):
    global passed
    passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global failed
    failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


def _grid(*solid: tuple[int, int], deco: tuple[tuple[int, int], ...] = ()) -> TileGrid:
    layers = [
        Layer("deco", False, tuple(Tile(0, x, y) for x, y in deco)),
        Layer("walls", True, tuple(Tile(1, x, y) for x, y in solid)),
    ]
    return TileGrid(8, 10, 10, layers)


BOUNDS = MapBounds(80, 80)


def _dirs(**held: bool) -> dict[str, bool]:
    snapshot = {"up": False, "down": False, "left": False, "right": False}
    snapshot.update(held)
    return snapshot


# ════════════════════════════════════════════════════════════════════════
#  TEST 1 — Corner sampling
# ════════════════════════════════════════════════════════════════════════

def test_corner_points():
    print("\n=== Test 1: Corner sample points ===")
    pts = corner_points(10, 20, 16, 12, 4)
    assert pts == [(14, 24), (22, 24), (14, 28), (22, 28)], pts
    ok("Four inset corners in TL, TR, BL, BR order")

    pts = corner_points(0, 0, 8, 8, 4)
    assert set(pts) == {(4, 4)}
    ok("8×8 box with 4 px margin collapses onto its centre")

    grid = _grid((2, 2))
    # 16×16 box at (4, 4): bottom-right sample (16, 16) is in tile (2,2)
    assert box_hits_solid(grid, 4, 4, 16, 16, 4)
    # Same box with a bigger margin pulls that corner back out
    assert not box_hits_solid(grid, 4, 4, 16, 16, 5)
    ok("Margin decides whether a grazing corner counts")


# ════════════════════════════════════════════════════════════════════════
#  TEST 2 — Accept / reject
# ════════════════════════════════════════════════════════════════════════

def test_rejects_move_into_wall():
    print("\n=== Test 2: Moves into a wall are rejected ===")
    grid = _grid((2, 2))

    # From (24, 16) one tile left → candidate (16, 16), centre (20, 20) in (2,2)
    assert move_box(24, 16, -8, 0, 8, 8, grid, BOUNDS) == (24, 16)
    ok("Left into tile (2,2) → position unchanged")

    # Approaching from above one pixel at a time stops at the boundary
    x, y = 16.0, 0.0
    for _ in range(40):
        x, y = move_box(x, y, 0, 1, 8, 8, grid, BOUNDS)
    assert (x, y) == (16, 11), (x, y)
    ok("Stepping down stops once the next centre would enter the wall")


def test_accepts_move_into_open_tile():
    print("\n=== Test 3: Open moves are accepted ===")
    grid = _grid((2, 2))
    assert move_box(0, 0, 8, 0, 8, 8, grid, BOUNDS) == (8, 0)
    ok("(0,0) → (8,0) into empty tile (1,0)")

    # Candidate (8,16): centre (12,20) lies in (1,2), beside the wall
    assert move_box(16, 16, -8, 0, 8, 8, grid, BOUNDS) == (8, 16)
    ok("Centre-sampled box may sit flush against a wall")


def test_decorative_layer_never_blocks():
    print("\n=== Test 4: Decorative tiles don't block ===")
    grid = _grid(deco=((1, 0), (2, 0), (3, 3)))
    assert move_box(0, 0, 8, 0, 8, 8, grid, BOUNDS) == (8, 0)
    assert move_box(24, 16, 0, 8, 8, 8, grid, BOUNDS) == (24, 24)
    ok("Tiles in collider=false layers are passable")


def test_no_sliding_on_diagonal():
    print("\n=== Test 5: Diagonal into a wall stops both axes ===")
    # Wall directly to the right at (3,1); moving up-right from (16, 8)
    grid = _grid((3, 1))
    dx, dy = direction_delta(_dirs(up=True, right=True), 8)
    assert (dx, dy) == (8, -8)
    # Candidate (24, 0): centre (28, 4) → tile (3, 0) open → accepted
    assert move_box(16, 8, dx, dy, 8, 8, grid, BOUNDS) == (24, 0)
    # Down-right instead → candidate (24,16), centre (28,20) tile (3,2) open
    assert move_box(16, 8, 8, 8, 8, 8, grid, BOUNDS) == (24, 16)
    # Pure right → centre (28, 12) tile (3,1) solid
    assert move_box(16, 8, 8, 0, 8, 8, grid, BOUNDS) == (16, 8)
    ok("Diagonals are tested as one candidate box")

    # A wide box brushing a wall on the x axis blocks the y component too
    grid = _grid((3, 2))
    start = (10.0, 10.0)
    # 16×8 box moving right+down 2 px: TR sample (24, 16) → tile (3,2) solid
    assert move_box(*start, 2, 2, 16, 8, grid, BOUNDS) == start
    # The vertical part alone would have been fine
    assert move_box(*start, 0, 2, 16, 8, grid, BOUNDS) == (10, 12)
    ok("No axis-separated sliding")


def test_bounds_clamp():
    print("\n=== Test 6: Map bounds clamp ===")
    grid = _grid()
    assert move_box(2, 2, -5, -5, 8, 8, grid, BOUNDS) == (0, 0)
    assert move_box(70, 71, 5, 5, 8, 8, grid, BOUNDS) == (72, 72)
    ok("Clamped into [0, bounds − size]")

    # Box bigger than the map pins to 0 rather than going negative
    assert move_box(0, 0, 3, 3, 100, 100, grid, BOUNDS) == (0, 0)
    ok("Oversized box clamps to 0")

    # Walking off-map into a solid tile outside the grid is still rejected
    walls = Layer("walls", True, (Tile(1, -1, 0),))
    grid = TileGrid(8, 10, 10, [walls])
    assert move_box(0, 0, -8, 0, 8, 8, grid, BOUNDS) == (0, 0)
    ok("Stray off-grid collider tiles are respected without crashing")


# ════════════════════════════════════════════════════════════════════════
#  TEST 7 — Input composition
# ════════════════════════════════════════════════════════════════════════

def test_direction_delta():
    print("\n=== Test 7: Direction composition ===")
    assert direction_delta(_dirs(), 5) == (0, 0)
    assert direction_delta(_dirs(right=True), 5) == (5, 0)
    assert direction_delta(_dirs(left=True), 5) == (-5, 0)
    assert direction_delta(_dirs(up=True), 5) == (0, -5)
    assert direction_delta(_dirs(down=True), 5) == (0, 5)
    ok("Single directions")
    assert direction_delta(_dirs(up=True, right=True), 1) == (1, -1)
    assert direction_delta(_dirs(left=True, right=True), 1) == (0, 0)
    assert direction_delta(_dirs(up=True, down=True, left=True), 2) == (-2, 0)
    ok("Directions add; opposites cancel; diagonals are not normalised")
    assert direction_delta({"right": True}, 3) == (3, 0)
    ok("Missing keys count as released")


# ════════════════════════════════════════════════════════════════════════
#  TEST 8 — Movement system (ECS)
# ════════════════════════════════════════════════════════════════════════

def _spawn_player(w: World, x: float, y: float, speed: float = 1.0) -> int:
    eid = w.spawn()
    w.add(eid, Position(x, y))
    w.add(eid, Collider(8, 8))
    w.add(eid, Player(speed=speed))
    w.add(eid, Facing())
    w.add(eid, Animation(total_frames=3, speed=0.5))
    return eid


def test_movement_system():
    print("\n=== Test 8: Movement system ===")
    grid = _grid((2, 2))
    w = World()
    eid = _spawn_player(w, 0, 0, speed=8)

    movement_system(w, grid, BOUNDS, _dirs(right=True))
    pos = w.get(eid, Position)
    assert (pos.x, pos.y) == (8, 0)
    assert w.get(eid, Animation).moving
    assert w.get(eid, Facing).direction == "right"
    ok("Player moves, animates, faces right")

    movement_system(w, grid, BOUNDS, _dirs(left=True, right=True))
    assert (pos.x, pos.y) == (8, 0)
    assert w.get(eid, Facing).direction == "left"
    ok("Left wins the facing when both are held")

    pos.x, pos.y = 24, 16
    movement_system(w, grid, BOUNDS, _dirs(left=True))
    assert (pos.x, pos.y) == (24, 16)
    assert w.get(eid, Animation).moving
    ok("Blocked move still counts as moving")

    movement_system(w, grid, BOUNDS, _dirs())
    assert not w.get(eid, Animation).moving
    assert w.get(eid, Facing).direction == "left"
    ok("Idle: not moving, facing kept")

    # Non-player entities are left alone
    other = w.spawn()
    w.add(other, Position(40, 40))
    w.add(other, Collider(8, 8))
    movement_system(w, grid, BOUNDS, _dirs(down=True))
    assert (w.get(other, Position).x, w.get(other, Position).y) == (40, 40)
    ok("Only Player entities are driven by input")


def test_animation():
    print("\n=== Test 9: Animation stepping ===")
    anim = Animation(total_frames=3, speed=0.5)
    step_animation(anim)
    assert anim.frame_x == 0 and anim.timer == 0.0, "idle does nothing"
    anim.moving = True
    frames = []
    for _ in range(6):
        step_animation(anim)
        frames.append(anim.frame_x)
    assert frames == [0, 1, 1, 2, 2, 0], frames
    ok("Frame advances every 1/speed ticks and wraps")

    single = Animation(total_frames=1, speed=1.0, moving=True)
    for _ in range(3):
        step_animation(single)
    assert single.frame_x == 0
    ok("Single-frame sprites stay on frame 0")


# ════════════════════════════════════════════════════════════════════════
#  MAIN
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Corner points", test_corner_points),
        ("Reject", test_rejects_move_into_wall),
        ("Accept", test_accepts_move_into_open_tile),
        ("Decorative", test_decorative_layer_never_blocks),
        ("No sliding", test_no_sliding_on_diagonal),
        ("Bounds", test_bounds_clamp),
        ("Direction delta", test_direction_delta),
        ("Movement system", test_movement_system),
        ("Animation", test_animation),
    ]
    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    print(f"\n{'=' * 60}")
    print(f"  Movement Tests: {passed} passed, {failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if failed else 0)
