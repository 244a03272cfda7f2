import pytest

from ballsim.config import SimulationConfig
from ballsim.trail import Trail


def make_trail(max_length=100):
    return Trail(max_length, 25, (0, 255, 255, 100))


def test_push_snapshot_uses_trail_style():
    trail = make_trail()
    trail.push(10, 20)
    (entry,) = list(trail)
    assert (entry.x, entry.y, entry.radius, entry.color) == (10, 20, 25, (0, 255, 255, 100))


def test_bounded_fifo_after_101_pushes():
    trail = make_trail(100)
    for i in range(101):
        trail.push(i, i)
    assert len(trail) == 100
    positions = [(e.x, e.y) for e in trail]
    assert (0, 0) not in positions
    assert positions[0] == (1, 1)
    assert positions[-1] == (100, 100)


def test_length_never_exceeds_max():
    trail = make_trail(7)
    for i in range(50):
        trail.push(i, 0)
        assert len(trail) <= 7
    assert [e.x for e in trail] == list(range(43, 50))


def test_render_fades_by_rank():
    trail = make_trail(4)
    for i in range(4):
        trail.push(i, 0)
    shapes = list(trail.render())
    assert [s.x for s in shapes] == [0, 1, 2, 3]
    # decay for ranks 3, 2, 1, 0 of 4 entries
    assert [s.radius for s in shapes] == [6, 12, 18, 25]
    assert [s.color[3] for s in shapes] == [25, 50, 75, 100]
    assert all(s.color[:3] == (0, 255, 255) for s in shapes)


def test_render_is_monotonic_from_newest():
    trail = make_trail()
    for i in range(100):
        trail.push(i, i)
    shapes = list(trail.render())
    newest_first = shapes[::-1]
    for newer, older in zip(newest_first, newest_first[1:]):
        assert older.radius <= newer.radius
        assert older.color[3] <= newer.color[3]
    assert newest_first[0].radius == 25


def test_render_does_not_mutate_entries():
    trail = make_trail(10)
    for i in range(10):
        trail.push(i, 0)
    first = [s.radius for s in trail.render()]
    second = [s.radius for s in trail.render()]
    assert first == second
    assert all(e.radius == 25 and e.color[3] == 100 for e in trail)


def test_render_is_lazy_and_empty_trail_yields_nothing():
    trail = make_trail()
    assert list(trail.render()) == []
    trail.push(1, 1)
    gen = trail.render()
    assert next(gen).radius == 25
    with pytest.raises(StopIteration):
        next(gen)


def test_from_config_and_clear():
    trail = Trail.from_config(SimulationConfig(trail_max_length=3, trail_start_radius=9))
    for i in range(5):
        trail.push(i, i)
    assert len(trail) == 3
    assert all(e.radius == 9 for e in trail)
    trail.clear()
    assert len(trail) == 0
