import pytest

from ballsim.events import DestroyEvent, FrameEvent, ScriptedEventSource


def test_scripted_source_sequence():
    source = ScriptedEventSource(2, 640, 480)
    first = source.next_event()
    assert isinstance(first, FrameEvent)
    assert (first.width, first.height) == (640, 480)
    first.present([])
    source.invalidate()
    assert isinstance(source.next_event(), FrameEvent)
    source.invalidate()
    last = source.next_event()
    assert isinstance(last, DestroyEvent)
    assert last.error is None
    assert source.frames == [[]]


def test_scripted_source_requires_invalidate():
    source = ScriptedEventSource(2, 640, 480)
    source.next_event()
    with pytest.raises(RuntimeError):
        source.next_event()


def test_scripted_source_extents_and_keep():
    source = ScriptedEventSource(3, extents=[(1, 2), (3, 4), (5, 6)], keep=1)
    sizes = []
    for _ in range(3):
        event = source.next_event()
        sizes.append((event.width, event.height))
        event.present([])
        source.invalidate()
    assert sizes == [(1, 2), (3, 4), (5, 6)]
    assert len(source.frames) == 1


def test_scripted_source_needs_enough_extents():
    with pytest.raises(ValueError):
        ScriptedEventSource(3, extents=[(1, 1)])
