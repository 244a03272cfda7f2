import pytest

pygame = pytest.importorskip("pygame")

from ballsim.config import SimulationConfig
from ballsim.data_models import Shape
from ballsim.events import DestroyEvent, FrameEvent
from ballsim.renderer import PygameEventSource, draw_shapes


def test_draw_shapes_paints_in_order():
    surface = pygame.Surface((50, 50))
    surface.fill((0, 0, 0))
    shapes = [
        Shape(25, 25, 10, (255, 0, 0, 255)),
        Shape(25, 25, 4, (0, 0, 255, 255)),
    ]
    assert draw_shapes(surface, shapes) == 2
    assert tuple(surface.get_at((25, 25)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((25, 18)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((2, 2)))[:3] == (0, 0, 0)


def test_draw_shapes_skips_degenerate_shapes():
    surface = pygame.Surface((10, 10))
    shapes = [Shape(5, 5, 0, (255, 255, 255, 255)), Shape(10 ** 6, 5, 3, (255, 255, 255, 255))]
    assert draw_shapes(surface, shapes) == 0


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    source = PygameEventSource(SimulationConfig(window_width=200, window_height=150, fps=1000))
    source.open()
    yield source
    source.close()


def test_frame_then_quit(window):
    event = window.next_event()
    assert isinstance(event, FrameEvent)
    assert (event.width, event.height) == (200, 150)
    event.present([Shape(100, 75, 20, (255, 255, 255, 255))])
    window.invalidate()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    end = window.next_event()
    assert isinstance(end, DestroyEvent)
    assert end.error is None


def test_draw_error_becomes_destroy_error(window, monkeypatch):
    def broken_flip():
        raise pygame.error("display lost")

    event = window.next_event()
    monkeypatch.setattr(pygame.display, "flip", broken_flip)
    event.present([])
    window.invalidate()
    end = window.next_event()
    assert isinstance(end, DestroyEvent)
    assert str(end.error) == "display lost"
