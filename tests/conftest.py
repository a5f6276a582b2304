import pytest

from cube_cli_renderer.camera import Camera
from cube_cli_renderer.config import RenderConfig
from cube_cli_renderer.display import MemoryDisplay
from cube_cli_renderer.framebuffer import FrameBuffer
from cube_cli_renderer.scene import Scene


@pytest.fixture
def config():
    return RenderConfig()


@pytest.fixture
def canvas(config):
    return FrameBuffer(config.width, config.height)


@pytest.fixture
def small_canvas():
    return FrameBuffer(10, 6)


@pytest.fixture
def camera(config):
    return Camera.from_config(config)


@pytest.fixture
def scene():
    return Scene()


@pytest.fixture
def display():
    return MemoryDisplay()


class FakeSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return FakeSleep()
