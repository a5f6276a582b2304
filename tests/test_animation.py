import pytest

from cube_cli_renderer.animation import AnimationLoop
from cube_cli_renderer.camera import Camera
from cube_cli_renderer.config import RenderConfig
from cube_cli_renderer.display import MemoryDisplay
from cube_cli_renderer.errors import DisplayError
from cube_cli_renderer.framebuffer import FrameBuffer
from cube_cli_renderer.renderer import Renderer
from cube_cli_renderer.scene import Scene


def test_step_emits_frame_advances_and_sleeps(display, fake_sleep):
    loop = AnimationLoop(display=display, sleep=fake_sleep)
    text = loop.step()
    assert display.frames == [text]
    assert display.clears == 1
    assert loop.scene.angle == pytest.approx(0.01)
    assert fake_sleep.calls == [0.010]
    assert loop.frame_count == 1


def test_first_frame_is_rest_frame(display, fake_sleep):
    loop = AnimationLoop(display=display, sleep=fake_sleep)
    loop.step()
    expected = Renderer().render(FrameBuffer(160, 80), Scene(), Camera())
    assert display.frames[0] == expected


def test_run_stops_after_max_frames(display, fake_sleep):
    loop = AnimationLoop(display=display, sleep=fake_sleep)
    loop.run(max_frames=5)
    assert len(display.frames) == 5
    assert len(fake_sleep.calls) == 5
    assert loop.scene.angle == pytest.approx(0.05)
    # consecutive frames differ as the cube turns
    assert len(set(display.frames)) > 1


def test_runs_are_reproducible(fake_sleep):
    a, b = MemoryDisplay(), MemoryDisplay()
    AnimationLoop(display=a, sleep=fake_sleep).run(max_frames=3)
    AnimationLoop(display=b, sleep=fake_sleep).run(max_frames=3)
    assert a.frames == b.frames


def test_injected_angle(display, fake_sleep):
    loop = AnimationLoop(display=display, sleep=fake_sleep, scene=Scene(angle=1.2))
    text = loop.step()
    expected = Renderer().render(FrameBuffer(160, 80), Scene(angle=1.2), Camera())
    assert text == expected


def test_custom_config(display, fake_sleep):
    config = RenderConfig(width=40, height=20, angle_increment=0.5, frame_delay=0.0)
    loop = AnimationLoop(config, display=display, sleep=fake_sleep)
    text = loop.step()
    assert len(text.split('\n')[:-1]) == 20
    assert loop.scene.angle == 0.5
    assert fake_sleep.calls == [0.0]


def test_paced_delay_subtracts_render_time(display, fake_sleep):
    ticks = iter([10.0, 10.004])
    config = RenderConfig(pace_frames=True)
    loop = AnimationLoop(config, display=display, sleep=fake_sleep, clock=lambda: next(ticks))
    loop.step()
    assert fake_sleep.calls == [pytest.approx(0.006)]


def test_paced_delay_never_negative(display, fake_sleep):
    ticks = iter([10.0, 10.5])
    config = RenderConfig(pace_frames=True)
    loop = AnimationLoop(config, display=display, sleep=fake_sleep, clock=lambda: next(ticks))
    loop.step()
    assert fake_sleep.calls == [0.0]


class FailingDisplay:
    def clear(self):
        raise DisplayError("terminal gone")

    def write(self, text):
        pass


def test_display_failure_propagates(fake_sleep):
    loop = AnimationLoop(display=FailingDisplay(), sleep=fake_sleep)
    with pytest.raises(DisplayError):
        loop.run()
    assert loop.frame_count == 0
    assert fake_sleep.calls == []
