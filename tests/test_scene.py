import math

import numpy as np
import pytest

from cube_cli_renderer.mesh import Wireframe
from cube_cli_renderer.scene import Scene


def test_cube_topology():
    cube = Wireframe.cube()
    assert len(cube.vertices) == 8
    assert len(cube.edges) == 12
    for a, b in cube.edges:
        # every edge joins corners differing in exactly one coordinate
        diff = np.abs(cube.vertices[a] - cube.vertices[b])
        assert sorted(diff) == [0.0, 0.0, 2.0]
    assert len({frozenset(e) for e in cube.edges}) == 12


def test_wireframe_rejects_dangling_edges():
    with pytest.raises(ValueError):
        Wireframe([(0, 0, 0), (1, 0, 0)], [(0, 2)])


def test_default_scene_is_cube_at_rest():
    scene = Scene()
    assert scene.angle == 0.0
    assert len(scene.mesh.edges) == 12
    assert tuple(scene.rotation()) == (0.0, 0.0, 0.0)


def test_rotation_uses_angle_on_x_and_z():
    scene = Scene(angle=0.25)
    assert tuple(scene.rotation()) == (0.25, 0.0, 0.25)


def test_advance():
    scene = Scene()
    scene.advance(0.01)
    scene.advance(0.01)
    assert scene.angle == pytest.approx(0.02)


def test_advance_wraps_by_exactly_two_pi():
    start = 2 * math.pi - 0.005
    scene = Scene(angle=start)
    scene.advance(0.01)
    assert scene.angle == (start + 0.01) - 2 * math.pi
    assert 0.0 <= scene.angle < 2 * math.pi


def test_angle_stays_in_range_over_many_frames():
    scene = Scene()
    for _ in range(1000):
        scene.advance(0.01)
        assert 0.0 <= scene.angle < 2 * math.pi
    assert scene.angle == pytest.approx(10.0 - 2 * math.pi)


def test_large_initial_angle_is_wrapped():
    scene = Scene(angle=100.0)
    assert 0.0 <= scene.angle < 2 * math.pi
    assert scene.angle == pytest.approx(math.fmod(100.0, 2 * math.pi))


def test_advance_by_more_than_a_turn():
    scene = Scene()
    for _ in range(3):
        scene.advance(13.0)
        assert 0.0 <= scene.angle < 2 * math.pi
    assert scene.angle == pytest.approx(39.0 % (2 * math.pi), abs=1e-9)


def test_negative_advance_stays_in_range():
    scene = Scene()
    scene.advance(-1e-17)
    assert scene.angle == 0.0
    scene.advance(-0.5)
    assert scene.angle == pytest.approx(2 * math.pi - 0.5)
