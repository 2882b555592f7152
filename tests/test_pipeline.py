import numpy as np
import pytest

from tinyraster.config import RenderConfig
from tinyraster.errors import InputError, MissingTexCoordsError
from tinyraster.models.mode import RenderMode
from tinyraster.renderers.pipeline import render, render_with_stats
from tinyraster.scene.mesh import Mesh
from tinyraster.scene.primitives import make_box, make_quad, make_triangle
from tinyraster.scene.texture import Texture

LIT = ([-0.5, -0.5, 0.0], [0.5, -0.5, 0.0], [0.0, 0.5, 0.0])


def test_back_facing_triangle_writes_nothing():
    v0, v1, v2 = LIT
    cfg = RenderConfig(width=32, height=32, mode="flat")
    target, stats = render_with_stats(make_triangle(v0, v2, v1), cfg)
    assert stats.culled == 1 and stats.drawn == 0 and stats.pixels == 0
    assert not target.color.any()
    assert np.all(np.isneginf(target.depth))


def test_front_facing_triangle_is_lit():
    cfg = RenderConfig(width=32, height=32, mode="flat", color=[200, 100, 50])
    target, stats = render_with_stats(make_triangle(*LIT), cfg)
    assert stats.drawn == 1 and stats.pixels > 0
    assert tuple(target.color[16, 16]) == (200, 100, 50)


def test_flat_cube_draws_only_the_front_face():
    cfg = RenderConfig(width=64, height=64, mode=RenderMode.flat)
    target, stats = render_with_stats(make_box(size=1.0), cfg)
    assert stats.triangles == 12
    assert stats.drawn == 2
    assert stats.culled == 10
    assert tuple(target.color[24, 40]) == (255, 255, 255)
    assert target.depth_at(40, 24) == pytest.approx(0.5)
    assert tuple(target.color[2, 2]) == (0, 0, 0)


def test_light_direction_scales_flat_colour():
    cfg = RenderConfig(width=32, height=32, mode="flat", light_dir=[0, 0, -3])
    assert cfg.light_dir == [0.0, 0.0, -1.0]
    target = render(make_triangle(*LIT), cfg)
    assert tuple(target.color[16, 16]) == (255, 255, 255)


def test_nearer_face_occludes_farther():
    V = [[-1, -1, 0.1], [1, -1, 0.1], [0, 1, 0.1],
         [-0.5, -0.5, 0.6], [0.5, -0.5, 0.6], [0, 0.5, 0.6]]
    cfg = RenderConfig(width=32, height=32, mode="flat")
    for F in ([[0, 1, 2], [3, 4, 5]], [[3, 4, 5], [0, 1, 2]]):
        target = render(Mesh(V, F), cfg)
        assert target.depth_at(16, 14) == pytest.approx(0.6)


def test_wireframe_edges():
    cfg = RenderConfig(width=9, height=9, mode="wireframe")
    target, stats = render_with_stats(make_triangle([-1, -1, 0], [1, -1, 0], [0, 1, 0]), cfg)
    assert stats.drawn == 1
    assert np.all(target.color[0, :] == 255)       # base edge on row y=0
    assert tuple(target.color[8, 4]) == (255, 255, 255)
    assert tuple(target.color[3, 4]) == (0, 0, 0)
    assert np.all(np.isneginf(target.depth))


def test_wireframe_draws_back_faces_too():
    v0, v1, v2 = LIT
    cfg = RenderConfig(width=16, height=16, mode="wireframe")
    _, stats = render_with_stats(make_triangle(v0, v2, v1), cfg)
    assert stats.drawn == 1 and stats.culled == 0


def test_textured_quad():
    pixels = np.zeros((2, 2, 3), dtype=np.uint8)
    pixels[0, 0] = (10, 20, 30)
    pixels[1, 1] = (40, 50, 60)
    cfg = RenderConfig(width=8, height=8, mode="textured")
    target = render(make_quad(), cfg, Texture(pixels))
    assert tuple(target.color[1, 1]) == (10, 20, 30)
    assert tuple(target.color[7, 7]) == (40, 50, 60)
    # pixel centre offset leaves column/row 0 uncovered
    assert tuple(target.color[0, 0]) == (0, 0, 0)


def test_textured_requires_texture_and_uvs():
    cfg = RenderConfig(width=8, height=8, mode="textured")
    with pytest.raises(InputError):
        render(make_quad(), cfg)
    with pytest.raises(MissingTexCoordsError):
        render(make_box(), cfg, Texture(np.zeros((1, 1, 3), dtype=np.uint8)))


def test_background_colour():
    cfg = RenderConfig(width=4, height=4, mode="flat", background=[9, 8, 7])
    target = render(make_triangle(*LIT), cfg)
    assert tuple(target.color[0, 3]) == (9, 8, 7)


def test_wireframe_honours_pixel_center():
    mesh = make_triangle(*LIT)
    plain = render(mesh, RenderConfig(width=16, height=16, mode="wireframe"))
    shifted = render(mesh, RenderConfig(width=16, height=16, mode="wireframe", pixel_center=True))
    assert not np.array_equal(plain.color, shifted.color)
    # x = (-0.5 + 1) * 7.5 = 3.75 -> 3, with the half-pixel offset 4.25 -> 4
    assert tuple(plain.color[3, 3]) == (255, 255, 255)
    assert tuple(shifted.color[4, 4]) == (255, 255, 255)
    assert tuple(shifted.color[3, 3]) == (0, 0, 0)


def test_wireframe_pixel_center_stays_in_bounds():
    cfg = RenderConfig(width=9, height=9, mode="wireframe", pixel_center=True)
    target = render(make_triangle([-1, -1, 0], [1, -1, 0], [0, 1, 0]), cfg)
    assert np.all(target.color[0, :] == 255)
    assert tuple(target.color[8, 4]) == (255, 255, 255)
