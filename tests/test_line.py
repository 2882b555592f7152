import itertools

import numpy as np
import pytest

from tinyraster.errors import PixelOutOfBoundsError
from tinyraster.renderers.line import draw_line, line_pixels
from tinyraster.renderers.target import RenderTarget

ENDPOINTS = [(0, 0), (7, 2), (2, 7), (5, 5), (0, 6), (6, 0), (3, 1), (9, 4)]


def test_horizontal_and_vertical():
    assert line_pixels((1, 2), (4, 2)) == [(1, 2), (2, 2), (3, 2), (4, 2)]
    assert sorted(line_pixels((3, 5), (3, 1))) == [(3, 1), (3, 2), (3, 3), (3, 4), (3, 5)]


def test_single_point():
    assert line_pixels((4, 4), (4, 4)) == [(4, 4)]


def test_diagonal():
    assert line_pixels((0, 0), (3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_shallow_line_matches_reference_walk():
    # dx=5, dy=2: error2 steps 4, 8>5 -> y+1, ...
    assert line_pixels((0, 0), (5, 2)) == [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)]


@pytest.mark.parametrize("p0,p1", list(itertools.permutations(ENDPOINTS, 2)))
def test_connected_and_symmetric(p0, p1):
    pts = line_pixels(p0, p1)
    assert {pts[0], pts[-1]} == {p0, p1}
    for a, b in zip(pts, pts[1:]):
        assert max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1
    assert set(pts) == set(line_pixels(p1, p0))
    assert len(pts) == max(abs(p1[0] - p0[0]), abs(p1[1] - p0[1])) + 1


def test_draw_line_writes_without_depth_test():
    t = RenderTarget(10, 10)
    draw_line(t, (0, 0), (9, 9), (255, 255, 255))
    for i in range(10):
        assert tuple(t.color[i, i]) == (255, 255, 255)
    assert tuple(t.color[0, 9]) == (0, 0, 0)
    assert np.all(np.isneginf(t.depth))


def test_draw_line_out_of_bounds_fails_fast():
    t = RenderTarget(5, 5)
    with pytest.raises(PixelOutOfBoundsError):
        draw_line(t, (0, 0), (5, 0), (255, 0, 0))
