import numpy as np

from ..errors import MissingTexCoordsError
from ..utils.geometry import barycentric_grid, shade_color

def bounding_box(P, width, height):
    """Integer (xmin, ymin, xmax, ymax) of the projected triangle, clamped to the target."""
    xs, ys = P[:, 0], P[:, 1]
    xmin = max(0, int(np.floor(xs.min())))
    ymin = max(0, int(np.floor(ys.min())))
    xmax = min(width - 1, int(np.floor(xs.max())))
    ymax = min(height - 1, int(np.floor(ys.max())))
    return xmin, ymin, xmax, ymax

def fill_triangle(target, P, color=(255, 255, 255), uvs=None, texture=None,
                  intensity=1.0, eps=1e-9):
    """
    Rasterize one screen-space triangle P (3x3: x, y, depth) into target.

    Every integer pixel of the clamped bounding box is tested against the
    barycentric weights; pixels with any negative weight are rejected. Depth
    (and uv when texturing) is the weight-blend of the vertex values, and the
    fragments go through the target's strict depth test.
    Returns the number of pixels written.
    """
    if texture is not None and uvs is None:
        raise MissingTexCoordsError("texture given but triangle has no texture coordinates")

    P = np.asarray(P, dtype=np.float64)
    xmin, ymin, xmax, ymax = bounding_box(P, target.width, target.height)
    if xmin > xmax or ymin > ymax:
        return 0

    X, Y = np.meshgrid(np.arange(xmin, xmax + 1), np.arange(ymin, ymax + 1))
    xs = X.ravel(); ys = Y.ravel()
    W = barycentric_grid(P, xs, ys, eps)
    if W is None:
        return 0

    inside = np.all(W >= 0.0, axis=0)
    if not np.any(inside):
        return 0
    xs, ys, W = xs[inside], ys[inside], W[:, inside]

    z = W.T @ P[:, 2]

    if texture is not None:
        uv = W.T @ np.asarray(uvs, dtype=np.float64)[:, :2]
        px = np.trunc(uv[:, 0] * texture.width).astype(np.int64)
        py = np.trunc(uv[:, 1] * texture.height).astype(np.int64)
        colors = shade_color(texture.sample_many(px, py), intensity)
    else:
        colors = np.asarray(color, dtype=np.uint8)

    written = target.try_write_many(xs, ys, z, colors)
    return int(np.count_nonzero(written))
