import numpy as np

DEGENERATE = (-1.0, 1.0, 1.0)

def _cross_terms(tri, px, py):
    A, B, C = tri[0], tri[1], tri[2]
    ax, ay = A[0], A[1]
    # u = (C.x-A.x, B.x-A.x, A.x-P.x) x (C.y-A.y, B.y-A.y, A.y-P.y)
    s0, s1 = C[0] - ax, B[0] - ax
    t0, t1 = C[1] - ay, B[1] - ay
    s2, t2 = ax - px, ay - py
    ux = s1 * t2 - s2 * t1
    uy = s2 * t0 - s0 * t2
    uz = s0 * t1 - s1 * t0
    return ux, uy, uz

def is_degenerate(tri, eps=1e-9):
    """
    Relative area test: |AB x AC| <= eps * |AB| * |AC|, i.e. sin of the angle
    at A is below eps. Independent of resolution and coordinate scale.
    """
    tri = np.asarray(tri, dtype=np.float64)
    _, _, uz = _cross_terms(tri, tri[0][0], tri[0][1])
    ab = np.hypot(tri[1][0] - tri[0][0], tri[1][1] - tri[0][1])
    ac = np.hypot(tri[2][0] - tri[0][0], tri[2][1] - tri[0][1])
    return abs(uz) <= eps * ab * ac

def barycentric(tri, p, eps=1e-9):
    """
    Barycentric weights (w0, w1, w2) of point p for the 2D triangle tri
    (only x,y of each vertex are read). Degenerate triangles return a
    sentinel with a negative component so callers reject every pixel.
    """
    tri = np.asarray(tri, dtype=np.float64)
    if is_degenerate(tri, eps):
        return DEGENERATE
    ux, uy, uz = _cross_terms(tri, float(p[0]), float(p[1]))
    return (1.0 - (ux + uy) / uz, uy / uz, ux / uz)

def barycentric_grid(tri, xs, ys, eps=1e-9):
    """Vectorised barycentric(); returns a (3, N) array, or None if degenerate."""
    tri = np.asarray(tri, dtype=np.float64)
    if is_degenerate(tri, eps):
        return None
    ux, uy, uz = _cross_terms(tri, np.asarray(xs, np.float64), np.asarray(ys, np.float64))
    return np.stack([1.0 - (ux + uy) / uz, uy / uz, ux / uz], axis=0)

def face_normal(v0, v1, v2):
    v0, v1, v2 = (np.asarray(v, dtype=np.float64) for v in (v0, v1, v2))
    n = np.cross(v2 - v0, v1 - v0)
    m = np.linalg.norm(n)
    if m == 0.0 or not np.isfinite(m):
        return np.zeros(3)
    return n / m

def light_intensity(v0, v1, v2, light_dir):
    """Lambert term of the face normal against light_dir; <= 0 means cull."""
    return float(np.dot(face_normal(v0, v1, v2), np.asarray(light_dir, dtype=np.float64)))

def shade_color(color, intensity):
    """Scale each channel by intensity, truncating (no rounding, no clamping)."""
    c = np.asarray(color, dtype=np.float64) * intensity
    return np.trunc(c).astype(np.uint8)
