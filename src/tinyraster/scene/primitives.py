import numpy as np

from .mesh import Mesh

# All primitives wind counter-clockwise seen from outside, so with the default
# light travelling along -Z the faces pointing at +Z are lit.

def make_triangle(v0, v1, v2, uvs=None):
    VT = None if uvs is None else np.asarray(uvs, dtype=np.float64)
    FT = None if uvs is None else [[0, 1, 2]]
    return Mesh([v0, v1, v2], [[0, 1, 2]], VT, FT)

def make_quad(z=0.0, half=1.0):
    """Axis-aligned square facing +Z with uvs spanning the unit square."""
    V = np.array([[-half, -half, z], [half, -half, z], [half, half, z], [-half, half, z]], dtype=np.float64)
    VT = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=np.float64)
    F = [(0, 1, 2), (0, 2, 3)]
    return Mesh(V, F, VT, F)

def make_box(center=(0.0, 0.0, 0.0), size=1.0):
    cx, cy, cz = center
    sx, sy, sz = (size, size, size) if np.isscalar(size) else size
    x0, x1 = cx - sx/2, cx + sx/2
    y0, y1 = cy - sy/2, cy + sy/2
    z0, z1 = cz - sz/2, cz + sz/2
    V = np.array([
        [x0,y0,z0], [x1,y0,z0], [x1,y1,z0], [x0,y1,z0],
        [x0,y0,z1], [x1,y0,z1], [x1,y1,z1], [x0,y1,z1],
    ], dtype=np.float64)
    F = [
        (0,2,1), (0,3,2),   # -Z
        (4,5,6), (4,6,7),   # +Z
        (0,5,4), (0,1,5),   # -Y
        (1,6,5), (1,2,6),   # +X
        (2,7,6), (2,3,7),   # +Y
        (3,4,7), (3,0,4),   # -X
    ]
    return Mesh(V, F)

BUILTIN_MODELS = {
    "triangle": lambda: make_triangle([-0.5, -0.5, 0.0], [0.5, -0.5, 0.0], [0.0, 0.5, 0.0],
                                      uvs=[[0, 0], [1, 0], [0.5, 1]]),
    "quad": make_quad,
    "box": lambda: make_box(size=1.0),
}
