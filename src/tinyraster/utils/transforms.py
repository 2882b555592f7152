import numpy as np

def project(V, width, height, pixel_center=False):
    """
    Orthographic viewport map from model space [-1,1]^3 to screen space.
    x,y -> (v + 1) * half_extent (+0.5 for pixel centres); z passes through
    unchanged as the depth proxy. Origin bottom-left, +Y up.
    """
    V = np.asarray(V, dtype=np.float64)
    half = np.array([width / 2.0, height / 2.0])
    P = V.copy()
    P[..., :2] = (V[..., :2] + 1.0) * half
    if pixel_center:
        P[..., :2] += 0.5
    return P

def project_edges(V, width, height, pixel_center=False):
    """
    Projection used for wireframes: [-1,1] lands exactly on [0, size-1].
    With pixel_center the +0.5 still truncates inside the target.
    """
    return project(V, width - 1, height - 1, pixel_center=pixel_center)

def to_pixel(P):
    """Truncate screen-space x,y towards zero."""
    return np.trunc(np.asarray(P)[..., :2]).astype(np.int64)
