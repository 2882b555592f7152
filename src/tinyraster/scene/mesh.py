import logging
from pathlib import Path
from typing import NamedTuple, Optional

import numpy as np

from ..errors import MeshLoadError, MissingTexCoordsError

logger = logging.getLogger(__name__)


class Triangle(NamedTuple):
    positions: np.ndarray            # (3, 3)
    uvs: Optional[np.ndarray] = None  # (3, 2)


def _resolve(idx, count, what, lineno):
    i = int(idx)
    i = i - 1 if i > 0 else count + i  # OBJ is 1-based, negatives count from the end
    if i < 0 or i >= count:
        raise MeshLoadError(f"line {lineno}: {what} index {idx} out of range ({count} defined)")
    return i


class Mesh:
    """
    Indexed triangle mesh.
    V: (N,3) positions, F: (T,3) position indices,
    VT: (M,2) texture coords or None, FT: (T,3) uv indices or None.
    """

    def __init__(self, V, F, VT=None, FT=None):
        self.V = np.asarray(V, dtype=np.float64).reshape(-1, 3)
        self.F = np.asarray(F, dtype=np.int64).reshape(-1, 3)
        self.VT = None if VT is None else np.asarray(VT, dtype=np.float64).reshape(-1, 2)
        self.FT = None if FT is None else np.asarray(FT, dtype=np.int64).reshape(-1, 3)

    def __len__(self):
        return len(self.F)

    @property
    def has_uvs(self):
        return self.VT is not None and self.FT is not None

    def triangles(self, require_uvs=False):
        """Fresh iterator over Triangle records; call again to restart."""
        if require_uvs and not self.has_uvs:
            raise MissingTexCoordsError("mesh has no texture coordinates")
        for t in range(len(self.F)):
            uvs = self.VT[self.FT[t]] if self.has_uvs else None
            yield Triangle(self.V[self.F[t]], uvs)

    @classmethod
    def from_obj(cls, path):
        """
        Read positions (v), texture coords (vt) and faces (f) from a Wavefront
        OBJ file. Faces with more than 3 corners are fan-triangulated; the uv
        index of a face is kept only when every face in the file has one.
        """
        path = Path(path)
        verts, tex, faces, face_uvs = [], [], [], []
        all_uv = True
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                for lineno, line in enumerate(f, 1):
                    parts = line.split()
                    if not parts:
                        continue
                    tag = parts[0]
                    try:
                        if tag == "v":
                            verts.append([float(c) for c in parts[1:4]])
                        elif tag == "vt":
                            # 3-component vt is allowed, w is ignored
                            tex.append([float(c) for c in parts[1:3]])
                        elif tag == "f":
                            corners = [c.split("/") for c in parts[1:]]
                            if len(corners) < 3:
                                raise MeshLoadError(f"line {lineno}: face with {len(corners)} corners")
                            vi = [_resolve(c[0], len(verts), "vertex", lineno) for c in corners]
                            if all(len(c) > 1 and c[1] for c in corners):
                                ti = [_resolve(c[1], len(tex), "texcoord", lineno) for c in corners]
                            else:
                                ti, all_uv = None, False
                            for k in range(1, len(vi) - 1):
                                faces.append([vi[0], vi[k], vi[k + 1]])
                                face_uvs.append(None if ti is None else [ti[0], ti[k], ti[k + 1]])
                    except ValueError as exc:
                        raise MeshLoadError(f"{path}:{lineno}: malformed '{tag}' record: {exc}") from exc
        except OSError as exc:
            raise MeshLoadError(f"cannot read mesh {path}: {exc}") from exc

        if any(len(v) != 3 for v in verts):
            raise MeshLoadError(f"{path}: vertex with fewer than 3 components")
        if any(len(t) != 2 for t in tex):
            raise MeshLoadError(f"{path}: texture coordinate with fewer than 2 components")
        if not faces:
            raise MeshLoadError(f"{path}: no faces")

        VT = FT = None
        if all_uv and tex:
            VT, FT = tex, face_uvs
        logger.info("loaded %s: %d vertices, %d triangles%s", path, len(verts), len(faces),
                    ", with uvs" if VT is not None else "")
        return cls(verts, faces, VT, FT)
