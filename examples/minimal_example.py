import numpy as np

import vec3f as vf
from vec3f.utils import logger


def face_normals(vertices: np.ndarray, indices: np.ndarray):
    """Нормали треугольников (по правилу правой руки)."""
    verts = [vf.Vec3.from_array(v) for v in vertices.reshape(-1, 3)]
    normals = []
    for i0, i1, i2 in indices.reshape(-1, 3):
        a, b, c = verts[i0], verts[i1], verts[i2]
        normals.append((b - a).cross(c - a).normalize())
    return normals


if __name__ == "__main__":
    logger.setLevel("INFO")
    logger.info("Starting minimal example...")

    # Передняя грань единичного куба
    vertices = np.array([
        -0.5, -0.5, 0.5,
        0.5, -0.5, 0.5,
        0.5, 0.5, 0.5,
        -0.5, 0.5, 0.5,
    ], dtype=np.float32)
    indices = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32)

    for n in face_normals(vertices, indices):
        logger.info(f"normal = {n}")

    lo = vf.Vec3.splat(np.inf)
    hi = vf.Vec3.splat(-np.inf)
    for v in vertices.reshape(-1, 3):
        p = vf.Vec3.from_array(v)
        lo, hi = lo.min(p), hi.max(p)
    logger.info(f"bounds = {lo} .. {hi}, extent = {(hi - lo).hmax()}")
