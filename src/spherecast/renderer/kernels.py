# renderer/kernels.py

from numba import njit
import numpy as np
import math

# The kernels mirror the Vector3 pipeline operation for operation so that both
# backends round identically. error_model="numpy" keeps IEEE division (x/0 -> inf).

@njit(error_model="numpy")
def dot(ax, ay, az, bx, by, bz):
    return ax * bx + ay * by + az * bz

@njit(error_model="numpy")
def normalize(x, y, z):
    mag = math.sqrt(x * x + y * y + z * z)
    return x / mag, y / mag, z / mag

@njit(error_model="numpy")
def clamp_channel(c):
    if c != c:
        return 0.0
    if c > 255.0:
        return 255.0
    if c < 0.0:
        return 0.0
    return c

@njit(error_model="numpy")
def ray_sphere_intersect(ox, oy, oz, dx, dy, dz, cx, cy, cz, radius):
    """Ray-sphere intersection for a unit-length direction. Returns (hit, t)."""
    ocx = ox - cx
    ocy = oy - cy
    ocz = oz - cz
    b = dot(ocx, ocy, ocz, dx, dy, dz) * 2.0
    c = dot(ocx, ocy, ocz, ocx, ocy, ocz) - radius * radius
    disc = b * b - c * 4.0
    if disc < 0.0:
        return False, -1.0
    disc = math.sqrt(disc)
    t1 = -b - disc
    t2 = -b + disc
    return True, min(t1, t2)

@njit(error_model="numpy")
def render_kernel(out, sphere_center, sphere_radius, light_center, base_color, highlight_color,
                  reset_background):
    """
    Fills out[height, width, 3] with the shaded scene in PPM order.
    A miss keeps the previous pixel color unless reset_background is set.
    """
    height = out.shape[0]
    width = out.shape[1]
    cx, cy, cz = sphere_center[0], sphere_center[1], sphere_center[2]
    r = 0.0
    g = 0.0
    b = 0.0
    for i in range(height):
        for j in range(width):
            ox = float(j)
            oy = float(i)
            oz = 0.0
            if reset_background:
                r = 0.0
                g = 0.0
                b = 0.0
            hit, t = ray_sphere_intersect(ox, oy, oz, 0.0, 0.0, 1.0, cx, cy, cz, sphere_radius)
            if hit:
                px = ox + 0.0 * t
                py = oy + 0.0 * t
                pz = oz + 1.0 * t
                lx, ly, lz = normalize(light_center[0] - px, light_center[1] - py,
                                       light_center[2] - pz)
                nx, ny, nz = normalize((px - cx) / sphere_radius, (py - cy) / sphere_radius,
                                       (pz - cz) / sphere_radius)
                dt = dot(lx, ly, lz, nx, ny, nz)
                r = clamp_channel((base_color[0] + highlight_color[0] * dt) * 0.5)
                g = clamp_channel((base_color[1] + highlight_color[1] * dt) * 0.5)
                b = clamp_channel((base_color[2] + highlight_color[2] * dt) * 0.5)
            out[i, j, 0] = np.uint8(int(r))
            out[i, j, 1] = np.uint8(int(g))
            out[i, j, 2] = np.uint8(int(b))
    return out
