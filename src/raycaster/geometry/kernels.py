# geometry/kernels.py
"""
Closed-form root finding for the local-space primitives, compiled with numba.
Both kernels work on plain floats so they can be called straight from the
per-ray Python code.
"""
import math
import numba as nb

@nb.njit(cache=True, nogil=True)
def unit_sphere_roots(ox, oy, oz, dx, dy, dz):
    """
    Roots of |o + t*d|^2 = 1 for the unit sphere at the origin.
    Returns (count, t0, t1) with t0 <= t1; count is 0 or 2 (equal roots when tangent).
    """
    a = dx * dx + dy * dy + dz * dz
    b = 2.0 * (dx * ox + dy * oy + dz * oz)
    c = ox * ox + oy * oy + oz * oz - 1.0
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return 0, 0.0, 0.0
    sqrt_disc = math.sqrt(discriminant)
    return 2, (-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)

@nb.njit(cache=True, nogil=True)
def xz_plane_root(oy, dy, epsilon):
    """
    Root of o.y + t*d.y = 0. Returns (count, t); rays parallel to the plane
    (|d.y| < epsilon, coplanar ones included) report no root.
    """
    if abs(dy) < epsilon:
        return 0, 0.0
    return 1, -oy / dy
