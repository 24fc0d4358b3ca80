# core/utils.py
import math

# Tolerance shared by equality checks, degeneracy tests and the shadow offset.
EPSILON = 1e-4

def equal(a: float, b: float) -> bool:
    """
    Returns True when two scalars differ by less than EPSILON.
    """
    return abs(a - b) < EPSILON

def fract(x: float) -> float:
    """
    Fractional part of x, keeping the sign of x (fract(-1.25) == -0.25).
    """
    return x - math.trunc(x)
