# core/utils.py
import math

# Tolerances for float comparison. Exact equality is only used for the
# determinant-zero check in Matrix.invert().
EPSILON = 1.0e-7
LOW_EPSILON = 1.0e-3


def approx_eq(a: float, b: float, epsilon: float = LOW_EPSILON) -> bool:
    """
    Returns True when a and b differ by at most epsilon.
    """
    if math.isnan(a) or math.isnan(b):
        return False
    if a == b:
        # Covers matching infinities.
        return True
    return abs(a - b) <= epsilon


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
