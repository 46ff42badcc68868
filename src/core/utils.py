# core/utils.py
import sys
import numpy as np

# Largest representable distance; doubles as the "no hit" sentinel.
INFINITY = sys.float_info.max
EPSILON = 1e-5

def float_equal(a: float, b: float) -> bool:
    """
    Approximate float comparison used by Tuple and Color equality.
    """
    return abs(a - b) < EPSILON

def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divides like the hardware does: x/0 gives inf or nan instead of raising.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(numerator) / np.float64(denominator))

def reflect(v, n):
    """
    Reflects v about the normal n (R = 2N(N.V) - V).
    """
    return n * 2 * n.dot(v) - v

def ieee_pow(base: float, exponent: float) -> float:
    """
    Power with hardware semantics: overflow gives inf instead of raising.
    """
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        return float(np.float64(base) ** np.float64(exponent))
