# core/fuzzy.py
EPSILON = 1e-5


def f64_fuzzy_eq(left: float, right: float) -> bool:
    return abs(left - right) < EPSILON


def fuzzy_eq(left, right) -> bool:
    """
    Compares two values with an absolute tolerance of EPSILON.
    Objects that define fuzzy_eq() compare themselves; numbers are compared directly.
    """
    if hasattr(left, "fuzzy_eq"):
        return left.fuzzy_eq(right)
    return f64_fuzzy_eq(left, right)
