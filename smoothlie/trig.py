"""Taylor tails of sin and cos of varying degree.

Every function takes the *squared* argument ``x2``. Below ``EPS2`` a truncated
series is used instead of the closed form.
"""

from __future__ import annotations

import math

EPS2 = 1e-8
"""Squared-argument threshold below which the series expansions are used."""


def cos_2(x2: float) -> float:
    """Return ``(cos(x) - 1) / x**2``."""
    if x2 > EPS2:
        x = math.sqrt(x2)
        return (math.cos(x) - 1.0) / x2
    return -1.0 / 2.0 + x2 / 24.0 - x2 * x2 / 720.0


def sin_3(x2: float) -> float:
    """Return ``(sin(x) - x) / x**3``."""
    if x2 > EPS2:
        x = math.sqrt(x2)
        return (math.sin(x) - x) / (x2 * x)
    return -1.0 / 6.0 + x2 / 120.0 - x2 * x2 / 5040.0


def cos_4(x2: float) -> float:
    """Return ``(cos(x) - 1 + x**2 / 2) / x**4``."""
    if x2 > EPS2:
        x = math.sqrt(x2)
        return (math.cos(x) - 1.0 + x2 / 2.0) / (x2 * x2)
    return 1.0 / 24.0 - x2 / 720.0 + (x2 * x2) / 40320.0


def sin_5(x2: float) -> float:
    """Return ``(sin(x) - x + x**3 / 6) / x**5``."""
    if x2 > EPS2:
        x = math.sqrt(x2)
        return (math.sin(x) - x + x2 * x / 6.0) / (x2 * x2 * x)
    return 1.0 / 120.0 - x2 / 5040.0 + x2 * x2 / 362880.0


def cos_6(x2: float) -> float:
    """Return ``(cos(x) - 1 + x**2 / 2 - x**4 / 24) / x**6``."""
    x4 = x2 * x2
    if x2 > EPS2:
        x = math.sqrt(x2)
        return (math.cos(x) - 1.0 + x2 / 2.0 - x4 / 24.0) / (x4 * x2)
    return -1.0 / 720.0 + x2 / 40320.0 - x4 / 3628800.0