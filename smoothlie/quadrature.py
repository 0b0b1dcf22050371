"""Radau quadrature nodes and weights on [-1, 1]."""

from __future__ import annotations

import math

import numpy as np
from numpy.polynomial import legendre

MAX_LGR_NODES = 40
"""Largest node count for which :func:`lgr_nodes` is accurate."""


def cgr_nodes(k: int) -> np.ndarray:
    """Chebyshev-Gauss-Radau nodes on [-1, 1]."""
    if k < 0:
        raise ValueError("number of nodes must be non-negative")
    return np.array([-math.cos(2.0 * math.pi * i / (2 * k - 1)) for i in range(k)])


def lgr_nodes(k: int, iterations: int = 8) -> tuple[np.ndarray, np.ndarray]:
    """Legendre-Gauss-Radau nodes and weights on [-1, 1].

    The nodes are the roots of ``P_{k-1} + P_k``, found with ``iterations``
    Newton steps from the Chebyshev-Gauss-Radau nodes. The first node is -1
    with weight ``2 / k**2``; the others have weight
    ``(1 - x) / (k**2 P_{k-1}(x)**2)``.
    """
    if not 1 <= k <= MAX_LGR_NODES:
        raise ValueError(f"number of nodes must be between 1 and {MAX_LGR_NODES}")
    if iterations < 0:
        raise ValueError("iterations must be non-negative")

    p_km1 = np.zeros(k + 1)
    p_km1[k - 1] = 1.0
    f = p_km1.copy()
    f[k] = 1.0
    df = legendre.legder(f)

    xs = cgr_nodes(k)
    ws = np.empty(k)
    ws[0] = 2.0 / (k * k)
    for i in range(1, k):
        x = xs[i]
        for _ in range(iterations):
            x -= legendre.legval(x, f) / legendre.legval(x, df)
        xs[i] = x
        ws[i] = (1.0 - x) / (k * k * legendre.legval(x, p_km1) ** 2)
    return xs, ws