"""Euclidean vectors as a commutative Lie group under addition."""

from __future__ import annotations

import numpy as np

from .lie_group import DEFAULT_EPS, LieGroup


def _vector(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return arr


class Rn(LieGroup):
    """Element of R^n with addition as the group operation."""

    DOF = -1
    IS_COMMUTATIVE = True

    def __init__(self, values):
        self._v = _vector(values)

    def __repr__(self) -> str:
        return f"Rn({self._v.tolist()!r})"

    def coeffs(self) -> np.ndarray:
        """A copy of the underlying vector."""
        return self._v.copy()

    def _other(self, other) -> np.ndarray:
        v = other._v if isinstance(other, Rn) else _vector(other)
        if v.shape != self._v.shape:
            raise ValueError(f"size mismatch: {self._v.size} and {v.size}")
        return v

    # group interface

    def dof(self) -> int:
        return int(self._v.size)

    @classmethod
    def identity(cls, dof=None) -> "Rn":
        return cls(np.zeros(cls._resolve_dof(dof)))

    @classmethod
    def random(cls, dof=None) -> "Rn":
        return cls(np.random.uniform(-1.0, 1.0, size=cls._resolve_dof(dof)))

    def compose(self, other) -> "Rn":
        return Rn(self._v + self._other(other))

    def inverse(self) -> "Rn":
        return Rn(-self._v)

    def log(self) -> np.ndarray:
        return self._v.copy()

    def Ad(self) -> np.ndarray:  # noqa: N802
        return np.eye(self._v.size)

    def is_approx(self, other, eps: float = DEFAULT_EPS) -> bool:
        v = self._other(other)
        diff = np.linalg.norm(self._v - v)
        return bool(diff <= eps * min(np.linalg.norm(self._v), np.linalg.norm(v)))

    # tangent interface

    @classmethod
    def exp(cls, a) -> "Rn":
        return cls(a)

    @classmethod
    def ad(cls, a) -> np.ndarray:
        n = _vector(a).size
        return np.zeros((n, n))

    @classmethod
    def dr_exp(cls, a) -> np.ndarray:
        return np.eye(_vector(a).size)

    @classmethod
    def dr_expinv(cls, a) -> np.ndarray:
        return np.eye(_vector(a).size)

    @classmethod
    def d2r_exp(cls, a) -> np.ndarray:
        n = _vector(a).size
        return np.zeros((n, n * n))

    @classmethod
    def d2r_expinv(cls, a) -> np.ndarray:
        n = _vector(a).size
        return np.zeros((n, n * n))