"""The planar rotation group SO(2), stored as a unit complex number."""

from __future__ import annotations

import math

import numpy as np

from .lie_group import DEFAULT_EPS, LieGroup


def _tangent(a) -> float:
    """Extract the single tangent coordinate of SO(2)."""
    arr = np.asarray(a, dtype=float).reshape(-1)
    if arr.size != 1:
        raise ValueError(f"SO2 tangent vectors have 1 element, got {arr.size}")
    return float(arr[0])


class SO2(LieGroup):
    """Planar rotation.

    Coefficients are ``[qz, qw]`` with ``qz**2 + qw**2 == 1``; the tangent
    space is the single angle ``[wz]``.
    """

    DOF = 1
    IS_COMMUTATIVE = True

    def __init__(self, angle: float = 0.0):
        self._c = np.array([math.sin(angle), math.cos(angle)])

    @classmethod
    def _from_unit(cls, qz: float, qw: float) -> "SO2":
        obj = cls.__new__(cls)
        obj._c = np.array([qz, qw], dtype=float)
        return obj

    @classmethod
    def from_coeffs(cls, qz: float, qw: float) -> "SO2":
        """Construct from (possibly unnormalized) sine and cosine coefficients."""
        n = math.hypot(qz, qw)
        if n == 0:
            raise ValueError("coefficients must not both be zero")
        return cls._from_unit(qz / n, qw / n)

    @classmethod
    def from_complex(cls, c: complex) -> "SO2":
        """Construct from a (possibly unnormalized) complex number."""
        c = complex(c)
        return cls.from_coeffs(c.imag, c.real)

    def __repr__(self) -> str:
        return f"SO2(angle={self.angle()!r})"

    def coeffs(self) -> np.ndarray:
        """A copy of ``[qz, qw]``."""
        return self._c.copy()

    # group interface

    def dof(self) -> int:
        return 1

    @classmethod
    def identity(cls, dof=None) -> "SO2":
        cls._resolve_dof(dof)
        return cls._from_unit(0.0, 1.0)

    @classmethod
    def random(cls, dof=None) -> "SO2":
        cls._resolve_dof(dof)
        return cls(np.random.uniform(-math.pi, math.pi))

    def compose(self, other: "SO2") -> "SO2":
        qz1, qw1 = self._c
        qz2, qw2 = other._c
        return SO2._from_unit(qz1 * qw2 + qw1 * qz2, qw1 * qw2 - qz1 * qz2)

    def inverse(self) -> "SO2":
        return SO2._from_unit(-self._c[0], self._c[1])

    def log(self) -> np.ndarray:
        return np.array([math.atan2(self._c[0], self._c[1])])

    def Ad(self) -> np.ndarray:  # noqa: N802
        return np.ones((1, 1))

    def is_approx(self, other, eps: float = DEFAULT_EPS) -> bool:
        b = other.coeffs() if isinstance(other, SO2) else np.asarray(other, dtype=float)
        diff = np.linalg.norm(self._c - b)
        return bool(diff <= eps * min(np.linalg.norm(self._c), np.linalg.norm(b)))

    def matrix(self) -> np.ndarray:
        """The 2x2 rotation matrix."""
        qz, qw = self._c
        return np.array([[qw, -qz], [qz, qw]])

    # tangent interface

    @classmethod
    def exp(cls, a) -> "SO2":
        return cls(_tangent(a))

    @classmethod
    def hat(cls, a) -> np.ndarray:
        """Map a tangent vector to its 2x2 Lie algebra matrix."""
        w = _tangent(a)
        return np.array([[0.0, -w], [w, 0.0]])

    @classmethod
    def vee(cls, A) -> np.ndarray:
        """Map a 2x2 Lie algebra matrix to its tangent vector."""
        A = np.asarray(A, dtype=float)
        if A.shape != (2, 2):
            raise ValueError("expected a 2x2 matrix")
        return np.array([A[1, 0]])

    @classmethod
    def ad(cls, a) -> np.ndarray:
        _tangent(a)
        return np.zeros((1, 1))

    @classmethod
    def dr_exp(cls, a) -> np.ndarray:
        _tangent(a)
        return np.ones((1, 1))

    @classmethod
    def dr_expinv(cls, a) -> np.ndarray:
        _tangent(a)
        return np.ones((1, 1))

    @classmethod
    def d2r_exp(cls, a) -> np.ndarray:
        _tangent(a)
        return np.zeros((1, 1))

    @classmethod
    def d2r_expinv(cls, a) -> np.ndarray:
        _tangent(a)
        return np.zeros((1, 1))

    # rotation-specific

    def angle(self) -> float:
        """Rotation angle in ``[-pi, pi]``."""
        return float(self.log()[0])

    def angle_cw(self) -> float:
        """Rotation angle in ``[-2 pi, 0]``."""
        y, x = self._c
        if y <= 0.0:
            return math.atan2(y, x)
        return math.atan2(-y, -x) - math.pi

    def angle_ccw(self) -> float:
        """Rotation angle in ``[0, 2 pi]``."""
        y, x = self._c
        if y >= 0.0:
            return math.atan2(y, x)
        return math.pi + math.atan2(-y, -x)

    def unit_complex(self) -> np.ndarray:
        """``[qw, qz]``: real and imaginary parts of the unit complex number."""
        return np.array([self._c[1], self._c[0]])

    def u1(self) -> complex:
        """The rotation as a unit complex number."""
        return complex(self._c[1], self._c[0])

    def act(self, v) -> np.ndarray:
        """Rotate a 2D vector."""
        return self.matrix() @ np.asarray(v, dtype=float)

    def dr_action(self, v) -> np.ndarray:
        """Right Jacobian of ``act(v)`` with respect to the group, shape (2, 1)."""
        v = np.asarray(v, dtype=float)
        return (self.matrix() @ SO2.hat([1.0]) @ v).reshape(2, 1)

    def __format__(self, spec: str) -> str:
        return format(self.angle(), spec)