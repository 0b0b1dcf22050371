"""The planar rigid motion group SE(2)."""

from __future__ import annotations

import math

import numpy as np

from .lie_group import DEFAULT_EPS, LieGroup
from .so2 import SO2
from .trig import EPS2, cos_2, sin_3


def _tangent(a) -> np.ndarray:
    arr = np.asarray(a, dtype=float).reshape(-1)
    if arr.size != 3:
        raise ValueError(f"SE2 tangent vectors have 3 elements, got {arr.size}")
    return arr


class SE2(LieGroup):
    """Planar rigid motion.

    Coefficients are ``[x, y, qz, qw]``; tangent vectors are ``[vx, vy, wz]``.
    """

    DOF = 3
    IS_COMMUTATIVE = False

    def __init__(self, so2: SO2 | None = None, r2=(0.0, 0.0)):
        if so2 is None:
            so2 = SO2.identity()
        r2 = np.asarray(r2, dtype=float).reshape(-1)
        if r2.size != 2:
            raise ValueError("translation must have 2 elements")
        self._c = np.concatenate([r2, so2.coeffs()])

    @classmethod
    def _from_coeffs(cls, c) -> "SE2":
        obj = cls.__new__(cls)
        obj._c = np.asarray(c, dtype=float).copy()
        return obj

    @classmethod
    def from_isometry(cls, t) -> "SE2":
        """Construct from a 2D homogeneous transform (3x3 or 2x3 matrix)."""
        t = np.asarray(t, dtype=float)
        if t.shape not in ((3, 3), (2, 3)):
            raise ValueError("expected a 3x3 or 2x3 transform")
        return cls._from_coeffs([t[0, 2], t[1, 2], t[1, 0], t[0, 0]])

    def __repr__(self) -> str:
        return f"SE2(r2={self.r2().tolist()!r}, angle={self.so2().angle()!r})"

    def coeffs(self) -> np.ndarray:
        """A copy of ``[x, y, qz, qw]``."""
        return self._c.copy()

    def so2(self) -> SO2:
        """The rotation part."""
        return SO2.from_coeffs(self._c[2], self._c[3])

    def r2(self) -> np.ndarray:
        """The translation part."""
        return self._c[:2].copy()

    def _rotation(self) -> np.ndarray:
        qz, qw = self._c[2:]
        return np.array([[qw, -qz], [qz, qw]])

    # group interface

    def dof(self) -> int:
        return 3

    @classmethod
    def identity(cls, dof=None) -> "SE2":
        cls._resolve_dof(dof)
        return cls._from_coeffs([0.0, 0.0, 0.0, 1.0])

    @classmethod
    def random(cls, dof=None) -> "SE2":
        cls._resolve_dof(dof)
        return cls(SO2.random(), np.random.uniform(-1.0, 1.0, size=2))

    def compose(self, other: "SE2") -> "SE2":
        rot = self.so2().compose(other.so2())
        t = self._rotation() @ other._c[:2] + self._c[:2]
        return SE2(rot, t)

    def inverse(self) -> "SE2":
        rot_inv = self.so2().inverse()
        return SE2(rot_inv, -(rot_inv.matrix() @ self._c[:2]))

    def log(self) -> np.ndarray:
        th = self.so2().angle()
        th2 = th * th
        b = th / 2.0
        a = 1.0 - th2 / 12.0 if th2 < EPS2 else b / math.tan(b)
        s_inv = np.array([[a, b], [-b, a]])
        return np.concatenate([s_inv @ self._c[:2], [th]])

    def Ad(self) -> np.ndarray:  # noqa: N802
        out = np.zeros((3, 3))
        out[:2, :2] = self._rotation()
        out[0, 2] = self._c[1]
        out[1, 2] = -self._c[0]
        out[2, 2] = 1.0
        return out

    def is_approx(self, other, eps: float = DEFAULT_EPS) -> bool:
        b = other.coeffs() if isinstance(other, SE2) else np.asarray(other, dtype=float)
        diff = np.linalg.norm(self._c - b)
        return bool(diff <= eps * min(np.linalg.norm(self._c), np.linalg.norm(b)))

    def matrix(self) -> np.ndarray:
        """The 3x3 homogeneous matrix."""
        out = np.eye(3)
        out[:2, :2] = self._rotation()
        out[:2, 2] = self._c[:2]
        return out

    # tangent interface

    @classmethod
    def exp(cls, a) -> "SE2":
        a = _tangent(a)
        th = a[2]
        th2 = th * th
        if th2 < EPS2:
            sa = 1.0 - th2 / 6.0
            sb = -th / 2.0 + th * th2 / 24.0
        else:
            sa = math.sin(th) / th
            sb = (math.cos(th) - 1.0) / th
        s = np.array([[sa, sb], [-sb, sa]])
        return cls(SO2.exp([th]), s @ a[:2])

    @classmethod
    def hat(cls, a) -> np.ndarray:
        """Map a tangent vector to its 3x3 Lie algebra matrix."""
        a = _tangent(a)
        out = np.zeros((3, 3))
        out[:2, :2] = SO2.hat(a[2:])
        out[:2, 2] = a[:2]
        return out

    @classmethod
    def vee(cls, A) -> np.ndarray:
        """Map a 3x3 Lie algebra matrix to its tangent vector."""
        A = np.asarray(A, dtype=float)
        if A.shape != (3, 3):
            raise ValueError("expected a 3x3 matrix")
        return np.concatenate([A[:2, 2], SO2.vee(A[:2, :2])])

    @classmethod
    def ad(cls, a) -> np.ndarray:
        a = _tangent(a)
        out = np.zeros((3, 3))
        out[:2, :2] = SO2.hat(a[2:])
        out[0, 2] = a[1]
        out[1, 2] = -a[0]
        return out

    @classmethod
    def dr_exp(cls, a) -> np.ndarray:
        a = _tangent(a)
        th2 = a[2] * a[2]
        ad_a = cls.ad(a)
        return np.eye(3) + cos_2(th2) * ad_a - sin_3(th2) * (ad_a @ ad_a)

    @classmethod
    def dr_expinv(cls, a) -> np.ndarray:
        a = _tangent(a)
        th = a[2]
        th2 = th * th
        if th2 < EPS2:
            coef = 1.0 / 12.0 + th2 / 720.0
        else:
            coef = 1.0 / th2 - (1.0 + math.cos(th)) / (2.0 * th * math.sin(th))
        ad_a = cls.ad(a)
        return np.eye(3) + ad_a / 2.0 + coef * (ad_a @ ad_a)

    @classmethod
    def d2r_exp(cls, a) -> np.ndarray:
        a = _tangent(a)
        x, y, wz = a
        wz2 = wz * wz
        if wz2 < EPS2:
            ca = 0.5 - wz2 / 24.0
            cb = 1.0 / 6.0 - wz2 / 120.0
            dca = -wz / 48.0
            dcb = -wz / 60.0
        else:
            s, c = math.sin(wz), math.cos(wz)
            wz3 = wz2 * wz
            wz4 = wz2 * wz2
            ca = (1.0 - c) / wz2
            cb = (wz - s) / wz3
            dca = s / wz2 + 2.0 * c / wz3 - 2.0 / wz3
            dcb = -c / wz3 - 2.0 / wz3 + 3.0 * s / wz4

        hess = np.array(
            [
                [0, 0, -2 * cb * wz, 0, 0, -ca, 0, 0, 0],
                [0, 0, ca, 0, 0, -2 * cb * wz, 0, 0, 0],
                [cb * wz, -ca, cb * x, ca, cb * wz, cb * y, 0, 0, 0],
            ],
            dtype=float,
        )
        ad_a = cls.ad(a)
        ad_a2 = ad_a @ ad_a
        for j in range(3):
            hess[:, 2 + 3 * j] += dcb * ad_a2[j] - dca * ad_a[j]
        return hess

    @classmethod
    def d2r_expinv(cls, a) -> np.ndarray:
        a = _tangent(a)
        x, y, wz = a
        wz2 = wz * wz
        if wz2 < EPS2:
            ca = 1.0 / 12.0 + wz2 / 720.0
            dca = 1.0 / 360.0
        else:
            s, c = math.sin(wz), math.cos(wz)
            wz3 = wz2 * wz
            ca = 1.0 / wz2 - (1.0 + c) / (2.0 * wz * s)
            dca = (
                1.0 / (2.0 * wz)
                + c * c / (2.0 * wz * s * s)
                + c / (2.0 * wz * s * s)
                + c / (2.0 * wz2 * s)
                + 1.0 / (2.0 * wz2 * s)
                - 2.0 / wz3
            )

        hess = np.array(
            [
                [0, 0, -2 * ca * wz, 0, 0, 0.5, 0, 0, 0],
                [0, 0, -0.5, 0, 0, -2 * ca * wz, 0, 0, 0],
                [ca * wz, 0.5, ca * x, -0.5, ca * wz, ca * y, 0, 0, 0],
            ],
            dtype=float,
        )
        ad_a = cls.ad(a)
        ad_a2 = ad_a @ ad_a
        for j in range(3):
            hess[:, 2 + 3 * j] += dca * ad_a2[j]
        return hess

    # motion-specific

    def isometry(self) -> np.ndarray:
        """The motion as a 3x3 homogeneous transform."""
        return self.matrix()

    def act(self, v) -> np.ndarray:
        """Transform a 2D point."""
        return self.so2().act(v) + self._c[:2]

    def dr_action(self, v) -> np.ndarray:
        """Right Jacobian of ``act(v)`` with respect to the group, shape (2, 3)."""
        rot = self.so2()
        return np.hstack([rot.matrix(), rot.dr_action(v)])

    def __format__(self, spec: str) -> str:
        x, y = self._c[:2]
        return f"r2: [{format(x, spec)}, {format(y, spec)}], so2: {format(self.so2().angle(), spec)}"