"""Manifold dispatch, type-erased manifolds and grouping of arguments.

A manifold here is a :class:`~smoothlie.lie_group.LieGroup` element, an
:class:`AnyManifold`, a one-dimensional numpy array, or a real scalar. Arrays
and scalars are treated as Euclidean spaces.
"""

from __future__ import annotations

import numbers

import numpy as np

from .lie_group import LieGroup


def _is_scalar(m) -> bool:
    return isinstance(m, numbers.Real) and not isinstance(m, bool)


def _is_manifold(m) -> bool:
    if isinstance(m, (LieGroup, AnyManifold)):
        return True
    if isinstance(m, np.ndarray):
        return m.ndim == 1
    return _is_scalar(m)


def _tangent(a, n: int) -> np.ndarray:
    arr = np.asarray(a, dtype=float).reshape(-1)
    if arr.size != n:
        raise ValueError(f"tangent vector has {arr.size} elements, expected {n}")
    return arr


class AnyManifold:
    """A manifold value whose concrete type is only known at run time."""

    __slots__ = ("_value",)

    def __init__(self, value):
        if isinstance(value, AnyManifold):
            value = value._value
        if not _is_manifold(value):
            raise TypeError(f"{type(value).__name__} is not a manifold")
        self._value = value.copy() if isinstance(value, np.ndarray) else value

    def __repr__(self) -> str:
        return f"AnyManifold({self._value!r})"

    def get(self):
        """The wrapped value."""
        return self._value

    def dof(self) -> int:
        """Degrees of freedom of the wrapped value."""
        return dof(self._value)

    def rplus(self, a) -> "AnyManifold":
        """Right-plus, wrapped again."""
        return AnyManifold(rplus(self._value, a))

    def rminus(self, other: "AnyManifold") -> np.ndarray:
        """Right-minus against another wrapped value of the same type."""
        if not isinstance(other, AnyManifold):
            raise TypeError("rminus requires another AnyManifold")
        return rminus(self._value, other._value)


def dof(m) -> int:
    """Degrees of freedom of a manifold value."""
    if isinstance(m, (LieGroup, AnyManifold)):
        return m.dof()
    if isinstance(m, np.ndarray) and m.ndim == 1:
        return int(m.size)
    if _is_scalar(m):
        return 1
    raise TypeError(f"{type(m).__name__} is not a manifold")


def rplus(m, a):
    """Right-plus ``m ⊕ a``."""
    a = _tangent(a, dof(m))
    if isinstance(m, (LieGroup, AnyManifold)):
        return m.rplus(a)
    if isinstance(m, np.ndarray):
        return m + a
    return float(m) + float(a[0])


def rminus(m1, m2) -> np.ndarray:
    """Right-minus ``m1 ⊖ m2``; both values must be of the same kind."""
    if _is_scalar(m1) and _is_scalar(m2):
        return np.array([float(m1) - float(m2)])
    if not _is_manifold(m1):
        raise TypeError(f"{type(m1).__name__} is not a manifold")
    if type(m1) is not type(m2):
        raise TypeError(
            f"cannot subtract {type(m2).__name__} from {type(m1).__name__}"
        )
    if isinstance(m1, np.ndarray):
        if m1.shape != m2.shape:
            raise ValueError(f"size mismatch: {m1.size} and {m2.size}")
        return np.asarray(m1 - m2, dtype=float)
    return m1.rminus(m2)


def wrt(*args) -> tuple:
    """Group manifold arguments into a tuple."""
    for m in args:
        if not _is_manifold(m):
            raise TypeError(f"{type(m).__name__} is not a manifold")
    return tuple(args)


def wrt_dof(args) -> int:
    """Total degrees of freedom of a group of arguments."""
    return sum(dof(m) for m in args)


def wrt_rplus(args, a) -> tuple:
    """Apply ``rplus`` to each argument with its own slice of ``a``."""
    args = tuple(args)
    sizes = [dof(m) for m in args]
    a = _tangent(a, sum(sizes))
    bounds = np.cumsum([0, *sizes])
    return tuple(
        rplus(m, a[begin:end]) for m, begin, end in zip(args, bounds[:-1], bounds[1:])
    )