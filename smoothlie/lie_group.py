"""Abstract Lie group interface with the derived operations built on it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import reduce
from typing import ClassVar, TypeVar

import numpy as np

DEFAULT_EPS = 1e-12
"""Default relative tolerance of :meth:`LieGroup.is_approx`."""

G = TypeVar("G", bound="LieGroup")


class LieGroup(ABC):
    """Base class for Lie group elements.

    ``DOF`` is the tangent-space dimension, or ``-1`` when it is only known
    at run time. Tangent vectors, Jacobians and Hessians are numpy arrays;
    Hessians have shape ``(dof, dof * dof)``.
    """

    DOF: ClassVar[int] = -1
    IS_COMMUTATIVE: ClassVar[bool] = False

    @classmethod
    def _resolve_dof(cls, dof: int | None) -> int:
        """Validate a requested dof against the class's static dof."""
        if dof is None:
            if cls.DOF < 0:
                raise ValueError(f"{cls.__name__} has dynamic size; dof must be given")
            return cls.DOF
        if dof < 0:
            raise ValueError("dof must be non-negative")
        if cls.DOF >= 0 and dof != cls.DOF:
            raise ValueError(f"{cls.__name__} has {cls.DOF} degrees of freedom, not {dof}")
        return int(dof)

    # group interface

    @abstractmethod
    def dof(self) -> int:
        """Degrees of freedom of this element."""

    @classmethod
    @abstractmethod
    def identity(cls: type[G], dof: int | None = None) -> G:
        """Identity element."""

    @classmethod
    @abstractmethod
    def random(cls: type[G], dof: int | None = None) -> G:
        """Random element."""

    @abstractmethod
    def compose(self: G, other: G) -> G:
        """Group composition ``self * other``."""

    def __mul__(self, other):
        if isinstance(other, LieGroup):
            return self.compose(other)
        return NotImplemented

    @abstractmethod
    def inverse(self: G) -> G:
        """Group inverse."""

    @abstractmethod
    def log(self) -> np.ndarray:
        """Group logarithm, mapping to the tangent space."""

    @abstractmethod
    def Ad(self) -> np.ndarray:  # noqa: N802
        """Group adjoint matrix."""

    @abstractmethod
    def is_approx(self, other, eps: float = DEFAULT_EPS) -> bool:
        """Whether two elements are approximately equal."""

    # tangent interface

    @classmethod
    @abstractmethod
    def exp(cls: type[G], a) -> G:
        """Lie algebra exponential."""

    @classmethod
    @abstractmethod
    def ad(cls, a) -> np.ndarray:
        """Lie algebra adjoint matrix."""

    @classmethod
    @abstractmethod
    def dr_exp(cls, a) -> np.ndarray:
        """Right Jacobian of the exponential map."""

    @classmethod
    @abstractmethod
    def dr_expinv(cls, a) -> np.ndarray:
        """Right Jacobian of the inverse exponential map."""

    @classmethod
    @abstractmethod
    def d2r_exp(cls, a) -> np.ndarray:
        """Right Hessian of the exponential map."""

    @classmethod
    @abstractmethod
    def d2r_expinv(cls, a) -> np.ndarray:
        """Right Hessian of the inverse exponential map."""

    # derived operations

    @classmethod
    def dl_exp(cls, a) -> np.ndarray:
        """Left Jacobian of the exponential map."""
        return cls.dr_exp(-np.asarray(a, dtype=float))

    @classmethod
    def dl_expinv(cls, a) -> np.ndarray:
        """Left Jacobian of the inverse exponential map."""
        return cls.dr_expinv(-np.asarray(a, dtype=float))

    @classmethod
    def d2l_exp(cls, a) -> np.ndarray:
        """Left Hessian of the exponential map."""
        return -cls.d2r_exp(-np.asarray(a, dtype=float))

    @classmethod
    def d2l_expinv(cls, a) -> np.ndarray:
        """Left Hessian of the inverse exponential map."""
        return -cls.d2r_expinv(-np.asarray(a, dtype=float))

    def rplus(self: G, a) -> G:
        """Right-plus: ``self * exp(a)``."""
        return self.compose(type(self).exp(a))

    def rminus(self, other) -> np.ndarray:
        """Right-minus: ``log(other^-1 * self)``."""
        return other.inverse().compose(self).log()

    def __add__(self, a):
        if isinstance(a, LieGroup):
            return NotImplemented
        return self.rplus(a)

    def __sub__(self, other):
        if isinstance(other, LieGroup):
            return self.rminus(other)
        return NotImplemented

    def lplus(self: G, a) -> G:
        """Left-plus: ``exp(a) * self``."""
        return type(self).exp(a).compose(self)

    def lminus(self, other) -> np.ndarray:
        """Left-minus: ``log(self * other^-1)``."""
        return self.compose(other.inverse()).log()


def composition(g: G, *args: G) -> G:
    """Compose ``g`` with each of ``args`` from left to right."""
    return reduce(lambda acc, h: acc.compose(h), args, g)