import numpy as np
import pytest

from smoothlie.lie_group import LieGroup, composition


class MyGroup(LieGroup):
    DOF = 1
    IS_COMMUTATIVE = False

    def __init__(self, data):
        self.data = float(data)

    def dof(self):
        return 1

    @classmethod
    def identity(cls, dof=None):
        cls._resolve_dof(dof)
        return cls(0.0)

    @classmethod
    def random(cls, dof=None):
        cls._resolve_dof(dof)
        return cls(np.random.uniform(-1.0, 1.0))

    def compose(self, other):
        return type(self)(self.data + other.data)

    def inverse(self):
        return type(self)(-self.data)

    def log(self):
        return np.array([self.data])

    def Ad(self):
        return np.eye(1)

    def is_approx(self, other, eps=1e-12):
        return abs(self.data - other.data) <= eps * abs(self.data)

    @classmethod
    def exp(cls, a):
        return cls(np.asarray(a, dtype=float)[0])

    @classmethod
    def ad(cls, a):
        return np.zeros((1, 1))

    @classmethod
    def dr_exp(cls, a):
        return np.eye(1)

    @classmethod
    def dr_expinv(cls, a):
        return np.eye(1)

    @classmethod
    def d2r_exp(cls, a):
        return np.zeros((1, 1))

    @classmethod
    def d2r_expinv(cls, a):
        return np.zeros((1, 1))


class Skewed(MyGroup):
    @classmethod
    def dr_exp(cls, a):
        return np.array([[1.0 + a[0]]])

    @classmethod
    def dr_expinv(cls, a):
        return np.array([[2.0 * a[0]]])

    @classmethod
    def d2r_exp(cls, a):
        return np.array([[a[0]]])

    @classmethod
    def d2r_expinv(cls, a):
        return np.array([[3.0 * a[0]]])


def test_base_is_abstract():
    with pytest.raises(TypeError):
        LieGroup()


def test_identity_is_neutral_in_composition():
    g = composition(MyGroup.identity(), MyGroup(2.0))
    assert g.data == pytest.approx(2.0)


def test_composition_multinary():
    g = composition(MyGroup(1.0), MyGroup(2.0), MyGroup(3.5))
    assert g.data == pytest.approx(6.5)


def test_mul_composes():
    assert LieGroup.__mul__(MyGroup(1.5), MyGroup(0.5)).data == pytest.approx(2.0)
    with pytest.raises(TypeError):
        MyGroup(1.0) * 5


def test_rplus_and_add():
    g = MyGroup(0.25)
    assert LieGroup.rplus(g, [0.5]).data == pytest.approx(0.75)
    assert LieGroup.__add__(g, np.array([0.5])).data == pytest.approx(0.75)


def test_rminus_and_sub():
    g1, g2 = MyGroup(0.7), MyGroup(0.2)
    assert np.allclose(LieGroup.rminus(g1, g2), [0.5])
    assert np.allclose(LieGroup.__sub__(g1, g2), [0.5])


def test_rplus_rminus_round_trip():
    g = MyGroup(0.3)
    a = np.array([-0.4])
    assert np.allclose(LieGroup.rminus(LieGroup.rplus(g, a), g), a)


def test_lplus_lminus_round_trip():
    g = MyGroup(-0.1)
    a = np.array([0.9])
    moved = LieGroup.lplus(g, a)
    assert moved.data == pytest.approx(0.8)
    assert np.allclose(LieGroup.lminus(moved, g), a)


def test_is_approx_after_composition():
    g = composition(MyGroup(0.4), MyGroup(0.6))
    assert g.is_approx(MyGroup(1.0))
    assert not g.is_approx(MyGroup(1.1))
    assert g.is_approx(MyGroup(1.05), 0.1)


def test_left_jacobians_flip_sign():
    a = np.array([0.3])
    assert np.allclose(LieGroup.dl_exp.__func__(Skewed, a), [[0.7]])
    assert np.allclose(LieGroup.dl_expinv.__func__(Skewed, a), [[-0.6]])
    assert np.allclose(LieGroup.d2l_exp.__func__(Skewed, a), [[0.3]])
    assert np.allclose(LieGroup.d2l_expinv.__func__(Skewed, a), [[0.9]])