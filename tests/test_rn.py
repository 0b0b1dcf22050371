import numpy as np
import pytest

from smoothlie.lie_group import composition
from smoothlie.rn import Rn


def test_basics():
    np.random.seed(0)
    x_id = Rn.identity(3)
    x_df = Rn(np.zeros(3))
    assert Rn.DOF == -1
    assert x_id.dof() == 3
    assert x_id.is_approx(x_df)

    x_rd = Rn.random(3)
    v = x_rd.coeffs()

    assert np.allclose(x_rd.Ad(), np.eye(3))
    assert np.allclose(composition(x_rd, x_rd).coeffs(), v + v)
    assert np.allclose(x_rd.inverse().coeffs(), -v)
    assert np.allclose(x_rd.log(), v)
    assert Rn.exp(v).is_approx(x_rd)
    assert np.allclose(Rn.dr_exp(v), np.eye(3))
    assert np.allclose(Rn.dr_expinv(v), np.eye(3))


def test_identity_requires_dof():
    with pytest.raises(ValueError):
        Rn.identity()


def test_random_range_and_size():
    np.random.seed(3)
    v = Rn.random(5).coeffs()
    assert v.shape == (5,)
    assert np.all(np.abs(v) <= 1.0)


def test_rejects_matrix():
    with pytest.raises(ValueError):
        Rn([[1.0, 2.0]])


def test_compose_size_mismatch():
    with pytest.raises(ValueError):
        Rn([1.0, 2.0]).compose(Rn([1.0]))


def test_rplus_rminus_round_trip():
    g = Rn([1.0, -2.0])
    a = np.array([0.5, 0.25])
    assert np.allclose((g + a) - g, a)
    assert np.allclose((g + a).coeffs(), [1.5, -1.75])


def test_lminus():
    assert np.allclose(Rn([3.0, 1.0]).lminus(Rn([1.0, 1.0])), [2.0, 0.0])


def test_is_approx_tolerance():
    g = Rn([1.0, 0.0])
    assert not g.is_approx(Rn([1.1, 0.0]))
    assert g.is_approx(Rn([1.05, 0.0]), 0.1)


def test_algebra_matrices():
    a = np.array([0.1, 0.2])
    assert np.array_equal(Rn.ad(a), np.zeros((2, 2)))
    assert Rn.d2r_exp(a).shape == (2, 4)
    assert not Rn.d2r_expinv(a).any()
    assert np.allclose(Rn.dl_exp(a), np.eye(2))


def test_coeffs_is_copy():
    g = Rn([1.0, 2.0])
    c = g.coeffs()
    c[0] = 99.0
    assert np.allclose(g.coeffs(), [1.0, 2.0])