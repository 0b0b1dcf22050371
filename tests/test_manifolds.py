import numpy as np
import pytest

from smoothlie.manifolds import (
    AnyManifold,
    dof,
    rminus,
    rplus,
    wrt,
    wrt_dof,
    wrt_rplus,
)
from smoothlie.se2 import SE2
from smoothlie.so2 import SO2


def test_any_manifold_wraps_group():
    np.random.seed(42)
    x = SE2.random()
    xa = AnyManifold(x)
    assert xa.get().is_approx(x)
    assert xa.dof() == 3


def test_any_manifold_copy():
    np.random.seed(42)
    x = SE2.random()
    xa = AnyManifold(x)
    copy1 = AnyManifold(xa)
    assert isinstance(copy1.get(), SE2)
    assert copy1.get().is_approx(x)


def test_any_manifold_rplus():
    np.random.seed(42)
    x = SE2.random()
    a = np.random.uniform(-1.0, 1.0, 3)
    mp = rplus(AnyManifold(x), a)
    assert isinstance(mp, AnyManifold)
    assert mp.get().is_approx(x + a)


def test_any_manifold_rminus():
    np.random.seed(42)
    x1 = SE2.random()
    x2 = SE2.random()
    d = np.asarray(rminus(AnyManifold(x1), AnyManifold(x2)), dtype=float)
    expected = np.asarray(x1 - x2, dtype=float)
    assert d.shape == (3,)
    assert np.linalg.norm(d - expected) <= 1e-12 * np.linalg.norm(expected)


def test_any_manifold_rminus_type_mismatch():
    with pytest.raises(TypeError):
        AnyManifold(SE2.identity()).rminus(AnyManifold(SO2.identity()))


def test_any_manifold_rejects_non_manifold():
    with pytest.raises(TypeError):
        AnyManifold("text")


def test_any_manifold_scalar():
    xa = AnyManifold(1.5)
    assert xa.dof() == 1
    assert xa.rplus([0.5]).get() == pytest.approx(2.0)


def test_any_manifold_array_is_copied():
    v = np.array([1.0, 2.0])
    xa = AnyManifold(v)
    v[0] = 10.0
    assert xa.get()[0] == 1.0


def test_dof_dispatch():
    assert dof(SE2.identity()) == 3
    assert dof(np.zeros(4)) == 4
    assert dof(2.0) == 1
    with pytest.raises(TypeError):
        dof("x")


def test_rplus_array_and_scalar():
    assert np.allclose(rplus(np.array([1.0, 2.0]), [0.5, -0.5]), [1.5, 1.5])
    assert rplus(3.0, [1.0]) == pytest.approx(4.0)


def test_rplus_wrong_size():
    with pytest.raises(ValueError):
        rplus(SE2.identity(), [1.0, 2.0])


def test_rminus_scalar_and_array():
    assert np.allclose(rminus(3.0, 1.0), [2.0])
    assert np.allclose(rminus(np.array([3.0, 1.0]), np.array([1.0, 1.0])), [2.0, 0.0])


def test_rminus_mismatch():
    with pytest.raises(TypeError):
        rminus(SE2.identity(), np.zeros(3))
    with pytest.raises(ValueError):
        rminus(np.zeros(2), np.zeros(3))


def test_rplus_rminus_roundtrip():
    np.random.seed(3)
    x = SE2.random()
    a = np.random.uniform(-0.5, 0.5, 3)
    assert np.allclose(rminus(rplus(x, a), x), a)


def test_wrt_groups_arguments():
    x = SE2.identity()
    v = np.zeros(2)
    grouped = wrt(x, v, 1.0)
    assert len(grouped) == 3
    assert grouped[0] is x
    assert grouped[1] is v


def test_wrt_rejects_non_manifold():
    with pytest.raises(TypeError):
        wrt(SE2.identity(), "abc")


def test_wrt_dof():
    assert wrt_dof(wrt(SE2.identity(), SO2.identity(), np.zeros(4))) == 8


def test_wrt_rplus():
    np.random.seed(7)
    x = SE2.random()
    s = SO2.random()
    v = np.array([1.0, 2.0])
    a = np.random.uniform(-1.0, 1.0, 6)
    out = wrt_rplus(wrt(x, s, v), a)
    assert out[0].is_approx(x + a[:3])
    assert out[1].is_approx(s + a[3:4])
    assert np.allclose(out[2], v + a[4:])


def test_wrt_rplus_wrong_size():
    with pytest.raises(ValueError):
        wrt_rplus(wrt(SE2.identity(), 1.0), np.zeros(3))