"""Evaluation of cumulative splines on Lie groups and their derivatives.

A cumulative spline of degree ``K`` is defined by ``K`` tangent differences
``vs`` (or ``K + 1`` group elements ``gs``) and a cumulative basis matrix
``bcum`` of shape ``(K + 1, K + 1)``, whose column ``j`` holds the monomial
coefficients of the cumulative basis function ``j``.
"""

from __future__ import annotations

import math

import numpy as np

from .lie_group import LieGroup


def monomial_derivatives(u: float, degree: int, order: int) -> np.ndarray:
    """Derivatives of ``[1, u, ..., u**degree]``.

    Row ``d`` of the ``(order + 1, degree + 1)`` result is the ``d``-th
    derivative with respect to ``u``.
    """
    if degree < 0 or order < 0:
        raise ValueError("degree and order must be non-negative")
    out = np.zeros((order + 1, degree + 1))
    for d in range(order + 1):
        for i in range(d, degree + 1):
            out[d, i] = math.perm(i, d) * u ** (i - d)
    return out


def _tangents(vs) -> list[np.ndarray]:
    out = [np.asarray(v, dtype=float).reshape(-1) for v in vs]
    if not out:
        raise ValueError("at least one segment is required")
    n = out[0].size
    if any(v.size != n for v in out):
        raise ValueError("tangent vectors must all have the same size")
    return out


def _basis_values(u: float, bcum, k: int, order: int) -> np.ndarray:
    """Row ``d`` holds the ``d``-th derivative of every cumulative basis function."""
    b = np.asarray(bcum, dtype=float)
    if b.shape != (k + 1, k + 1):
        raise ValueError(f"basis matrix must have shape {(k + 1, k + 1)}, got {b.shape}")
    return monomial_derivatives(u, k, order) @ b


def _check_order(order: int, highest: int) -> None:
    if not 0 <= order <= highest:
        raise ValueError(f"order must be between 0 and {highest}")


def _differences(gs) -> list[np.ndarray]:
    gs = list(gs)
    if len(gs) < 2:
        raise ValueError("at least two control points are required")
    if not all(isinstance(g, LieGroup) for g in gs):
        raise TypeError("control points must be Lie group elements")
    return [g1.rminus(g0) for g0, g1 in zip(gs, gs[1:])]


def cspline_eval_vs(group: type[LieGroup], vs, bcum, u: float, order: int = 0):
    """Evaluate a cumulative spline from its differences.

    Returns ``(g, derivatives)`` where ``derivatives`` holds the first
    ``order`` (at most 3) body derivatives: velocity, acceleration, jerk.
    """
    _check_order(order, 3)
    vs = _tangents(vs)
    k = len(vs)
    coef = _basis_values(u, bcum, k, 3)
    n = vs[0].size

    g = group.identity(n)
    vel = np.zeros(n)
    acc = np.zeros(n)
    jer = np.zeros(n)

    for j, vj in enumerate(vs, start=1):
        bj, dbj, d2bj, d3bj = coef[:, j]
        exp_v = group.exp(bj * vj)
        g = g.compose(exp_v)
        if order < 1:
            continue
        adj = exp_v.inverse().Ad()
        vel = adj @ vel + dbj * vj
        if order < 2:
            continue
        vel_bracket_vj = group.ad(vel) @ vj
        acc = adj @ acc + dbj * vel_bracket_vj + d2bj * vj
        if order < 3:
            continue
        jer = (
            adj @ jer
            + 2.0 * dbj * (group.ad(acc) @ vj)
            - dbj * dbj * (group.ad(vel_bracket_vj) @ vj)
            + d2bj * vel_bracket_vj
            + d3bj * vj
        )

    return g, (vel, acc, jer)[:order]


def cspline_eval_dg_dvs(group: type[LieGroup], vs, bcum, u: float, order: int = 0):
    """Jacobian of a cumulative spline with respect to its differences.

    Returns ``(dg_dvs, derivatives)`` where ``derivatives`` holds the first
    ``order`` (at most 2) of the Jacobians of velocity and acceleration.
    Each Jacobian has shape ``(dof, dof * K)``.
    """
    _check_order(order, 2)
    vs = _tangents(vs)
    k = len(vs)
    coef = _basis_values(u, bcum, k, 2)
    n = vs[0].size
    eye = np.eye(n)

    dg = np.zeros((n, n * k))
    dvel = np.zeros((n, n * k))
    dacc = np.zeros((n, n * k))
    vel = np.zeros(n)
    acc = np.zeros(n)

    for j, vj in enumerate(vs, start=1):
        bj, dbj, d2bj = coef[:, j]
        lo, hi = (j - 1) * n, j * n
        adj = group.exp(-bj * vj).Ad()
        dr_exp = group.dr_exp(-bj * vj)

        dg[:, :lo] = adj @ dg[:, :lo]
        dg[:, lo:hi] += bj * group.dr_exp(bj * vj)

        if order < 1:
            continue
        dvel[:, :lo] = adj @ dvel[:, :lo]
        dvel[:, lo:hi] += bj * (adj @ group.ad(vel) @ dr_exp)
        dvel[:, lo:hi] += dbj * eye
        vel = adj @ vel + dbj * vj

        if order < 2:
            continue
        dacc[:, :lo] = adj @ dacc[:, :lo]
        dacc[:, :hi] -= dbj * (group.ad(vj) @ dvel[:, :hi])
        dacc[:, lo:hi] += bj * (adj @ group.ad(acc) @ dr_exp)
        dacc[:, lo:hi] += dbj * group.ad(vel)
        dacc[:, lo:hi] += d2bj * eye
        acc = adj @ acc + dbj * (group.ad(vel) @ vj) + d2bj * vj

    return dg, (dvel, dacc)[:order]


def cspline_eval_gs(gs, bcum, u: float, order: int = 0):
    """Evaluate a cumulative spline from its ``K + 1`` control points.

    Returns ``(g, derivatives)`` as :func:`cspline_eval_vs` does.
    """
    gs = list(gs)
    vs = _differences(gs)
    g, derivatives = cspline_eval_vs(type(gs[0]), vs, bcum, u, order)
    return gs[0].compose(g), derivatives


def cspline_eval_dg_dgs(gs, bcum, u: float, order: int = 0):
    """Jacobian of a cumulative spline with respect to its control points.

    Returns ``(dg_dgs, derivatives)`` where ``derivatives`` holds the first
    ``order`` (at most 2) of the Jacobians of velocity and acceleration.
    Each Jacobian has shape ``(dof, dof * (K + 1))``.
    """
    _check_order(order, 2)
    gs = list(gs)
    vs = _differences(gs)
    group = type(gs[0])
    k = len(vs)
    n = vs[0].size

    dg_dvs, (dvel_dvs, dacc_dvs) = cspline_eval_dg_dvs(group, vs, bcum, u, 2)
    coef = _basis_values(u, bcum, k, 0)[0]

    dg = np.zeros((n, n * (k + 1)))
    dvel = np.zeros((n, n * (k + 1)))
    dacc = np.zeros((n, n * (k + 1)))

    exp_series = group.identity(n)
    for j, vj in enumerate(vs):
        dr_expinv = group.dr_expinv(vj)
        dl_expinv = -group.ad(vj) + dr_expinv
        cur = slice(j * n, (j + 1) * n)
        nxt = slice((j + 1) * n, (j + 2) * n)
        for out, src in ((dg, dg_dvs), (dvel, dvel_dvs), (dacc, dacc_dvs)):
            out[:, cur] -= src[:, cur] @ dl_expinv
            out[:, nxt] += src[:, cur] @ dr_expinv
        exp_series = exp_series.compose(group.exp(coef[1 + j] * vj))

    # g also depends on the first control point directly
    dg[:, :n] += exp_series.inverse().Ad()

    return dg, (dvel, dacc)[:order]