# smoothlie

Lie groups and manifolds with tangent-space derivatives, built on numpy.

## What it provides

- `smoothlie.lie_group`
  - `LieGroup` is the abstract base class for group elements. It offers
    `identity`, `random`, `compose` (also `*`), `inverse`, `log`, `exp`,
    the adjoints `Ad` and `ad`, `is_approx`, and the Jacobians and Hessians
    of the exponential map. The right ones are `dr_exp`, `dr_expinv`,
    `d2r_exp` and `d2r_expinv`. The left ones are `dl_exp`, `dl_expinv`,
    `d2l_exp` and `d2l_expinv`.
  - It also provides right-plus and right-minus: `rplus` and `rminus`, also
    written `g + a` and `g - h`. Left-plus and left-minus are `lplus` and
    `lminus`.
  - `composition(g, *args)` composes several elements from left to right.
- `smoothlie.rn.Rn`: vectors of any length as a commutative group under
  addition.
- `smoothlie.so2.SO2`: planar rotations, stored as `[qz, qw]`.
  - Construct one with `SO2(angle)`, `SO2.from_coeffs(qz, qw)` or
    `SO2.from_complex(c)`.
  - Read the angle with `angle`, `angle_cw` or `angle_ccw`. `u1` and
    `unit_complex` give it as a complex number.
  - It also has `matrix`, `hat`/`vee`, `act` (rotates a vector) and
    `dr_action`.
- `smoothlie.se2.SE2`: planar rigid motions, stored as `[x, y, qz, qw]`,
  with tangent vectors `[vx, vy, wz]`.
  - Build one with `SE2(so2, r2)` or `SE2.from_isometry(matrix)`.
  - `so2` and `r2` return the two parts. `matrix`/`isometry` give the 3x3
    homogeneous matrix.
  - It also has `act`, `dr_action` and `hat`/`vee`.
- `smoothlie.manifolds`
  - The free functions `dof`, `rplus` and `rminus` work on any manifold
    value. That means Lie group elements, `AnyManifold`, one-dimensional
    numpy arrays and real scalars.
  - `AnyManifold` wraps one such value.
  - `wrt`, `wrt_dof` and `wrt_rplus` group several arguments and handle
    them together.
- `smoothlie.trig`: `cos_2`, `sin_3`, `cos_4`, `sin_5` and `cos_6`. These
  are Taylor tails of sine and cosine. Each takes the squared argument and
  stays accurate near zero.
- `smoothlie.quadrature`
  - `cgr_nodes(k)` gives Chebyshev-Gauss-Radau nodes on [-1, 1].
  - `lgr_nodes(k, iterations=8)` gives Legendre-Gauss-Radau nodes and
    weights, for `k` up to 40.
- `smoothlie.cumulative_spline` evaluates one segment of a cumulative spline
  on a Lie group. It takes a cumulative basis matrix of shape
  `(K + 1, K + 1)`.
  - `cspline_eval_gs` and `cspline_eval_vs` return the value together with
    up to three body derivatives: velocity, acceleration and jerk.
  - `cspline_eval_dg_dgs` and `cspline_eval_dg_dvs` return Jacobians with
    respect to the control points or their differences.
  - `monomial_derivatives` is the helper that builds the derivatives of the
    monomials.
- `smoothlie.tr_strategy`: the trust-region size rules `CeresStrategy` and
  `DisneyStrategy`, both subclasses of `TrustRegionStrategy`.

## Installation

```
pip install .
```

## Example

```python
import numpy as np
from smoothlie.se2 import SE2
from smoothlie.so2 import SO2

g = SE2(SO2(np.pi / 2), np.array([1.0, 2.0]))
assert SE2.exp(g.log()).is_approx(g, 1e-9)

h = SE2.random()
d = g - h                 # right-minus: log(h^-1 g)
assert (h + d).is_approx(g, 1e-9)

print(g.act(np.array([1.0, 0.0])))
print(f"{g:.3f}")         # r2: [1.000, 2.000], so2: 1.571
```

## What it does not do

The package covers only the planar groups `SO2` and `SE2`, plus `Rn`. It
has no three-dimensional rotation or motion groups and no group bundles.
It does not differentiate functions numerically or automatically. It has
no least-squares solver: the trust-region module holds only the rules that
resize the region. The spline module evaluates single cumulative segments;
it has no spline classes, and it does not fit or reparameterise splines.
There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```