"""Lie groups (Rn, SO2, SE2), manifold helpers, quadrature and cumulative splines on Lie groups."""

__version__ = "0.1.0"