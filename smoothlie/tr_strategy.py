"""Trust-region size update strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TrustRegionStrategy(ABC):
    """Decides whether a step is taken and how the trust region changes."""

    @abstractmethod
    def delta(self) -> float:
        """Current trust region size."""

    @abstractmethod
    def step_and_update(self, rho: float) -> bool:
        """Update the trust region from the gain ratio; return whether to step."""


class CeresStrategy(TrustRegionStrategy):
    """Levenberg-Marquardt style update as used by the Ceres solver."""

    def __init__(self) -> None:
        self._delta = 10000.0
        self._reduce = 2.0

    def delta(self) -> float:
        return self._delta

    def step_and_update(self, rho: float) -> bool:
        if rho > 1e-3:
            two_rho_min_1 = 2.0 * rho - 1.0
            self._delta /= max(1.0 / 3.0, 1.0 - two_rho_min_1**3)
            self._reduce = 2.0
            return True
        self._delta /= self._reduce
        self._reduce *= 2.0
        return False


class DisneyStrategy(TrustRegionStrategy):
    """Reset on success, shrink by ten on failure."""

    def __init__(self) -> None:
        self._delta = 1000.0

    def delta(self) -> float:
        return self._delta

    def step_and_update(self, rho: float) -> bool:
        if rho > 0:
            self._delta = 1000.0
            return True
        self._delta /= 10.0
        return False