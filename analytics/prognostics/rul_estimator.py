# analytics/prognostics/rul_estimator.py

RUL_STABLE = 999.0


class RULEstimator:
    def __init__(
        self,
        limit_value: float,
        noise_floor: float,
        min_slope: float,
        max_horizon: float,
        stable_value: float = RUL_STABLE,
    ):
        """
        limit_value: critical amplitude threshold (failure)
        noise_floor: below this the signal is still baseline
        min_slope:   slope at or below this is flat / improving
        max_horizon: projections beyond this collapse to stable
        """
        self.limit = limit_value
        self.noise_floor = noise_floor
        self.min_slope = min_slope
        self.max_horizon = max_horizon
        self.stable_value = stable_value

    def estimate(self, current: float, slope: float) -> float:
        """
        current: smoothed amplitude
        slope:   amplitude units per second

        Returns seconds to threshold, 0 when already failed,
        or the stable sentinel.
        """

        # already failed
        if current >= self.limit:
            return 0.0

        # still baseline, trend not actionable
        if current < self.noise_floor:
            return self.stable_value

        # flat or improving
        if slope <= self.min_slope:
            return self.stable_value

        remaining = (self.limit - current) / slope

        if remaining > self.max_horizon:
            return self.stable_value

        return remaining

    def is_stable(self, rul: float) -> bool:
        return rul == self.stable_value
