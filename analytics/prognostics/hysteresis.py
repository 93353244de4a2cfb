# analytics/prognostics/hysteresis.py
import numpy as np

from analytics.prognostics.rul_estimator import RUL_STABLE
from core.ring_buffer import RingBuffer


class MedianHysteresis:
    """
    Median-of-3 output filter for RUL.

    Terminal values (failed = 0, stable sentinel) bypass the median and
    flood all three slots so entering / leaving them has no lag.
    Everything else: write next slot, then median of the three.
    """

    SLOTS = 3

    def __init__(self, stable_value: float = RUL_STABLE):
        self.stable_value = stable_value
        self.history = RingBuffer(self.SLOTS, fill_value=stable_value)

    def update(self, raw_rul: float) -> float:
        # --- instant override ---
        if raw_rul == 0 or raw_rul == self.stable_value:
            self.history.fill(raw_rul)
            return raw_rul

        # --- general path ---
        self.history.push(raw_rul)
        return float(np.median(self.history.data))
