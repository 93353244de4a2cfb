# analytics/prognostics/regression.py
import numpy as np

from core.ring_buffer import RingBuffer


def ols_slope(x, y) -> float:
    """
    Ordinary least-squares slope.

        slope = (NΣxy − ΣxΣy) / (NΣx² − (Σx)²)

    Returns 0.0 for fewer than 2 points or a zero denominator.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    n = x.size
    if n < 2 or y.size != n:
        return 0.0

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return 0.0

    return (n * sum_xy - sum_x * sum_y) / denominator


class TrendBuffer:
    """
    Sliding window of (decimation index, smoothed amplitude) pairs.

    x is the integer position in the decimated sequence, never wall-clock
    time, so spacing stays uniform under upstream jitter.
    """

    def __init__(self, capacity: int, min_points: int = 2):
        self.index = RingBuffer(capacity, dtype=np.int64, fill_value=0)
        self.values = RingBuffer(capacity)
        self.min_points = min_points
        self._next_index = 0

    @property
    def count(self) -> int:
        return self.values.count

    def push(self, value: float):
        self.index.push(self._next_index)
        self.values.push(value)
        self._next_index += 1

    def has_min_population(self) -> bool:
        return self.values.count >= self.min_points

    def slope(self) -> float:
        """Slope per decimation tick; 0.0 below the minimum population."""
        if self.values.count == 0 or not self.has_min_population():
            return 0.0
        index = self.index.ordered()
        # window-relative x keeps the sums small over long uptimes
        return ols_slope(index - index[0], self.values.ordered())
