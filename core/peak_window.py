import numpy as np

from core.ring_buffer import RingBuffer


class PeakWindow:
    """
    Peak Window / Decimator
    =======================
    Raw amplitude ring + decimation counter.

    State transition:
        accumulate `decimation_factor` raw samples
        AND window fully populated
        → fire once, counter back to 0
    """

    def __init__(self, capacity: int, decimation_factor: int | None = None):
        self.buffer = RingBuffer(capacity)
        self.decimation_factor = decimation_factor or capacity
        self.samples_since_decimation = 0

    @property
    def count(self) -> int:
        return self.buffer.count

    def push(self, value: float) -> bool:
        """
        Append one raw sample.
        Returns True when this sample fires the decimation tick.
        """
        self.buffer.push(value)
        self.samples_since_decimation += 1

        if (
            self.samples_since_decimation >= self.decimation_factor
            and self.buffer.is_full()
        ):
            self.samples_since_decimation = 0
            return True

        return False

    def peak(self) -> float:
        """Max |value| over populated slots (0.0 when empty)."""
        values = self.buffer.ordered()
        if values.size == 0:
            return 0.0
        return float(np.max(np.abs(values)))
