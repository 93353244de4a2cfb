import numpy as np


class RingBuffer:
    """
    Ring Buffer
    ===========
    - Preallocated fixed-capacity array
    - Head pointer mod capacity, count capped at capacity
    - Oldest entry overwritten once full
    - No reallocation on push
    """

    def __init__(self, capacity: int, dtype=float, fill_value=0.0):
        if capacity <= 0:
            raise ValueError("capacity must be > 0")

        self.capacity = capacity
        self.data = np.full(capacity, fill_value, dtype=dtype)
        self.head = 0
        self.count = 0

    # =========================================================
    # WRITE
    # =========================================================
    def push(self, value):
        self.data[self.head] = value
        self.head = (self.head + 1) % self.capacity

        if self.count < self.capacity:
            self.count += 1

    def fill(self, value):
        """Overwrite every slot; head and count are left untouched."""
        self.data[:] = value

    # =========================================================
    # READ
    # =========================================================
    def is_full(self) -> bool:
        return self.count >= self.capacity

    def _start(self) -> int:
        # oldest populated slot
        return (self.head - self.count) % self.capacity

    def ordered(self) -> np.ndarray:
        """
        Populated slots in chronological order (oldest → newest).
        Returns a copy.
        """
        if self.count == 0:
            return self.data[:0].copy()

        idx = (self._start() + np.arange(self.count)) % self.capacity
        return self.data[idx]

    def recent(self, max_count: int) -> np.ndarray:
        """Up to max_count newest entries, chronological order."""
        if max_count <= 0 or self.count == 0:
            return self.data[:0].copy()

        n = min(max_count, self.count)
        start = (self.head - n) % self.capacity
        idx = (start + np.arange(n)) % self.capacity
        return self.data[idx]

    def __len__(self):
        return self.count
