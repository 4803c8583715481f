# buffer.py
import numpy as np  # type: ignore


class DirectionsBuffer:
    """
    Fixed-capacity ring of direction codes (0..3), packed four per byte.

    The buffer itself has no notion of head or tail; callers keep their own
    indices and wrap them with next_index().
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.data = np.zeros((capacity + 3) >> 2, dtype=np.uint8)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(f"index {index} out of range for capacity {self.capacity}")

    def set_at(self, index: int, code: int) -> None:
        self._check(index)
        if not 0 <= code <= 3:
            raise ValueError(f"invalid direction code {code}")
        byte_index = index >> 2
        shift = (index & 3) << 1
        old = int(self.data[byte_index])
        mask = ~(3 << shift) & 0xFF
        self.data[byte_index] = (old & mask) | (code << shift)

    def get_at(self, index: int) -> int:
        self._check(index)
        b = int(self.data[index >> 2])
        return (b >> ((index & 3) << 1)) & 3

    def next_index(self, index: int) -> int:
        return 0 if index + 1 == self.capacity else index + 1
