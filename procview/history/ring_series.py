"""
Fixed-capacity rotating sample store.

Index 0 is always the newest sample and index len-1 the oldest. Rotation
moves a start offset instead of shifting the stored values.
"""
from typing import Iterable, Iterator, List


class RingSeries:
    """Recent history of one metric, always holding exactly `capacity` samples"""

    def __init__(self, initial: Iterable[float]):
        """
        Create a series whose capacity is the length of `initial`.

        Args:
            initial: seed values, newest first

        Raises:
            ValueError: if `initial` is empty
        """
        self._data: List[float] = [float(v) for v in initial]
        if not self._data:
            raise ValueError("RingSeries needs at least one initial sample")
        self._start = 0

    @classmethod
    def filled(cls, capacity: int, value: float = 0.0) -> "RingSeries":
        return cls([value] * capacity)

    def _slot(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError(f"Index {index} out of range for series of {len(self._data)} samples")
        return (self._start + index) % len(self._data)

    def rotate_and_set(self, value: float) -> None:
        """Evict the oldest sample and store `value` as the newest one."""
        # The slot of the oldest sample becomes index 0
        self._start = (self._start - 1) % len(self._data)
        self._data[self._start] = float(value)

    def get(self, index: int) -> float:
        return self._data[self._slot(index)]

    def set(self, index: int, value: float) -> None:
        self._data[self._slot(index)] = float(value)

    @property
    def newest(self) -> float:
        return self._data[self._start]

    def values(self) -> List[float]:
        """Samples ordered newest to oldest."""
        return [self._data[(self._start + i) % len(self._data)] for i in range(len(self._data))]

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"RingSeries({self.values()!r})"
