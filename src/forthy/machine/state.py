"""Machine state representation"""

from typing import List

from ..exceptions import StackUnderflow
from .dictionary import Dictionary


class State:
    """Data owned by one session: the numeric stack and the Dictionary

    Multi-operand access checks the stack depth before touching anything, so
    an operation that fails never leaves the stack half-consumed.
    """

    def __init__(self, data=()):
        self._ds: List[float] = [float(x) for x in data]
        self.dictionary = Dictionary()

    @property
    def stack(self) -> List[float]:
        """A copy of the stack, bottom first"""
        return list(self._ds)

    def ds_push(self, val: float):
        self._ds.append(float(val))

    def ds_push_all(self, values):
        self._ds.extend(float(v) for v in values)

    def ds_require(self, count: int):
        if len(self._ds) < count:
            raise StackUnderflow(count, len(self._ds))

    def ds_take(self, count: int) -> List[float]:
        """Get the top count values (bottom first) without removing them"""
        self.ds_require(count)
        return self._ds[len(self._ds) - count :]

    def ds_drop(self, count: int):
        self.ds_require(count)
        del self._ds[len(self._ds) - count :]

    def ds_pop_many(self, count: int) -> List[float]:
        """Remove and return the top count values, bottom first"""
        values = self.ds_take(count)
        self.ds_drop(count)
        return values

    def ds_pop(self) -> float:
        return self.ds_pop_many(1)[0]

    def ds_peek(self, offset: int) -> float:
        """Peek at the Nth value from the top of the stack (0-indexed)"""
        self.ds_require(offset + 1)
        return self._ds[-(offset + 1)]

    def __len__(self):
        return len(self._ds)

    def __str__(self):
        return f"<State depth={len(self._ds)} words={len(self.dictionary)}>"
