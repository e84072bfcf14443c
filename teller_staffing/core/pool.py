"""Teller pool implementation."""

import heapq
from typing import List, Set, Tuple

from teller_staffing.core.base import EmptyPoolError, InvariantViolation, Teller


class TellerPool:
    """Pool of tellers where the earliest free teller is always selected.

    Tellers are ordered by ``(next_available, teller_id)`` so that ties go to
    the teller with the lower identifier.
    """

    def __init__(self, teller_count: int):
        self.teller_count = teller_count
        self._heap: List[Tuple[int, int, Teller]] = []
        self._present: Set[int] = set()
        for teller_id in range(1, teller_count + 1):
            self.release(Teller(teller_id=teller_id))

    def __len__(self) -> int:
        return len(self._heap)

    def take_earliest(self) -> Teller:
        """Remove and return the teller that becomes free first."""
        if not self._heap:
            raise EmptyPoolError("No tellers left in pool")
        _, _, teller = heapq.heappop(self._heap)
        self._present.discard(teller.teller_id)
        return teller

    def release(self, teller: Teller) -> None:
        """Return a teller to the pool with its updated free time."""
        if teller.teller_id in self._present:
            raise InvariantViolation(f"Teller {teller.teller_id} is already in the pool")
        self._present.add(teller.teller_id)
        heapq.heappush(self._heap, (teller.next_available, teller.teller_id, teller))

    def peek(self) -> Teller:
        """Look at the earliest free teller without removing it."""
        if not self._heap:
            raise EmptyPoolError("No tellers left in pool")
        return self._heap[0][2]

    def tellers(self) -> List[Teller]:
        """All tellers currently in the pool, ordered by identifier."""
        return sorted((entry[2] for entry in self._heap), key=lambda t: t.teller_id)
