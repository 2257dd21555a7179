from typing import Dict, List, Tuple
from sortedcontainers import SortedList

from ..errors import MemberNotFound, MetadataNotFound

class MemoryScoreStore:
    """Ordered score store kept in process memory.

    Entries are held ascending as ``(score, member)`` so equal scores sort
    the way a Redis sorted set does. Descending positions are mirrored from
    the end of the list. No method awaits, so each call runs atomically on
    the event loop.
    """

    def __init__(self, name: str = 'memory'):
        self.name = name
        self._scores: Dict[str, float] = {}
        self._ordered = SortedList()

    async def upsert(self, member_id: str, score: float) -> None:
        self._set(member_id, float(score))

    async def increment_by(self, member_id: str, delta: float) -> float:
        new_score = self._scores.get(member_id, 0.0) + delta
        self._set(member_id, new_score)
        return new_score

    async def rank(self, member_id: str) -> int:
        score = self._get(member_id)
        return len(self._ordered) - 1 - self._ordered.index((score, member_id))

    async def score(self, member_id: str) -> float:
        return self._get(member_id)

    async def count(self) -> int:
        return len(self._scores)

    async def range_desc(self, start: int, end: int) -> List[Tuple[str, float]]:
        total = len(self._ordered)
        start = max(start, 0)
        end = min(end, total - 1)
        if start > end:
            return []
        items = self._ordered.islice(total - 1 - end, total - start, reverse=True)
        return [(member, score) for score, member in items]

    async def remove(self, member_id: str) -> bool:
        score = self._scores.pop(member_id, None)
        if score is None:
            return False
        self._ordered.remove((score, member_id))
        return True

    def _get(self, member_id: str) -> float:
        try:
            return self._scores[member_id]
        except KeyError:
            raise MemberNotFound(member_id, self.name) from None

    def _set(self, member_id: str, score: float):
        old = self._scores.get(member_id)
        if old is not None:
            self._ordered.remove((old, member_id))
        self._scores[member_id] = score
        self._ordered.add((score, member_id))

class MemoryMetadataStore:
    def __init__(self):
        self._payloads: Dict[str, bytes] = {}

    async def put(self, member_id: str, payload: bytes) -> None:
        self._payloads[member_id] = bytes(payload)

    async def get(self, member_id: str) -> bytes:
        try:
            return self._payloads[member_id]
        except KeyError:
            raise MetadataNotFound(member_id) from None
