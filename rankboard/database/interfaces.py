"""Store capabilities the leaderboard is written against.

Every method either returns a value, raises a ``NotFound`` subclass for a
missing member, or raises ``BackendError`` for anything else.
"""
from typing import List, Protocol, Tuple


class OrderedScoreStore(Protocol):
    name: str

    async def upsert(self, member_id: str, score: float) -> None: ...

    async def increment_by(self, member_id: str, delta: float) -> float: ...

    async def rank(self, member_id: str) -> int:
        """0-based position in descending score order; raises MemberNotFound"""
        ...

    async def score(self, member_id: str) -> float: ...

    async def count(self) -> int: ...

    async def range_desc(self, start: int, end: int) -> List[Tuple[str, float]]:
        """Members at positions start..end inclusive, highest score first"""
        ...

    async def remove(self, member_id: str) -> bool: ...


class MetadataStore(Protocol):
    async def put(self, member_id: str, payload: bytes) -> None: ...

    async def get(self, member_id: str) -> bytes:
        """Raises MetadataNotFound when nothing is stored for member_id"""
        ...
