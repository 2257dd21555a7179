from typing import List, Optional

UNRANKED = 0

class User:
    __slots__ = ('id', 'score', 'rank', 'metadata')
    def __init__(self, id: str, score: int = 0, rank: int = UNRANKED, metadata: Optional[bytes] = None):
        self.id = id
        self.score = int(score)
        self.rank = rank
        self.metadata = metadata

    @property
    def is_ranked(self) -> bool:
        return self.rank != UNRANKED

    def to_dict(self):
        return {
            'id': self.id,
            'score': self.score,
            'rank': self.rank,
            'metadata': self.metadata
        }

    def __repr__(self):
        return f"User(id={self.id!r}, score={self.score}, rank={self.rank})"

class LeaderPage:
    __slots__ = ('page', 'total_pages', 'page_size', 'entries')
    def __init__(self, page: int, total_pages: int, page_size: int, entries: List[User]):
        self.page = page
        self.total_pages = total_pages
        self.page_size = page_size
        self.entries = entries
