"""Ranking operations over an ordered score store.

Ranks are snapshots: every operation is a sequence of independent store
calls, so a rank is only correct at the instant it was read. No operation
here retries, locks, or hides a backend failure behind a default value.
"""
from typing import List

from ..database.interfaces import MetadataStore, OrderedScoreStore
from ..errors import InvalidIncrement, InvalidScore, MemberNotFound, MetadataNotFound
from ..logger import get_logger
from ..models.data import UNRANKED, LeaderPage, User
from . import paging

logger = get_logger(__name__)


class Leaderboard:
    def __init__(self, name: str, scores: OrderedScoreStore, metadata: MetadataStore,
                 page_size: int = paging.DEFAULT_PAGE_SIZE):
        self.name = name
        self.scores = scores
        self.metadata = metadata
        if not paging.is_valid_page_size(page_size):
            logger.warning(f"Page size {page_size!r} not in {sorted(paging.ALLOWED_PAGE_SIZES)}, "
                           f"using {paging.DEFAULT_PAGE_SIZE} for {name}")
        self.page_size = paging.resolve_page_size(page_size)

    async def first_or_insert(self, member_id: str, score: int) -> User:
        """
        Return the member as stored, inserting it with score if it is new.

        An existing member keeps its score; the argument is discarded. Two
        concurrent first inserts of the same ID both write, the last one wins.
        A member removed between the rank and score reads is inserted again.
        Non-integer scores raise InvalidScore before any store call.
        """
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidScore(score)

        try:
            rank = await self.scores.rank(member_id)
            current = await self.scores.score(member_id)
        except MemberNotFound:
            await self.scores.upsert(member_id, score)
            logger.info(f"Inserted {member_id} with score {score} into {self.name}")
            return await self._ranked(member_id, score)

        logger.debug(f"{member_id} already in {self.name}, keeping score {current}")
        return User(member_id, int(current), rank + 1)

    async def get_member(self, member_id: str, with_metadata: bool = False) -> User:
        """
        Look up a member. An absent member comes back unranked with a zero
        score rather than as an error; missing metadata leaves metadata None.
        """
        try:
            rank = await self.scores.rank(member_id)
            score = await self.scores.score(member_id)
            user = User(member_id, int(score), rank + 1)
        except MemberNotFound:
            logger.debug(f"{member_id} is not ranked in {self.name}")
            user = User(member_id, 0, UNRANKED)

        if with_metadata:
            try:
                user.metadata = await self.metadata.get(member_id)
            except MetadataNotFound:
                user.metadata = None
        return user

    async def increment_member_score(self, member_id: str, delta: int) -> User:
        """
        Atomically add a positive delta to a member's score and re-rank it.
        A member that does not exist yet starts from zero. If it is removed
        before the rank re-read, it comes back unranked with the new score.
        """
        if isinstance(delta, bool) or not isinstance(delta, int) or delta <= 0:
            raise InvalidIncrement(delta)

        score = await self.scores.increment_by(member_id, delta)
        logger.info(f"Incremented {member_id} by {delta} to {int(score)} in {self.name}")
        return await self._ranked(member_id, int(score))

    async def remove_member(self, member_id: str) -> bool:
        """Drop a member's score. Its metadata is left alone."""
        removed = await self.scores.remove(member_id)
        if removed:
            logger.info(f"Removed {member_id} from {self.name}")
        return removed

    async def upsert_member_info(self, member_id: str, payload: bytes) -> None:
        await self.metadata.put(member_id, payload)
        logger.info(f"Stored {len(payload)} bytes of metadata for {member_id}")

    async def get_member_info(self, member_id: str) -> bytes:
        # MetadataNotFound propagates so callers can tell it from a backend error
        return await self.metadata.get(member_id)

    async def total_members(self) -> int:
        return await self.scores.count()

    async def total_pages(self) -> int:
        return paging.total_pages(await self.total_members(), self.page_size)

    async def get_leaders(self, page: int) -> List[User]:
        """
        Members on a page, highest score first. Out of range pages are
        clamped to the first or last page; an empty board yields [].
        Ranks come from positions in the range query, not per-member lookups.
        """
        return (await self.get_leaders_page(page)).entries

    async def get_leaders_page(self, page: int) -> LeaderPage:
        """
        Same as get_leaders, plus the clamped page number and page count
        taken from the one count query the entries were fetched with.
        An empty board is page 0 of 0.
        """
        pages = await self.total_pages()
        if pages == 0:
            return LeaderPage(0, 0, self.page_size, [])

        page = paging.clamp_page(page, pages)
        start, end = paging.page_bounds(page, self.page_size)
        rows = await self.scores.range_desc(start, end)
        logger.debug(f"Fetched {len(rows)} leaders for page {page}/{pages} of {self.name}")
        entries = [
            User(member_id, int(score), start + idx + 1)
            for idx, (member_id, score) in enumerate(rows)
        ]
        return LeaderPage(page, pages, self.page_size, entries)

    async def _ranked(self, member_id: str, score: int) -> User:
        """
        Re-read the rank after a write. If another client removed the member
        in between, the written score is returned unranked.
        """
        try:
            rank = await self.scores.rank(member_id)
        except MemberNotFound:
            logger.warning(f"{member_id} was removed from {self.name} before it could be ranked")
            return User(member_id, score, UNRANKED)
        return User(member_id, score, rank + 1)
