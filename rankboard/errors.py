class LeaderboardError(Exception):
    """Base class for every error raised by rankboard"""


class NotFound(LeaderboardError):
    """A member or its metadata is absent"""

    def __init__(self, member_id: str, message: str = None):
        self.member_id = member_id
        super().__init__(message or f"{member_id} not found")


class MemberNotFound(NotFound):
    def __init__(self, member_id: str, leaderboard: str = None):
        self.leaderboard = leaderboard
        where = f" in {leaderboard}" if leaderboard else ""
        super().__init__(member_id, f"Member {member_id} not found{where}")


class MetadataNotFound(NotFound):
    def __init__(self, member_id: str):
        super().__init__(member_id, f"No metadata stored for {member_id}")


class InvalidIncrement(LeaderboardError):
    def __init__(self, delta):
        self.delta = delta
        super().__init__(f"Increment must be a positive integer, got {delta!r}")


class BackendError(LeaderboardError):
    """The backing store failed for a reason other than a missing member"""


class BackendUnavailable(BackendError):
    """The backing store could not be reached or timed out"""


class InvalidScore(LeaderboardError):
    def __init__(self, score):
        self.score = score
        super().__init__(f"Score must be an integer, got {score!r}")
