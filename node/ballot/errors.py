class BallotError(Exception):
    """Base class for rejected election calls. State is never modified."""


class PermissionDenied(BallotError):
    def __init__(self, caller: str):
        super().__init__(f"{caller!r} is not the administrator")
        self.caller = caller


class AlreadyVoted(BallotError):
    def __init__(self, voter: str):
        super().__init__(f"{voter!r} has already voted")
        self.voter = voter


class InvalidCandidate(BallotError):
    def __init__(self, candidate_id: int, candidates_count: int):
        super().__init__(
            f"candidate {candidate_id} does not exist "
            f"(valid ids are 1..{candidates_count})"
        )
        self.candidate_id = candidate_id
        self.candidates_count = candidates_count
