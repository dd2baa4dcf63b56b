# ballot ledger: one vote per identity
import logging

from .errors import AlreadyVoted, InvalidCandidate
from .models import Voted, Voter
from .state import ElectionState

logger = logging.getLogger(__name__)


def vote(state: ElectionState, candidate_id: int, voter: str) -> Voted:
    """
    Cast `voter`'s single vote for `candidate_id`.

    Marking the voter, bumping the candidate's count and emitting the Voted
    event happen in one lock scope; a rejected vote changes nothing.
    """
    with state.lock:
        if voter in state.voters:
            logger.warning("vote refused for %r: already voted", voter)
            raise AlreadyVoted(voter)
        if candidate_id < 1 or candidate_id > state.candidates_count:
            logger.warning("vote refused for %r: no candidate %d", voter, candidate_id)
            raise InvalidCandidate(candidate_id, state.candidates_count)

        state.voters[voter] = {"voted": True, "chosen_candidate_id": candidate_id}
        state.candidates[candidate_id]["vote_count"] += 1
        event = state.emit(Voted, voter=voter, candidate_id=candidate_id)

    logger.info("vote %d: %r -> candidate %d", event.seq, voter, candidate_id)
    return event


def get_voter(state: ElectionState, identity: str) -> Voter:
    """
    Unknown identities get the default record; nothing is stored.
    """
    with state.lock:
        rec = state.voters.get(identity)
        if rec is None:
            return Voter(identity=identity)
        return Voter(identity=identity, **rec)


def voters_count(state: ElectionState) -> int:
    with state.lock:
        return len(state.voters)
