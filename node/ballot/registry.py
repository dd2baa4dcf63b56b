# candidate registry
import logging
from typing import List

from .errors import PermissionDenied
from .models import Candidate, CandidateAdded
from .state import ElectionState

logger = logging.getLogger(__name__)


def add_candidate(state: ElectionState, name: str, caller: str) -> int:
    """
    Register a candidate under the next sequential id and return that id.
    Only the administrator may call this.
    """
    with state.lock:
        if caller != state.admin:
            logger.warning("add_candidate refused for %r", caller)
            raise PermissionDenied(caller)

        candidate_id = state.candidates_count + 1
        state.candidates[candidate_id] = {"name": name, "vote_count": 0}
        state.candidates_count = candidate_id
        state.emit(CandidateAdded, id=candidate_id, name=name)

    logger.info("candidate %d added: %r", candidate_id, name)
    return candidate_id


def _snapshot(state: ElectionState, candidate_id: int) -> Candidate:
    rec = state.candidates[candidate_id]
    return Candidate(id=candidate_id, name=rec["name"], vote_count=rec["vote_count"])


def get_candidate(state: ElectionState, candidate_id: int) -> Candidate:
    """
    Ids outside 1..candidates_count yield the zero record (0, "", 0)
    rather than an error.
    """
    with state.lock:
        if candidate_id not in state.candidates:
            return Candidate()
        return _snapshot(state, candidate_id)


def get_all_candidates(state: ElectionState) -> List[Candidate]:
    with state.lock:
        return [_snapshot(state, i) for i in range(1, state.candidates_count + 1)]


def candidates_count(state: ElectionState) -> int:
    with state.lock:
        return state.candidates_count
