# winner + results queries
from .models import Results
from .registry import get_all_candidates, get_candidate
from .state import ElectionState


def winning_candidate_id(state: ElectionState) -> int:
    """
    Lowest id among the candidates with the most votes, or 0 when there is
    no winner (no candidates, or no vote cast yet).
    """
    winner, best = 0, 0
    with state.lock:
        for candidate_id in range(1, state.candidates_count + 1):
            count = state.candidates[candidate_id]["vote_count"]
            # strict: a later candidate with an equal count never takes the lead
            if count > best:
                winner, best = candidate_id, count
    return winner


def winner_name(state: ElectionState) -> str:
    # id 0 resolves to the zero record, hence the empty name
    with state.lock:
        return get_candidate(state, winning_candidate_id(state)).name


def results(state: ElectionState) -> Results:
    with state.lock:
        candidates = get_all_candidates(state)
        winner = winning_candidate_id(state)
        return Results(
            candidates=candidates,
            total_votes=sum(c.vote_count for c in candidates),
            winning_candidate_id=winner,
            winner_name=get_candidate(state, winner).name,
        )
