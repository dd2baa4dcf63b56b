import pytest

from ballot.errors import PermissionDenied
from ballot.models import CandidateAdded
from ballot.registry import add_candidate, candidates_count, get_all_candidates, get_candidate

from conftest import ADMIN


def test_ids_are_sequential_in_call_order(election):
    names = ["Mary", "John", "Mary", ""]
    ids = [add_candidate(election, name, ADMIN) for name in names]
    assert ids == [1, 2, 3, 4]
    assert candidates_count(election) == 4
    assert [c.name for c in get_all_candidates(election)] == names


def test_new_candidate_starts_with_no_votes(election):
    candidate_id = add_candidate(election, "Mary", ADMIN)
    c = get_candidate(election, candidate_id)
    assert (c.id, c.name, c.vote_count) == (1, "Mary", 0)


@pytest.mark.parametrize("caller", ["0xsomeone", "", ADMIN.upper()])
def test_non_admin_cannot_add(mary_and_john, caller):
    with pytest.raises(PermissionDenied):
        add_candidate(mary_and_john, "Eve", caller)
    assert candidates_count(mary_and_john) == 2
    assert len(mary_and_john.events) == 2


def test_admin_is_fixed_at_construction(election):
    assert election.admin == ADMIN
    with pytest.raises(AttributeError):
        election.admin = "0xother"


@pytest.mark.parametrize("candidate_id", [0, -1, 3, 99])
def test_missing_candidate_is_zero_record(mary_and_john, candidate_id):
    c = get_candidate(mary_and_john, candidate_id)
    assert (c.id, c.name, c.vote_count) == (0, "", 0)


def test_all_candidates_is_fresh_each_call(mary_and_john):
    first = get_all_candidates(mary_and_john)
    first[0].vote_count = 42
    first.pop()
    second = get_all_candidates(mary_and_john)
    assert [(c.id, c.vote_count) for c in second] == [(1, 0), (2, 0)]


def test_empty_registry(election):
    assert get_all_candidates(election) == []
    assert candidates_count(election) == 0


def test_add_emits_candidate_added(election):
    seen = []
    election.add_listener(seen.append)
    add_candidate(election, "Mary", ADMIN)
    add_candidate(election, "John", ADMIN)
    assert seen == [
        CandidateAdded(seq=1, id=1, name="Mary"),
        CandidateAdded(seq=2, id=2, name="John"),
    ]
    assert election.events == seen
