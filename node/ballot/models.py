from typing import List, Literal, Union
from pydantic import BaseModel, Field


class CandidateIn(BaseModel):
    name: str = Field(..., examples=["Mary"])


class VoteIn(BaseModel):
    candidate_id: int = Field(..., examples=[1])


class Candidate(BaseModel):
    """
    Snapshot of one candidate. id=0 with an empty name is the zero record
    returned for ids that were never assigned.
    """
    id: int = 0
    name: str = ""
    vote_count: int = 0


class Voter(BaseModel):
    """
    chosen_candidate_id is only meaningful when voted is True.
    """
    identity: str
    voted: bool = False
    chosen_candidate_id: int = 0


class CandidateAdded(BaseModel):
    type: Literal["CandidateAdded"] = "CandidateAdded"
    seq: int
    id: int
    name: str


class Voted(BaseModel):
    type: Literal["Voted"] = "Voted"
    seq: int
    voter: str
    candidate_id: int


Event = Union[CandidateAdded, Voted]


class Results(BaseModel):
    """
    Consistent view of the whole election taken in one lock scope.
    """
    candidates: List[Candidate]
    total_votes: int
    winning_candidate_id: int
    winner_name: str


class EventLog(BaseModel):
    events: List[Event]
    last_seq: int
