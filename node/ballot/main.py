import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException

from .config import ADMIN_ID, LOG_LEVEL, NODE_ID, NOTIFY_QUEUE_SIZE, NOTIFY_TIMEOUT, OBSERVERS
from .deps import caller_id, get_election
from .errors import AlreadyVoted, BallotError, InvalidCandidate, PermissionDenied
from .ledger import get_voter, vote as cast_vote, voters_count
from .models import Candidate, CandidateIn, Results, Voter, VoteIn
from .notify import Notifier, router as events_router
from .registry import add_candidate, candidates_count, get_all_candidates, get_candidate
from .state import ElectionState
from .tally import results, winner_name, winning_candidate_id

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

STATUS_CODES = {
    PermissionDenied: 403,
    AlreadyVoted: 409,
    InvalidCandidate: 400,
}


def _http_error(exc: BallotError) -> HTTPException:
    return HTTPException(status_code=STATUS_CODES[type(exc)], detail=str(exc))


def create_app(admin_id: str = ADMIN_ID, observers: Optional[List[str]] = None) -> FastAPI:
    if observers is None:
        observers = OBSERVERS

    election = ElectionState(admin=admin_id)
    notifier = Notifier(observers, timeout=NOTIFY_TIMEOUT, queue_size=NOTIFY_QUEUE_SIZE)
    election.add_listener(notifier)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: observer delivery task
        notifier.start()
        logger.info("node %s up, admin=%r, observers=%s", NODE_ID, admin_id, observers)
        yield
        await notifier.stop()

    app = FastAPI(title=f"Ballot Node ({NODE_ID})", lifespan=lifespan)
    app.state.election = election
    app.state.notifier = notifier

    app.include_router(events_router)

    @app.post("/candidates")
    def post_candidate(
        c: CandidateIn,
        caller: str = Depends(caller_id),
        election: ElectionState = Depends(get_election),
    ):
        try:
            candidate_id = add_candidate(election, c.name, caller)
        except PermissionDenied as e:
            raise _http_error(e)
        return {"id": candidate_id}

    @app.get("/candidates")
    def list_candidates(election: ElectionState = Depends(get_election)) -> List[Candidate]:
        return get_all_candidates(election)

    @app.get("/candidates/{candidate_id}")
    def read_candidate(
        candidate_id: int, election: ElectionState = Depends(get_election)
    ) -> Candidate:
        return get_candidate(election, candidate_id)

    @app.post("/vote")
    def vote(
        v: VoteIn,
        caller: str = Depends(caller_id),
        election: ElectionState = Depends(get_election),
    ):
        try:
            event = cast_vote(election, v.candidate_id, caller)
        except (AlreadyVoted, InvalidCandidate) as e:
            raise _http_error(e)
        return {"ok": True, "node": NODE_ID, "event": event.model_dump()}

    @app.get("/voters/{identity:path}")
    def read_voter(identity: str, election: ElectionState = Depends(get_election)) -> Voter:
        return get_voter(election, identity)

    @app.get("/winner/id")
    def read_winner_id(election: ElectionState = Depends(get_election)):
        return {"id": winning_candidate_id(election)}

    @app.get("/winner/name")
    def read_winner_name(election: ElectionState = Depends(get_election)):
        return {"name": winner_name(election)}

    @app.get("/results")
    def read_results(election: ElectionState = Depends(get_election)) -> Results:
        return results(election)

    @app.get("/status")
    def status(election: ElectionState = Depends(get_election)):
        with election.lock:
            return {
                "node": NODE_ID,
                "admin": election.admin,
                "candidates": candidates_count(election),
                "voters": voters_count(election),
                "last_seq": election.last_seq(),
                "observers": notifier.observers,
            }

    return app


app = create_app()
