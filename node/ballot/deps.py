from fastapi import Header, Request

from .state import ElectionState


def get_election(request: Request) -> ElectionState:
    return request.app.state.election


def caller_id(x_caller_id: str = Header(..., min_length=1)) -> str:
    """
    Identity of the caller, taken from the X-Caller-Id header.
    """
    return x_caller_id
