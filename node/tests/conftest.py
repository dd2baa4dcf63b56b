import pytest
from fastapi.testclient import TestClient

from ballot.main import create_app
from ballot.registry import add_candidate
from ballot.state import ElectionState

ADMIN = "0xadmin"


@pytest.fixture
def election():
    return ElectionState(admin=ADMIN)


@pytest.fixture
def mary_and_john(election):
    add_candidate(election, "Mary", ADMIN)
    add_candidate(election, "John", ADMIN)
    return election


@pytest.fixture
def client():
    with TestClient(create_app(admin_id=ADMIN, observers=[])) as c:
        yield c


def as_caller(identity):
    return {"X-Caller-Id": identity}
