import pytest

from ballot.config import log_level


@pytest.mark.parametrize(("value", "expected"), [
    ("INFO", "INFO"),
    ("debug", "DEBUG"),
    (" warning ", "WARNING"),
    ("verbose", "INFO"),
    ("", "INFO"),
])
def test_log_level_falls_back_to_info(value, expected):
    assert log_level(value) == expected
