"""
Tests for argument validation helpers.
"""

import pytest

from chesssystem.exceptions import (
    InvalidIdException,
    InvalidPlayTimeException,
    NullArgumentException,
)
from chesssystem.utils.validation import (
    is_positive_int,
    require,
    require_id,
    require_play_time,
    validate_location,
)


def test_validate_location_reports_the_problem():
    result = validate_location("Tel-aviv")
    assert not result
    assert "'-'" in result.error_message
    assert not validate_location(None)
    assert validate_location("Haifa").is_valid


@pytest.mark.parametrize("value, expected", [(1, True), (0, False), (-3, False), (True, False), ("4", False)])
def test_is_positive_int(value, expected):
    assert is_positive_int(value) is expected


def test_require_helpers_raise():
    with pytest.raises(NullArgumentException):
        require(None, "stream")
    with pytest.raises(InvalidIdException, match="player id"):
        require_id(0, "player id")
    with pytest.raises(InvalidPlayTimeException):
        require_play_time(-1)
    require_id(5)
    require_play_time(1)
