"""
Unit tests for the mapping of domain errors to HTTP status codes.
"""

import pytest

from filmorate_api.app.api.errors import status_code_for
from filmorate_api.app.core.exceptions import (
    ConflictError,
    FilmorateError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error,expected",
    [
        (NotFoundError("missing"), 404),
        (ConflictError("twice"), 409),
        (ValidationError("bad"), 400),
        (FilmorateError("other"), 500),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


def test_message_is_kept():
    error = NotFoundError("User with id=1 not found")

    assert error.message == "User with id=1 not found"
    assert str(error) == "User with id=1 not found"
