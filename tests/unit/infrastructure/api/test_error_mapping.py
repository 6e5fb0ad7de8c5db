import pytest

from tasklist.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    EntropyError,
    PersistenceError,
    ResourceNotFoundError,
    SigningError,
    TasklistError,
    ValidationError,
)
from tasklist.infrastructure.api.app import status_code_for


@pytest.mark.parametrize(
    "exc, path, expected",
    [
        (ValidationError("bad"), "/users", 400),
        (AuthenticationError("bad"), "/users/login", 400),
        (AuthorizationError("bad"), "/lists", 401),
        (ResourceNotFoundError("missing"), "/lists/abc", 404),
        (PersistenceError("store"), "/users/login", 400),
        (SigningError("sign"), "/users", 400),
        (EntropyError("entropy"), "/users/login", 400),
        (PersistenceError("store"), "/lists", 500),
        (SigningError("sign"), "/lists/abc/tasks", 500),
        (TasklistError("other"), "/users", 500),
    ],
)
def test_status_code_for(exc, path, expected):
    assert status_code_for(exc, path) == expected
