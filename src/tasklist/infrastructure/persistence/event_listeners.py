"""SQLAlchemy event listeners for user records.

Hashes the ``password`` attribute of a ``UserModel`` before it reaches the
database. The hash runs on insert, and on update only when the attribute
history shows a new value; unrelated field updates leave it untouched.
"""

from sqlalchemy import event, inspect

from tasklist.core.logging import get_logger
from tasklist.infrastructure.auth.password_hasher import hash_password
from tasklist.infrastructure.persistence.models.user import UserModel

logger = get_logger(__name__)


def _password_changed(target: UserModel) -> bool:
    history = inspect(target).attrs.password.history
    if not history.added:
        return False
    previous = history.deleted[0] if history.deleted else None
    return history.added[0] != previous


def hash_password_before_insert(mapper, connection, target: UserModel) -> None:
    """Replace the plaintext password of a new user with its hash."""
    target.password = hash_password(target.password)
    logger.debug("Password hashed for new user", email=target.email)


def hash_password_before_update(mapper, connection, target: UserModel) -> None:
    """Rehash the password of an existing user only if it was reassigned."""
    if _password_changed(target):
        target.password = hash_password(target.password)
        logger.debug("Password hashed for updated user", user_id=target.id)


def register_password_listeners() -> None:
    """Attach the hashing listeners to ``UserModel`` once."""
    if not event.contains(UserModel, "before_insert", hash_password_before_insert):
        event.listen(UserModel, "before_insert", hash_password_before_insert)
    if not event.contains(UserModel, "before_update", hash_password_before_update):
        event.listen(UserModel, "before_update", hash_password_before_update)


register_password_listeners()
