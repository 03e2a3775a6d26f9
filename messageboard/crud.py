from typing import Any, Dict, List

from messageboard.database import Database
from messageboard.errors import UserNotFoundError


# users
def get_users(db: Database) -> List[Dict[str, Any]]:
    return db.query("SELECT id, name, type FROM users")


def get_user(db: Database, user_id: int) -> Dict[str, Any]:
    rows = db.query(
        "SELECT name, type FROM users WHERE id = :user_id", {"user_id": user_id}
    )
    if not rows:
        raise UserNotFoundError(user_id)
    return rows[0]


# messages
def get_messages_by_user(db: Database, user_id: int) -> List[Dict[str, Any]]:
    return db.query(
        "SELECT id, msg FROM messages WHERE user_id = :user_id", {"user_id": user_id}
    )


def get_user_with_messages(db: Database, user_id: int) -> Dict[str, Any]:
    """
    The user's name/type with every message they own attached under
    ``messages`` (an empty list when there are none).

    Raises UserNotFoundError before reading messages if the id is unknown.
    """
    user = get_user(db, user_id)
    user["messages"] = get_messages_by_user(db, user_id)
    return user
