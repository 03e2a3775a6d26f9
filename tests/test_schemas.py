import pytest
from pydantic import ValidationError

from messageboard.schemas import UserWithMessages


def test_user_with_messages_requires_messages():
    with pytest.raises(ValidationError):
        UserWithMessages.model_validate({"name": "Ava", "type": "admin"})


def test_user_with_messages_accepts_empty_list():
    user = UserWithMessages.model_validate(
        {"name": "Elie", "type": "user", "messages": []}
    )
    assert user.messages == []
