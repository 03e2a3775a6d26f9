"""
Demo data for local development.

    python -m messageboard.seed

creates the tables (if missing) in ``MESSAGEBOARD_DATABASE_URL`` and fills
them with a few users and messages.
"""

from sqlalchemy import func, select
from loguru import logger

from messageboard import models
from messageboard.config import configure_logging, get_settings
from messageboard.database import Database

DEMO_USERS = [
    {"name": "Ava", "type": "admin", "messages": ["hi", "bye"]},
    {"name": "Joel", "type": "staff", "messages": ["ahoy", "hello there"]},
    {"name": "Elie", "type": "staff", "messages": []},
    {"name": "Sam", "type": "user", "messages": ["first post"]},
]


def seed_demo_data(database: Database) -> int:
    """Insert DEMO_USERS unless the users table already has rows.

    Returns the number of users inserted.
    """
    with database.session() as session:
        existing = session.scalar(select(func.count()).select_from(models.User))
        if existing:
            logger.info(f"users table already has {existing} rows, skipping seed")
            return 0

        for entry in DEMO_USERS:
            user = models.User(name=entry["name"], type=entry["type"])
            user.messages = [models.Message(msg=msg) for msg in entry["messages"]]
            session.add(user)
        session.commit()

    logger.info(f"Seeded {len(DEMO_USERS)} users")
    return len(DEMO_USERS)


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    database = Database(settings.database_url, echo=settings.database_echo)
    try:
        database.create_all()
        seed_demo_data(database)
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
