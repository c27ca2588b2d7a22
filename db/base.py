from typing import Optional

from peewee import DatabaseProxy, Model
from playhouse.db_url import connect

from core.logging import get_logger

logger = get_logger(__name__)

# Bound to a real database by init_db(); PostgreSQL in production, SQLite in tests
db = DatabaseProxy()


class BaseModel(Model):
    class Meta:
        database = db


def get_models() -> list:
    """All tables, in foreign key dependency order."""
    from db.models import (
        Game,
        League,
        LeagueMembership,
        Player,
        PlayerStat,
        Team,
        TeamStat,
    )

    # 1. League and its dimension tables
    # 2. Games (FK to teams)
    # 3. Stat lines (FK to games)
    return [League, LeagueMembership, Team, Player, Game, PlayerStat, TeamStat]


# Function to initialize database connection
def init_db(database_url: Optional[str] = None, create_tables: bool = True):
    """
    Bind the proxy to the configured database and create tables if they don't exist.

    Args:
        database_url: Overrides settings.database_url (e.g. sqlite:///... in tests)
        create_tables: Create missing tables (safe=True is idempotent)
    """
    if database_url is None:
        from core.settings import settings

        database_url = settings.database_url

    database = connect(database_url)
    db.initialize(database)

    if create_tables:
        with db.connection_context():
            db.create_tables(get_models(), safe=True)

    logger.info("database_initialized", engine=type(database).__name__)
    return database


# Function to close database connection
def close_db():
    """Close database connection."""
    if db.obj is not None and not db.is_closed():
        db.close()
        logger.info("database_connection_closed")
