"""
Leagues Table

A league groups teams, players and games for one season. Display data and
visibility only; statistics are never stored here.
"""

from datetime import datetime

from peewee import AutoField, BooleanField, CharField, DateTimeField

from db.base import BaseModel


class League(BaseModel):
    """
    A basketball league season.

    Attributes:
        id: Auto-incrementing primary key
        name: League name
        season: Season label (e.g., '2025')
        status: draft, active, completed or archived
        is_public: Readable without a membership
        owner_id: Identity of the owning user (always has access)
        created_at: When the league was created
    """

    id = AutoField(primary_key=True)
    name = CharField(max_length=255)
    season = CharField(max_length=20, null=True)
    status = CharField(max_length=20, default="active")  # draft, active, completed, archived
    is_public = BooleanField(default=False, index=True)
    owner_id = CharField(max_length=255, null=True, index=True)
    created_at = DateTimeField(default=datetime.utcnow)

    class Meta:
        table_name = "leagues"

    def __repr__(self) -> str:
        return f"<League(id={self.id}, name='{self.name}', season='{self.season}')>"
