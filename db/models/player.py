"""
Players Table

Rostered players. A player's current team is used for display and for
resolving opponents; stat lines carry their own team id.
"""

from peewee import AutoField, CharField, ForeignKeyField, SmallIntegerField

from db.base import BaseModel
from db.models.team import Team
from engine.records import PlayerRef


class Player(BaseModel):
    """
    A player on a team roster.

    Attributes:
        id: Auto-incrementing primary key
        team: Current team
        name: Display name
        number: Jersey number
        position: PG, SG, SF, PF or C (optional)
    """

    id = AutoField(primary_key=True)
    team = ForeignKeyField(
        Team,
        backref="players",
        on_delete="CASCADE",
        column_name="team_id",
    )
    name = CharField(max_length=255)
    number = SmallIntegerField(null=True)
    position = CharField(max_length=2, null=True)

    class Meta:
        table_name = "players"

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, name='{self.name}', team_id={self.team_id})>"

    def to_record(self) -> PlayerRef:
        return PlayerRef(
            id=self.id,
            name=self.name,
            team_id=self.team_id,
            number=self.number,
            position=self.position,
        )
