"""
Teams Table

Teams belonging to a league. Names and logos are display decoration only.
"""

from peewee import AutoField, CharField, ForeignKeyField

from db.base import BaseModel
from db.models.league import League
from engine.records import TeamRef


class Team(BaseModel):
    """
    A team in one league.

    Attributes:
        id: Auto-incrementing primary key
        league: League the team plays in
        name: Team name
        city: Home city (optional)
        logo_url: Logo image URL (optional)
    """

    id = AutoField(primary_key=True)
    league = ForeignKeyField(
        League,
        backref="teams",
        on_delete="CASCADE",
        column_name="league_id",
    )
    name = CharField(max_length=255)
    city = CharField(max_length=255, null=True)
    logo_url = CharField(max_length=500, null=True)

    class Meta:
        table_name = "teams"
        indexes = (
            (("league", "name"), False),
        )

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name='{self.name}', league_id={self.league_id})>"

    def to_record(self) -> TeamRef:
        return TeamRef(id=self.id, name=self.name, city=self.city, logo_url=self.logo_url)
