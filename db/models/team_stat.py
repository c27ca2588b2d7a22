from peewee import AutoField, ForeignKeyField, SmallIntegerField

from db.base import BaseModel
from db.models.game import Game
from db.models.team import Team
from engine.records import TeamStatLine


class TeamStat(BaseModel):
    """Rebounds credited to a team in one game but to none of its players."""

    id = AutoField(primary_key=True)
    game = ForeignKeyField(
        Game,
        backref="team_stats",
        on_delete="CASCADE",
        column_name="game_id",
    )
    team = ForeignKeyField(
        Team,
        backref="team_stats",
        on_delete="CASCADE",
        column_name="team_id",
    )
    offensive_rebounds = SmallIntegerField(null=True)
    defensive_rebounds = SmallIntegerField(null=True)

    class Meta:
        table_name = "team_stats"
        indexes = (
            (("team", "game"), True),
        )

    def __repr__(self):
        return f"<TeamStat(team_id={self.team_id}, game_id={self.game_id})>"

    def to_record(self) -> TeamStatLine:
        return TeamStatLine(
            id=self.id,
            game_id=self.game_id,
            team_id=self.team_id,
            offensive_rebounds=self.offensive_rebounds,
            defensive_rebounds=self.defensive_rebounds,
        )
