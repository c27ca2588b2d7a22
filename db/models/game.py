"""
Games Table

Scheduled, in-progress and completed games. Only completed games feed
statistics.
"""

from datetime import datetime

from peewee import AutoField, CharField, DateTimeField, ForeignKeyField, IntegerField

from db.base import BaseModel
from db.models.league import League
from db.models.team import Team
from engine.records import GameRecord, GameStatus


class Game(BaseModel):
    """
    A game between two teams of the same league.

    Attributes:
        id: Auto-incrementing primary key
        league: League the game belongs to
        home_team: Home team
        away_team: Away team
        home_score: Home team score
        away_score: Away team score
        status: scheduled, active, paused or completed
        scheduled_at: Planned tip-off
        started_at: Actual tip-off
        ended_at: Final buzzer
        updated_at: Last write, bumped on every save
    """

    id = AutoField(primary_key=True)
    league = ForeignKeyField(
        League,
        backref="games",
        on_delete="CASCADE",
        column_name="league_id",
    )
    home_team = ForeignKeyField(
        Team,
        backref="home_games",
        on_delete="CASCADE",
        column_name="home_team_id",
    )
    away_team = ForeignKeyField(
        Team,
        backref="away_games",
        on_delete="CASCADE",
        column_name="away_team_id",
    )
    home_score = IntegerField(default=0)
    away_score = IntegerField(default=0)
    status = CharField(max_length=20, default=GameStatus.SCHEDULED.value)  # scheduled, active, paused, completed
    scheduled_at = DateTimeField(null=True)
    started_at = DateTimeField(null=True)
    ended_at = DateTimeField(null=True)
    updated_at = DateTimeField(default=datetime.utcnow)

    class Meta:
        table_name = "games"
        indexes = (
            (("league", "status"), False),
        )

    def __repr__(self) -> str:
        return (
            f"<Game("
            f"id={self.id}, "
            f"status={self.status}, "
            f"{self.away_team_id}@{self.home_team_id})>"
        )

    def save(self, *args, **kwargs):
        """Override save to auto-update updated_at timestamp."""
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def to_record(self) -> GameRecord:
        return GameRecord(
            id=self.id,
            league_id=self.league_id,
            home_team_id=self.home_team_id,
            away_team_id=self.away_team_id,
            home_score=self.home_score or 0,
            away_score=self.away_score or 0,
            status=GameStatus(self.status),
            scheduled_at=self.scheduled_at,
            started_at=self.started_at,
            ended_at=self.ended_at,
            updated_at=self.updated_at,
        )
