"""
Player Stats Table

One box score line per player per game. Counting stats only; every rate
and average is derived on read by the statistics engine.
"""

from peewee import AutoField, ForeignKeyField, SmallIntegerField

from db.base import BaseModel
from db.models.game import Game
from db.models.player import Player
from db.models.team import Team
from engine.records import PlayerStatLine


class PlayerStat(BaseModel):
    """
    A player's box score for one game.

    Attributes:
        id: Auto-incrementing primary key
        game: Game the line was recorded in
        player: Player the line belongs to
        team: Team the player played for in that game
        points, rebounds, assists, steals, blocks, turnovers, fouls: Counting stats
        field_goals_made/attempted, three_pointers_made/attempted,
        free_throws_made/attempted: Shooting
        offensive_rebounds, defensive_rebounds: Optional rebound split
        minutes_played: Minutes on court
    """

    id = AutoField(primary_key=True)
    game = ForeignKeyField(
        Game,
        backref="player_stats",
        on_delete="CASCADE",
        column_name="game_id",
    )
    player = ForeignKeyField(
        Player,
        backref="stats",
        on_delete="CASCADE",
        column_name="player_id",
    )
    team = ForeignKeyField(
        Team,
        backref="player_stats",
        on_delete="CASCADE",
        column_name="team_id",
    )

    points = SmallIntegerField(default=0)
    field_goals_made = SmallIntegerField(default=0)
    field_goals_attempted = SmallIntegerField(default=0)
    three_pointers_made = SmallIntegerField(default=0)
    three_pointers_attempted = SmallIntegerField(default=0)
    free_throws_made = SmallIntegerField(default=0)
    free_throws_attempted = SmallIntegerField(default=0)
    rebounds = SmallIntegerField(default=0)
    offensive_rebounds = SmallIntegerField(null=True)
    defensive_rebounds = SmallIntegerField(null=True)
    assists = SmallIntegerField(default=0)
    steals = SmallIntegerField(default=0)
    blocks = SmallIntegerField(default=0)
    turnovers = SmallIntegerField(default=0)
    fouls = SmallIntegerField(default=0)
    minutes_played = SmallIntegerField(default=0)

    class Meta:
        table_name = "player_stats"
        indexes = (
            (("player", "game"), True),  # one line per player per game
            (("team", "game"), False),
        )

    def __repr__(self) -> str:
        return f"<PlayerStat(player_id={self.player_id}, game_id={self.game_id}, points={self.points})>"

    def to_record(self) -> PlayerStatLine:
        return PlayerStatLine(
            id=self.id,
            game_id=self.game_id,
            player_id=self.player_id,
            team_id=self.team_id,
            points=self.points or 0,
            field_goals_made=self.field_goals_made or 0,
            field_goals_attempted=self.field_goals_attempted or 0,
            three_pointers_made=self.three_pointers_made or 0,
            three_pointers_attempted=self.three_pointers_attempted or 0,
            free_throws_made=self.free_throws_made or 0,
            free_throws_attempted=self.free_throws_attempted or 0,
            rebounds=self.rebounds or 0,
            offensive_rebounds=self.offensive_rebounds,
            defensive_rebounds=self.defensive_rebounds,
            assists=self.assists or 0,
            steals=self.steals or 0,
            blocks=self.blocks or 0,
            turnovers=self.turnovers or 0,
            fouls=self.fouls or 0,
            minutes_played=self.minutes_played or 0,
        )
