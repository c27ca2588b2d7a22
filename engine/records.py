"""
Engine Input Records

Immutable snapshots of stored games and stat lines. The engine never
touches the database; the repository converts ORM rows into these records.
"""

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional


class GameStatus(str, Enum):
    """Lifecycle status of a game."""

    SCHEDULED = "scheduled"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(frozen=True)
class GameRecord:
    id: int
    league_id: int
    home_team_id: int
    away_team_id: int
    home_score: int = 0
    away_score: int = 0
    status: GameStatus = GameStatus.SCHEDULED
    scheduled_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == GameStatus.COMPLETED

    def opponent_of(self, team_id: int) -> int:
        return self.away_team_id if self.home_team_id == team_id else self.home_team_id

    @property
    def played_at(self) -> Optional[datetime]:
        """Best known date of the game: end, then start, then schedule."""
        return self.ended_at or self.started_at or self.scheduled_at


@dataclass(frozen=True)
class TeamRef:
    """Display data for a team. Never used in computation."""

    id: int
    name: str
    city: Optional[str] = None
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class PlayerRef:
    """Display data for a rostered player."""

    id: int
    name: str
    team_id: Optional[int] = None
    number: Optional[int] = None
    position: Optional[str] = None


@dataclass(frozen=True)
class PlayerStatLine:
    """One player's counting stats for one game."""

    game_id: int
    player_id: int
    team_id: int
    id: Optional[int] = None
    points: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    three_pointers_made: int = 0
    three_pointers_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0
    rebounds: int = 0
    offensive_rebounds: Optional[int] = None
    defensive_rebounds: Optional[int] = None
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fouls: int = 0
    minutes_played: int = 0


@dataclass(frozen=True)
class TeamStatLine:
    """Rebounds credited to a team rather than to any player."""

    game_id: int
    team_id: int
    id: Optional[int] = None
    offensive_rebounds: Optional[int] = None
    defensive_rebounds: Optional[int] = None


@dataclass(frozen=True)
class CompletedGames:
    """
    The completed games of one league.

    This is the only place the engine applies the "completed" status
    filter. Every component that needs games or stat lines receives an
    instance of this class instead of re-deriving the filter itself.
    """

    league_id: int
    games: tuple[GameRecord, ...] = ()
    _ids: frozenset = field(default=frozenset(), init=False, repr=False, compare=False)

    def __post_init__(self):
        eligible = tuple(g for g in self.games if g.is_completed and g.league_id == self.league_id)
        object.__setattr__(self, "games", eligible)
        object.__setattr__(self, "_ids", frozenset(g.id for g in eligible))

    @classmethod
    def from_games(cls, league_id: int, games: Iterable[GameRecord]) -> "CompletedGames":
        return cls(league_id=league_id, games=tuple(games))

    def __len__(self) -> int:
        return len(self.games)

    def __iter__(self):
        return iter(self.games)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._ids

    @property
    def ids(self) -> frozenset:
        return self._ids

    @property
    def fingerprint(self) -> str:
        """
        Short digest of which games are completed, their scores and the latest
        write to any of them. Changes as soon as a game is completed or corrected.
        """
        stamps = [g.updated_at for g in self.games if g.updated_at is not None]
        latest = max(stamps).isoformat() if stamps else "-"
        scores = ",".join(
            f"{g.id}:{g.home_score}-{g.away_score}" for g in sorted(self.games, key=lambda g: g.id)
        )
        return hashlib.sha1(f"{scores}|{latest}".encode()).hexdigest()[:16]

    def get(self, game_id: int) -> Optional[GameRecord]:
        for game in self.games:
            if game.id == game_id:
                return game
        return None

    def filter_lines(self, lines):
        """Keep only stat lines recorded in one of these games."""
        return [line for line in lines if line.game_id in self._ids]

    def for_team(self, team_id: int) -> tuple[list[GameRecord], list[GameRecord]]:
        """Split the team's games into (home, away), preserving input order."""
        home = [g for g in self.games if g.home_team_id == team_id]
        away = [g for g in self.games if g.away_team_id == team_id]
        return home, away

    def most_recent(self, limit: int) -> list[GameRecord]:
        """Games ordered by end time, newest first. Games without an end time sort last."""
        return sorted(self.games, key=ended_sort_key, reverse=True)[:limit]


def ended_sort_key(game: GameRecord) -> float:
    return game.ended_at.timestamp() if game.ended_at else 0.0
