"""
Statistics Response Schemas

Pydantic models for every record the statistics engine produces.
All of them are derived on read and never persisted.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ------------------------------- Building Blocks ------------------------------- #

class StatTotals(BaseModel):
    """Plain sums of counting stats over a set of stat lines."""

    games_played: int = 0
    points: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    three_pointers_made: int = 0
    three_pointers_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0
    rebounds: int = 0
    offensive_rebounds: int = 0
    defensive_rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fouls: int = 0
    minutes: float = 0


class StatAverages(BaseModel):
    """Per-game averages, one decimal."""

    points: float = 0
    rebounds: float = 0
    offensive_rebounds: float = 0
    defensive_rebounds: float = 0
    assists: float = 0
    steals: float = 0
    blocks: float = 0
    turnovers: float = 0
    fouls: float = 0
    minutes: float = 0


class ShootingPercentages(BaseModel):
    """Made / attempted as a one-decimal percentage."""

    field_goal: float = 0
    three_point: float = 0
    free_throw: float = 0


class AdvancedStats(BaseModel):
    effective_field_goal_percentage: float = 0
    true_shooting_percentage: float = 0
    efficiency_rating: float = 0
    usage_rate: float = 0
    assist_to_turnover_ratio: float = 0


# ------------------------------- Players ------------------------------- #

class PlayerSeasonStats(BaseModel):
    """One player's season: totals, averages, shooting and advanced metrics."""

    player_id: int
    player_name: str
    team_id: Optional[int] = None
    team_name: str = "Unknown"
    position: Optional[str] = None
    number: Optional[int] = None
    games_played: int = 0
    totals: StatTotals = Field(default_factory=StatTotals)
    averages: StatAverages = Field(default_factory=StatAverages)
    shooting: ShootingPercentages = Field(default_factory=ShootingPercentages)
    advanced: AdvancedStats = Field(default_factory=AdvancedStats)


class RecentGameLine(BaseModel):
    """A single game from a player's recent history."""

    game_id: int
    game_date: Optional[datetime] = None
    opponent_id: int
    opponent: str = "Unknown"
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0
    fouls: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    field_goal_percentage: float = 0
    three_pointers_made: int = 0
    three_pointers_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0
    minutes_played: float = 0


class PlayerSeasonReport(BaseModel):
    stats: PlayerSeasonStats
    recent_games: list[RecentGameLine] = []


class Pagination(BaseModel):
    current_page: int
    per_page: int
    total_pages: int
    total_count: int


class PlayersStatsPage(BaseModel):
    players: list[PlayerSeasonStats]
    pagination: Pagination


class PlayerComparisonRecord(BaseModel):
    """Side-by-side comparison row. Zero-game players get an all-zero record."""

    player_id: int
    player_name: str
    team_name: str = "Unknown"
    position: Optional[str] = None
    number: Optional[int] = None
    games_played: int = 0
    avg_points: float = 0
    avg_rebounds: float = 0
    avg_assists: float = 0
    avg_steals: float = 0
    avg_blocks: float = 0
    avg_turnovers: float = 0
    avg_minutes: float = 0
    field_goal_percentage: float = 0
    three_point_percentage: float = 0
    free_throw_percentage: float = 0
    total_points: int = 0
    total_rebounds: int = 0
    total_assists: int = 0


class PlayerComparison(BaseModel):
    player1: PlayerComparisonRecord
    player2: PlayerComparisonRecord


# ------------------------------- Teams ------------------------------- #

class TeamSeasonStats(BaseModel):
    """Team averages. Rebounds include unattributed team rebounds."""

    team_id: int
    team_name: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    win_percentage: float = 0
    avg_points: float = 0
    avg_rebounds: float = 0
    avg_offensive_rebounds: float = 0
    avg_defensive_rebounds: float = 0
    avg_assists: float = 0
    field_goal_percentage: float = 0


class TeamsStatsReport(BaseModel):
    teams: list[TeamSeasonStats]


class TeamStanding(BaseModel):
    rank: int = 0
    team_id: int
    team_name: str
    city: Optional[str] = None
    logo_url: Optional[str] = None
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    win_percentage: float = 0
    home_record: str = "0-0"
    away_record: str = "0-0"
    points_for: int = 0
    points_against: int = 0
    point_diff: int = 0
    avg_points_for: float = 0
    avg_points_against: float = 0
    last5: list[str] = []
    streak: str = "-"
    streak_count: int = 0
    streak_type: Optional[str] = None
    games_back: float = 0


class LeagueInfo(BaseModel):
    id: int
    name: str
    season: Optional[str] = None
    status: Optional[str] = None


class StandingsReport(BaseModel):
    standings: list[TeamStanding]
    league: LeagueInfo
    total_games: int = 0


# ------------------------------- Leaders ------------------------------- #

class LeaderboardEntry(BaseModel):
    player_id: int
    player_name: str
    team: str = "Unknown"
    games_played: int
    value: float


class LeagueLeaders(BaseModel):
    category: str
    leaders: list[LeaderboardEntry]


# ------------------------------- Dashboard ------------------------------- #

class DashboardLeader(BaseModel):
    name: str
    value: float
    team: str = "Unknown"


class DashboardLeaders(BaseModel):
    scoring: list[DashboardLeader] = []
    rebounding: list[DashboardLeader] = []
    assists: list[DashboardLeader] = []
    shooting: list[DashboardLeader] = []


class DashboardStanding(BaseModel):
    team_id: int
    team_name: str
    logo_url: Optional[str] = None
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    win_percentage: float = 0
    avg_points: float = 0


class RecentResult(BaseModel):
    id: int
    date: Optional[datetime] = None
    home_team: str = "Unknown"
    away_team: str = "Unknown"
    home_score: int = 0
    away_score: int = 0
    total_points: int = 0


class DashboardLeagueInfo(LeagueInfo):
    total_games: int = 0
    total_teams: int = 0
    total_players: int = 0


class Dashboard(BaseModel):
    leaders: DashboardLeaders
    standings: list[DashboardStanding]
    recent_games: list[RecentResult]
    league_info: DashboardLeagueInfo
