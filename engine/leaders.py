"""
Leaderboard & Comparison Engine

Orders, thresholds and paginates player season records built by
``engine.season``.

Categories and sort fields are closed enums, each mapped to an explicit
accessor. A category without an entry in ``LEADER_RULES`` (or a sort field
without an entry in ``SORT_ACCESSORS``) is a programming error, not a
silent zero.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from schemas.statistics import (
    DashboardLeader,
    DashboardLeaders,
    LeaderboardEntry,
    LeagueLeaders,
    Pagination,
    PlayerComparison,
    PlayerComparisonRecord,
    PlayerSeasonStats,
)

DEFAULT_LEADERS_LIMIT = 10
DASHBOARD_LEADERS_LIMIT = 5
DASHBOARD_SHOOTING_MIN_GAMES = 3

Accessor = Callable[[PlayerSeasonStats], float]


class LeaderCategory(str, Enum):
    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    STEALS = "steals"
    BLOCKS = "blocks"
    FIELD_GOAL_PERCENTAGE = "field_goal_percentage"
    THREE_POINT_PERCENTAGE = "three_point_percentage"
    FREE_THROW_PERCENTAGE = "free_throw_percentage"


@dataclass(frozen=True)
class CategoryRule:
    """
    How a leaderboard category is ranked and who qualifies for it.

    Attributes:
        value: Extracts the ranked value from a season record
        attempts: Extracts the attempt count checked against min_attempts
        min_attempts: Hard qualification threshold (0 = none)
    """

    value: Accessor
    attempts: Optional[Accessor] = None
    min_attempts: int = 0

    def qualifies(self, season: PlayerSeasonStats) -> bool:
        if self.attempts is None:
            return True
        return self.attempts(season) >= self.min_attempts


LEADER_RULES: dict[LeaderCategory, CategoryRule] = {
    LeaderCategory.POINTS: CategoryRule(value=lambda s: s.averages.points),
    LeaderCategory.REBOUNDS: CategoryRule(value=lambda s: s.averages.rebounds),
    LeaderCategory.ASSISTS: CategoryRule(value=lambda s: s.averages.assists),
    LeaderCategory.STEALS: CategoryRule(value=lambda s: s.averages.steals),
    LeaderCategory.BLOCKS: CategoryRule(value=lambda s: s.averages.blocks),
    LeaderCategory.FIELD_GOAL_PERCENTAGE: CategoryRule(
        value=lambda s: s.shooting.field_goal,
        attempts=lambda s: s.totals.field_goals_attempted,
        min_attempts=10,
    ),
    LeaderCategory.THREE_POINT_PERCENTAGE: CategoryRule(
        value=lambda s: s.shooting.three_point,
        attempts=lambda s: s.totals.three_pointers_attempted,
        min_attempts=5,
    ),
    LeaderCategory.FREE_THROW_PERCENTAGE: CategoryRule(
        value=lambda s: s.shooting.free_throw,
        attempts=lambda s: s.totals.free_throws_attempted,
        min_attempts=5,
    ),
}


class PlayerSortField(str, Enum):
    GAMES_PLAYED = "games_played"
    # Per-game averages
    AVG_POINTS = "avg_points"
    AVG_REBOUNDS = "avg_rebounds"
    AVG_OFFENSIVE_REBOUNDS = "avg_offensive_rebounds"
    AVG_DEFENSIVE_REBOUNDS = "avg_defensive_rebounds"
    AVG_ASSISTS = "avg_assists"
    AVG_STEALS = "avg_steals"
    AVG_BLOCKS = "avg_blocks"
    AVG_TURNOVERS = "avg_turnovers"
    AVG_FOULS = "avg_fouls"
    AVG_MINUTES = "avg_minutes"
    # Season totals
    TOTAL_POINTS = "total_points"
    TOTAL_REBOUNDS = "total_rebounds"
    TOTAL_ASSISTS = "total_assists"
    TOTAL_STEALS = "total_steals"
    TOTAL_BLOCKS = "total_blocks"
    TOTAL_TURNOVERS = "total_turnovers"
    TOTAL_FOULS = "total_fouls"
    TOTAL_MINUTES = "total_minutes"
    # Shooting
    FIELD_GOAL_PERCENTAGE = "field_goal_percentage"
    THREE_POINT_PERCENTAGE = "three_point_percentage"
    FREE_THROW_PERCENTAGE = "free_throw_percentage"
    # Advanced
    EFFECTIVE_FIELD_GOAL_PERCENTAGE = "effective_field_goal_percentage"
    TRUE_SHOOTING_PERCENTAGE = "true_shooting_percentage"
    EFFICIENCY_RATING = "efficiency_rating"
    USAGE_RATE = "usage_rate"
    ASSIST_TO_TURNOVER_RATIO = "assist_to_turnover_ratio"


SORT_ACCESSORS: dict[PlayerSortField, Accessor] = {
    PlayerSortField.GAMES_PLAYED: lambda s: s.games_played,
    PlayerSortField.AVG_POINTS: lambda s: s.averages.points,
    PlayerSortField.AVG_REBOUNDS: lambda s: s.averages.rebounds,
    PlayerSortField.AVG_OFFENSIVE_REBOUNDS: lambda s: s.averages.offensive_rebounds,
    PlayerSortField.AVG_DEFENSIVE_REBOUNDS: lambda s: s.averages.defensive_rebounds,
    PlayerSortField.AVG_ASSISTS: lambda s: s.averages.assists,
    PlayerSortField.AVG_STEALS: lambda s: s.averages.steals,
    PlayerSortField.AVG_BLOCKS: lambda s: s.averages.blocks,
    PlayerSortField.AVG_TURNOVERS: lambda s: s.averages.turnovers,
    PlayerSortField.AVG_FOULS: lambda s: s.averages.fouls,
    PlayerSortField.AVG_MINUTES: lambda s: s.averages.minutes,
    PlayerSortField.TOTAL_POINTS: lambda s: s.totals.points,
    PlayerSortField.TOTAL_REBOUNDS: lambda s: s.totals.rebounds,
    PlayerSortField.TOTAL_ASSISTS: lambda s: s.totals.assists,
    PlayerSortField.TOTAL_STEALS: lambda s: s.totals.steals,
    PlayerSortField.TOTAL_BLOCKS: lambda s: s.totals.blocks,
    PlayerSortField.TOTAL_TURNOVERS: lambda s: s.totals.turnovers,
    PlayerSortField.TOTAL_FOULS: lambda s: s.totals.fouls,
    PlayerSortField.TOTAL_MINUTES: lambda s: s.totals.minutes,
    PlayerSortField.FIELD_GOAL_PERCENTAGE: lambda s: s.shooting.field_goal,
    PlayerSortField.THREE_POINT_PERCENTAGE: lambda s: s.shooting.three_point,
    PlayerSortField.FREE_THROW_PERCENTAGE: lambda s: s.shooting.free_throw,
    PlayerSortField.EFFECTIVE_FIELD_GOAL_PERCENTAGE: lambda s: s.advanced.effective_field_goal_percentage,
    PlayerSortField.TRUE_SHOOTING_PERCENTAGE: lambda s: s.advanced.true_shooting_percentage,
    PlayerSortField.EFFICIENCY_RATING: lambda s: s.advanced.efficiency_rating,
    PlayerSortField.USAGE_RATE: lambda s: s.advanced.usage_rate,
    PlayerSortField.ASSIST_TO_TURNOVER_RATIO: lambda s: s.advanced.assist_to_turnover_ratio,
}


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ------------------------------- Player lists ------------------------------- #

def sort_players(
    players: Iterable[PlayerSeasonStats],
    sort_by: PlayerSortField = PlayerSortField.AVG_POINTS,
    order: SortOrder = SortOrder.DESC,
) -> list[PlayerSeasonStats]:
    """Stable sort of season records by one field."""
    accessor = SORT_ACCESSORS[PlayerSortField(sort_by)]
    return sorted(players, key=accessor, reverse=SortOrder(order) == SortOrder.DESC)


def paginate(items: list, page: int = 1, per_page: int = 20) -> tuple[list, Pagination]:
    """
    Slice one 1-based page out of ``items``.

    Pages past the end are empty, not an error.
    """
    if page < 1 or per_page < 1:
        raise ValueError("page and per_page must be positive")

    start = (page - 1) * per_page
    total = len(items)
    return items[start:start + per_page], Pagination(
        current_page=page,
        per_page=per_page,
        total_pages=math.ceil(total / per_page),
        total_count=total,
    )


# ------------------------------- Leaderboards ------------------------------- #

def league_leaders(
    players: Iterable[PlayerSeasonStats],
    category: LeaderCategory,
    limit: int = DEFAULT_LEADERS_LIMIT,
) -> LeagueLeaders:
    """
    Top players in one category.

    Players without games are excluded, then the category's qualification
    threshold is applied as a hard filter before ranking.
    """
    category = LeaderCategory(category)
    rule = LEADER_RULES[category]

    eligible = [p for p in players if p.games_played > 0 and rule.qualifies(p)]
    eligible.sort(key=rule.value, reverse=True)

    return LeagueLeaders(
        category=category.value,
        leaders=[
            LeaderboardEntry(
                player_id=p.player_id,
                player_name=p.player_name,
                team=p.team_name,
                games_played=p.games_played,
                value=rule.value(p),
            )
            for p in eligible[:limit]
        ],
    )


def _top(players: list[PlayerSeasonStats], accessor: Accessor) -> list[DashboardLeader]:
    ranked = sorted(players, key=accessor, reverse=True)[:DASHBOARD_LEADERS_LIMIT]
    return [DashboardLeader(name=p.player_name, value=accessor(p), team=p.team_name) for p in ranked]


def dashboard_leaders(players: Iterable[PlayerSeasonStats]) -> DashboardLeaders:
    """Top five scorers, rebounders, passers and shooters (shooters need 3+ games)."""
    active = [p for p in players if p.games_played > 0]
    shooters = [p for p in active if p.games_played >= DASHBOARD_SHOOTING_MIN_GAMES]

    return DashboardLeaders(
        scoring=_top(active, SORT_ACCESSORS[PlayerSortField.AVG_POINTS]),
        rebounding=_top(active, SORT_ACCESSORS[PlayerSortField.AVG_REBOUNDS]),
        assists=_top(active, SORT_ACCESSORS[PlayerSortField.AVG_ASSISTS]),
        shooting=_top(shooters, SORT_ACCESSORS[PlayerSortField.FIELD_GOAL_PERCENTAGE]),
    )


# ------------------------------- Comparison ------------------------------- #

def comparison_record(season: PlayerSeasonStats) -> PlayerComparisonRecord:
    """Flatten a season record for side-by-side display."""
    if season.games_played == 0:
        return PlayerComparisonRecord(
            player_id=season.player_id,
            player_name=season.player_name,
            team_name=season.team_name,
            position=season.position,
            number=season.number,
        )

    return PlayerComparisonRecord(
        player_id=season.player_id,
        player_name=season.player_name,
        team_name=season.team_name,
        position=season.position,
        number=season.number,
        games_played=season.games_played,
        avg_points=season.averages.points,
        avg_rebounds=season.averages.rebounds,
        avg_assists=season.averages.assists,
        avg_steals=season.averages.steals,
        avg_blocks=season.averages.blocks,
        avg_turnovers=season.averages.turnovers,
        avg_minutes=season.averages.minutes,
        field_goal_percentage=season.shooting.field_goal,
        three_point_percentage=season.shooting.three_point,
        free_throw_percentage=season.shooting.free_throw,
        total_points=season.totals.points,
        total_rebounds=season.totals.rebounds,
        total_assists=season.totals.assists,
    )


def compare(first: PlayerSeasonStats, second: PlayerSeasonStats) -> PlayerComparison:
    """Both players side by side, each computed independently."""
    return PlayerComparison(
        player1=comparison_record(first),
        player2=comparison_record(second),
    )
