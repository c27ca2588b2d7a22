"""
Advanced Metrics Calculator

Composite efficiency metrics derived from season totals and averages.

Metrics:
    eFG%:  (FGM + 0.5 * 3PM) / FGA * 100
    TS%:   PTS / (2 * (FGA + 0.44 * FTA)) * 100
    Efficiency rating (simplified, per game, x15, floored at 0):
        FGM + 0.5*3PM + FTM + REB + AST + STL + BLK
        - missed FG - missed FT - TO
    Usage estimate: (FGA + 0.44 * FTA + TO) / (games * 100) * 100
    AST/TO: assists / turnovers, or raw assists with no turnovers

The usage estimate assumes a flat 100 team possessions per game instead of
a measured pace. It is not the textbook usage rate; stored leaderboard
history depends on this exact formula.
"""

from engine.rounding import round_half_up, safe_ratio
from schemas.statistics import AdvancedStats, StatAverages, StatTotals

FREE_THROW_POSSESSION_FACTOR = 0.44
EFFICIENCY_SCALE = 15
ESTIMATED_TEAM_POSSESSIONS_PER_GAME = 100


def effective_field_goal_percentage(totals: StatTotals) -> float:
    made = totals.field_goals_made + 0.5 * totals.three_pointers_made
    return round_half_up(safe_ratio(made, totals.field_goals_attempted) * 100)


def true_shooting_percentage(totals: StatTotals) -> float:
    shooting_attempts = (
        totals.field_goals_attempted
        + FREE_THROW_POSSESSION_FACTOR * totals.free_throws_attempted
    )
    return round_half_up(safe_ratio(totals.points, 2 * shooting_attempts) * 100)


def efficiency_rating(totals: StatTotals, averages: StatAverages) -> float:
    """
    Simplified per-game efficiency rating.

    Shooting terms use unrounded per-game values; rebounds, assists,
    steals, blocks and turnovers use the rounded averages.
    """
    gp = totals.games_played
    if gp == 0:
        return 0.0

    fgm = totals.field_goals_made / gp
    fga = totals.field_goals_attempted / gp
    three_made = totals.three_pointers_made / gp
    ftm = totals.free_throws_made / gp
    fta = totals.free_throws_attempted / gp

    rating = (
        fgm
        + 0.5 * three_made
        + ftm
        + averages.rebounds
        + averages.assists
        + averages.steals
        + averages.blocks
        - (fga - fgm)
        - (fta - ftm)
        - averages.turnovers
    ) * EFFICIENCY_SCALE

    return round_half_up(max(rating, 0.0))


def usage_rate(totals: StatTotals) -> float:
    player_possessions = (
        totals.field_goals_attempted
        + FREE_THROW_POSSESSION_FACTOR * totals.free_throws_attempted
        + totals.turnovers
    )
    team_possessions = totals.games_played * ESTIMATED_TEAM_POSSESSIONS_PER_GAME
    return round_half_up(safe_ratio(player_possessions, team_possessions) * 100)


def assist_to_turnover_ratio(totals: StatTotals) -> float:
    if totals.turnovers > 0:
        return round_half_up(totals.assists / totals.turnovers, 2)
    return float(totals.assists)


def calculate_advanced(totals: StatTotals, averages: StatAverages) -> AdvancedStats:
    """Compute every advanced metric. Zero games yields an all-zero record."""
    if totals.games_played == 0:
        return AdvancedStats()

    return AdvancedStats(
        effective_field_goal_percentage=effective_field_goal_percentage(totals),
        true_shooting_percentage=true_shooting_percentage(totals),
        efficiency_rating=efficiency_rating(totals, averages),
        usage_rate=usage_rate(totals),
        assist_to_turnover_ratio=assist_to_turnover_ratio(totals),
    )
