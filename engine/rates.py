"""
Rate Calculator

Per-game averages and shooting percentages derived from season totals.
Zero games and zero attempts resolve to 0, never to an error or NaN.
"""

from engine.rounding import round_half_up, safe_ratio
from schemas.statistics import ShootingPercentages, StatAverages, StatTotals


def per_game(total: float, games_played: int) -> float:
    """Average per game, one decimal. 0 when no games were played."""
    if games_played <= 0:
        return 0.0
    return round_half_up(total / games_played)


def percentage(made: float, attempted: float) -> float:
    """made / attempted * 100, one decimal. 0 when nothing was attempted."""
    return round_half_up(safe_ratio(made, attempted) * 100)


def calculate_averages(totals: StatTotals) -> StatAverages:
    gp = totals.games_played
    if gp == 0:
        return StatAverages()

    return StatAverages(
        points=per_game(totals.points, gp),
        rebounds=per_game(totals.rebounds, gp),
        offensive_rebounds=per_game(totals.offensive_rebounds, gp),
        defensive_rebounds=per_game(totals.defensive_rebounds, gp),
        assists=per_game(totals.assists, gp),
        steals=per_game(totals.steals, gp),
        blocks=per_game(totals.blocks, gp),
        turnovers=per_game(totals.turnovers, gp),
        fouls=per_game(totals.fouls, gp),
        minutes=per_game(totals.minutes, gp),
    )


def calculate_shooting(totals: StatTotals) -> ShootingPercentages:
    return ShootingPercentages(
        field_goal=percentage(totals.field_goals_made, totals.field_goals_attempted),
        three_point=percentage(totals.three_pointers_made, totals.three_pointers_attempted),
        free_throw=percentage(totals.free_throws_made, totals.free_throws_attempted),
    )
