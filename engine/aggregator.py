"""
Aggregator

Sums raw counting stats across a set of stat lines into season totals.
Callers are responsible for restricting the lines to one player (or team)
and to completed games, normally via ``CompletedGames.filter_lines``.
"""

from typing import Iterable

from engine.records import PlayerStatLine, TeamStatLine
from schemas.statistics import StatTotals


# StatTotals field -> PlayerStatLine attribute
COUNTING_FIELDS: dict[str, str] = {
    "points": "points",
    "field_goals_made": "field_goals_made",
    "field_goals_attempted": "field_goals_attempted",
    "three_pointers_made": "three_pointers_made",
    "three_pointers_attempted": "three_pointers_attempted",
    "free_throws_made": "free_throws_made",
    "free_throws_attempted": "free_throws_attempted",
    "rebounds": "rebounds",
    "offensive_rebounds": "offensive_rebounds",
    "defensive_rebounds": "defensive_rebounds",
    "assists": "assists",
    "steals": "steals",
    "blocks": "blocks",
    "turnovers": "turnovers",
    "fouls": "fouls",
    "minutes": "minutes_played",
}


def aggregate_player_lines(lines: Iterable[PlayerStatLine]) -> StatTotals:
    """
    Sum every counting field across the given stat lines.

    Missing optional values (the offensive/defensive rebound split) count
    as zero. ``games_played`` is the number of lines, regardless of minutes.

    Args:
        lines: Stat lines for a single player or team

    Returns:
        StatTotals; all zeros with games_played=0 for empty input
    """
    sums = dict.fromkeys(COUNTING_FIELDS, 0)
    games_played = 0

    for line in lines:
        games_played += 1
        for total_field, line_attr in COUNTING_FIELDS.items():
            sums[total_field] += getattr(line, line_attr) or 0

    return StatTotals(games_played=games_played, **sums)


def aggregate_team_lines(
    player_lines: Iterable[PlayerStatLine],
    team_lines: Iterable[TeamStatLine],
) -> StatTotals:
    """
    Team totals: player sums plus rebounds credited only to the team.

    ``games_played`` here counts player lines and is not the number of
    team games; callers take games played from the game records.
    """
    totals = aggregate_player_lines(player_lines)

    team_offensive = 0
    team_defensive = 0
    for line in team_lines:
        team_offensive += line.offensive_rebounds or 0
        team_defensive += line.defensive_rebounds or 0

    return totals.model_copy(
        update={
            "rebounds": totals.rebounds + team_offensive + team_defensive,
            "offensive_rebounds": totals.offensive_rebounds + team_offensive,
            "defensive_rebounds": totals.defensive_rebounds + team_defensive,
        }
    )
