"""
Season Builders

Threads stat lines through the aggregator, rate calculator and advanced
metrics calculator to produce one season record per player or team.
"""

from typing import Iterable, Optional

from engine.advanced import calculate_advanced
from engine.aggregator import aggregate_player_lines, aggregate_team_lines
from engine.rates import calculate_averages, calculate_shooting, per_game, percentage
from engine.records import CompletedGames, PlayerRef, PlayerStatLine, TeamRef, TeamStatLine
from engine.standings import team_record
from schemas.statistics import PlayerSeasonStats, RecentGameLine, TeamSeasonStats

UNKNOWN = "Unknown"
RECENT_GAMES_LIMIT = 10


def build_player_season(
    player: PlayerRef,
    lines: Iterable[PlayerStatLine],
    completed: CompletedGames,
    team_name: Optional[str] = None,
) -> PlayerSeasonStats:
    """
    Season record for one player.

    Only lines from completed games are counted. A player without any
    such line gets an all-zero record rather than being dropped.
    """
    totals = aggregate_player_lines(completed.filter_lines(lines))
    averages = calculate_averages(totals)

    return PlayerSeasonStats(
        player_id=player.id,
        player_name=player.name,
        team_id=player.team_id,
        team_name=team_name or UNKNOWN,
        position=player.position,
        number=player.number,
        games_played=totals.games_played,
        totals=totals,
        averages=averages,
        shooting=calculate_shooting(totals),
        advanced=calculate_advanced(totals, averages),
    )


def build_recent_games(
    player: PlayerRef,
    lines: Iterable[PlayerStatLine],
    completed: CompletedGames,
    team_names: dict[int, str],
    limit: int = RECENT_GAMES_LIMIT,
) -> list[RecentGameLine]:
    """
    The player's most recent completed games, newest first.

    The opponent is resolved against the player's current team; names
    that do not resolve are reported as "Unknown".
    """
    rows = []
    for line in completed.filter_lines(lines):
        game = completed.get(line.game_id)
        if game is None:
            continue
        opponent_id = game.opponent_of(player.team_id)
        rows.append(
            RecentGameLine(
                game_id=game.id,
                game_date=game.played_at,
                opponent_id=opponent_id,
                opponent=team_names.get(opponent_id, UNKNOWN),
                points=line.points,
                rebounds=line.rebounds,
                assists=line.assists,
                steals=line.steals,
                blocks=line.blocks,
                turnovers=line.turnovers,
                fouls=line.fouls,
                field_goals_made=line.field_goals_made,
                field_goals_attempted=line.field_goals_attempted,
                field_goal_percentage=percentage(line.field_goals_made, line.field_goals_attempted),
                three_pointers_made=line.three_pointers_made,
                three_pointers_attempted=line.three_pointers_attempted,
                free_throws_made=line.free_throws_made,
                free_throws_attempted=line.free_throws_attempted,
                minutes_played=line.minutes_played or 0,
            )
        )

    rows.sort(key=lambda row: row.game_date.timestamp() if row.game_date else 0.0, reverse=True)
    return rows[:limit]


def build_team_season(
    team: TeamRef,
    player_lines: Iterable[PlayerStatLine],
    team_lines: Iterable[TeamStatLine],
    completed: CompletedGames,
) -> TeamSeasonStats:
    """
    Season averages for one team.

    Games played, wins and losses come from the game records; the counting
    stats come from the team's stat lines. Rebounds include rebounds
    credited only to the team.
    """
    record = team_record(team.id, completed)
    totals = aggregate_team_lines(
        completed.filter_lines(player_lines),
        completed.filter_lines(team_lines),
    )
    gp = record.games_played

    return TeamSeasonStats(
        team_id=team.id,
        team_name=team.name,
        games_played=gp,
        wins=record.wins,
        losses=record.losses,
        win_percentage=record.win_percentage,
        avg_points=per_game(totals.points, gp),
        avg_rebounds=per_game(totals.rebounds, gp),
        avg_offensive_rebounds=per_game(totals.offensive_rebounds, gp),
        avg_defensive_rebounds=per_game(totals.defensive_rebounds, gp),
        avg_assists=per_game(totals.assists, gp),
        field_goal_percentage=percentage(totals.field_goals_made, totals.field_goals_attempted),
    )
