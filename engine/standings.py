"""
Standings Engine

Win/loss records, home/away splits, streaks, games-back and ranking for
every team in a league, computed from that league's completed games.

A completed game with a tied score is recorded as a loss for both teams.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from engine.records import CompletedGames, GameRecord, TeamRef, ended_sort_key
from engine.rounding import round_half_up
from schemas.statistics import DashboardStanding, TeamStanding

WIN = "W"
LOSS = "L"
STREAK_WINDOW = 5


@dataclass
class TeamRecord:
    """Running totals for one team while walking its games."""

    team_id: int
    wins: int = 0
    losses: int = 0
    home_wins: int = 0
    home_losses: int = 0
    away_wins: int = 0
    away_losses: int = 0
    points_for: int = 0
    points_against: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def point_diff(self) -> int:
        return self.points_for - self.points_against

    @property
    def win_percentage(self) -> float:
        """Wins / games as a one-decimal percentage, 0 with no games."""
        if self.games_played == 0:
            return 0.0
        return round_half_up(self.wins / self.games_played * 100)

    @property
    def home_record(self) -> str:
        return f"{self.home_wins}-{self.home_losses}"

    @property
    def away_record(self) -> str:
        return f"{self.away_wins}-{self.away_losses}"


def game_result(game: GameRecord, team_id: int) -> str:
    """'W' if the team outscored its opponent, otherwise 'L' (ties included)."""
    if game.home_team_id == team_id:
        return WIN if game.home_score > game.away_score else LOSS
    return WIN if game.away_score > game.home_score else LOSS


def team_record(team_id: int, completed: CompletedGames) -> TeamRecord:
    record = TeamRecord(team_id=team_id)
    home_games, away_games = completed.for_team(team_id)

    for game in home_games:
        record.points_for += game.home_score
        record.points_against += game.away_score
        if game_result(game, team_id) == WIN:
            record.wins += 1
            record.home_wins += 1
        else:
            record.losses += 1
            record.home_losses += 1

    for game in away_games:
        record.points_for += game.away_score
        record.points_against += game.home_score
        if game_result(game, team_id) == WIN:
            record.wins += 1
            record.away_wins += 1
        else:
            record.losses += 1
            record.away_losses += 1

    return record


def recent_results(
    team_id: int, completed: CompletedGames, window: int = STREAK_WINDOW
) -> list[str]:
    """
    Results of the team's most recently ended games, newest first.

    Games with no end time sort as the oldest. Ties in end time keep
    home games ahead of away games, each in input order.
    """
    home_games, away_games = completed.for_team(team_id)
    ordered = sorted(
        home_games + away_games,
        key=ended_sort_key,
        reverse=True,
    )
    return [game_result(game, team_id) for game in ordered[:window]]


def current_streak(results: list[str]) -> tuple[Optional[str], int]:
    """
    Run length of the most recent result.

    Walks from the newest result and stops at the first mismatch, so
    [W, W, L, W, W] is a streak of W2.

    Returns:
        (streak_type, count), or (None, 0) when there are no results
    """
    streak_type: Optional[str] = None
    count = 0
    for result in results:
        if streak_type is None:
            streak_type = result
            count = 1
        elif result == streak_type:
            count += 1
        else:
            break
    return streak_type, count


def format_streak(streak_type: Optional[str], count: int) -> str:
    return f"{streak_type}{count}" if streak_type else "-"


def games_back(leader: TeamRecord, team: TeamRecord) -> float:
    return ((leader.wins - team.wins) + (team.losses - leader.losses)) / 2


def ranking_key(standing: TeamStanding) -> tuple:
    """Sort key for wins desc, then win percentage desc, then point differential desc."""
    return (-standing.wins, -standing.win_percentage, -standing.point_diff)


def build_standing(team: TeamRef, completed: CompletedGames) -> tuple[TeamStanding, TeamRecord]:
    record = team_record(team.id, completed)
    last5 = recent_results(team.id, completed)
    streak_type, streak_count = current_streak(last5)
    gp = record.games_played

    standing = TeamStanding(
        team_id=team.id,
        team_name=team.name,
        city=team.city,
        logo_url=team.logo_url,
        games_played=gp,
        wins=record.wins,
        losses=record.losses,
        win_percentage=record.win_percentage,
        home_record=record.home_record,
        away_record=record.away_record,
        points_for=record.points_for,
        points_against=record.points_against,
        point_diff=record.point_diff,
        avg_points_for=round_half_up(record.points_for / gp) if gp else 0.0,
        avg_points_against=round_half_up(record.points_against / gp) if gp else 0.0,
        last5=last5,
        streak=format_streak(streak_type, streak_count),
        streak_count=streak_count,
        streak_type=streak_type,
    )
    return standing, record


def build_standings(teams: Iterable[TeamRef], completed: CompletedGames) -> list[TeamStanding]:
    """
    Rank every team in the league.

    Ordering is wins desc, win percentage desc, point differential desc;
    remaining ties keep the input order. Rank is the 1-based position and
    games back is measured against the first-ranked team.
    """
    built = [build_standing(team, completed) for team in teams]
    built.sort(key=lambda pair: ranking_key(pair[0]))

    if not built:
        return []

    _, leader = built[0]
    ranked = []
    for rank, (standing, record) in enumerate(built, start=1):
        ranked.append(
            standing.model_copy(
                update={
                    "rank": rank,
                    "games_back": 0.0 if rank == 1 else games_back(leader, record),
                }
            )
        )
    return ranked


def sort_by_record(rows: list) -> list:
    """Order summary rows (anything with wins and win_percentage) by wins, then win percentage."""
    return sorted(rows, key=lambda row: (-row.wins, -row.win_percentage))


def build_standings_summary(teams: Iterable[TeamRef], completed: CompletedGames) -> list[DashboardStanding]:
    """Compact standings for the dashboard: wins desc, then win percentage desc."""
    rows = []
    for team in teams:
        record = team_record(team.id, completed)
        gp = record.games_played
        rows.append(
            DashboardStanding(
                team_id=team.id,
                team_name=team.name,
                logo_url=team.logo_url,
                games_played=gp,
                wins=record.wins,
                losses=record.losses,
                win_percentage=record.win_percentage,
                avg_points=round_half_up(record.points_for / gp) if gp else 0.0,
            )
        )
    return sort_by_record(rows)
