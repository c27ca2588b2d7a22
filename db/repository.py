"""
League Repository

The only place the statistics service touches the database. Rows are
converted to immutable engine records on the way out so nothing above this
layer holds a live ORM object.
"""

from typing import Iterable, Optional

from core.errors import NotFoundError
from db.models import Game, League, LeagueMembership, Player, PlayerStat, Team, TeamStat
from db.models.membership import ACTIVE
from engine.records import (
    CompletedGames,
    GameStatus,
    PlayerRef,
    PlayerStatLine,
    TeamRef,
    TeamStatLine,
)


class LeagueRepository:
    """Read-only queries scoped to one league at a time."""

    def get_league(self, league_id: int) -> League:
        league = League.get_or_none(League.id == league_id)
        if league is None:
            raise NotFoundError("league", league_id)
        return league

    def get_player(self, league_id: int, player_id: int) -> PlayerRef:
        """
        A player rostered on one of the league's teams.

        Raises:
            NotFoundError: If the player does not exist or plays in another league
        """
        player = (
            Player.select()
            .join(Team)
            .where((Player.id == player_id) & (Team.league == league_id))
            .first()
        )
        if player is None:
            raise NotFoundError("player", player_id)
        return player.to_record()

    def list_teams(self, league_id: int) -> list[TeamRef]:
        query = Team.select().where(Team.league == league_id).order_by(Team.id)
        return [team.to_record() for team in query]

    def list_players(self, league_id: int) -> list[PlayerRef]:
        """Every player rostered on one of the league's teams, by team then id."""
        query = (
            Player.select()
            .join(Team)
            .where(Team.league == league_id)
            .order_by(Team.id, Player.id)
        )
        return [player.to_record() for player in query]

    def team_names(self, league_id: int) -> dict[int, str]:
        return {team.id: team.name for team in self.list_teams(league_id)}

    def completed_games(self, league_id: int) -> CompletedGames:
        """Fetch the league's completed games once, in id order."""
        query = (
            Game.select()
            .where(
                (Game.league == league_id)
                & (Game.status == GameStatus.COMPLETED.value)
            )
            .order_by(Game.id)
        )
        return CompletedGames.from_games(league_id, (game.to_record() for game in query))

    def player_lines(
        self,
        player_ids: Optional[Iterable[int]],
        completed: CompletedGames,
    ) -> list[PlayerStatLine]:
        """
        Stat lines recorded in the given completed games.

        Args:
            player_ids: Restrict to these players; None for every player
            completed: Games the lines must belong to
        """
        if not completed.ids:
            return []

        query = PlayerStat.select().where(PlayerStat.game.in_(list(completed.ids)))
        if player_ids is not None:
            query = query.where(PlayerStat.player.in_(list(player_ids)))

        return completed.filter_lines(row.to_record() for row in query.order_by(PlayerStat.id))

    def team_lines(
        self,
        team_id: Optional[int],
        completed: CompletedGames,
    ) -> list[TeamStatLine]:
        """Unattributed team rebounds in the given completed games (None = every team)."""
        if not completed.ids:
            return []

        query = TeamStat.select().where(TeamStat.game.in_(list(completed.ids)))
        if team_id is not None:
            query = query.where(TeamStat.team == team_id)

        return completed.filter_lines(row.to_record() for row in query.order_by(TeamStat.id))

    def is_member(self, user_id: str, league_id: int) -> bool:
        """True if the user holds an active membership in the league."""
        return (
            LeagueMembership.select()
            .where(
                (LeagueMembership.user_id == user_id)
                & (LeagueMembership.league == league_id)
                & (LeagueMembership.status == ACTIVE)
            )
            .exists()
        )
