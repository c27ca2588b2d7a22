"""
Statistics Service

Query surface for league statistics. Every operation fetches the league's
completed games once, hands them to the engine, and memoizes the result
under a key that includes their fingerprint, so completing or correcting a
game makes every cached result for the league unreachable.

No I/O beyond the repository; nothing derived is ever written back.
"""

from collections import defaultdict
from typing import Optional

from core.logging import get_logger
from core.settings import settings
from db.repository import LeagueRepository
from engine.leaders import (
    LeaderCategory,
    PlayerSortField,
    SortOrder,
    compare,
    dashboard_leaders,
    league_leaders,
    paginate,
    sort_players,
)
from engine.records import CompletedGames
from engine.season import UNKNOWN, build_player_season, build_recent_games, build_team_season
from engine.standings import build_standings, build_standings_summary, sort_by_record
from schemas.statistics import (
    Dashboard,
    DashboardLeagueInfo,
    LeagueInfo,
    LeagueLeaders,
    PlayerComparison,
    PlayerSeasonReport,
    PlayerSeasonStats,
    PlayersStatsPage,
    RecentResult,
    StandingsReport,
    TeamsStatsReport,
)
from services.cache import get_cache_key, get_cached, set_cached

RECENT_RESULTS_LIMIT = 5


class StatisticsService:
    """Derives season statistics, standings and leaderboards for one league at a time."""

    def __init__(self, repository: Optional[LeagueRepository] = None):
        self.repository = repository or LeagueRepository()
        self.log = get_logger("statistics")

    def _memoize(self, key: str, compute):
        cached = get_cached(key)
        if cached is not None:
            self.log.debug("stats_cache_hit", cache_key=key)
            return cached

        result = compute()
        set_cached(key, result)
        return result

    def _league_seasons(self, league_id: int, completed: CompletedGames) -> list[PlayerSeasonStats]:
        """Season record for every rostered player, zero-game players included."""
        players = self.repository.list_players(league_id)
        team_names = self.repository.team_names(league_id)

        lines_by_player = defaultdict(list)
        for line in self.repository.player_lines(None, completed):
            lines_by_player[line.player_id].append(line)

        return [
            build_player_season(
                player,
                lines_by_player.get(player.id, []),
                completed,
                team_names.get(player.team_id, UNKNOWN),
            )
            for player in players
        ]

    # ------------------------------- Players ------------------------------- #

    def get_player_season_stats(self, league_id: int, player_id: int) -> PlayerSeasonReport:
        """
        One player's season record plus their last 10 completed games.

        Raises:
            NotFoundError: If the league or player does not exist
        """
        completed = self.repository.completed_games(league_id)

        def compute():
            self.repository.get_league(league_id)
            player = self.repository.get_player(league_id, player_id)
            lines = self.repository.player_lines([player.id], completed)
            team_names = self.repository.team_names(league_id)

            self.log.info(
                "player_stats_computed",
                league_id=league_id,
                player_id=player_id,
                games_played=len(lines),
            )
            return PlayerSeasonReport(
                stats=build_player_season(player, lines, completed, team_names.get(player.team_id)),
                recent_games=build_recent_games(player, lines, completed, team_names),
            )

        key = get_cache_key("player_stats", league_id, completed.fingerprint, player_id)
        return self._memoize(key, compute)

    def get_players_stats(
        self,
        league_id: int,
        sort_by: PlayerSortField = PlayerSortField.AVG_POINTS,
        order: SortOrder = SortOrder.DESC,
        page: int = 1,
        per_page: Optional[int] = None,
    ) -> PlayersStatsPage:
        """Every rostered player in the league, sorted and paginated."""
        sort_by = PlayerSortField(sort_by)
        order = SortOrder(order)
        per_page = min(per_page or settings.default_page_size, settings.max_page_size)

        completed = self.repository.completed_games(league_id)

        def compute():
            self.repository.get_league(league_id)
            ordered = sort_players(self._league_seasons(league_id, completed), sort_by, order)
            rows, pagination = paginate(ordered, page, per_page)

            self.log.info(
                "players_stats_computed",
                league_id=league_id,
                sort_by=sort_by.value,
                order=order.value,
                total_count=pagination.total_count,
            )
            return PlayersStatsPage(players=rows, pagination=pagination)

        key = get_cache_key(
            "players_stats",
            league_id,
            completed.fingerprint,
            sort_by=sort_by.value,
            order=order.value,
            page=page,
            per_page=per_page,
        )
        return self._memoize(key, compute)

    def compare_players(self, league_id: int, player1_id: int, player2_id: int) -> PlayerComparison:
        """
        Two players side by side, each computed independently.

        Raises:
            NotFoundError: If the league or either player does not exist
        """
        completed = self.repository.completed_games(league_id)

        def compute():
            self.repository.get_league(league_id)
            first = self.repository.get_player(league_id, player1_id)
            second = self.repository.get_player(league_id, player2_id)
            team_names = self.repository.team_names(league_id)

            seasons = [
                build_player_season(
                    player,
                    self.repository.player_lines([player.id], completed),
                    completed,
                    team_names.get(player.team_id),
                )
                for player in (first, second)
            ]
            return compare(*seasons)

        key = get_cache_key("compare", league_id, completed.fingerprint, player1_id, player2_id)
        return self._memoize(key, compute)

    # ------------------------------- Leaders ------------------------------- #

    def get_league_leaders(
        self,
        league_id: int,
        category: LeaderCategory = LeaderCategory.POINTS,
        limit: Optional[int] = None,
    ) -> LeagueLeaders:
        """Top players in one category, after the category's qualification threshold."""
        category = LeaderCategory(category)
        limit = limit or settings.default_leaders_limit

        completed = self.repository.completed_games(league_id)

        def compute():
            self.repository.get_league(league_id)
            leaders = league_leaders(self._league_seasons(league_id, completed), category, limit)

            self.log.info(
                "league_leaders_computed",
                league_id=league_id,
                category=category.value,
                count=len(leaders.leaders),
            )
            return leaders

        key = get_cache_key("leaders", league_id, completed.fingerprint, category.value, limit=limit)
        return self._memoize(key, compute)

    # ------------------------------- Teams ------------------------------- #

    def get_teams_stats(self, league_id: int) -> TeamsStatsReport:
        """Per-team season averages, ordered by wins then win percentage."""
        completed = self.repository.completed_games(league_id)

        def compute():
            self.repository.get_league(league_id)
            teams = self.repository.list_teams(league_id)

            player_lines_by_team = defaultdict(list)
            for line in self.repository.player_lines(None, completed):
                player_lines_by_team[line.team_id].append(line)

            team_lines_by_team = defaultdict(list)
            for line in self.repository.team_lines(None, completed):
                team_lines_by_team[line.team_id].append(line)

            rows = [
                build_team_season(
                    team,
                    player_lines_by_team.get(team.id, []),
                    team_lines_by_team.get(team.id, []),
                    completed,
                )
                for team in teams
            ]

            self.log.info("teams_stats_computed", league_id=league_id, team_count=len(rows))
            return TeamsStatsReport(teams=sort_by_record(rows))

        return self._memoize(get_cache_key("teams_stats", league_id, completed.fingerprint), compute)

    def get_standings(self, league_id: int) -> StandingsReport:
        """Ranked standings with streaks and games back."""
        completed = self.repository.completed_games(league_id)

        def compute():
            league = self.repository.get_league(league_id)
            standings = build_standings(self.repository.list_teams(league_id), completed)

            self.log.info(
                "standings_computed",
                league_id=league_id,
                team_count=len(standings),
                total_games=len(completed),
            )
            return StandingsReport(
                standings=standings,
                league=LeagueInfo(id=league.id, name=league.name, season=league.season, status=league.status),
                total_games=len(completed),
            )

        return self._memoize(get_cache_key("standings", league_id, completed.fingerprint), compute)

    # ------------------------------- Dashboard ------------------------------- #

    def get_dashboard(self, league_id: int) -> Dashboard:
        """League overview: leaders, compact standings, five latest results and league totals."""
        completed = self.repository.completed_games(league_id)

        def compute():
            league = self.repository.get_league(league_id)
            teams = self.repository.list_teams(league_id)
            seasons = self._league_seasons(league_id, completed)
            team_names = {team.id: team.name for team in teams}

            recent = [
                RecentResult(
                    id=game.id,
                    date=game.ended_at,
                    home_team=team_names.get(game.home_team_id, UNKNOWN),
                    away_team=team_names.get(game.away_team_id, UNKNOWN),
                    home_score=game.home_score,
                    away_score=game.away_score,
                    total_points=game.home_score + game.away_score,
                )
                for game in completed.most_recent(RECENT_RESULTS_LIMIT)
            ]

            self.log.info(
                "dashboard_computed",
                league_id=league_id,
                total_games=len(completed),
                total_players=len(seasons),
            )
            return Dashboard(
                leaders=dashboard_leaders(seasons),
                standings=build_standings_summary(teams, completed),
                recent_games=recent,
                league_info=DashboardLeagueInfo(
                    id=league.id,
                    name=league.name,
                    season=league.season,
                    status=league.status,
                    total_games=len(completed),
                    total_teams=len(teams),
                    total_players=len(seasons),
                ),
            )

        return self._memoize(get_cache_key("dashboard", league_id, completed.fingerprint), compute)
