"""
Integration tests for StatisticsService against the seeded SQLite league.
"""

import pytest

from core.errors import NotFoundError
from engine.leaders import LeaderCategory, PlayerSortField, SortOrder
from services.statistics_service import StatisticsService


@pytest.fixture
def service(seeded_league):
    return StatisticsService()


@pytest.fixture
def league_id(seeded_league):
    return seeded_league["league"].id


class TestPlayerSeasonStats:
    def test_counts_only_completed_games(self, service, league_id, seeded_league):
        report = service.get_player_season_stats(league_id, seeded_league["alice"].id)
        stats = report.stats

        assert stats.games_played == 3
        assert stats.totals.points == 60
        assert stats.averages.points == 20.0
        assert stats.averages.assists == 6.0
        assert stats.shooting.field_goal == 52.2
        assert stats.shooting.three_point == 40.0
        assert stats.shooting.free_throw == 75.0
        assert stats.team_name == "Hawks"

    def test_recent_games_newest_first_with_opponents(self, service, league_id, seeded_league):
        report = service.get_player_season_stats(league_id, seeded_league["alice"].id)

        assert [g.game_id for g in report.recent_games] == [g.id for g in reversed(seeded_league["games"])]
        assert [g.opponent for g in report.recent_games] == ["Bears", "Wolves", "Wolves"]
        assert report.recent_games[0].field_goal_percentage == 55.6

    def test_zero_minute_line_still_counts_as_a_game(self, service, league_id, seeded_league):
        stats = service.get_player_season_stats(league_id, seeded_league["ann"].id).stats
        assert stats.games_played == 2
        assert stats.averages.rebounds == 5.0

    def test_player_without_games(self, service, league_id, seeded_league):
        report = service.get_player_season_stats(league_id, seeded_league["cara"].id)
        assert report.stats.games_played == 0
        assert report.stats.averages.points == 0
        assert report.recent_games == []

    def test_unknown_player(self, service, league_id):
        with pytest.raises(NotFoundError):
            service.get_player_season_stats(league_id, 9999)

    def test_player_from_another_league(self, service, league_id, private_league):
        other_player = private_league.teams[0].players[0]
        with pytest.raises(NotFoundError):
            service.get_player_season_stats(league_id, other_player.id)

    def test_unknown_league(self, service, seeded_league):
        with pytest.raises(NotFoundError):
            service.get_player_season_stats(9999, seeded_league["alice"].id)

    def test_results_are_cached(self, service, league_id, seeded_league):
        first = service.get_player_season_stats(league_id, seeded_league["alice"].id)
        second = service.get_player_season_stats(league_id, seeded_league["alice"].id)
        assert first is second


class TestPlayersStats:
    def test_default_sort_is_points_per_game(self, service, league_id):
        page = service.get_players_stats(league_id)

        assert [p.player_name for p in page.players] == [
            "Ben Center", "Alice Guard", "Ann Forward", "Cara Bench",
        ]
        assert page.pagination.total_count == 4
        assert page.pagination.total_pages == 1

    def test_second_page(self, service, league_id):
        page = service.get_players_stats(league_id, PlayerSortField.AVG_POINTS, SortOrder.DESC, page=2, per_page=2)
        assert [p.player_name for p in page.players] == ["Ann Forward", "Cara Bench"]
        assert page.pagination.total_pages == 2

    def test_ascending_games_played(self, service, league_id):
        page = service.get_players_stats(league_id, PlayerSortField.GAMES_PLAYED, SortOrder.ASC)
        assert [p.games_played for p in page.players] == [0, 2, 2, 3]


class TestLeadersAndComparison:
    def test_field_goal_leaders_apply_attempt_threshold(self, service, league_id):
        leaders = service.get_league_leaders(league_id, LeaderCategory.FIELD_GOAL_PERCENTAGE)
        assert [(e.player_name, e.value) for e in leaders.leaders] == [
            ("Ben Center", 72.7),
            ("Alice Guard", 52.2),
        ]

    def test_default_limit(self, service, league_id):
        leaders = service.get_league_leaders(league_id)
        assert leaders.category == "points"
        assert len(leaders.leaders) == 3

    def test_compare(self, service, league_id, seeded_league):
        result = service.compare_players(league_id, seeded_league["ben"].id, seeded_league["cara"].id)
        assert result.player1.avg_points == 20.5
        assert result.player1.number == 34
        assert result.player2.games_played == 0
        assert result.player2.total_points == 0


class TestTeamsAndStandings:
    def test_team_rebounds_include_unattributed(self, service, league_id):
        teams = service.get_teams_stats(league_id).teams
        wolves = next(t for t in teams if t.team_name == "Wolves")

        assert wolves.games_played == 2
        assert wolves.avg_rebounds == 13.5
        assert wolves.avg_offensive_rebounds == 4.5
        assert wolves.avg_defensive_rebounds == 9.0

    def test_teams_ordered_by_wins(self, service, league_id):
        teams = service.get_teams_stats(league_id).teams
        assert [t.team_name for t in teams] == ["Hawks", "Wolves", "Bears"]

    def test_standings(self, service, league_id):
        report = service.get_standings(league_id)
        hawks, wolves, bears = report.standings

        assert report.total_games == 3
        assert report.league.name == "Metro League"
        assert (hawks.rank, hawks.wins, hawks.losses) == (1, 2, 1)
        assert hawks.home_record == "2-0"
        assert hawks.away_record == "0-1"
        assert hawks.last5 == ["W", "L", "W"]
        assert hawks.streak == "W1"
        assert hawks.point_diff == 37
        assert hawks.avg_points_for == 80.7
        assert hawks.games_back == 0
        assert wolves.games_back == 0.5
        assert bears.games_back == 1.0


class TestDashboard:
    def test_dashboard(self, service, league_id, seeded_league):
        dashboard = service.get_dashboard(league_id)

        assert dashboard.leaders.scoring[0].name == "Ben Center"
        assert [e.name for e in dashboard.leaders.shooting] == ["Alice Guard"]
        assert [s.team_name for s in dashboard.standings] == ["Hawks", "Wolves", "Bears"]
        assert [g.id for g in dashboard.recent_games] == [g.id for g in reversed(seeded_league["games"])]
        assert dashboard.recent_games[0].home_team == "Hawks"
        assert dashboard.recent_games[0].away_team == "Bears"
        assert dashboard.recent_games[0].total_points == 150
        assert dashboard.league_info.total_games == 3
        assert dashboard.league_info.total_teams == 3
        assert dashboard.league_info.total_players == 4


class TestCacheFreshness:
    def _complete(self, game, home_score, away_score):
        game.status = "completed"
        game.home_score = home_score
        game.away_score = away_score
        game.ended_at = game.scheduled_at
        game.save()

    def test_completing_a_game_refreshes_standings(self, service, league_id, seeded_league):
        assert service.get_standings(league_id).total_games == 3

        self._complete(seeded_league["upcoming"], 60, 90)
        report = service.get_standings(league_id)

        assert report.total_games == 4
        assert [(s.team_name, s.wins, s.losses) for s in report.standings] == [
            ("Wolves", 2, 1),
            ("Hawks", 2, 2),
            ("Bears", 0, 1),
        ]
        assert report.standings[1].games_back == 0.5

    def test_completing_a_game_refreshes_player_stats(self, service, league_id, seeded_league):
        alice_id = seeded_league["alice"].id
        assert service.get_player_season_stats(league_id, alice_id).stats.games_played == 3

        self._complete(seeded_league["upcoming"], 60, 90)
        report = service.get_player_season_stats(league_id, alice_id)

        assert report.stats.games_played == 4
        assert report.stats.totals.points == 110

    def test_score_correction_refreshes_standings(self, service, league_id, seeded_league):
        assert service.get_standings(league_id).standings[0].point_diff == 37

        first_game = seeded_league["games"][0]
        first_game.away_score = 78
        first_game.save()
        hawks = service.get_standings(league_id).standings[0]

        assert hawks.team_name == "Hawks"
        assert hawks.point_diff == 29
