"""
Unit tests for leaderboards, player sorting, pagination and comparison.
"""

import pytest

from conftest import make_game, make_line
from engine.leaders import (
    LEADER_RULES,
    SORT_ACCESSORS,
    LeaderCategory,
    PlayerSortField,
    SortOrder,
    compare,
    dashboard_leaders,
    league_leaders,
    paginate,
    sort_players,
)
from engine.records import CompletedGames, PlayerRef
from engine.season import build_player_season


@pytest.fixture
def completed():
    return CompletedGames.from_games(1, [make_game(i, 1, 2, 80, 70, ended_day=i) for i in range(1, 4)])


def _season(completed, player_id, name, lines):
    player = PlayerRef(id=player_id, name=name, team_id=1)
    return build_player_season(player, lines, completed, "Hawks")


@pytest.fixture
def seasons(completed):
    sharpshooter = _season(completed, 1, "Sharpshooter", [
        make_line(game_id=1, player_id=1, points=30, field_goals_made=9, field_goals_attempted=9),
    ])
    volume = _season(completed, 2, "Volume Scorer", [
        make_line(game_id=g, player_id=2, points=20, field_goals_made=8, field_goals_attempted=16,
                  free_throws_made=4, free_throws_attempted=5, rebounds=3, assists=8)
        for g in (1, 2, 3)
    ])
    big = _season(completed, 3, "Glass Cleaner", [
        make_line(game_id=g, player_id=3, points=12, field_goals_made=6, field_goals_attempted=10,
                  rebounds=14, blocks=3)
        for g in (1, 2)
    ])
    idle = _season(completed, 4, "Never Played", [])
    return [sharpshooter, volume, big, idle]


class TestLeagueLeaders:
    def test_every_category_has_a_rule(self):
        assert set(LEADER_RULES) == set(LeaderCategory)

    def test_every_sort_field_has_an_accessor(self):
        assert set(SORT_ACCESSORS) == set(PlayerSortField)

    def test_points_leaders_use_per_game_average(self, seasons):
        result = league_leaders(seasons, LeaderCategory.POINTS)
        assert result.category == "points"
        assert [entry.player_name for entry in result.leaders] == [
            "Sharpshooter", "Volume Scorer", "Glass Cleaner",
        ]
        assert result.leaders[0].value == 30.0

    def test_players_without_games_are_excluded(self, seasons):
        result = league_leaders(seasons, LeaderCategory.STEALS)
        assert "Never Played" not in [entry.player_name for entry in result.leaders]

    def test_nine_attempts_never_qualify_for_field_goal_percentage(self, seasons):
        result = league_leaders(seasons, LeaderCategory.FIELD_GOAL_PERCENTAGE)
        names = [entry.player_name for entry in result.leaders]
        assert "Sharpshooter" not in names
        assert names == ["Glass Cleaner", "Volume Scorer"]

    def test_free_throw_threshold(self, seasons):
        result = league_leaders(seasons, LeaderCategory.FREE_THROW_PERCENTAGE)
        assert [entry.player_name for entry in result.leaders] == ["Volume Scorer"]
        assert result.leaders[0].value == 80.0

    def test_limit_truncates(self, seasons):
        assert len(league_leaders(seasons, LeaderCategory.POINTS, limit=1).leaders) == 1

    def test_accepts_category_value(self, seasons):
        assert league_leaders(seasons, "rebounds").leaders[0].player_name == "Glass Cleaner"

    def test_unknown_category_is_rejected(self, seasons):
        with pytest.raises(ValueError):
            league_leaders(seasons, "dunks")


class TestSortAndPaginate:
    def test_descending_by_default(self, seasons):
        ordered = sort_players(seasons)
        assert [s.player_name for s in ordered][:3] == ["Sharpshooter", "Volume Scorer", "Glass Cleaner"]

    def test_ascending(self, seasons):
        ordered = sort_players(seasons, PlayerSortField.AVG_REBOUNDS, SortOrder.ASC)
        values = [s.averages.rebounds for s in ordered]
        assert values == sorted(values)

    def test_sort_is_stable_for_equal_values(self, seasons):
        ordered = sort_players(seasons, PlayerSortField.AVG_STEALS, SortOrder.DESC)
        assert [s.player_id for s in ordered] == [1, 2, 3, 4]

    def test_pagination_math(self):
        items = list(range(45))
        page, pagination = paginate(items, page=3, per_page=20)
        assert page == list(range(40, 45))
        assert pagination.total_pages == 3
        assert pagination.total_count == 45
        assert pagination.current_page == 3

    def test_page_past_the_end_is_empty(self):
        page, pagination = paginate([1, 2], page=5, per_page=10)
        assert page == []
        assert pagination.total_pages == 1

    def test_empty_list(self):
        page, pagination = paginate([], page=1, per_page=20)
        assert page == []
        assert pagination.total_pages == 0


class TestDashboardAndComparison:
    def test_shooting_leaders_need_three_games(self, seasons):
        leaders = dashboard_leaders(seasons)
        assert [entry.name for entry in leaders.shooting] == ["Volume Scorer"]
        assert leaders.rebounding[0].name == "Glass Cleaner"
        assert leaders.assists[0].name == "Volume Scorer"
        assert all(entry.team == "Hawks" for entry in leaders.scoring)

    def test_comparison_of_zero_game_player(self, seasons):
        result = compare(seasons[1], seasons[3])

        assert result.player1.games_played == 3
        assert result.player1.avg_points == 20.0
        assert result.player1.total_points == 60
        assert result.player2.games_played == 0
        assert result.player2.avg_points == 0
        assert result.player2.field_goal_percentage == 0
        assert result.player2.player_name == "Never Played"
