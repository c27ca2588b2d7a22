"""
Shared pytest fixtures for the statistics service.

Provides a throwaway SQLite database bound to the model proxy and a small
seeded league:

    Hawks   2-1   home 2-0  away 0-1
    Wolves  1-1
    Bears   0-1

plus a scheduled game whose stat lines must never count, and a private
league with one active and one suspended member.
"""

import os
from datetime import datetime, timedelta

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("API_TOKEN", "test-token")

import pytest

from db.base import close_db, init_db
from db.models import Game, League, LeagueMembership, Player, PlayerStat, Team, TeamStat
from engine.records import GameRecord, GameStatus, PlayerStatLine
from services.cache import clear_cache

API_TOKEN = os.environ["API_TOKEN"]
DAY_ONE = datetime(2025, 1, 10, 21, 0)


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def database(tmp_path):
    """Bind the model proxy to a fresh SQLite file for one test."""
    database = init_db(f"sqlite:///{tmp_path / 'league.db'}")
    yield database
    close_db()


def _line(game, player, **stats):
    return PlayerStat.create(game=game, player=player, team=player.team, **stats)


@pytest.fixture
def seeded_league(database):
    """
    Create the public Metro League with three teams, four players and
    three completed games.

    Returns:
        Dict of created rows keyed by short name
    """
    league = League.create(name="Metro League", season="2025", status="active", is_public=True)

    hawks = Team.create(league=league, name="Hawks", city="Springfield", logo_url="https://img/hawks.png")
    wolves = Team.create(league=league, name="Wolves", city="Shelbyville")
    bears = Team.create(league=league, name="Bears")

    alice = Player.create(team=hawks, name="Alice Guard", number=3, position="PG")
    ann = Player.create(team=hawks, name="Ann Forward", number=12, position="SF")
    ben = Player.create(team=wolves, name="Ben Center", number=34, position="C")
    cara = Player.create(team=bears, name="Cara Bench", number=0, position="SG")

    completed = GameStatus.COMPLETED.value
    g1 = Game.create(
        league=league, home_team=hawks, away_team=wolves, home_score=80, away_score=70,
        status=completed, ended_at=DAY_ONE,
    )
    g2 = Game.create(
        league=league, home_team=wolves, away_team=hawks, home_score=75, away_score=72,
        status=completed, ended_at=DAY_ONE + timedelta(days=1),
    )
    g3 = Game.create(
        league=league, home_team=hawks, away_team=bears, home_score=90, away_score=60,
        status=completed, ended_at=DAY_ONE + timedelta(days=2),
    )
    upcoming = Game.create(
        league=league, home_team=hawks, away_team=wolves, status=GameStatus.SCHEDULED.value,
        scheduled_at=DAY_ONE + timedelta(days=5),
    )

    # Alice: 3 games, 60 pts, 24/46 FG, 6/15 3P, 6/8 FT
    _line(g1, alice, points=20, field_goals_made=8, field_goals_attempted=16,
          three_pointers_made=2, three_pointers_attempted=5, free_throws_made=2, free_throws_attempted=2,
          rebounds=4, assists=6, steals=1, turnovers=2, fouls=2, minutes_played=30)
    _line(g2, alice, points=15, field_goals_made=6, field_goals_attempted=12,
          three_pointers_made=1, three_pointers_attempted=4, free_throws_made=2, free_throws_attempted=4,
          rebounds=3, assists=5, steals=2, turnovers=3, fouls=3, minutes_played=28)
    _line(g3, alice, points=25, field_goals_made=10, field_goals_attempted=18,
          three_pointers_made=3, three_pointers_attempted=6, free_throws_made=2, free_throws_attempted=2,
          rebounds=5, assists=7, blocks=1, turnovers=1, fouls=1, minutes_played=32)
    _line(upcoming, alice, points=50, field_goals_made=20, field_goals_attempted=20)

    # Ann: 2 games, 9 FGA in total, second game with zero minutes
    _line(g1, ann, points=10, field_goals_made=4, field_goals_attempted=9, rebounds=8, assists=1,
          minutes_played=20)
    _line(g3, ann, rebounds=2, minutes_played=0)

    # Ben: 2 games, 16/22 FG, 8/11 FT, no turnovers
    _line(g1, ben, points=18, field_goals_made=7, field_goals_attempted=10, free_throws_made=4,
          free_throws_attempted=6, rebounds=12, offensive_rebounds=4, defensive_rebounds=8, assists=2,
          minutes_played=34)
    _line(g2, ben, points=23, field_goals_made=9, field_goals_attempted=12, free_throws_made=4,
          free_throws_attempted=5, rebounds=10, offensive_rebounds=3, defensive_rebounds=7, assists=1,
          blocks=3, minutes_played=36)

    TeamStat.create(game=g1, team=wolves, offensive_rebounds=2, defensive_rebounds=3)
    TeamStat.create(game=upcoming, team=wolves, offensive_rebounds=10, defensive_rebounds=10)

    return {
        "league": league,
        "hawks": hawks,
        "wolves": wolves,
        "bears": bears,
        "alice": alice,
        "ann": ann,
        "ben": ben,
        "cara": cara,
        "games": [g1, g2, g3],
        "upcoming": upcoming,
    }


@pytest.fixture
def private_league(database):
    league = League.create(name="Office League", season="2025", is_public=False, owner_id="owner-1")
    team = Team.create(league=league, name="Accountants")
    Player.create(team=team, name="Dana Ledger", number=7)
    LeagueMembership.create(user_id="member-1", league=league, status="active")
    LeagueMembership.create(user_id="suspended-1", league=league, status="suspended")
    return league


# ------------------------------- Record builders ------------------------------- #

def make_game(game_id, home, away, home_score, away_score, ended_day=None, league_id=1,
              status=GameStatus.COMPLETED):
    """Completed GameRecord helper for pure engine tests."""
    return GameRecord(
        id=game_id,
        league_id=league_id,
        home_team_id=home,
        away_team_id=away,
        home_score=home_score,
        away_score=away_score,
        status=status,
        ended_at=DAY_ONE + timedelta(days=ended_day) if ended_day is not None else None,
    )


def make_line(game_id=1, player_id=1, team_id=1, **stats):
    return PlayerStatLine(game_id=game_id, player_id=player_id, team_id=team_id, **stats)
