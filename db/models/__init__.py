# Import all models to ensure they are registered with the database
from .league import League
from .membership import LeagueMembership
from .team import Team
from .player import Player
from .game import Game
from .player_stat import PlayerStat
from .team_stat import TeamStat

__all__ = [
    'League', 'LeagueMembership', 'Team', 'Player', 'Game', 'PlayerStat', 'TeamStat'
]
