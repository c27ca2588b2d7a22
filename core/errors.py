"""
Service Errors

Exception taxonomy for the statistics service. Degenerate inputs (zero
games, zero attempts, zero turnovers) are never errors; they resolve to
documented zero values inside the engine.
"""

from typing import Any


class StatsServiceError(Exception):
    """Base class for errors surfaced to callers."""

    pass


class NotFoundError(StatsServiceError):
    """Raised when a referenced league, team, or player does not resolve."""

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(f"{resource.capitalize()} not found: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class LeagueAccessError(StatsServiceError):
    """Raised when the caller may not view a league's data."""

    def __init__(self, league_id: Any, user_id: Any = None):
        super().__init__(f"Access denied to league {league_id}")
        self.league_id = league_id
        self.user_id = user_id
