"""
Statistics API Routes

Read-only endpoints over derived league statistics. Every route requires the
service bearer token and checks league visibility before computing anything.
"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, Path, Query, Security

from core.api_auth import get_user_id, verify_api_token
from core.league_access import ensure_league_access
from core.settings import settings
from db.base import db
from engine.leaders import LeaderCategory, PlayerSortField, SortOrder
from schemas.common import BaseResponse, success_response
from services.statistics_service import StatisticsService

router = APIRouter(
    prefix="/leagues/{league_id}",
    tags=["statistics"],
    dependencies=[Security(verify_api_token)],
)


def get_statistics_service() -> StatisticsService:
    return StatisticsService()


class LeagueScope:
    """
    One request against one league.

    The access check and the computation share one connection, opened and
    closed in the thread that runs the handler.
    """

    def __init__(self, league_id: int, user_id: Optional[str], service: StatisticsService):
        self.league_id = league_id
        self.user_id = user_id
        self.service = service

    def run(self, operation: Callable, *args, **kwargs):
        """
        Check access, then call operation(league_id, *args, **kwargs).

        Raises:
            NotFoundError: If the league does not exist
            LeagueAccessError: If the caller may not read the league
        """
        with db.connection_context():
            ensure_league_access(self.service.repository, self.league_id, self.user_id)
            return operation(self.league_id, *args, **kwargs)


def league_scope(
    league_id: int = Path(..., ge=1),
    user_id: Optional[str] = Depends(get_user_id),
    service: StatisticsService = Depends(get_statistics_service),
) -> LeagueScope:
    return LeagueScope(league_id, user_id, service)


@router.get("/players/stats", response_model=BaseResponse)
def get_players_stats(
    scope: LeagueScope = Depends(league_scope),
    sort_by: PlayerSortField = Query(PlayerSortField.AVG_POINTS, description="Field to sort by"),
    order: SortOrder = Query(SortOrder.DESC),
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    per_page: Optional[int] = Query(None, ge=1, le=settings.max_page_size, description="Players per page"),
) -> dict:
    """Season statistics for every rostered player, sorted and paginated."""
    result = scope.run(scope.service.get_players_stats, sort_by, order, page, per_page)
    return success_response(
        message="Players statistics retrieved",
        data=result.model_dump(mode="json"),
    )


@router.get("/players/{player_id}/stats", response_model=BaseResponse)
def get_player_stats(
    player_id: int,
    scope: LeagueScope = Depends(league_scope),
) -> dict:
    """One player's season record and their last 10 completed games."""
    result = scope.run(scope.service.get_player_season_stats, player_id)
    return success_response(
        message="Player statistics retrieved",
        data=result.model_dump(mode="json"),
    )


@router.get("/teams/stats", response_model=BaseResponse)
def get_teams_stats(
    scope: LeagueScope = Depends(league_scope),
) -> dict:
    result = scope.run(scope.service.get_teams_stats)
    return success_response(
        message="Team statistics retrieved",
        data=result.model_dump(mode="json"),
    )


@router.get("/leaders", response_model=BaseResponse)
def get_league_leaders(
    scope: LeagueScope = Depends(league_scope),
    category: LeaderCategory = Query(LeaderCategory.POINTS),
    limit: Optional[int] = Query(None, ge=1, le=100),
) -> dict:
    """
    League leaders for one category.

    Shooting categories require minimum attempts (10 FGA, 5 3PA, 5 FTA).
    """
    result = scope.run(scope.service.get_league_leaders, category, limit)
    return success_response(
        message=f"League leaders retrieved for {category.value}",
        data=result.model_dump(mode="json"),
    )


@router.get("/dashboard", response_model=BaseResponse)
def get_dashboard(
    scope: LeagueScope = Depends(league_scope),
) -> dict:
    result = scope.run(scope.service.get_dashboard)
    return success_response(
        message="Dashboard retrieved",
        data=result.model_dump(mode="json"),
    )


@router.get("/compare", response_model=BaseResponse)
def compare_players(
    player1_id: int = Query(..., ge=1),
    player2_id: int = Query(..., ge=1),
    scope: LeagueScope = Depends(league_scope),
) -> dict:
    result = scope.run(scope.service.compare_players, player1_id, player2_id)
    return success_response(
        message="Player comparison retrieved",
        data=result.model_dump(mode="json"),
    )


@router.get("/standings", response_model=BaseResponse)
def get_standings(
    scope: LeagueScope = Depends(league_scope),
) -> dict:
    """Ranked standings with home/away splits, last five, streak and games back."""
    result = scope.run(scope.service.get_standings)
    return success_response(
        message="Standings retrieved",
        data=result.model_dump(mode="json"),
    )
