from typing import Optional

from core.errors import LeagueAccessError
from core.logging import get_logger
from db.models import League
from db.repository import LeagueRepository

log = get_logger("league_access")


def ensure_league_access(
    repository: LeagueRepository,
    league_id: int,
    user_id: Optional[str] = None,
) -> League:
    """
    Check the caller may read the league's statistics.

    Public leagues are readable by anyone; private leagues need the owner
    or an active member.

    Raises:
        NotFoundError: If the league does not exist
        LeagueAccessError: If the league is private and the user is neither its owner nor an active member
    """
    league = repository.get_league(league_id)
    if league.is_public:
        return league

    if user_id and (league.owner_id == user_id or repository.is_member(user_id, league_id)):
        return league

    log.warning("league_access_denied", league_id=league_id, user_id=user_id)
    raise LeagueAccessError(league_id, user_id)
