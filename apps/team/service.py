import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from apps.team.schemas import TeamOut, UserOut
from models.base import SessionLocal
from models.team import Team
from models.user import User

logger = logging.getLogger(__name__)


class TeamServiceError(Exception):
    """Base class for lookup failures of the team screen."""

    detail = "Team lookup failed"

    def __init__(self, detail: str | None = None) -> None:
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class TeamNotFoundError(TeamServiceError):
    def __init__(self, team_id: int) -> None:
        self.team_id = team_id
        super().__init__(f"Team {team_id} not found")


class TeamService:
    """
    Reads the team and the console users.
    Each lookup opens its own session so both can be awaited concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = SessionLocal) -> None:
        self._session_factory = session_factory

    async def get_team(self, team_id: int) -> TeamOut:
        async with self._session_factory() as db:
            team = await db.get(Team, team_id)
        if team is None:
            raise TeamNotFoundError(team_id)
        return TeamOut.model_validate(team)

    async def get_all_users(self) -> List[UserOut]:
        async with self._session_factory() as db:
            res = await db.execute(select(User).order_by(User.id))
            users = res.scalars().all()
        logger.debug("Loaded %d users", len(users))
        return [UserOut.model_validate(u) for u in users]
