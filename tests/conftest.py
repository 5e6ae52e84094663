import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from apps.notifications.service import Notifications
from apps.team.schemas import TeamOut, UserOut
from apps.team.view import TeamMembershipView
from common.pagination import PaginationPreferences
from constants.roles import ADMINISTRATOR, STANDARD_USER


class FakeTeamService:
    """
    In-memory team lookup. Errors and a gate can be set to drive the failure
    and in-flight paths of the view.
    """

    def __init__(
        self,
        team: Optional[TeamOut] = None,
        users: Sequence[UserOut] = (),
        team_error: Optional[Exception] = None,
        users_error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.team = team
        self.users = list(users)
        self.team_error = team_error
        self.users_error = users_error
        self.gate = gate
        self.team_calls: List[int] = []
        self.users_calls = 0

    async def get_team(self, team_id: int) -> TeamOut:
        self.team_calls.append(team_id)
        if self.gate is not None:
            await self.gate.wait()
        if self.team_error is not None:
            raise self.team_error
        return self.team or TeamOut(id=team_id, name=f"team-{team_id}")

    async def get_all_users(self) -> List[UserOut]:
        self.users_calls += 1
        if self.users_error is not None:
            raise self.users_error
        return list(self.users)


def make_user(user_id: int, username: str, role: int = STANDARD_USER) -> UserOut:
    return UserOut(id=user_id, username=username, role=role)


@pytest.fixture
def console_users() -> List[UserOut]:
    return [
        make_user(1, "admin", ADMINISTRATOR),
        make_user(2, "bob"),
        make_user(3, "al"),
        make_user(4, "carol"),
    ]


@pytest.fixture
def team_service(console_users) -> FakeTeamService:
    return FakeTeamService(team=TeamOut(id=7, name="platform"), users=console_users)


@pytest.fixture
def notifications() -> Notifications:
    return Notifications()


@pytest.fixture
def pagination() -> PaginationPreferences:
    return PaginationPreferences(default_count=10)


@pytest.fixture
def view(team_service, notifications, pagination) -> TeamMembershipView:
    return TeamMembershipView(team_id=7, team_service=team_service, notifications=notifications, pagination=pagination)
