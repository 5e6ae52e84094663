"""
Team membership screen.

Holds the two tables of the team screen (users that can still be added, and
the team members) and moves users between them on operator actions. Every
outcome is reported through the notification collaborator.

Membership changes stay local to the view: the authorization update that
would persist them is not wired in, so closing the view discards them.
"""
import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from apps.notifications.schemas import NotificationOut
from apps.team.schemas import TeamOut, UserOut, UserViewModel
from common.confirmation import ConfirmationService
from common.pagination import SortState
from constants import messages
from constants.pagination import TEAM_AVAILABLE_USERS, TEAM_MEMBERS
from constants.statuses import UNINITIALIZED, LOADING, READY, ERROR, CLOSED

logger = logging.getLogger(__name__)


class TeamFetcher(Protocol):
    async def get_team(self, team_id: int) -> TeamOut:
        ...

    async def get_all_users(self) -> Sequence[UserOut]:
        ...


class Notifier(Protocol):
    def success(self, message: str, subject: Optional[str] = None) -> None:
        ...

    def error(self, title: str, error: object, message: str) -> None:
        ...

    def drain(self) -> List[NotificationOut]:
        ...


class PaginationStore(Protocol):
    def get_pagination_count(self, key: str) -> int:
        ...

    def set_pagination_count(self, key: str, count: int) -> None:
        ...


@dataclass
class TeamViewState:
    view_id: str
    team_id: int
    pagination_count_users: int
    pagination_count_members: int
    status: str = UNINITIALIZED
    loading: bool = False
    team: Optional[TeamOut] = None
    users: List[UserViewModel] = field(default_factory=list)
    team_members: List[UserViewModel] = field(default_factory=list)
    users_sort: SortState = field(default_factory=SortState)
    members_sort: SortState = field(default_factory=SortState)


def remove_user_from_list(user_id: int, users: List[UserViewModel]) -> None:
    """
    Drop the first entry with the given id, if any.
    Linear scan: team tables hold at most a few hundred rows.
    """
    for index, user in enumerate(users):
        if user.id == user_id:
            del users[index]
            return


class TeamMembershipView:
    def __init__(
        self,
        team_id: int,
        team_service: TeamFetcher,
        notifications: Notifier,
        pagination: PaginationStore,
        view_id: Optional[str] = None,
    ) -> None:
        self._team_service = team_service
        self._notifications = notifications
        self._pagination = pagination
        self.state = TeamViewState(
            view_id=view_id or uuid.uuid4().hex,
            team_id=team_id,
            pagination_count_users=pagination.get_pagination_count(TEAM_AVAILABLE_USERS),
            pagination_count_members=pagination.get_pagination_count(TEAM_MEMBERS),
        )

    @property
    def view_id(self) -> str:
        return self.state.view_id

    @property
    def closed(self) -> bool:
        return self.state.status == CLOSED

    async def initialize(self) -> None:
        """
        Fetch team and users together and fill the available users table.
        Either lookup failing leaves both tables empty and raises one error notification.
        """
        state = self.state
        state.status = LOADING
        state.loading = True
        logger.info("Loading team %s", state.team_id)
        try:
            team, users = await asyncio.gather(
                self._team_service.get_team(state.team_id),
                self._team_service.get_all_users(),
            )
        except Exception as exc:
            if self.closed:
                return
            logger.warning("Loading team %s failed: %r", state.team_id, exc)
            state.users = []
            state.team_members = []
            state.status = ERROR
            self._notifications.error(messages.FAILURE_TITLE, exc, messages.TEAM_DETAILS_ERROR)
        else:
            if self.closed:
                return
            state.team = team
            state.users = [UserViewModel.from_user(u) for u in users if not u.is_administrator]
            state.team_members = []
            state.status = READY
            logger.info("Team %s ready with %d available users", state.team_id, len(state.users))
        finally:
            state.loading = False

    def add_user(self, user: UserViewModel) -> None:
        remove_user_from_list(user.id, self.state.users)
        self.state.team_members.append(user)
        self._notifications.success(messages.USER_ADDED, user.username)

    def remove_user(self, user: UserViewModel) -> None:
        remove_user_from_list(user.id, self.state.team_members)
        self.state.users.append(user)
        self._notifications.success(messages.USER_REMOVED, user.username)

    def add_all_users(self) -> None:
        self.state.team_members = self.state.team_members + self.state.users
        self.state.users = []
        self._notifications.success(messages.ALL_USERS_ADDED)

    def remove_all_users(self) -> None:
        self.state.users = self.state.users + self.state.team_members
        self.state.team_members = []
        self._notifications.success(messages.ALL_USERS_REMOVED)

    async def request_delete_team(self, confirmation: ConfirmationService) -> bool:
        """
        Ask the operator to confirm the deletion of the team.
        Deleting is not enabled yet: a confirmed request is only logged.
        """
        confirmed = await confirmation.confirm_deletion(messages.DELETE_TEAM_PROMPT)
        if not confirmed:
            return False
        logger.info("Deletion of team %s confirmed, team deletion is disabled", self.state.team_id)
        return True

    def order_users(self, sort_type: str) -> None:
        self.state.users_sort.order(sort_type)

    def order_group_members(self, sort_type: str) -> None:
        self.state.members_sort.order(sort_type)

    def change_pagination_count_users(self, count: int) -> None:
        self.state.pagination_count_users = count
        self._pagination.set_pagination_count(TEAM_AVAILABLE_USERS, count)

    def change_pagination_count_group_members(self, count: int) -> None:
        self.state.pagination_count_members = count
        self._pagination.set_pagination_count(TEAM_MEMBERS, count)

    def drain_notifications(self) -> List[NotificationOut]:
        return self._notifications.drain()

    def find_available_user(self, user_id: int) -> Optional[UserViewModel]:
        return next((u for u in self.state.users if u.id == user_id), None)

    def find_team_member(self, user_id: int) -> Optional[UserViewModel]:
        return next((u for u in self.state.team_members if u.id == user_id), None)

    def teardown(self) -> None:
        """
        Discard the tables. A lookup still in flight is ignored when it completes.
        """
        self.state.status = CLOSED
        self.state.users = []
        self.state.team_members = []
        logger.info("Team %s view closed", self.state.team_id)
