from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from apps.notifications.schemas import NotificationOut
from constants.roles import ADMINISTRATOR, ROLE_NAMES
from constants.statuses import UNINITIALIZED, LOADING, READY, ERROR, CLOSED
from settings.config import get_settings


ViewStatus = Literal[UNINITIALIZED, LOADING, READY, ERROR, CLOSED]
ListName = Literal["users", "members"]


class TeamOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class UserOut(BaseModel):
    """
    User record as returned by the user lookup.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: int

    @property
    def is_administrator(self) -> bool:
        return self.role == ADMINISTRATOR


class UserViewModel(BaseModel):
    """
    Row shown in the team tables. Identity never changes, only the table it sits in.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    role: int
    role_name: str

    @classmethod
    def from_user(cls, user: UserOut) -> "UserViewModel":
        return cls(id=user.id, username=user.username, role=user.role, role_name=ROLE_NAMES.get(user.role, "unknown"))


class SortRequest(BaseModel):
    sort_type: str = Field(..., min_length=1)


class PaginationCountRequest(BaseModel):
    count: int = Field(..., ge=1)

    @field_validator("count")
    def within_max_count(cls, v: int) -> int:
        max_count = get_settings().MAX_PAGINATION_COUNT
        if v > max_count:
            raise ValueError(f"Page size cannot exceed {max_count}.")
        return v


class DeletionRequest(BaseModel):
    """
    Answer the operator gave to the deletion prompt.
    """
    confirmed: bool


class DeletionResponse(BaseModel):
    viewId: str
    teamId: int
    confirmed: bool
    deleted: bool = False
    notifications: List[NotificationOut] = []


class UserListPage(BaseModel):
    items: List[UserViewModel]
    total: int
    page: int
    size: int
    total_pages: int
    sort_type: str
    sort_reverse: bool
    pagination_count: int


class TeamViewOut(BaseModel):
    """
    Snapshot of one team screen, with the notifications raised since the last call.
    """
    viewId: str
    teamId: int
    status: ViewStatus
    loading: bool
    team: Optional[TeamOut] = None
    users: UserListPage
    members: UserListPage
    notifications: List[NotificationOut] = []
