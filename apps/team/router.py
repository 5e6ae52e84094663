"""
Team screen endpoints.

Opening a team returns a view id; every later call addresses that screen, so two
operators on the same team never share tables.

No access guard is attached here: authentication was dropped from this service,
so these routes are open to anyone who can reach it. Put it behind the console's
admin-only gateway.
"""
from fastapi import APIRouter, Depends, Query, status

from apps.team.exception import http_bad_request, user_not_in_list, view_not_open
from apps.team.registry import TeamViewRegistry, get_view_registry
from apps.team.schemas import (
    DeletionRequest,
    DeletionResponse,
    PaginationCountRequest,
    SortRequest,
    TeamViewOut,
    UserListPage,
)
from apps.team.view import TeamMembershipView
from common.confirmation import StaticConfirmation
from common.pagination import SortState, paginate_list

router = APIRouter(prefix="/api/teams", tags=["Team"])

LIST_NAMES = ("users", "members")


def _page(items, sort: SortState, page: int, count: int) -> UserListPage:
    rows, total, page, size, total_pages = paginate_list(items, sort, page, count)
    return UserListPage(
        items=rows,
        total=total,
        page=page,
        size=size,
        total_pages=total_pages,
        sort_type=sort.sort_type,
        sort_reverse=sort.sort_reverse,
        pagination_count=count,
    )


def _serialize_view(view: TeamMembershipView, users_page: int = 1, members_page: int = 1) -> TeamViewOut:
    """Shape a view's state into TeamViewOut, handing over its pending notifications."""
    state = view.state
    return TeamViewOut(
        viewId=state.view_id,
        teamId=state.team_id,
        status=state.status,  # type: ignore[arg-type]
        loading=state.loading,
        team=state.team,
        users=_page(state.users, state.users_sort, users_page, state.pagination_count_users),
        members=_page(state.team_members, state.members_sort, members_page, state.pagination_count_members),
        notifications=view.drain_notifications(),
    )


def _require_view(view_id: str, registry: TeamViewRegistry) -> TeamMembershipView:
    view = registry.get(view_id)
    if view is None:
        raise view_not_open(view_id)
    return view


def _require_list_name(list_name: str) -> str:
    if list_name not in LIST_NAMES:
        raise http_bad_request(f"Unknown list '{list_name}', expected one of: {', '.join(LIST_NAMES)}")
    return list_name


@router.post("/{team_id}/views", response_model=TeamViewOut)
async def open_view(team_id: int, registry: TeamViewRegistry = Depends(get_view_registry)):
    """
    Open a team screen: loads the team and the users that can be added to it.
    A failed lookup still returns the (empty) screen with an error notification,
    but that screen is not kept open.
    """
    view = await registry.open(team_id)
    return _serialize_view(view)


@router.get("/views/{view_id}", response_model=TeamViewOut)
async def get_view(
    view_id: str,
    users_page: int = Query(1, ge=1, description="Page of the available users table"),
    members_page: int = Query(1, ge=1, description="Page of the team members table"),
    registry: TeamViewRegistry = Depends(get_view_registry),
):
    view = _require_view(view_id, registry)
    return _serialize_view(view, users_page, members_page)


@router.delete("/views/{view_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_view(view_id: str, registry: TeamViewRegistry = Depends(get_view_registry)):
    """
    Close a team screen. Membership changes made in it are discarded.
    """
    if not registry.close(view_id):
        raise view_not_open(view_id)
    return None


@router.post("/views/{view_id}/members:add-all", response_model=TeamViewOut)
async def add_all_users(view_id: str, registry: TeamViewRegistry = Depends(get_view_registry)):
    view = _require_view(view_id, registry)
    view.add_all_users()
    return _serialize_view(view)


@router.post("/views/{view_id}/members:remove-all", response_model=TeamViewOut)
async def remove_all_users(view_id: str, registry: TeamViewRegistry = Depends(get_view_registry)):
    view = _require_view(view_id, registry)
    view.remove_all_users()
    return _serialize_view(view)


@router.post("/views/{view_id}/members/{user_id}", response_model=TeamViewOut)
async def add_user(view_id: str, user_id: int, registry: TeamViewRegistry = Depends(get_view_registry)):
    """
    Move an available user into the team.
    """
    view = _require_view(view_id, registry)
    user = view.find_available_user(user_id)
    if user is None:
        raise user_not_in_list(user_id, "users")
    view.add_user(user)
    return _serialize_view(view)


@router.delete("/views/{view_id}/members/{user_id}", response_model=TeamViewOut)
async def remove_user(view_id: str, user_id: int, registry: TeamViewRegistry = Depends(get_view_registry)):
    """
    Move a team member back to the available users.
    """
    view = _require_view(view_id, registry)
    user = view.find_team_member(user_id)
    if user is None:
        raise user_not_in_list(user_id, "members")
    view.remove_user(user)
    return _serialize_view(view)


@router.post("/views/{view_id}/sort/{list_name}", response_model=TeamViewOut)
async def order_list(
    view_id: str,
    list_name: str,
    payload: SortRequest,
    registry: TeamViewRegistry = Depends(get_view_registry),
):
    """
    Sort a table by a column. Sorting by the active column again flips the direction.
    """
    _require_list_name(list_name)
    view = _require_view(view_id, registry)
    if list_name == "users":
        view.order_users(payload.sort_type)
    else:
        view.order_group_members(payload.sort_type)
    return _serialize_view(view)


@router.put("/views/{view_id}/pagination/{list_name}", response_model=TeamViewOut)
async def change_pagination_count(
    view_id: str,
    list_name: str,
    payload: PaginationCountRequest,
    registry: TeamViewRegistry = Depends(get_view_registry),
):
    _require_list_name(list_name)
    view = _require_view(view_id, registry)
    if list_name == "users":
        view.change_pagination_count_users(payload.count)
    else:
        view.change_pagination_count_group_members(payload.count)
    return _serialize_view(view)


@router.post("/views/{view_id}/deletion", response_model=DeletionResponse)
async def request_delete_team(
    view_id: str,
    payload: DeletionRequest,
    registry: TeamViewRegistry = Depends(get_view_registry),
):
    """
    Submit the operator's answer to the deletion prompt.
    Team deletion is disabled: even a confirmed request leaves the team in place.
    """
    view = _require_view(view_id, registry)
    confirmed = await view.request_delete_team(StaticConfirmation(payload.confirmed))
    return DeletionResponse(
        viewId=view.view_id,
        teamId=view.state.team_id,
        confirmed=confirmed,
        deleted=False,
        notifications=view.drain_notifications(),
    )
