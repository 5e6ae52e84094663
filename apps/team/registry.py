import logging
from functools import lru_cache
from typing import Callable, Dict, Optional

from apps.notifications.service import Notifications
from apps.team.service import TeamService
from apps.team.view import TeamFetcher, TeamMembershipView
from common.pagination import PaginationPreferences
from constants.statuses import ERROR

logger = logging.getLogger(__name__)


class TeamViewRegistry:
    """
    Team screens currently open in the console, keyed by a generated view id.
    Several operators may open the same team; each gets its own screen.
    Page sizes are shared by all screens, like a browser-wide preference.
    """

    def __init__(
        self,
        team_service_factory: Callable[[], TeamFetcher] = TeamService,
        pagination: Optional[PaginationPreferences] = None,
    ) -> None:
        self._team_service_factory = team_service_factory
        self.pagination = pagination or PaginationPreferences()
        self._views: Dict[str, TeamMembershipView] = {}

    async def open(self, team_id: int) -> TeamMembershipView:
        """
        Build and load a fresh view for the team.
        A view whose load failed is handed back once for its error notification, then forgotten.
        """
        view = TeamMembershipView(
            team_id=team_id,
            team_service=self._team_service_factory(),
            notifications=Notifications(),
            pagination=self.pagination,
        )
        self._views[view.view_id] = view
        await view.initialize()
        if view.state.status == ERROR:
            self._views.pop(view.view_id, None)
            logger.info("Dropped view %s of team %s after failed load", view.view_id, team_id)
        return view

    def get(self, view_id: str) -> Optional[TeamMembershipView]:
        return self._views.get(view_id)

    def close(self, view_id: str) -> bool:
        view = self._views.pop(view_id, None)
        if view is None:
            return False
        view.teardown()
        return True


@lru_cache()
def get_view_registry() -> TeamViewRegistry:
    """
    Process-wide registry used by the team router.
    """
    return TeamViewRegistry()
