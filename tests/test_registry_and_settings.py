import pytest

from apps.team.registry import TeamViewRegistry
from common.pagination import PaginationPreferences
from constants.statuses import CLOSED, ERROR, READY
from conftest import FakeTeamService, make_user
from main import _default_rate_limit
from settings.config import Settings


class TestTeamViewRegistry:
    @pytest.fixture
    def registry(self):
        service = FakeTeamService(users=[make_user(2, "bob")])
        return TeamViewRegistry(team_service_factory=lambda: service, pagination=PaginationPreferences(default_count=10))

    @pytest.mark.asyncio
    async def test_open_initializes_view(self, registry):
        view = await registry.open(3)

        assert registry.get(view.view_id) is view
        assert view.state.status == READY
        assert [u.username for u in view.state.users] == ["bob"]

    @pytest.mark.asyncio
    async def test_views_of_the_same_team_stay_independent(self, registry):
        first = await registry.open(3)
        first.add_all_users()

        second = await registry.open(3)

        assert first.view_id != second.view_id
        assert not first.closed
        assert [u.username for u in first.state.team_members] == ["bob"]
        assert second.state.team_members == []
        assert registry.get(first.view_id) is first
        assert registry.get(second.view_id) is second

    @pytest.mark.asyncio
    async def test_failed_view_is_not_registered(self):
        service = FakeTeamService(team_error=ConnectionError("down"))
        registry = TeamViewRegistry(team_service_factory=lambda: service)

        view = await registry.open(3)

        assert view.state.status == ERROR
        assert len(view.drain_notifications()) == 1
        assert registry.get(view.view_id) is None

    @pytest.mark.asyncio
    async def test_close_tears_view_down(self, registry):
        view = await registry.open(3)

        assert registry.close(view.view_id) is True
        assert view.state.status == CLOSED
        assert registry.get(view.view_id) is None

    def test_close_unknown_view(self, registry):
        assert registry.close("missing") is False


def test_settings_database_url_from_parts():
    settings = Settings(DB_USER="svc", DB_PASSWORD="p@ss", DB_HOST="db", DB_PORT=5433, DB_NAME="teams")
    assert settings.build_database_url() == "postgresql+psycopg://svc:p%40ss@db:5433/teams"


def test_settings_explicit_database_url_wins():
    settings = Settings(DATABASE_URL="postgresql+psycopg://u:p@h/d")
    assert settings.build_database_url() == "postgresql+psycopg://u:p@h/d"


def test_settings_parses_origins_and_debug():
    settings = Settings(ALLOWED_ORIGINS=" http://a.test, ,http://b.test ", DEBUG="off")
    assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]
    assert settings.DEBUG is False


def test_settings_rejects_empty_page_size():
    with pytest.raises(ValueError):
        Settings(DEFAULT_PAGINATION_COUNT=0)


@pytest.mark.parametrize(
    "requests,window,expected",
    [(100, 60, "100/minute"), (5, 1, "5/second"), (10, 90, "10 per 90 seconds")],
)
def test_default_rate_limit(requests, window, expected):
    assert _default_rate_limit(requests, window) == expected
