import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy import select

from apps.team.router import router as team_router
from constants.roles import ADMINISTRATOR
from models.base import Base, engine, SessionLocal
from models.team import Team  # noqa: F401  registers the teams table
from models.user import User
from settings.config import get_settings
from utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _default_rate_limit(requests: int, window_seconds: int) -> str:
    """
    Turn a request count and window into a slowapi limit string.
    """
    units = {1: "second", 60: "minute", 3600: "hour", 86400: "day"}
    if window_seconds in units:
        return f"{requests}/{units[window_seconds]}"
    return f"{requests} per {window_seconds} seconds"


def create_app() -> FastAPI:
    """
    Application factory to build a FastAPI app with all middlewares and routers.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store"
        return response

    if settings.ENABLE_RATE_LIMITER:
        limiter = Limiter(
            key_func=get_remote_address,
            default_limits=[_default_rate_limit(settings.RATE_LIMIT_REQUESTS, settings.RATE_LIMIT_WINDOW_SECONDS)],
            storage_uri=settings.RATE_LIMIT_STORAGE_URI or None,
        )
        app.state.limiter = limiter
        app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
        app.add_middleware(SlowAPIMiddleware)

    app.include_router(team_router)

    # Dev convenience; use Alembic migrations elsewhere.
    @app.on_event("startup")
    async def on_startup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with SessionLocal() as db:
            res = await db.execute(select(User).where(User.username == settings.ADMIN_USERNAME))
            if res.scalar_one_or_none() is None:
                db.add(User(username=settings.ADMIN_USERNAME, role=ADMINISTRATOR))
                await db.commit()
                logger.info("Seeded administrator %s", settings.ADMIN_USERNAME)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
