"""
paleto_auth.api.app

FastAPI app factory for the staff authentication backend.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Construct shared infrastructure once (HTTP client, session store, resolver).
- Map errors to JSON bodies without leaking internals outside development.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from datetime import timedelta

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from paleto_auth.api.routers.auth import router as auth_router
from paleto_auth.api.routers.health import router as health_router
from paleto_auth.api.routers.protected import router as protected_router
from paleto_auth.api.routers.session import router as session_router
from paleto_auth.auth.cookies import CookieSigner
from paleto_auth.auth.roles import GuildRoleIds
from paleto_auth.db.init_db import init_db
from paleto_auth.db.session import create_engine, create_sessionmaker
from paleto_auth.discord.client import DiscordClient, DiscordOAuthConfig
from paleto_auth.membership.factory import build_resolver
from paleto_auth.observability.logging import configure_logging, get_logger
from paleto_auth.observability.middleware import RequestContextMiddleware
from paleto_auth.services.login_service import LoginService
from paleto_auth.sessions.manager import SessionManager
from paleto_auth.sessions.store import MemorySessionStore, SessionStore, SqlSessionStore
from paleto_auth.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    `transport` replaces the outbound network layer (Discord, Google); tests pass
    an `httpx.MockTransport`.
    """

    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, membership_mode=settings.membership_mode)
        for name in settings.missing_required():
            log.warning("config_missing", variable=name)

        async with AsyncExitStack() as stack:
            # Everything registered here is closed even if a later startup step fails.
            http = await stack.enter_async_context(
                httpx.AsyncClient(transport=transport, timeout=settings.http_timeout_seconds)
            )
            store: SessionStore
            if settings.session_backend == "sql":
                engine = create_engine(settings.database_url)
                stack.push_async_callback(engine.dispose)
                store = SqlSessionStore(create_sessionmaker(engine))
                if settings.env in ("development", "test"):
                    # Production relies on Alembic migrations.
                    await init_db(engine)
                log.info("expired_sessions_purged", count=await store.purge_expired())
            else:
                store = MemorySessionStore()

            discord = DiscordClient(
                config=DiscordOAuthConfig(
                    client_id=settings.discord_client_id,
                    client_secret=settings.discord_client_secret,
                    redirect_uri=settings.discord_redirect_uri,
                    api_base_url=settings.discord_api_base_url,
                ),
                http=http,
            )
            sessions = SessionManager(
                store=store,
                signer=CookieSigner(secret=settings.session_secret, issuer=settings.service_name),
                ttl=timedelta(seconds=settings.session_ttl_seconds),
            )
            app.state.discord = discord
            app.state.sessions = sessions
            app.state.login = LoginService(
                discord=discord,
                resolver=build_resolver(settings=settings, discord=discord, http=http),
                sessions=sessions,
                role_ids=GuildRoleIds(
                    admin=settings.admin_role_id_set,
                    rh=settings.rh_role_id_set,
                    employee=settings.employee_role_id_set,
                ),
            )
            yield
        log.info("shutdown")

    app = FastAPI(
        title="Paleto Garage staff authentication",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(session_router)
    app.include_router(protected_router)

    @app.exception_handler(HTTP_404_NOT_FOUND)
    async def _not_found(_: Request, __: Exception) -> JSONResponse:
        return JSONResponse(status_code=HTTP_404_NOT_FOUND, content={"error": "Route not found"})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unhandled(_: Request, exc: Exception) -> JSONResponse:
        log.exception("unhandled_error")
        body: dict[str, str] = {"error": "Internal server error"}
        if settings.env == "development":
            body["message"] = str(exc)
        return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=body)

    return app


# --- Module Notes -----------------------------------------------------------
# Everything a handler needs is built inside `lifespan` from the `settings` passed
# in; nothing reads environment variables after this point.
