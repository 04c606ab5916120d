"""
paleto_auth.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (client secret, bot token, session secret).
- Report missing required values so startup can warn about them.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SESSION_TTL_SECONDS = 24 * 60 * 60


def parse_id_list(raw: str) -> frozenset[str]:
    # "1, 2,,3" -> {"1", "2", "3"}
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


class Settings(BaseSettings):
    """
    Variable names match the existing deployment (DISCORD_*, GOOGLE_*, ...),
    so no prefix is applied.
    """

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    env: Literal["development", "test", "production"] = "development"
    service_name: str = "paleto-auth"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    port: int = 3000

    # Discord OAuth2 application
    discord_client_id: str = ""
    discord_client_secret: str = Field(default="", repr=False)
    discord_redirect_uri: str = ""
    discord_api_base_url: str = "https://discord.com/api"

    # Guild mode only
    discord_guild_id: str = ""
    discord_bot_token: str = Field(default="", repr=False)
    admin_role_ids: str = ""
    rh_role_ids: str = ""
    employee_role_ids: str = ""

    # Sheet mode only
    google_sheet_id: str = ""
    google_api_key: str = Field(default="", repr=False)
    sheet_name: str = "Info Employé"
    sheets_api_base_url: str = "https://sheets.googleapis.com/v4"

    membership_mode: Literal["sheet", "guild"] = "sheet"

    # Browser-facing
    frontend_url: str = "http://localhost:5173"
    session_secret: str = Field(default="secret-a-changer", repr=False)
    session_cookie_name: str = "paleto.sid"
    session_ttl_seconds: int = SESSION_TTL_SECONDS

    # Session persistence
    session_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite+aiosqlite:///./sessions.db"

    # Outbound HTTP
    http_timeout_seconds: float = 10.0

    @property
    def oauth_scope(self) -> str:
        if self.membership_mode == "guild":
            return "identify guilds guilds.members.read"
        return "identify"

    @property
    def admin_role_id_set(self) -> frozenset[str]:
        return parse_id_list(self.admin_role_ids)

    @property
    def rh_role_id_set(self) -> frozenset[str]:
        return parse_id_list(self.rh_role_ids)

    @property
    def employee_role_id_set(self) -> frozenset[str]:
        return parse_id_list(self.employee_role_ids)

    def missing_required(self) -> list[str]:
        """
        Names of required variables that are unset for the selected membership mode.
        """

        required = {
            "DISCORD_CLIENT_ID": self.discord_client_id,
            "DISCORD_CLIENT_SECRET": self.discord_client_secret,
            "DISCORD_REDIRECT_URI": self.discord_redirect_uri,
            "FRONTEND_URL": self.frontend_url,
        }
        if self.membership_mode == "guild":
            required.update(
                {
                    "DISCORD_GUILD_ID": self.discord_guild_id,
                    "DISCORD_BOT_TOKEN": self.discord_bot_token,
                    "ADMIN_ROLE_IDS": self.admin_role_ids,
                    "RH_ROLE_IDS": self.rh_role_ids,
                    "EMPLOYEE_ROLE_IDS": self.employee_role_ids,
                }
            )
        else:
            required.update(
                {
                    "GOOGLE_SHEET_ID": self.google_sheet_id,
                    "GOOGLE_API_KEY": self.google_api_key,
                }
            )
        return [name for name, value in required.items() if not value]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Only the process entrypoint calls this; the app receives the instance explicitly.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Handlers never import settings directly: `create_app` stores the instance on
# app.state and `api.deps.settings_dep` hands it out per request.
