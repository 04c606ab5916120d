"""
paleto_auth.discord.client

HTTP client boundary for Discord's OAuth2 and REST API.

Responsibilities:
- Build the authorize URL the browser is redirected to.
- Exchange an authorization code for a user access token.
- Fetch the authenticated user's profile.
- Look up a user's roles in the configured guild with bot credentials.

Every call is a single attempt; failures propagate to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from paleto_auth.errors import AuthExchangeError, ProfileFetchError
from paleto_auth.observability.logging import get_logger

log = get_logger(__name__)

CDN_BASE_URL = "https://cdn.discordapp.com"
DEFAULT_AVATAR_URL = f"{CDN_BASE_URL}/embed/avatars/0.png"


@dataclass(frozen=True, slots=True)
class DiscordOAuthConfig:
    client_id: str
    client_secret: str
    redirect_uri: str
    api_base_url: str = "https://discord.com/api"


@dataclass(frozen=True, slots=True)
class DiscordProfile:
    """
    Relevant fields of `/users/@me`.
    """

    id: str
    username: str
    discriminator: str
    avatar: str | None

    @property
    def avatar_url(self) -> str:
        if not self.avatar:
            return DEFAULT_AVATAR_URL
        return f"{CDN_BASE_URL}/avatars/{self.id}/{self.avatar}.png"

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> DiscordProfile:
        return cls(
            id=str(data["id"]),
            username=str(data.get("username") or ""),
            discriminator=str(data.get("discriminator") or "0"),
            avatar=data.get("avatar"),
        )


class DiscordClient:
    def __init__(self, *, config: DiscordOAuthConfig, http: httpx.AsyncClient) -> None:
        self._cfg = config
        self._http = http

    @property
    def _api(self) -> str:
        return self._cfg.api_base_url.rstrip("/")

    def authorize_url(self, *, scope: str) -> str:
        params = {
            "client_id": self._cfg.client_id,
            "redirect_uri": self._cfg.redirect_uri,
            "response_type": "code",
            "scope": scope,
        }
        return f"{self._api}/oauth2/authorize?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        try:
            r = await self._http.post(
                f"{self._api}/oauth2/token",
                data={
                    "client_id": self._cfg.client_id,
                    "client_secret": self._cfg.client_secret,
                    "grant_type": "authorization_code",
                    "code": code,
                    "redirect_uri": self._cfg.redirect_uri,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.HTTPError as e:
            raise AuthExchangeError(f"token endpoint unreachable: {e}") from e

        if not r.is_success:
            raise AuthExchangeError(f"token endpoint returned {r.status_code}")
        try:
            token = r.json().get("access_token")
        except (ValueError, AttributeError) as e:
            raise AuthExchangeError("token endpoint returned invalid JSON") from e
        if not token:
            raise AuthExchangeError("token response has no access_token")
        return str(token)

    async def fetch_profile(self, access_token: str) -> DiscordProfile:
        try:
            r = await self._http.get(
                f"{self._api}/users/@me",
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except httpx.HTTPError as e:
            raise ProfileFetchError(f"profile endpoint unreachable: {e}") from e

        if not r.is_success:
            raise ProfileFetchError(f"profile endpoint returned {r.status_code}")
        try:
            return DiscordProfile.from_payload(r.json())
        except (ValueError, KeyError, TypeError) as e:
            raise ProfileFetchError("profile response is malformed") from e

    async def fetch_member_roles(
        self, *, guild_id: str, user_id: str, bot_token: str
    ) -> list[str] | None:
        """
        Role ids of `user_id` in `guild_id`, or None when the lookup fails
        for any reason (404 not a member, 401/403 bot misconfigured, network).
        """

        try:
            r = await self._http.get(
                f"{self._api}/guilds/{guild_id}/members/{user_id}",
                headers={"Authorization": f"Bot {bot_token}"},
            )
        except httpx.HTTPError as e:
            log.warning("guild_member_lookup_failed", user_id=user_id, error=type(e).__name__)
            return None

        if r.status_code == httpx.codes.NOT_FOUND:
            log.info("guild_member_not_found", user_id=user_id)
            return None
        if not r.is_success:
            log.warning("guild_member_lookup_failed", user_id=user_id, status=r.status_code)
            return None
        try:
            payload = r.json()
        except ValueError:
            payload = None
        roles = payload.get("roles") if isinstance(payload, dict) else None
        if not isinstance(roles, list):
            log.warning("guild_member_lookup_failed", user_id=user_id, error="malformed body")
            return None
        return [str(role_id) for role_id in roles]


# --- Module Notes -----------------------------------------------------------
# The shared httpx.AsyncClient is created in `api.app` so tests can swap the
# transport for an httpx.MockTransport without touching this module.
