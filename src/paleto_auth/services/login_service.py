"""
paleto_auth.services.login_service

Discord login flow (callback owner).

Responsibilities:
- Exchange the OAuth code and fetch the Discord profile.
- Resolve membership facts and classify them into a role.
- Persist the resulting identity as a new session.

Steps run strictly in sequence with a single attempt each; the first failure
aborts the login with a `LoginError` whose `reason` the router forwards.
"""

from __future__ import annotations

from paleto_auth.auth.models import SessionIdentity
from paleto_auth.auth.roles import GuildRoleIds, GuildRoles, classify
from paleto_auth.discord.client import DiscordClient, DiscordProfile
from paleto_auth.errors import MembershipNotFound
from paleto_auth.membership.base import MembershipFacts, MembershipResolver
from paleto_auth.observability.logging import get_logger
from paleto_auth.sessions.manager import SessionManager

log = get_logger(__name__)


class LoginService:
    def __init__(
        self,
        *,
        discord: DiscordClient,
        resolver: MembershipResolver,
        sessions: SessionManager,
        role_ids: GuildRoleIds,
    ) -> None:
        self._discord = discord
        self._resolver = resolver
        self._sessions = sessions
        self._role_ids = role_ids

    async def complete(self, code: str) -> tuple[str, SessionIdentity]:
        access_token = await self._discord.exchange_code(code)
        log.info("token_exchanged")

        profile = await self._discord.fetch_profile(access_token)
        log.info("profile_fetched", user_id=profile.id, username=profile.username)

        facts = await self._resolver.resolve(profile.id)
        if facts is None:
            raise MembershipNotFound(self._resolver.not_found_reason, profile.id)
        log.info("membership_resolved", user_id=profile.id, kind=type(facts).__name__)

        identity = build_identity(profile, facts, self._role_ids)
        log.info("role_classified", user_id=profile.id, role=identity.role)

        session_id = await self._sessions.create_session(identity)
        return session_id, identity


def build_identity(
    profile: DiscordProfile, facts: MembershipFacts, role_ids: GuildRoleIds
) -> SessionIdentity:
    role = classify(facts, role_ids)
    if isinstance(facts, GuildRoles):
        return SessionIdentity(
            id=profile.id,
            username=profile.username,
            discriminator=profile.discriminator,
            avatar_url=profile.avatar_url,
            role=role.value,
            role_ids=tuple(sorted(facts.role_ids)),
        )
    return SessionIdentity(
        id=profile.id,
        username=profile.username,
        discriminator=profile.discriminator,
        avatar_url=profile.avatar_url,
        role=role.value,
        employee_name=facts.name,
        grade=facts.grade,
    )


# --- Module Notes -----------------------------------------------------------
# HTTP concerns (cookies, redirects) stay in `api.routers.auth`; this service only
# raises typed errors and returns the new session id.
