"""
paleto_auth.membership.guild

Resolve membership from the user's roles in the Discord guild.
"""

from __future__ import annotations

from paleto_auth.auth.roles import GuildRoles
from paleto_auth.discord.client import DiscordClient


class GuildMembershipResolver:
    not_found_reason = "not_in_guild"

    def __init__(self, *, discord: DiscordClient, guild_id: str, bot_token: str) -> None:
        self._discord = discord
        self._guild_id = guild_id
        self._bot_token = bot_token

    async def resolve(self, user_id: str) -> GuildRoles | None:
        roles = await self._discord.fetch_member_roles(
            guild_id=self._guild_id, user_id=user_id, bot_token=self._bot_token
        )
        if roles is None:
            return None
        return GuildRoles(role_ids=frozenset(roles))
