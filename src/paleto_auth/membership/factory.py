"""
paleto_auth.membership.factory

Pick the resolver for the configured deployment mode.
"""

from __future__ import annotations

import httpx

from paleto_auth.discord.client import DiscordClient
from paleto_auth.membership.base import MembershipResolver
from paleto_auth.membership.guild import GuildMembershipResolver
from paleto_auth.membership.sheet import SheetMembershipResolver
from paleto_auth.settings import Settings
from paleto_auth.sheets.client import SheetConfig, SheetsClient


def build_resolver(
    *, settings: Settings, discord: DiscordClient, http: httpx.AsyncClient
) -> MembershipResolver:
    if settings.membership_mode == "guild":
        return GuildMembershipResolver(
            discord=discord,
            guild_id=settings.discord_guild_id,
            bot_token=settings.discord_bot_token,
        )
    sheets = SheetsClient(
        config=SheetConfig(
            sheet_id=settings.google_sheet_id,
            api_key=settings.google_api_key,
            sheet_name=settings.sheet_name,
            api_base_url=settings.sheets_api_base_url,
        ),
        http=http,
    )
    return SheetMembershipResolver(sheets=sheets)
