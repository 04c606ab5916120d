"""
tests.test_settings

Configuration parsing and startup warnings.
"""

from __future__ import annotations

from paleto_auth.settings import Settings, parse_id_list


def test_parse_id_list_trims_and_drops_empties() -> None:
    assert parse_id_list(" 1, 2,,3 ,") == frozenset({"1", "2", "3"})
    assert parse_id_list("") == frozenset()


def test_env_variable_names_match_deployment(monkeypatch) -> None:
    monkeypatch.setenv("DISCORD_CLIENT_ID", "cid")
    monkeypatch.setenv("ADMIN_ROLE_IDS", "10,11")
    monkeypatch.setenv("MEMBERSHIP_MODE", "guild")
    settings = Settings()
    assert settings.discord_client_id == "cid"
    assert settings.admin_role_id_set == frozenset({"10", "11"})
    assert settings.oauth_scope == "identify guilds guilds.members.read"


def test_missing_required_depends_on_mode() -> None:
    sheet = Settings(membership_mode="sheet", discord_client_id="cid", frontend_url="f")
    assert "GOOGLE_SHEET_ID" in sheet.missing_required()
    assert "DISCORD_BOT_TOKEN" not in sheet.missing_required()
    assert "DISCORD_CLIENT_ID" not in sheet.missing_required()

    guild = Settings(membership_mode="guild")
    assert "DISCORD_BOT_TOKEN" in guild.missing_required()
    assert "GOOGLE_API_KEY" not in guild.missing_required()


def test_secrets_hidden_from_repr() -> None:
    settings = Settings(session_secret="hunter2", discord_client_secret="topsecret-cs")
    assert "hunter2" not in repr(settings)
    assert "topsecret-cs" not in repr(settings)
