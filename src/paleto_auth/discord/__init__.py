"""
paleto_auth.discord

Discord API boundary (OAuth2 + guild member lookup).
"""

# Package marker.
