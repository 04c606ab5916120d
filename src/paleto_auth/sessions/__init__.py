"""
paleto_auth.sessions

Server-side session package.

Responsibilities:
- `SessionStore` interface with SQL and in-memory implementations.
- `SessionManager`: create/read/destroy sessions and sign the browser cookie.
"""

# Package marker.
