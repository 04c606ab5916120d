"""
paleto_auth.services

Service layer.

Responsibilities:
- Run the OAuth callback flow end to end, independent of HTTP concerns.
"""

# Package marker.
