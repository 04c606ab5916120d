"""
paleto_auth.auth

Authentication/authorization package.

Responsibilities:
- Role levels and the classifiers that derive them.
- The session identity model and signed session cookie helpers.
- FastAPI access-guard dependencies.
"""

# Package marker.
